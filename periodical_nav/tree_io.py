from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests

from .tree.dates import parse_nav_date
from .tree.types import TreeNode


def tree_from_dict(obj: Any) -> TreeNode:
    """Build a TreeNode tree from its JSON mapping.

    Expected shape (all keys optional):
        {"id": ..., "label": ..., "navDate": "1923-05-01T00:00:00Z", "data": {...}, "nodes": [...]}

    navDate values that cannot be parsed are dropped (the node is treated as undated).
    """
    if not isinstance(obj, dict):
        raise ValueError(f"Tree node must be a JSON object, got {type(obj).__name__}")

    data = obj.get("data") or {}
    if not isinstance(data, dict):
        raise ValueError(f"Tree node data must be a JSON object: {obj.get('id')!r}")

    children = obj.get("nodes") or []
    if not isinstance(children, list):
        raise ValueError(f"Tree node children must be a list: {obj.get('id')!r}")

    node_id = obj.get("id")
    return TreeNode(
        id=str(node_id) if node_id is not None else None,
        label=str(obj.get("label") or ""),
        nav_date=parse_nav_date(obj.get("navDate")),
        data=dict(data),
        nodes=[tree_from_dict(c) for c in children],
    )


def load_tree(path: Path) -> TreeNode:
    if not path.exists():
        raise FileNotFoundError(f"Tree file not found: {path}")
    return tree_from_dict(json.loads(path.read_text(encoding="utf-8")))


def fetch_tree(url: str, *, timeout_s: int = 30) -> TreeNode:
    r = requests.get(url, headers={"Accept": "application/json"}, timeout=timeout_s)
    if r.status_code != 200:
        raise RuntimeError(f"Tree fetch failed ({r.status_code}): {r.text}")
    return tree_from_dict(r.json())
