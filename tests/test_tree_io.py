from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from periodical_nav import tree_io
from periodical_nav.tree import group_by_date
from periodical_nav.tree_io import fetch_tree, load_tree, tree_from_dict

DOC = {
    "label": "The Sentinel",
    "data": {"type": "collection"},
    "nodes": [
        {"id": "m1", "label": "No. 1", "navDate": "1923-05-01T00:00:00Z", "data": {"type": "manifest"}},
        {"id": "m2", "label": "No. 2", "navDate": "not a date", "data": {"type": "manifest"}},
    ],
}


def test_load_tree(tmp_path: Path) -> None:
    p = tmp_path / "tree.json"
    p.write_text(json.dumps(DOC), encoding="utf-8")

    tree = load_tree(p)
    assert tree.label == "The Sentinel"
    assert [n.id for n in tree.nodes] == ["m1", "m2"]
    assert tree.nodes[0].nav_date == date(1923, 5, 1)
    assert tree.nodes[1].nav_date is None


def test_load_tree_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tree(tmp_path / "nope.json")


def test_tree_from_dict_rejects_non_objects() -> None:
    with pytest.raises(ValueError):
        tree_from_dict(["not", "a", "node"])
    with pytest.raises(ValueError):
        tree_from_dict({"nodes": {"id": "x"}})


def test_to_dict_writes_leaf_item_as_id() -> None:
    grouped = group_by_date(tree_from_dict(DOC))
    out = grouped.to_dict()

    decade = out["nodes"][0]
    assert decade["label"] == "1920 - 1929"
    assert decade["navDate"] == "1923-05-01"
    leaf = decade["nodes"][0]["nodes"][0]["nodes"][0]
    assert leaf["id"] == "m1"
    assert leaf["data"]["item"] == "m1"
    assert leaf["data"]["month"] == 4
    json.dumps(out)


class _Resp:
    def __init__(self, status_code: int, payload: object) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = json.dumps(payload)

    def json(self) -> object:
        return self._payload


def test_fetch_tree(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    def fake_get(url: str, **kwargs: object) -> _Resp:
        calls.append(url)
        return _Resp(200, DOC)

    monkeypatch.setattr(tree_io.requests, "get", fake_get)
    tree = fetch_tree("https://example.org/tree.json")
    assert calls == ["https://example.org/tree.json"]
    assert tree.nodes[0].id == "m1"


def test_fetch_tree_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tree_io.requests, "get", lambda url, **kw: _Resp(404, {"error": "missing"}))
    with pytest.raises(RuntimeError):
        fetch_tree("https://example.org/missing.json")
