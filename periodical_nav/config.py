from __future__ import annotations

import os

from dotenv import load_dotenv

from .tree.types import DATED_LEAF, GroupingPolicy


def _env_flag(raw: str, default: bool) -> bool:
    raw = raw.strip().lower()
    if not raw:
        return default
    return raw not in ("0", "false", "no", "off")


def policy_from_env() -> GroupingPolicy:
    """GroupingPolicy with overrides from the environment (or .env).

    PERIODICAL_NAV_LEAF_TYPE, PERIODICAL_NAV_DATE_FORMAT, PERIODICAL_NAV_PRUNE (0/false/no/off disables).
    """
    load_dotenv()
    leaf_type = os.environ.get("PERIODICAL_NAV_LEAF_TYPE", "").strip() or DATED_LEAF
    fmt = os.environ.get("PERIODICAL_NAV_DATE_FORMAT", "").strip() or GroupingPolicy.date_label_format
    prune = _env_flag(os.environ.get("PERIODICAL_NAV_PRUNE", ""), True)
    return GroupingPolicy(leaf_type=leaf_type, prune_empty_decades=prune, date_label_format=fmt)
