from __future__ import annotations

from .types import TreeNode


def find_decade_bucket(root: TreeNode, year: int) -> TreeNode | None:
    """First decade bucket under root whose inclusive range contains year."""

    for n in root.nodes:
        start = n.data.get("start_year")
        end = n.data.get("end_year")
        if start is None or end is None:
            continue
        if start <= year <= end:
            return n
    return None


def find_year_bucket(decade: TreeNode, year: int) -> TreeNode | None:
    for n in decade.nodes:
        if n.data.get("year") == year:
            return n
    return None


def find_month_bucket(year_bucket: TreeNode, month: int) -> TreeNode | None:
    for n in year_bucket.nodes:
        if n.data.get("month") == month:
            return n
    return None


def resolve_month_bucket(root: TreeNode, year: int, month: int) -> TreeNode | None:
    """Walk decade -> year -> month; None if any link is missing."""

    decade = find_decade_bucket(root, year)
    if decade is None:
        return None
    year_bucket = find_year_bucket(decade, year)
    if year_bucket is None:
        return None
    return find_month_bucket(year_bucket, month)
