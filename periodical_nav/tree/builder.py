"""Build a decade -> year -> month -> date navigation tree from dated nodes.

The passes run in a fixed order, each relying on buckets created by the earlier ones:

    build_decade_buckets, sort_decade_buckets,
    build_year_buckets, sort_year_buckets,
    build_month_buckets, sort_month_buckets,
    build_date_leaves, prune_empty_decades

Buckets are only created for years/months that actually occur. Creation never compares
buckets; ordering is left to the explicit sort passes.

Every item handed to a pass must have a nav_date (see group_by_date, which filters).
Items whose buckets cannot be found are skipped, not reported as errors.
"""

from __future__ import annotations

import copy
import logging
from typing import Iterable

from .buckets import find_decade_bucket, find_month_bucket, find_year_bucket, resolve_month_bucket
from .dates import decade_range, display_date, month_name, node_month, node_year, parse_nav_date
from .types import DATED_LEAF, DECADE, MONTH, YEAR, GroupingPolicy, SortType, TreeNode

logger = logging.getLogger(__name__)


def _bucket_key(field: str):
    """Sort key on a bucket payload field; nodes without it go last, in their current order."""

    def key(n: TreeNode) -> tuple[bool, int]:
        value = n.data.get(field)
        return (value is None, value if value is not None else 0)

    return key


def build_decade_buckets(root: TreeNode, items: Iterable[TreeNode]) -> int:
    """Append one decade bucket per decade seen in items. Returns the number created."""

    created = 0
    for item in items:
        year = node_year(item)
        if find_decade_bucket(root, year):
            continue
        start, end = decade_range(year)
        root.add_node(
            TreeNode(
                label=f"{start} - {end}",
                nav_date=item.nav_date,
                data={"type": DECADE, "start_year": start, "end_year": end},
            )
        )
        created += 1
    return created


def sort_decade_buckets(root: TreeNode) -> None:
    root.nodes.sort(key=_bucket_key("start_year"))


def build_year_buckets(root: TreeNode, items: Iterable[TreeNode]) -> int:
    created = 0
    for item in items:
        year = node_year(item)
        decade = find_decade_bucket(root, year)
        if decade is None:
            logger.debug("No decade bucket for %s (year %d)", item.id or item.label, year)
            continue
        if find_year_bucket(decade, year):
            continue
        decade.add_node(TreeNode(label=str(year), nav_date=item.nav_date, data={"type": YEAR, "year": year}))
        created += 1
    return created


def sort_year_buckets(root: TreeNode) -> None:
    for decade in root.nodes:
        decade.nodes.sort(key=_bucket_key("year"))


def build_month_buckets(root: TreeNode, items: Iterable[TreeNode]) -> int:
    """Create month buckets under existing year buckets.

    items is usually narrower than for the decade/year passes (issues only, no collections).
    """

    created = 0
    for item in items:
        year = node_year(item)
        month = node_month(item)
        decade = find_decade_bucket(root, year)
        year_bucket = find_year_bucket(decade, year) if decade else None
        if year_bucket is None:
            logger.debug("No year bucket for %s (year %d)", item.id or item.label, year)
            continue
        if find_month_bucket(year_bucket, month):
            continue
        year_bucket.add_node(
            TreeNode(
                label=month_name(month),
                nav_date=item.nav_date,
                data={"type": MONTH, "year": year, "month": month},
            )
        )
        created += 1
    return created


def sort_month_buckets(root: TreeNode) -> None:
    for decade in root.nodes:
        for year_bucket in decade.nodes:
            year_bucket.nodes.sort(key=_bucket_key("month"))


def build_date_leaves(
    root: TreeNode,
    items: Iterable[TreeNode],
    *,
    leaf_type: str = DATED_LEAF,
    label_format: str = "%a %b %d %Y",
) -> int:
    """Place one leaf per item under its month bucket. Returns the number placed.

    Leaves are new nodes; the source item and its payload are left untouched.
    """

    placed = 0
    for item in items:
        year = node_year(item)
        month = node_month(item)
        month_bucket = resolve_month_bucket(root, year, month)
        if month_bucket is None:
            logger.debug("Dropping %s: no bucket for %d-%02d", item.id or item.label, year, month + 1)
            continue

        data = copy.deepcopy(item.data)
        data.update({"type": leaf_type, "year": year, "month": month, "item": item})
        month_bucket.add_node(
            TreeNode(
                id=item.id,
                label=display_date(item.nav_date, label_format),
                nav_date=item.nav_date,
                data=data,
            )
        )
        placed += 1
    return placed


def prune_empty_decades(root: TreeNode) -> int:
    """Remove childless decade buckets. Only the decade level is pruned."""

    empty = [n for n in root.nodes if not n.nodes]
    for n in empty:
        root.remove_node(n)
    return len(empty)


def has_temporal_data(tree: TreeNode) -> bool:
    """Return True if any descendant of tree carries a usable navigation date."""

    return any(parse_nav_date(n.nav_date) is not None for n in tree.traverse())


def group_by_date(tree: TreeNode, policy: GroupingPolicy | None = None) -> TreeNode:
    """Run every pass over the dated nodes of tree and return a fresh grouped root."""

    policy = policy or GroupingPolicy()

    dated = [n for n in tree.traverse() if n.nav_date is not None]
    group_items = [n for n in dated if n.data.get("type") in policy.group_types]
    leaf_items = [n for n in dated if n.data.get("type") in policy.leaf_item_types]

    root = TreeNode(label="root")
    build_decade_buckets(root, group_items)
    sort_decade_buckets(root)
    build_year_buckets(root, group_items)
    sort_year_buckets(root)
    build_month_buckets(root, leaf_items)
    sort_month_buckets(root)
    placed = build_date_leaves(
        root,
        leaf_items,
        leaf_type=policy.leaf_type,
        label_format=policy.date_label_format,
    )

    if policy.prune_empty_decades:
        prune_empty_decades(root)

    if placed < len(leaf_items):
        logger.info("Placed %d of %d dated items", placed, len(leaf_items))
    return root


def get_tree(tree: TreeNode, sort_type: SortType = "none", policy: GroupingPolicy | None = None) -> TreeNode:
    """Return tree grouped by date when requested and possible, otherwise tree itself."""

    if sort_type == "date" and has_temporal_data(tree):
        return group_by_date(tree, policy)
    return tree
