from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterator, Literal

SortType = Literal["none", "date"]

COLLECTION = "collection"
MANIFEST = "manifest"
DECADE = "decade"
YEAR = "year"
MONTH = "month"
DATED_LEAF = "dated-leaf"


@dataclass(eq=False)
class TreeNode:
    """One node of a navigation tree (source item, bucket or dated leaf)."""

    id: str | None = None
    label: str = ""
    nav_date: date | None = None
    data: dict[str, Any] = field(default_factory=dict)
    nodes: list[TreeNode] = field(default_factory=list)

    def add_node(self, node: TreeNode) -> None:
        self.nodes.append(node)

    def remove_node(self, node: TreeNode) -> None:
        # identity, not equality: two buckets may look alike
        for i, n in enumerate(self.nodes):
            if n is node:
                del self.nodes[i]
                return
        raise ValueError(f"Not a child of {self.label!r}: {node.label!r}")

    def traverse(self) -> Iterator[TreeNode]:
        """Yield every descendant depth-first, each node object at most once.

        Source trees can share nodes between ranges, so visited nodes are tracked by identity.
        """

        seen: set[int] = set()
        stack = list(reversed(self.nodes))
        while stack:
            n = stack.pop()
            if id(n) in seen:
                continue
            seen.add(id(n))
            yield n
            stack.extend(reversed(n.nodes))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for k, v in self.data.items():
            if isinstance(v, TreeNode):
                v = v.id
            elif isinstance(v, date):
                v = v.isoformat()
            data[k] = v

        out: dict[str, Any] = {"id": self.id, "label": self.label}
        if self.nav_date is not None:
            out["navDate"] = self.nav_date.isoformat()
        if data:
            out["data"] = data
        out["nodes"] = [n.to_dict() for n in self.nodes]
        return out


@dataclass(frozen=True)
class GroupingPolicy:
    """Controls how a source tree is grouped by date.

    - group_types feed the decade/year passes, leaf_item_types the month/leaf passes.
    - Leaf labels use date_label_format (strftime), e.g. "Tue May 01 1923".
    """

    leaf_type: str = DATED_LEAF
    group_types: tuple[str, ...] = (COLLECTION, MANIFEST)
    leaf_item_types: tuple[str, ...] = (MANIFEST,)
    prune_empty_decades: bool = True
    date_label_format: str = "%a %b %d %Y"
