"""Decade/year/month/date grouping of dated tree nodes.

Core philosophy: collections may not carry navigation dates at all. Callers should
check has_temporal_data() and fall back to the original tree when grouping is pointless.
"""

from .types import GroupingPolicy, TreeNode
from .builder import get_tree, group_by_date, has_temporal_data
