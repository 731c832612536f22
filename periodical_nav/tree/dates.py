from __future__ import annotations

import re
from datetime import date, datetime

from .types import TreeNode

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# xsd:dateTime as used for navDate, plus bare dates. Time and zone are ignored.
NAV_DATE_RE = re.compile(
    r"^\s*(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)?"
    r"(?:Z|[+-]\d{2}:?\d{2})?\s*$"
)


def parse_nav_date(value: object) -> date | None:
    """Best-effort conversion of a navDate value; None when it cannot be resolved."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    m = NAV_DATE_RE.match(value)
    if not m:
        return None
    try:
        return date(int(m.group("year")), int(m.group("month")), int(m.group("day")))
    except ValueError:
        return None


def _require_nav_date(node: TreeNode) -> date:
    if node.nav_date is None:
        raise ValueError(f"Node has no navigation date: {node.id or node.label!r}")
    return node.nav_date


def node_year(node: TreeNode) -> int:
    return _require_nav_date(node).year


def node_month(node: TreeNode) -> int:
    """0-based month (January == 0)."""
    return _require_nav_date(node).month - 1


def month_name(month: int) -> str:
    return MONTH_NAMES[month]


def display_date(d: date, fmt: str = "%a %b %d %Y") -> str:
    return d.strftime(fmt)


def decade_range(year: int) -> tuple[int, int]:
    """Inclusive (start, end) of the decade holding year: 1923 -> (1920, 1929)."""
    start = (year // 10) * 10
    return start, start + 9
