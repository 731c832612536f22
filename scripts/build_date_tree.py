#!/usr/bin/env python3
"""Group a navigation tree by decade/year/month/date and write it as JSON.

Input is a tree already extracted from a collection or manifest:
  {"label": ..., "nodes": [{"id": ..., "navDate": "1923-05-01T00:00:00Z", "data": {"type": "manifest"}}, ...]}

Default behavior:
- Group by date when any node carries a navDate.
- Otherwise write the input tree unchanged.

Defaults for leaf type, date label format and pruning come from the environment
(.env supported): PERIODICAL_NAV_LEAF_TYPE, PERIODICAL_NAV_DATE_FORMAT, PERIODICAL_NAV_PRUNE.

Usage:
  PYTHONPATH=. python3 scripts/build_date_tree.py \
    --input tree.json \
    --out tree-by-date.json
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from periodical_nav.config import policy_from_env
from periodical_nav.tree import get_tree, has_temporal_data
from periodical_nav.tree_io import fetch_tree, load_tree


def main() -> None:
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--input", help="Path to a tree JSON file")
    src.add_argument("--url", help="URL serving a tree JSON document")
    ap.add_argument("--out", default=None, help="Output path (default: stdout)")
    ap.add_argument("--sort", choices=["date", "none"], default="date")
    ap.add_argument("--no-prune", action="store_true", help="Keep decades that ended up empty")
    ap.add_argument("--date-format", default=None, help="strftime format for leaf labels")
    ap.add_argument("--timeout", type=int, default=30)
    args = ap.parse_args()

    tree = load_tree(Path(args.input)) if args.input else fetch_tree(args.url, timeout_s=args.timeout)

    policy = policy_from_env()
    if args.no_prune:
        policy = replace(policy, prune_empty_decades=False)
    if args.date_format:
        policy = replace(policy, date_label_format=str(args.date_format))

    if args.sort == "date" and not has_temporal_data(tree):
        print("WARN: date grouping requested but no navDate values were found; writing tree unchanged", file=sys.stderr)

    out_tree = get_tree(tree, args.sort, policy)
    text = json.dumps(out_tree.to_dict(), indent=2, ensure_ascii=False) + "\n"

    if not args.out:
        print(text, end="")
        return

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    print(f"OK: wrote {out_path} ({len(out_tree.nodes)} top-level nodes)")


if __name__ == "__main__":
    main()
