from __future__ import annotations
import argparse, json
from typing import List, Optional

from .ranker import top_k_words
from .report import format_ranked, to_rows

SAMPLE_LOGS: List[str] = [
    "Error: Disk full",
    "Warning: Memory low",
    "error: network down",
    "Error: Disk full",
]

DEMO_K = 2

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="logrank-demo", description="Rank words in a built-in sample of log lines.")
    ap.add_argument("--k", type=int, default=DEMO_K)
    ap.add_argument("--json", action="store_true")
    args = ap.parse_args(argv)
    if args.k < 0:
        ap.error("--k must be non-negative")

    result = top_k_words(SAMPLE_LOGS, args.k)
    print(json.dumps(to_rows(result), indent=2) if args.json else format_ranked(result))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
