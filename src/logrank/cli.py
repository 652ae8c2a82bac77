from __future__ import annotations
import argparse, json, os, sys
from pathlib import Path
from typing import List, Optional

from .ranker import top_k_words
from .report import format_ranked, to_rows, write_csv

FALLBACK_K = 5

def _non_negative_int(raw: str) -> int:
    # Plain ASCII decimal only: int() would also take "1_0" or "\u0663".
    digits = raw.strip()
    if not (digits.isascii() and digits.isdigit()):
        raise argparse.ArgumentTypeError(f"k must be a non-negative integer, got {raw!r}")
    return int(digits)

def _default_k() -> int:
    # Override via env, e.g. LOGRANK_DEFAULT_K=10
    raw = os.environ.get("LOGRANK_DEFAULT_K", "")
    if not raw:
        return FALLBACK_K
    return _non_negative_int(raw)

def read_lines(path: Path) -> List[str]:
    """Read a log file as UTF-8, one entry per line."""
    return path.read_text(encoding="utf-8").splitlines()

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="logrank",
        description="Print the top-k most frequent words in a log file.",
    )
    ap.add_argument("file", type=str, help="Log file to analyze")
    ap.add_argument("k", type=_non_negative_int, nargs="?", default=None,
                    help="Number of words to print (default $LOGRANK_DEFAULT_K or 5)")
    ap.add_argument("--json", action="store_true", help="Print rank/word/count objects as JSON")
    ap.add_argument("--out-csv", dest="out_csv", type=str, default=None,
                    help="Also write the ranking to this CSV file")
    args = ap.parse_args(argv)

    k = args.k
    if k is None:
        try:
            k = _default_k()
        except argparse.ArgumentTypeError as e:
            print(f"Error: LOGRANK_DEFAULT_K: {e}", file=sys.stderr)
            return 2

    path = Path(args.file)
    if not path.exists():
        print(f"Error: file not found: {path}", file=sys.stderr)
        return 2
    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        return 1

    result = top_k_words(lines, k)

    if args.json:
        print(json.dumps(to_rows(result), indent=2))
    else:
        print(format_ranked(result))
    if args.out_csv:
        try:
            outp = write_csv(result, args.out_csv)
        except OSError as e:
            print(f"Error: cannot write {args.out_csv}: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {len(result)} rows to {outp}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
