from __future__ import annotations
import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from .ranker import RankedEntry

CSV_HEADERS = ["rank", "word", "count"]

def format_ranked(entries: Sequence[RankedEntry]) -> str:
    """Render entries as a list literal, e.g. [("error", 3), ("disk", 2)]."""
    body = ", ".join(f"({json.dumps(word)}, {count})" for word, count in entries)
    return f"[{body}]"

def to_rows(entries: Sequence[RankedEntry]) -> List[Dict[str, Any]]:
    return [
        {"rank": rank, "word": word, "count": count}
        for rank, (word, count) in enumerate(entries, start=1)
    ]

def write_csv(entries: Sequence[RankedEntry], out_csv: Union[str, Path]) -> Path:
    outp = Path(out_csv)
    outp.parent.mkdir(parents=True, exist_ok=True)
    with outp.open("w", newline="", encoding="utf-8") as fo:
        w = csv.DictWriter(fo, fieldnames=CSV_HEADERS)
        w.writeheader()
        w.writerows(to_rows(entries))
    return outp
