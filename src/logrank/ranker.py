from __future__ import annotations
import re
from collections import Counter
from typing import Iterable, List, Tuple

# Lowercasing happens first, so only [a-z0-9] runs are words.
WORD_RE = re.compile(r"[a-z0-9]+")

RankedEntry = Tuple[str, int]

def tokens_from_line(line: str) -> List[str]:
    """Split one log line into lowercase ASCII alphanumeric tokens."""
    return WORD_RE.findall(line.lower())

def count_words(lines: Iterable[str]) -> Counter:
    """Build the word -> frequency table for all lines."""
    counts: Counter = Counter()
    for line in lines:
        counts.update(tokens_from_line(line))
    return counts

def top_k_words(lines: Iterable[str], k: int) -> List[RankedEntry]:
    """Return the k most frequent words as (word, count) pairs.

    Ordered by count descending, ties broken by ascending word. When k exceeds
    the number of distinct words, every word is returned.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    counts = count_words(lines)
    # Counter keeps insertion order; the sort is what makes output deterministic.
    ranked = sorted(counts.items(), key=lambda wc: (-wc[1], wc[0]))
    return ranked[:k]
