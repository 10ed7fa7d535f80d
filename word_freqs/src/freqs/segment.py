# freqs/segment.py
from __future__ import annotations
from typing import Iterator, Optional, Sequence, Tuple

from .alphabet import AlphabetTable, DEFAULT_TABLE


def segment(folded: Sequence[int], table: AlphabetTable = DEFAULT_TABLE) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) for every maximal run of alphabetic code points.

    Ranges are half-open, disjoint and in input order. `folded` should be the
    case-folded view: classification runs on folded values.
    """
    is_alpha = table.is_alphabetic
    run_start: Optional[int] = None
    for i, cp in enumerate(folded):
        if is_alpha(cp):
            if run_start is None:
                run_start = i
        elif run_start is not None:
            yield run_start, i
            run_start = None

    # last word
    if run_start is not None:
        yield run_start, len(folded)
