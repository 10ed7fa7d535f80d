# freqs/alphabet.py
from __future__ import annotations
from typing import Iterable, Sequence, Tuple

from .models import Alphabet
from . import config as CFG


class AlphabetTable:
    """
    Ordered set of alphabets used to classify and case-fold code points.

    The table must be sorted by ascending `upper_begin` with no overlapping
    blocks: `is_alphabetic` stops at the first alphabet that starts above the
    code point, which is only correct for a sorted table.
    """

    __slots__ = ("_alphabets",)

    def __init__(self, alphabets: Iterable[Alphabet]) -> None:
        items = tuple(alphabets)
        for prev, cur in zip(items, items[1:]):
            if cur.upper_begin < prev.lower_end:
                raise ValueError(
                    "alphabets must be sorted by upper_begin and must not overlap: "
                    f"{prev} before {cur}"
                )
        self._alphabets: Tuple[Alphabet, ...] = items

    @property
    def alphabets(self) -> Tuple[Alphabet, ...]:
        return self._alphabets

    def is_alphabetic(self, cp: int) -> bool:
        for a in self._alphabets:
            if cp < a.upper_begin:
                return False
            if cp < a.lower_end:
                return True
        return False

    def fold(self, cp: int) -> int:
        """Map an upper-case code point to its lower-case partner; others unchanged."""
        for a in self._alphabets:
            if a.upper_begin <= cp < a.lower_begin:
                return cp + a.case_offset
        return cp

    def fold_all(self, code_points: Sequence[int]) -> Tuple[int, ...]:
        fold = self.fold
        return tuple(fold(cp) for cp in code_points)

    def __repr__(self) -> str:
        return f"AlphabetTable({list(self._alphabets)!r})"


DEFAULT_TABLE = AlphabetTable(CFG.ALPHABETS)
