# freqs/registry.py
from __future__ import annotations
from typing import Dict, Iterable, List, Sequence, Tuple

from .models import Word


class WordRegistry:
    """
    Distinct words seen so far, keyed on their folded code points.

    Two ranges are the same word iff their folded subsequences are equal.
    The first registered occurrence stays the canonical one: later repeats
    only bump its count, so the report renders the first spelling seen.
    """

    def __init__(self, folded: Sequence[int]) -> None:
        self._folded = folded
        self._by_key: Dict[Tuple[int, ...], Word] = {}

    def key(self, start: int, end: int) -> Tuple[int, ...]:
        return tuple(self._folded[start:end])

    def register(self, start: int, end: int) -> Word:
        if end <= start:
            raise ValueError(f"empty word range [{start}, {end})")
        k = self.key(start, end)
        word = self._by_key.get(k)
        if word is None:
            word = Word(start=start, length=end - start)
            self._by_key[k] = word
        else:
            word.count += 1
        return word

    def register_all(self, ranges: Iterable[Tuple[int, int]]) -> int:
        n = 0
        for start, end in ranges:
            self.register(start, end)
            n += 1
        return n

    def words(self) -> List[Word]:
        """Distinct words in first-seen order."""
        return list(self._by_key.values())

    def total(self) -> int:
        return sum(w.count for w in self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key
