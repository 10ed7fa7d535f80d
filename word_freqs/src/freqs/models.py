# freqs/models.py
"""
Data models for the word frequency pipeline.

These classes carry no business logic of their own; they only give names to
the values that flow between decoding, folding, segmentation, registration
and reporting:

- ByteSpan: where one decoded code point came from in the input buffer.
- Alphabet: one upper-case block immediately followed by its lower-case block.
- DecodedText: the decoded code points plus their parallel byte spans.
- Word: one distinct word (by folded code points) and its occurrence count.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class ByteSpan:
    """(offset, length) of one encoded code point inside the source buffer."""
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True, slots=True)
class Alphabet:
    """
    Three code-point thresholds describing one alphabet.

    Attributes
    ----------
    upper_begin : int
        First upper-case code point.
    lower_begin : int
        First lower-case code point; the upper-case block is
        [upper_begin, lower_begin).
    lower_end : int
        One past the last lower-case code point; the lower-case block is
        [lower_begin, lower_end).
    """
    upper_begin: int
    lower_begin: int
    lower_end: int

    def __post_init__(self) -> None:
        if not (0 <= self.upper_begin <= self.lower_begin <= self.lower_end):
            raise ValueError(
                f"invalid alphabet bounds: {self.upper_begin}, {self.lower_begin}, {self.lower_end}"
            )

    @property
    def case_offset(self) -> int:
        return self.lower_begin - self.upper_begin


@dataclass(frozen=True, slots=True)
class DecodedText:
    """
    Result of decoding one input buffer.

    `code_points` and `spans` are parallel: spans[i] is where code_points[i]
    was read from in `source`. Neither view is mutated after decoding.
    """
    source: bytes
    code_points: Tuple[int, ...]
    spans: Tuple[ByteSpan, ...]

    def __len__(self) -> int:
        return len(self.code_points)

    def original_bytes(self, start: int, end: int) -> bytes:
        """Original encoded bytes of code points [start, end)."""
        if start >= end:
            return b""
        # spans are contiguous, so one slice covers the whole range
        return self.source[self.spans[start].offset:self.spans[end - 1].end]


@dataclass(slots=True)
class Word:
    """
    One distinct word.

    `start`/`length` point at the canonical (first registered) occurrence in
    the folded code-point sequence; `count` is the number of occurrences.
    """
    start: int
    length: int
    count: int = 1

    @property
    def end(self) -> int:
        return self.start + self.length
