# freqs/report.py
"""
Ranking and rendering of the distinct-word list.

Order: descending count, then ascending folded code-point sequence compared
numerically element by element (a proper prefix sorts first). Each line is
the decimal count, one space, then the word's ORIGINAL bytes from its
canonical occurrence.
"""

from __future__ import annotations
from typing import BinaryIO, Iterable, Iterator, List, Sequence, Tuple

from .models import DecodedText, Word
from . import config as CFG


def rank(words: Iterable[Word], folded: Sequence[int]) -> List[Word]:
    return sorted(words, key=lambda w: (-w.count, tuple(folded[w.start:w.end])))


def render_line(word: Word, text: DecodedText) -> bytes:
    return (
        str(word.count).encode("ascii")
        + CFG.COUNT_SEPARATOR
        + text.original_bytes(word.start, word.end)
        + CFG.LINE_TERMINATOR
    )


def iter_lines(ranked: Iterable[Word], text: DecodedText) -> Iterator[bytes]:
    for word in ranked:
        yield render_line(word, text)


def write_report(stream: BinaryIO, ranked: Iterable[Word], text: DecodedText) -> int:
    """Write one line per word to a binary stream; return the number of lines."""
    n = 0
    for line in iter_lines(ranked, text):
        stream.write(line)
        n += 1
    return n


def format_report(ranked: Iterable[Word], text: DecodedText) -> bytes:
    return b"".join(iter_lines(ranked, text))


def ranked_entries(ranked: Iterable[Word], text: DecodedText) -> Iterator[Tuple[int, str]]:
    """(count, word) pairs for display surfaces; the word is its original spelling."""
    for word in ranked:
        # overlong letter encodings pass our decoder but not the strict codec
        raw = text.original_bytes(word.start, word.end)
        yield word.count, raw.decode("utf-8", errors="replace")
