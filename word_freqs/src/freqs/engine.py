# freqs/engine.py
from __future__ import annotations

import os
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from . import config as CFG
from .alphabet import AlphabetTable, DEFAULT_TABLE
from .models import DecodedText, Word
from .utf8 import decode
from .segment import segment
from .registry import WordRegistry
from .report import rank, write_report, format_report, ranked_entries
from .loader import open_input, open_output, read_all

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrequencyReport:
    """
    Outcome of one counting pass.

    `text` keeps the original bytes and spans for rendering, `folded` is the
    comparison view, `words` is already ranked.
    """
    text: DecodedText
    folded: Tuple[int, ...]
    words: List[Word]
    occurrences: int

    @property
    def distinct(self) -> int:
        return len(self.words)

    def to_bytes(self) -> bytes:
        return format_report(self.words, self.text)

    def entries(self, limit: Optional[int] = None) -> List[Tuple[int, str]]:
        rows = self.words if limit is None else self.words[:max(0, limit)]
        return list(ranked_entries(rows, self.text))

    def folded_word(self, word: Word) -> Tuple[int, ...]:
        return self.folded[word.start:word.end]

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)


class Engine:
    """
    Glues the pipeline stages together:
      decode -> fold -> segment -> register -> rank

    Public API (used by CLI/Flask/GUI):
      * count(buffer):              bytes -> FrequencyReport
      * run(input_path, output_path): file -> file, returns the report
    """

    def __init__(self, table: Optional[AlphabetTable] = None, *, verbose: bool = False) -> None:
        self.table = table or DEFAULT_TABLE
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

    # /* ~~~ Count words in an in-memory buffer ~~~ */
    def count(self, buffer: bytes) -> FrequencyReport:
        text = decode(buffer)
        log.info("Decoded %d bytes into %d code points", len(text.source), len(text))

        folded = self.table.fold_all(text.code_points)
        registry = WordRegistry(folded)
        occurrences = registry.register_all(segment(folded, self.table))
        log.info("Registered %d words (%d distinct)", occurrences, len(registry))

        ranked = rank(registry.words(), folded)
        return FrequencyReport(text=text, folded=folded, words=ranked, occurrences=occurrences)

    # /* ~~~ Read input file, write the report to the output file ~~~ */
    def run(self, input_path: str, output_path: str) -> FrequencyReport:
        # Opening order matters for exit codes: input, then output, then read.
        with open_input(input_path) as src:
            with open_output(output_path) as dst:
                data = read_all(src, input_path)
                result = self.count(data)
                lines = write_report(dst, result.words, result.text)
        log.info("Wrote %d lines to %s", lines, output_path)
        return result


def count_words(buffer: bytes, table: Optional[AlphabetTable] = None) -> FrequencyReport:
    """Convenience wrapper: one-shot Engine(table).count(buffer)."""
    return Engine(table).count(buffer)
