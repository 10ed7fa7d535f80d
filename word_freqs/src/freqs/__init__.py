"""
Word Frequency Module

Reads a byte buffer as UTF-8, splits it into words made of Latin and
Cyrillic letters, counts each distinct word case-insensitively and reports
them by descending frequency, every word spelled exactly as it first
appeared in the input.

Main Functions:
    count_words(buffer): count words in an in-memory byte buffer
    Engine().run(input_path, output_path): file to file, as the CLI does

Example Usage:
    from freqs import count_words

    report = count_words("Cat cat dog".encode("utf-8"))
    print(report.to_bytes().decode("utf-8"))   # "2 Cat\\n1 dog\\n"
"""

# src/freqs/__init__.py
from .engine import Engine, FrequencyReport, count_words  # re-export
from .errors import (
    ExitCode, FreqsError, ArgumentCountError, InputOpenError,
    InputReadError, OutputOpenError, DecodeFormatError,
)

__version__ = "1.0.0"
__all__ = [
    "Engine", "FrequencyReport", "count_words",
    "ExitCode", "FreqsError", "ArgumentCountError", "InputOpenError",
    "InputReadError", "OutputOpenError", "DecodeFormatError",
]
