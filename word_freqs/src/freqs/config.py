from __future__ import annotations
from .models import Alphabet

# Registered alphabets, ordered by ascending upper_begin.
# The classifier short-circuits on this ordering, keep it sorted.
ALPHABETS: tuple[Alphabet, ...] = (
    # Latin: 'A'..'Z', 'a'..'z'. lower_end is 'z' + 1 (123); the old table
    # used 122, which left 'z' and 'Z' outside the alphabet.
    Alphabet(upper_begin=65, lower_begin=97, lower_end=123),
    # Cyrillic: 'А'..'Я', 'а'..'я' (no 'ё')
    Alphabet(upper_begin=1040, lower_begin=1072, lower_end=1104),
)

# Report formatting
LINE_TERMINATOR: bytes = b"\n"
COUNT_SEPARATOR: bytes = b" "

# Progress logging (set FREQS_VERBOSE=1 to enable)
VERBOSE_ENV: str = "FREQS_VERBOSE"

# /* ~~~ web surface defaults ~~~ */
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
WEB_DEFAULT_LIMIT: int = 100      # rows returned by /api/freqs when no ?limit=
MAX_UPLOAD_BYTES: int = 32 * 1024 * 1024
