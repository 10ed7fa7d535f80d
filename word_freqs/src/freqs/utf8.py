# freqs/utf8.py
"""
Byte-level UTF-8 decoder.

Produces one (code_point, offset, length) triple per encoded unit so that
words can later be written back exactly as they appeared in the input.

Lead byte rules:
  * 0xxxxxxx           -> one byte, value = byte
  * otherwise the first zero bit found scanning bits 5..1 at position p
    gives a unit of 7 - p bytes whose initial value is the bits below p
  * no zero bit in bits 5..1 (0xFE, 0xFF) -> DecodeFormatError

Bit 6 is never inspected, so a stray continuation byte (10xxxxxx) in lead
position starts a multi-byte unit of its own. Overlong forms, surrogates and
values above U+10FFFF are accepted as-is.
"""

from __future__ import annotations
from typing import Iterator, List, Tuple

from .errors import DecodeFormatError
from .models import ByteSpan, DecodedText

_HIGH_BIT = 0x80
_CONT_MASK = 0xC0       # top two bits of a continuation byte
_CONT_TAG = 0x80        # ...must read 10
_LOW6 = 0x3F


def interpret_lead_byte(byte: int, offset: int = 0) -> Tuple[int, int]:
    """Return (unit_length, initial_value) for a lead byte."""
    if byte & _HIGH_BIT == 0:
        return 1, byte

    for bit in range(5, 0, -1):
        if byte & (1 << bit) == 0:
            return 7 - bit, byte & (0xFF >> (8 - bit))

    raise DecodeFormatError(offset, f"lead byte 0x{byte:02X} has no length marker")


def interpret_continuation_byte(value: int, byte: int, offset: int = 0) -> int:
    """Append the low 6 bits of a continuation byte to `value`."""
    if byte & _CONT_MASK != _CONT_TAG:
        raise DecodeFormatError(offset, f"expected continuation byte, got 0x{byte:02X}")
    return (value << 6) | (byte & _LOW6)


def iter_code_points(buffer: bytes) -> Iterator[Tuple[int, int, int]]:
    """
    Yield (code_point, offset, length) for every encoded unit in `buffer`.

    The triples cover the buffer exactly and in order. Raises
    DecodeFormatError on the first malformed unit; callers must not use
    anything yielded before the failure as a complete result.
    """
    size = len(buffer)
    pos = 0
    while pos < size:
        start = pos
        length, value = interpret_lead_byte(buffer[pos], pos)
        for _ in range(length - 1):
            pos += 1
            if pos >= size:
                raise DecodeFormatError(
                    pos, f"truncated {length}-byte sequence starting at byte {start}"
                )
            value = interpret_continuation_byte(value, buffer[pos], pos)
        pos += 1
        yield value, start, pos - start


def decode(buffer: bytes) -> DecodedText:
    """Decode the whole buffer into parallel code-point and byte-span views."""
    source = bytes(buffer)
    code_points: List[int] = []
    spans: List[ByteSpan] = []
    for cp, offset, length in iter_code_points(source):
        code_points.append(cp)
        spans.append(ByteSpan(offset, length))
    return DecodedText(source=source, code_points=tuple(code_points), spans=tuple(spans))
