# freqs/loader.py
from __future__ import annotations
import os
import sys
from typing import BinaryIO

from .errors import InputOpenError, InputReadError, OutputOpenError
from . import config as CFG


def _verbose() -> bool:
    return os.environ.get(CFG.VERBOSE_ENV) == "1"


def open_input(path: str) -> BinaryIO:
    """Open the input file for binary reading."""
    try:
        return open(path, "rb")
    except OSError as exc:
        raise InputOpenError(path, exc.strerror or str(exc)) from exc


def open_output(path: str) -> BinaryIO:
    """Create/truncate the output file for binary writing."""
    try:
        return open(path, "wb")
    except OSError as exc:
        raise OutputOpenError(path, exc.strerror or str(exc)) from exc


def read_all(stream: BinaryIO, path: str) -> bytes:
    """
    Read the whole stream into memory.

    The expected size is taken from the file itself; a short read means the
    file changed or the device failed, and is reported as InputReadError.
    """
    try:
        expected = os.fstat(stream.fileno()).st_size
    except (OSError, AttributeError, ValueError):
        expected = None  # not a regular file (pipe, BytesIO, ...)

    try:
        data = stream.read()
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc

    if data is None:
        raise InputReadError(path, "non-blocking stream returned no data")
    if expected is not None and len(data) < expected:
        raise InputReadError(path, f"read {len(data)} of {expected} bytes")

    if _verbose():
        print(f"[read] {path}: {len(data):,} bytes", file=sys.stderr)
    return data


def read_file(path: str) -> bytes:
    with open_input(path) as f:
        return read_all(f, path)
