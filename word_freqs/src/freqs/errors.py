# freqs/errors.py
from __future__ import annotations
from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    ARGUMENT_COUNT = 1
    INPUT_FILE = 2
    OUTPUT_FILE = 3
    FILE_FORMAT = 4


class FreqsError(Exception):
    """Base class for every terminal failure of a run."""
    exit_code: ExitCode


class ArgumentCountError(FreqsError):
    exit_code = ExitCode.ARGUMENT_COUNT


class InputOpenError(FreqsError):
    exit_code = ExitCode.INPUT_FILE

    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"cannot open input file {path!r}" + (f": {reason}" if reason else ""))
        self.path = path


class InputReadError(FreqsError):
    exit_code = ExitCode.INPUT_FILE

    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"cannot read input file {path!r}" + (f": {reason}" if reason else ""))
        self.path = path


class OutputOpenError(FreqsError):
    exit_code = ExitCode.OUTPUT_FILE

    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"cannot open output file {path!r}" + (f": {reason}" if reason else ""))
        self.path = path


class DecodeFormatError(FreqsError):
    """Malformed UTF-8; `offset` is the byte index of the offending byte."""
    exit_code = ExitCode.FILE_FORMAT

    def __init__(self, offset: int, reason: str) -> None:
        super().__init__(f"invalid UTF-8 at byte {offset}: {reason}")
        self.offset = offset
        self.reason = reason
