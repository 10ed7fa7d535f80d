from __future__ import annotations
import argparse
import logging
import sys

from .engine import Engine
from .errors import ArgumentCountError, ExitCode, FreqsError

log = logging.getLogger("freqs")


class _Parser(argparse.ArgumentParser):
    """argparse exits with status 2 on bad input; we need ArgumentCountError (1).

    No -h/--help: any command line other than INPUT OUTPUT [--verbose] exits 1.
    """

    def error(self, message: str):  # type: ignore[override]
        raise ArgumentCountError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="freqs",
        add_help=False,
        description="Count Latin/Cyrillic words in a UTF-8 file, most frequent first",
    )
    p.add_argument("paths", nargs="*", metavar="PATH", help="INPUT OUTPUT")
    p.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
        if len(args.paths) != 2:
            raise ArgumentCountError(f"expected 2 arguments (INPUT OUTPUT), got {len(args.paths)}")

        input_path, output_path = args.paths
        Engine(verbose=args.verbose).run(input_path, output_path)
    except ArgumentCountError as exc:
        parser.print_usage(sys.stderr)
        log.error("%s", exc)
        return int(exc.exit_code)
    except FreqsError as exc:
        log.error("%s", exc)
        return int(exc.exit_code)
    return int(ExitCode.OK)


if __name__ == "__main__":
    raise SystemExit(main())
