from __future__ import annotations

import argparse
from typing import Callable, List, Optional

from dotenv import load_dotenv, find_dotenv

from utils.config import load_config
from utils.logging import setup_logging, get_logger
from utils.telemetry import Telemetry
from parsers import NameFileError, prompt_for_path, open_name_file, parse_name_file
from tools.report import print_report


logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {raw!r}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namelist",
        description="Read 'first last' name pairs from a text file and print them as a table.",
    )
    parser.add_argument("path", nargs="?", help="text file to read; prompted for when omitted")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="logging level (default: $LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--max-length",
        type=positive_int,
        default=None,
        help="truncate names to this many characters",
    )
    return parser


def run(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    args = build_arg_parser().parse_args(argv)
    cfg = load_config()
    setup_logging(args.log_level or cfg.log_level)
    max_len = args.max_length if args.max_length is not None else cfg.max_length

    path = args.path or prompt_for_path(input_fn)
    telemetry = Telemetry()

    try:
        with open_name_file(path, encoding=cfg.encoding) as f:
            result = parse_name_file(
                f,
                max_len=max_len,
                max_line_length=cfg.max_line_length,
                telemetry=telemetry,
            )
    except NameFileError as exc:
        # Nothing parsed before a read failure is printed.
        logger.error("run aborted for %r: %s", exc.path, exc)
        print(exc)
        return exc.exit_code

    print_report(result.records, width=cfg.field_width)
    logger.info("run complete: %s", telemetry.summary_line())
    return 0


def main() -> None:
    load_dotenv(find_dotenv(usecwd=True), override=False)
    try:
        code = run()
    except KeyboardInterrupt:
        print("\nInterrupted.")
        code = 130
    raise SystemExit(code)


if __name__ == "__main__":
    main()
