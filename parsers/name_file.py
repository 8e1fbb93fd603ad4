from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, TextIO

from parsers.errors import FatalOpenError
from utils.logging import get_logger


PROMPT = "Enter the name of the text file: "

logger = get_logger(__name__)


def prompt_for_path(input_fn: Callable[[str], str] = input) -> str:
    """Ask until an answer holds a token; keep only the first one."""
    while True:
        try:
            answer = input_fn(PROMPT)
        except EOFError:
            return ""
        tokens = answer.split()
        if tokens:
            return tokens[0]


@contextmanager
def open_name_file(path: str, encoding: str = "utf-8") -> Iterator[TextIO]:
    # Undecodable bytes become U+FFFD so a bad line never ends the run.
    try:
        f = open(path, "r", encoding=encoding, errors="replace")
    except OSError as exc:
        reason = f"open {path}: {exc.strerror or exc}"
        logger.debug("open failed for %r: %r", path, exc)
        raise FatalOpenError(path, reason) from exc
    logger.debug("opened %s", path)
    try:
        yield f
    finally:
        f.close()
        logger.debug("closed %s", path)
