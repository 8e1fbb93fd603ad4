from __future__ import annotations

from typing import Callable, Iterator, Optional, TextIO, Union

from models import MalformedLine, NameRecord, ParseResult
from parsers.errors import FatalReadError
from utils.config import DEFAULT_MAX_LENGTH, DEFAULT_MAX_LINE_LENGTH
from utils.logging import get_logger
from utils.telemetry import Telemetry


logger = get_logger(__name__)

ParsedLine = Union[NameRecord, MalformedLine]


def truncate(value: str, max_len: int = DEFAULT_MAX_LENGTH) -> str:
    if len(value) > max_len:
        return value[:max_len]
    return value


def parse_line(line: str, max_len: int = DEFAULT_MAX_LENGTH) -> Optional[NameRecord]:
    """
    Split one line into a NameRecord on its first whitespace run.

    Everything after that run is the last name, so "Mary Jane Smith" gives
    first="Mary", last="Jane Smith". Returns None when the line does not
    hold two non-empty parts. Fields are truncated after the split.
    """
    parts = line.strip().split(None, 1)
    if len(parts) != 2:
        return None
    first, last = parts
    return NameRecord(first_name=truncate(first, max_len), last_name=truncate(last, max_len))


def iter_name_lines(
    stream: TextIO,
    max_len: int = DEFAULT_MAX_LENGTH,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> Iterator[ParsedLine]:
    """
    Lazily yield a NameRecord or MalformedLine for every line of ``stream``.

    A failure while reading raises FatalReadError; end of file simply ends
    the iteration. Lines longer than ``max_line_length`` characters count as
    a read failure.
    """
    path = getattr(stream, "name", None)
    line_no = 0
    while True:
        try:
            raw = stream.readline(max_line_length + 1)
        except OSError as exc:
            raise FatalReadError(path, str(exc), line_no=line_no + 1) from exc
        if not raw:
            return
        line_no += 1

        body = raw.rstrip("\r\n")
        if len(body) > max_line_length:
            raise FatalReadError(
                path,
                f"line {line_no} exceeds {max_line_length} characters",
                line_no=line_no,
            )

        record = parse_line(body, max_len)
        if record is None:
            logger.debug("line %d malformed: %r", line_no, body)
            yield MalformedLine(line_no=line_no, content=body.strip())
        else:
            yield record


def parse_name_file(
    stream: TextIO,
    max_len: int = DEFAULT_MAX_LENGTH,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    notify: Callable[[str], None] = print,
    telemetry: Optional[Telemetry] = None,
) -> ParseResult:
    telemetry = telemetry or Telemetry()
    result = ParseResult()
    with telemetry.timer("parse"):
        for item in iter_name_lines(stream, max_len=max_len, max_line_length=max_line_length):
            result.add(item)
            telemetry.incr("lines_read")
            if isinstance(item, MalformedLine):
                telemetry.incr("malformed")
                notify(f"Skipping malformed line: {item.content}")
            else:
                telemetry.incr("records")
    logger.info(
        "parsed %d records from %d lines (%d skipped)",
        len(result.records),
        result.lines_read,
        len(result.skipped),
    )
    return result
