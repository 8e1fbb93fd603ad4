from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from models import NameRecord
from utils.config import DEFAULT_FIELD_WIDTH


HEADER = "Names found in file:"


def format_record(record: NameRecord, width: int = DEFAULT_FIELD_WIDTH) -> str:
    return f"First Name: {record.first_name:<{width}} Last Name: {record.last_name:<{width}}"


def render_report(records: Iterable[NameRecord], width: int = DEFAULT_FIELD_WIDTH) -> List[str]:
    # Blank separator keeps the table apart from the prompt and skip notices.
    lines = ["", HEADER]
    lines.extend(format_record(r, width) for r in records)
    return lines


def print_report(
    records: Iterable[NameRecord],
    width: int = DEFAULT_FIELD_WIDTH,
    out: Optional[TextIO] = None,
) -> None:
    out = out or sys.stdout
    for line in render_report(records, width):
        print(line, file=out)
