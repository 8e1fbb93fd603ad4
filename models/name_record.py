from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class NameRecord:
    first_name: str
    last_name: str


@dataclass(frozen=True)
class MalformedLine:
    line_no: int
    content: str


@dataclass
class ParseResult:
    records: List[NameRecord] = field(default_factory=list)
    skipped: List[MalformedLine] = field(default_factory=list)
    lines_read: int = 0

    def add(self, item: NameRecord | MalformedLine) -> None:
        self.lines_read += 1
        if isinstance(item, NameRecord):
            self.records.append(item)
        else:
            self.skipped.append(item)
