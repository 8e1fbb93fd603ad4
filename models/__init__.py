from .name_record import NameRecord, MalformedLine, ParseResult

__all__ = [
    "NameRecord",
    "MalformedLine",
    "ParseResult",
]
