from .errors import NameFileError, FatalOpenError, FatalReadError
from .name_file import prompt_for_path, open_name_file
from .name_parser import truncate, parse_line, iter_name_lines, parse_name_file

__all__ = [
    "NameFileError",
    "FatalOpenError",
    "FatalReadError",
    "prompt_for_path",
    "open_name_file",
    "truncate",
    "parse_line",
    "iter_name_lines",
    "parse_name_file",
]
