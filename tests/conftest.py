import logging
import os
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def name_file(tmp_path):
    """Write ``content`` to a names file and return its path as a string."""

    def _write(content, name="names.txt", encoding="utf-8"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding)
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in (
        "LOG_LEVEL",
        "NAMELIST_MAX_LENGTH",
        "NAMELIST_FIELD_WIDTH",
        "NAMELIST_MAX_LINE_LENGTH",
        "NAMELIST_ENCODING",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
