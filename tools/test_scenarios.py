from __future__ import annotations

import io
import os
import tempfile
from contextlib import redirect_stdout
from typing import Optional

from main import run


def run_scripted(content: Optional[str], argv_extra: Optional[list] = None) -> dict:
    """Run the CLI on ``content`` written to a temp file; None means no file."""
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "names.txt")
        if content is not None:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        out = io.StringIO()
        with redirect_stdout(out):
            code = run([path] + list(argv_extra or []))
    return summarize(code, out.getvalue())


def summarize(code: int, output: str) -> dict:
    lines = output.splitlines()
    return {
        "exit_code": code,
        "has_header": "Names found in file:" in lines,
        "records": [l for l in lines if l.startswith("First Name: ")],
        "skipped": [l for l in lines if l.startswith("Skipping malformed line: ")],
        "errors": [l for l in lines if l.startswith("Error ")],
    }


def scenario_two_names() -> dict:
    return run_scripted("Alice Smith\nBob Jones\n")


def scenario_single_token() -> dict:
    return run_scripted("Madonna\nAlice Smith\n")


def scenario_long_first_name() -> dict:
    return run_scripted("A" * 25 + " Smith\n")


def scenario_missing_file() -> dict:
    return run_scripted(None)


def scenario_empty_file() -> dict:
    return run_scripted("")


def run_all() -> dict:
    return {
        "two_names": scenario_two_names(),
        "single_token": scenario_single_token(),
        "long_first_name": scenario_long_first_name(),
        "missing_file": scenario_missing_file(),
        "empty_file": scenario_empty_file(),
    }


if __name__ == "__main__":
    import json
    print(json.dumps(run_all(), indent=2))
