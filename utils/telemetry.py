from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Dict


class Telemetry:
    def __init__(self) -> None:
        self.counters: Dict[str, int] = {}
        self.timings_ms: Dict[str, float] = {}

    def incr(self, name: str, value: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def get(self, name: str) -> int:
        return self.counters.get(name, 0)

    def observe_ms(self, name: str, ms: float) -> None:
        self.timings_ms[name] = self.timings_ms.get(name, 0.0) + ms

    @contextmanager
    def timer(self, name: str):
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe_ms(name, (time.perf_counter() - start) * 1000.0)

    def summary_line(self) -> str:
        parts = [f"{k}={v}" for k, v in sorted(self.counters.items())]
        parts += [f"{k}_ms={v:.1f}" for k, v in sorted(self.timings_ms.items())]
        return " ".join(parts)
