from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Timed:
    value: Any
    seconds: float


def timed(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Timed:
    t0 = time.perf_counter()
    value = fn(*args, **kwargs)
    return Timed(value=value, seconds=time.perf_counter() - t0)


def format_duration(seconds: float) -> str:
    nanos = int(round(seconds * 1e9))
    if nanos < 1_000:
        return f"{nanos}ns"
    if nanos < 1_000_000:
        return f"{nanos / 1_000:.2f}us"
    if nanos < 1_000_000_000:
        return f"{nanos / 1_000_000:.2f}ms"
    return f"{seconds:.2f}s"
