from __future__ import annotations

import math
import re

NON_TIME_CHARS_RE = re.compile(r"[^0-9:.]")
LEADING_FLOAT_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
LEADING_INT_RE = re.compile(r"\d+")


def _leading_float(text: str) -> float | None:
    match = LEADING_FLOAT_RE.match(text)
    return float(match.group(0)) if match else None


def _leading_int(text: str) -> int | None:
    match = LEADING_INT_RE.match(text)
    return int(match.group(0)) if match else None


def parse_time_to_seconds(value: str | float | int | None) -> float | None:
    """Parse "35.40", "1:05,32" or "1:02:03.5" into seconds.

    Returns None when nothing usable is left after cleaning.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) and value >= 0 else None
    text = NON_TIME_CHARS_RE.sub("", str(value).strip().replace(",", "."))
    if not text:
        return None

    parts = text.split(":")
    if len(parts) == 1:
        return _leading_float(parts[0])
    if len(parts) == 2:
        minutes = _leading_int(parts[0])
        seconds = _leading_float(parts[1])
        if minutes is None or seconds is None:
            return None
        return minutes * 60 + seconds

    hours = _leading_int(parts[0]) or 0
    minutes = _leading_int(parts[1]) or 0
    seconds = _leading_float(":".join(parts[2:]))
    if seconds is None:
        return None
    return hours * 3600 + minutes * 60 + seconds


def seconds_to_display(value: float | None) -> str:
    if value is None or not math.isfinite(value):
        return ""
    minutes = math.floor(value / 60)
    rest = value - minutes * 60
    return f"{minutes}:{rest:05.2f}"
