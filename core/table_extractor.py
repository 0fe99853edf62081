from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from core.tokenizer import detect_delimiter, split_line

logger = logging.getLogger(__name__)

HEADER_NAME_MARKERS = ("Simidrottare", "Namn")
HEADER_EVENT_MARKER = "Gren"
HEADER_TIME_MARKER = "Tid"
FOOTER_MARKER = "Placering"
HEADER_HIT_THRESHOLD = 3

LINE_BREAK_RE = re.compile(r"\r\n?")


@dataclass(frozen=True, slots=True)
class RawTable:
    headers: tuple[str, ...] = ()
    rows: tuple[Mapping[str, str], ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return bool(self.headers) and bool(self.rows)


def is_header_line(line: str) -> bool:
    return (
        any(marker in line for marker in HEADER_NAME_MARKERS)
        and HEADER_EVENT_MARKER in line
        and HEADER_TIME_MARKER in line
    )


def find_header_index(lines: list[str]) -> int | None:
    for idx, line in enumerate(lines):
        if is_header_line(line):
            return idx
    return None


def _is_noise(fields: list[str], header_set: set[str]) -> bool:
    if not any(f.strip() for f in fields):
        return True
    hits = sum(1 for f in fields if f.strip() in header_set)
    first = fields[0].strip() if fields else ""
    return hits >= HEADER_HIT_THRESHOLD or first == FOOTER_MARKER


def extract_table(text: str) -> RawTable:
    delimiter = detect_delimiter(text)
    lines = LINE_BREAK_RE.sub("\n", text).split("\n")
    logger.debug("Detected delimiter %r over %d lines", delimiter, len(lines))

    header_idx = find_header_index(lines)
    if header_idx is None:
        logger.debug("No header row found, assuming the first line is the header")
    else:
        logger.debug("Header row at line %d", header_idx)
        lines = lines[header_idx:]
    if not lines:
        return RawTable()

    headers = [h.strip() for h in split_line(lines[0], delimiter)]
    header_set = set(headers)

    rows: list[Mapping[str, str]] = []
    dropped = 0
    for line in lines[1:]:
        fields = split_line(line, delimiter)
        if _is_noise(fields, header_set):
            dropped += 1
            continue
        row: dict[str, str] = {}
        for idx, header in enumerate(headers):
            row[header] = fields[idx].strip() if idx < len(fields) else ""
        rows.append(MappingProxyType(row))
    logger.debug("Extracted %d rows, dropped %d blank or header/footer lines", len(rows), dropped)

    return RawTable(headers=tuple(headers), rows=tuple(rows))
