from __future__ import annotations

DELIMITER_SAMPLE_SIZE = 2000
QUOTE = '"'


def detect_delimiter(sample: str) -> str:
    head = sample[:DELIMITER_SAMPLE_SIZE]
    return ";" if head.count(";") >= head.count(",") else ","


def _strip_quote(field: str) -> str:
    if field.startswith(QUOTE):
        field = field[1:]
    if field.endswith(QUOTE):
        field = field[:-1]
    return field.strip()


def split_line(line: str, delimiter: str) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for ch in line:
        if ch == QUOTE:
            # an unmatched quote keeps the flag set to the end of the line
            in_quotes = not in_quotes
            continue
        if ch == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    fields.append("".join(current).strip())
    return [_strip_quote(f) for f in fields]
