from __future__ import annotations

import re
from typing import Mapping

from core.columns import ColumnMap

NON_DIGIT_RE = re.compile(r"\D")

DAM = "Dam"
HERR = "Herr"

# substring rules, checked in order; "dam" wins over "herr" for e.g. "female"
GENDER_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("dam", "kvinna", "f", "female", "flicka", "flickor"), DAM),
    (("herr", "man", "m", "male", "pojke", "pojkar"), HERR),
)
GENDER_SHORT_CODES = {"k": DAM, "h": HERR}


def normalize_gender(value: object) -> str:
    text = str(value or "").lower()
    if not text:
        return ""
    for words, gender in GENDER_RULES:
        if any(word in text for word in words):
            return gender
    return GENDER_SHORT_CODES.get(text, "")


def _year_prefix(value: str) -> int | None:
    prefix = value.strip()[:4]
    return int(prefix) if prefix.isascii() and prefix.isdigit() else None


def resolve_age(row: Mapping[str, str], columns: ColumnMap) -> int | None:
    if columns.age is not None:
        digits = NON_DIGIT_RE.sub("", row.get(columns.age, ""))
        if digits:
            return int(digits)

    if columns.birth_year is not None and columns.date is not None:
        born = _year_prefix(row.get(columns.birth_year, ""))
        competed = _year_prefix(row.get(columns.date, ""))
        if born is not None and competed is not None:
            return competed - born
    return None
