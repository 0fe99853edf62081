from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

WHITESPACE_RE = re.compile(r"\s+")
NORDIC_FOLD = str.maketrans({"å": "a", "ä": "a", "ö": "o"})

COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("Simidrottare", "Namn", "Simmare", "Namn på simmare", "Simmarens namn"),
    "event": ("Gren", "Simgren", "Distans"),
    "time": ("Tid", "Resultat", "Sluttid"),
    "gender": ("Kön", "Kon", "Gender", "K"),
    "age": ("Ålder vid loppet", "Alder vid loppet", "Ålder idag", "Alder idag", "Ålder", "Alder"),
    "birth_year": ("Född", "Fodd", "Födelseår", "Fodelsear"),
    "date": ("Datum", "Tävlingsdatum", "Tavlingsdatum"),
}

# required field -> name used in the "missing columns" message
REQUIRED_FIELDS: dict[str, str] = {
    "name": "Namn/Simidrottare",
    "event": "Gren",
    "time": "Tid",
}


def normalize_header_name(name: object) -> str:
    return WHITESPACE_RE.sub(" ", str(name).lower()).translate(NORDIC_FOLD)


def pick_column(headers: Sequence[str], candidates: Iterable[str]) -> str | None:
    normalized: dict[str, str] = {}
    for header in headers:
        normalized[normalize_header_name(header)] = header

    for candidate in candidates:
        norm = normalize_header_name(candidate)
        if norm in normalized:
            return normalized[norm]
        for key, header in normalized.items():
            if norm in key:
                return header
    return None


@dataclass(frozen=True, slots=True)
class ColumnMap:
    name: str | None = None
    event: str | None = None
    time: str | None = None
    gender: str | None = None
    age: str | None = None
    birth_year: str | None = None
    date: str | None = None

    def missing_required(self) -> list[str]:
        return [label for key, label in REQUIRED_FIELDS.items() if getattr(self, key) is None]


def resolve_columns(headers: Sequence[str]) -> ColumnMap:
    return ColumnMap(**{key: pick_column(headers, aliases) for key, aliases in COLUMN_ALIASES.items()})
