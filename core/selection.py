from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable, Mapping

from core.aggregation import SwimmerRecord
from core.events import BROST_100, FJARIL_100, FRISIM_50, FRISIM_100, FRISIM_200, RYGG_100, normalize_text

RELAY_TYPES = ("4x50 frisim", "4x100 frisim", "4x200 frisim", "4x50 medley", "4x100 medley")
RELAY_CLASSES = ("Herr", "Dam", "Mix")
MIX = "Mix"

# back, breast, fly, then 100 free shown as a reference time
MEDLEY_KEYS = (RYGG_100, BROST_100, FJARIL_100, FRISIM_100)

RELAY_RULES: tuple[tuple[re.Pattern[str], tuple[str, ...]], ...] = (
    (re.compile(r"4x50\s*frisim"), (FRISIM_50,)),
    (re.compile(r"4x100\s*frisim"), (FRISIM_100,)),
    (re.compile(r"4x200\s*frisim"), (FRISIM_200,)),
    (re.compile(r"4x50\s*medley"), MEDLEY_KEYS),
    (re.compile(r"4x100\s*medley"), MEDLEY_KEYS),
)

# Swedish collation: å, ä, ö follow z
SWEDISH_ALPHABET = "abcdefghijklmnopqrstuvwxyzåäö"
SWEDISH_ORDER = {ch: idx for idx, ch in enumerate(SWEDISH_ALPHABET)}
SWEDISH_EQUIVALENTS = str.maketrans({"æ": "ä", "ø": "ö", "ü": "y"})


@dataclass(frozen=True, slots=True)
class SwimmerEntry:
    name: str
    gender: str
    age: int | None
    times: Mapping[str, str]


def required_event_keys(relay_type: str) -> list[str]:
    text = normalize_text(relay_type)
    for pattern, keys in RELAY_RULES:
        if pattern.search(text):
            return list(keys)
    return []


def _base_letters(ch: str) -> str:
    if ch in SWEDISH_ORDER:
        return ch
    decomposed = unicodedata.normalize("NFD", ch)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def swedish_sort_key(name: str) -> tuple:
    folded = unicodedata.normalize("NFC", name.casefold())
    letters = "".join(_base_letters(ch) for ch in folded.translate(SWEDISH_EQUIVALENTS))
    primary = tuple(
        (1, SWEDISH_ORDER[ch]) if ch in SWEDISH_ORDER else (2 if ch.isalpha() else 0, ord(ch))
        for ch in letters
    )
    return primary, folded, name


def available_ages(swimmers: Mapping[str, SwimmerRecord]) -> list[int]:
    return sorted({r.age for r in swimmers.values() if r.age is not None})


def filter_swimmers(
    swimmers: Mapping[str, SwimmerRecord],
    relay_class: str = "",
    ages: Iterable[int] = (),
    relay_type: str = "",
) -> list[SwimmerEntry]:
    wanted_ages = {int(a) for a in ages}
    keys = required_event_keys(relay_type)
    entries: list[SwimmerEntry] = []
    for name, record in swimmers.items():
        gender = record.normalized_gender
        if relay_class and relay_class != MIX and gender != relay_class:
            continue
        if wanted_ages and record.age not in wanted_ages:
            continue
        times = {}
        for key in keys:
            sample = record.best_by_canonical_key.get(key)
            times[key] = sample.display if sample else ""
        entries.append(SwimmerEntry(name=name, gender=gender, age=record.age, times=times))
    return sorted(entries, key=lambda e: swedish_sort_key(e.name))
