"""Swim event names -> canonical (stroke, distance) keys.

Only six events are recognised. Anything else normalizes to ``None`` and is
kept under its raw label only.
"""

from __future__ import annotations

import re
from typing import Callable

from core.columns import NORDIC_FOLD, WHITESPACE_RE

FRISIM_50 = "frisim_50"
FRISIM_100 = "frisim_100"
FRISIM_200 = "frisim_200"
RYGG_100 = "rygg_100"
BROST_100 = "brost_100"
FJARIL_100 = "fjaril_100"

CANONICAL_KEYS = (FRISIM_50, FRISIM_100, FRISIM_200, RYGG_100, BROST_100, FJARIL_100)

KEY_LABELS = {
    FRISIM_50: "50 frisim",
    FRISIM_100: "100 frisim",
    FRISIM_200: "200 frisim",
    RYGG_100: "100 rygg",
    BROST_100: "100 bröst",
    FJARIL_100: "100 fjäril",
}

METER_RE = re.compile(r"meter|m\.|m ")

# "100m", "100 m" and a bare "100" token ("100 Frisim") all count as 100 m
DISTANCE_PATTERNS = {
    distance: re.compile(rf"(?:^|\s){distance}(?:\s*m|\s|$)|\b{distance}m\b")
    for distance in (50, 100, 200)
}

STROKE_WORDS = {
    "free": ("frisim", "freestyle"),
    "back": ("rygg", "ryggsim", "backstroke"),
    "breast": ("bröst", "brost", "breast"),
    "fly": ("fjäril", "fjaril", "butterfly"),
}


def normalize_text(value: object) -> str:
    text = str(value or "").lower().translate(NORDIC_FOLD)
    return WHITESPACE_RE.sub(" ", text).strip()


def _is(distance: int, stroke: str) -> Callable[[str], bool]:
    def matches(text: str) -> bool:
        return bool(DISTANCE_PATTERNS[distance].search(text)) and any(
            word in text for word in STROKE_WORDS[stroke]
        )

    return matches


# evaluated in order, first match wins
EVENT_RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (_is(50, "free"), FRISIM_50),
    (_is(100, "free"), FRISIM_100),
    (_is(200, "free"), FRISIM_200),
    (_is(100, "back"), RYGG_100),
    (_is(100, "breast"), BROST_100),
    (_is(100, "fly"), FJARIL_100),
)


def normalize_event(raw: object) -> str | None:
    text = WHITESPACE_RE.sub(" ", METER_RE.sub("m ", normalize_text(raw)))
    for predicate, key in EVENT_RULES:
        if predicate(text):
            return key
    return None


def label_for_key(key: str) -> str:
    return KEY_LABELS.get(key, key)
