from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Iterable, Mapping

from core.ages import DAM, HERR, normalize_gender, resolve_age
from core.columns import ColumnMap
from core.events import normalize_event
from core.time_utils import parse_time_to_seconds, seconds_to_display


@dataclass(frozen=True, slots=True)
class TimeSample:
    seconds: float
    display: str

    @classmethod
    def from_seconds(cls, seconds: float) -> TimeSample:
        return cls(seconds=seconds, display=seconds_to_display(seconds))


@dataclass(frozen=True, slots=True)
class SwimmerRecord:
    name: str
    gender: str = ""
    age: int | None = None
    best_by_raw_event: Mapping[str, TimeSample] = field(default_factory=dict)
    best_by_canonical_key: Mapping[str, TimeSample] = field(default_factory=dict)

    @property
    def normalized_gender(self) -> str:
        return normalize_gender(self.gender)


@dataclass(frozen=True, slots=True)
class Summary:
    count: int
    dam: int
    herr: int


def _improve(best: Mapping[str, TimeSample], key: str, sample: TimeSample) -> Mapping[str, TimeSample]:
    current = best.get(key)
    # strict "<" keeps the first-seen sample on ties
    if current is not None and not sample.seconds < current.seconds:
        return best
    return {**best, key: sample}


def update_with_row(
    records: dict[str, SwimmerRecord], row: Mapping[str, str], columns: ColumnMap
) -> dict[str, SwimmerRecord]:
    """Fold one row into ``records`` in place and return it."""
    name = row.get(columns.name, "").strip() if columns.name else ""
    event = row.get(columns.event, "").strip() if columns.event else ""
    raw_time = row.get(columns.time, "").strip() if columns.time else ""
    gender = row.get(columns.gender, "").strip() if columns.gender else ""

    if not (name or event or raw_time):
        return records

    seconds = parse_time_to_seconds(raw_time)
    age = resolve_age(row, columns)
    record = records.get(name) or SwimmerRecord(name=name, gender=gender, age=age)

    if not record.gender and gender:
        record = replace(record, gender=gender)
    if record.age is None and age is not None:
        record = replace(record, age=age)

    if name and event and seconds is not None and math.isfinite(seconds):
        sample = TimeSample.from_seconds(seconds)
        record = replace(record, best_by_raw_event=_improve(record.best_by_raw_event, event, sample))
        key = normalize_event(event)
        if key is not None:
            record = replace(
                record, best_by_canonical_key=_improve(record.best_by_canonical_key, key, sample)
            )

    records[name] = record
    return records


def aggregate(rows: Iterable[Mapping[str, str]], columns: ColumnMap) -> dict[str, SwimmerRecord]:
    return reduce(lambda acc, row: update_with_row(acc, row, columns), rows, {})


def _merge_best(first: Mapping[str, TimeSample], second: Mapping[str, TimeSample]) -> Mapping[str, TimeSample]:
    return reduce(lambda acc, item: _improve(acc, item[0], item[1]), second.items(), first)


def merge_records(
    first: Mapping[str, SwimmerRecord], second: Mapping[str, SwimmerRecord]
) -> dict[str, SwimmerRecord]:
    """Combine two partial aggregations; ``first`` wins ties and already-set fields."""
    merged = dict(first)
    for name, other in second.items():
        mine = merged.get(name)
        if mine is None:
            merged[name] = other
            continue
        merged[name] = replace(
            mine,
            gender=mine.gender or other.gender,
            age=mine.age if mine.age is not None else other.age,
            best_by_raw_event=_merge_best(mine.best_by_raw_event, other.best_by_raw_event),
            best_by_canonical_key=_merge_best(mine.best_by_canonical_key, other.best_by_canonical_key),
        )
    return merged


def summarize(records: Mapping[str, SwimmerRecord]) -> Summary:
    genders = [r.normalized_gender for r in records.values()]
    return Summary(count=len(records), dam=genders.count(DAM), herr=genders.count(HERR))
