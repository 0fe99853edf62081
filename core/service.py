from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from core.aggregation import Summary, SwimmerRecord, aggregate, summarize
from core.columns import ColumnMap, resolve_columns
from core.table_extractor import RawTable, extract_table

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """A results export that cannot be turned into swimmer records."""


class NoInputError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Ingen fil inläst. Ladda upp en CSV först.")


class NoTableError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Kunde inte hitta tabell i filen.")


class MissingColumnsError(ValidationError):
    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Saknar obligatoriska kolumner: {', '.join(missing)}")


@dataclass(frozen=True, slots=True)
class ValidationResult:
    ok: bool
    swimmers: Mapping[str, SwimmerRecord] = field(default_factory=dict)
    summary: Summary | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    table: RawTable = field(default_factory=RawTable)
    columns: ColumnMap | None = None

    @classmethod
    def failed(cls, message: str) -> ValidationResult:
        return cls(ok=False, errors=[message])


def extract_checked(raw_text: str | None) -> tuple[RawTable, ColumnMap]:
    if not raw_text:
        raise NoInputError()
    table = extract_table(raw_text)
    if not table:
        raise NoTableError()
    columns = resolve_columns(table.headers)
    missing = columns.missing_required()
    if missing:
        raise MissingColumnsError(missing)
    return table, columns


def validate(raw_text: str | None) -> ValidationResult:
    try:
        table, columns = extract_checked(raw_text)
    except ValidationError as exc:
        logger.warning("Validation failed: %s", exc)
        return ValidationResult.failed(str(exc))

    swimmers = aggregate(table.rows, columns)
    summary = summarize(swimmers)
    logger.info(
        "Validated %d rows: %d swimmers (%d dam, %d herr)",
        len(table.rows),
        summary.count,
        summary.dam,
        summary.herr,
    )
    return ValidationResult(ok=True, swimmers=swimmers, summary=summary, table=table, columns=columns)
