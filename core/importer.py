from __future__ import annotations

import logging
from datetime import date, datetime, time
from pathlib import Path
from zipfile import BadZipFile

from core.time_utils import seconds_to_display

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = {".csv", ".txt"}
EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
EXPORT_DELIMITER = ";"


class FileImportError(ValueError):
    """Raised when a results export cannot be read."""


def _file_debug_message(file_path: Path) -> str:
    exists = file_path.exists()
    size = file_path.stat().st_size if exists else 0
    return f"Selected: {file_path}; exists: {exists}; size: {size}; suffix: {file_path.suffix.lower()}"


def _validate_input_file(file_path: Path) -> None:
    if not file_path.exists():
        raise FileImportError("Den valda filen finns inte.")
    suffix = file_path.suffix.lower()
    if suffix == ".xls":
        raise FileImportError("Formatet .xls stöds inte. Spara filen som .xlsx eller .csv och försök igen.")
    if suffix not in TEXT_SUFFIXES | EXCEL_SUFFIXES:
        raise FileImportError("Endast .csv, .txt, .xlsx och .xlsm stöds.")
    if file_path.stat().st_size == 0:
        raise FileImportError("Den valda filen är tom (0 byte).")


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, time):
        seconds = value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1_000_000
        return seconds_to_display(seconds)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value).strip()


def _quote(value: object) -> str:
    text = _cell_text(value)
    if EXPORT_DELIMITER in text or "," in text:
        return f'"{text}"'
    return text


def _workbook_to_text(path: Path) -> str:
    from openpyxl import load_workbook
    from openpyxl.utils.exceptions import InvalidFileException

    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (BadZipFile, InvalidFileException) as exc:
        raise FileImportError("Kunde inte öppna Excel-filen. Kontrollera att det är en giltig .xlsx/.xlsm-fil.") from exc

    try:
        ws = wb.worksheets[0]
        lines = [
            EXPORT_DELIMITER.join(_quote(cell) for cell in row)
            for row in ws.iter_rows(values_only=True)
        ]
    finally:
        wb.close()
    logger.debug("Rendered %d worksheet rows from %s", len(lines), path.name)
    return "\n".join(lines)


def read_export_text(path: Path) -> str:
    logger.debug(_file_debug_message(path))
    try:
        _validate_input_file(path)
    except FileImportError as exc:
        logger.warning("Rejected %s: %s", path, exc)
        raise

    if path.suffix.lower() in EXCEL_SUFFIXES:
        return _workbook_to_text(path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise FileImportError("Filen är inte UTF-8-kodad.") from exc
