from __future__ import annotations

import io
import logging
from pathlib import PurePath
from typing import Any, Tuple

import pandas as pd

logger = logging.getLogger(__name__)

Row = Tuple[Any, ...]
Grid = Tuple[Row, ...]

EMPTY_GRID: Grid = ()
CSV_SUFFIXES = {".csv"}


class GridDecodeError(ValueError):
    """Raised when uploaded bytes cannot be decoded into a grid."""


def _clean_cell(value: object) -> object:
    if value is None:
        return None
    if isinstance(value, str):
        return value if value != "" else None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _trim_row(values) -> Row:
    cells = [_clean_cell(v) for v in values]
    while cells and cells[-1] is None:
        cells.pop()
    return tuple(cells)


def frame_to_grid(df: pd.DataFrame) -> Grid:
    """Turn a header-less frame into a grid; row 0 of the frame is the header row."""
    if df.empty:
        return EMPTY_GRID
    rows = [_trim_row(row) for row in df.itertuples(index=False, name=None)]
    # blank rows inside the sheet are data rows; trailing ones are not
    while rows and not rows[-1]:
        rows.pop()
    return tuple(rows)


def decode_workbook(raw: bytes) -> Grid:
    try:
        df = pd.read_excel(
            io.BytesIO(raw),
            sheet_name=0,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_filter=False,
            engine="openpyxl",
        )
    except Exception as exc:
        raise GridDecodeError(f"Could not read workbook: {exc}") from exc
    return frame_to_grid(df)


def decode_csv(raw: bytes) -> Grid:
    try:
        df = pd.read_csv(
            io.BytesIO(raw),
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=False,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError:
        return EMPTY_GRID
    except Exception as exc:
        raise GridDecodeError(f"Could not read CSV: {exc}") from exc
    return frame_to_grid(df)


def load_grid(raw: bytes, file_name: str = "") -> Grid:
    """Decode an uploaded file's bytes, first sheet only for workbooks."""
    suffix = PurePath(file_name or "").suffix.lower()
    grid = decode_csv(raw) if suffix in CSV_SUFFIXES else decode_workbook(raw)
    logger.debug("loaded %s: %d rows", file_name or "<upload>", len(grid))
    return grid
