"""Shared pytest fixtures: spreadsheet bytes built in memory."""

import io

import pandas as pd
import pytest


def _xlsx(sheets):
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for name, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=name, header=False, index=False)
    return buf.getvalue()


@pytest.fixture
def make_xlsx():
    """Build xlsx bytes from a list of rows (row 0 is the header) on a single sheet."""

    def _make(rows, sheet_name="Sheet1"):
        return _xlsx({sheet_name: rows})

    return _make


@pytest.fixture
def make_workbook():
    """Build xlsx bytes from {sheet_name: rows}; sheet order is preserved."""
    return _xlsx


@pytest.fixture
def jobs_xlsx(make_xlsx):
    return make_xlsx(
        [
            ["Name", "Status"],
            ["A", "SUCCESS"],
            ["B", "FAILED"],
            ["C", "SUCCESS"],
        ]
    )
