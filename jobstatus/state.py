from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

import pandas as pd

from jobstatus.grid import Grid, load_grid
from jobstatus.settings import StatusSettings
from jobstatus.status import ZERO_COUNTS, Counts, aggregate


@dataclass(frozen=True)
class ViewState:
    grid: Optional[Grid] = None
    table_visible: bool = False
    counts: Counts = ZERO_COUNTS
    file_name: str = ""
    status_column: Optional[int] = None

    @property
    def loaded(self) -> bool:
        return self.grid is not None

    @property
    def header(self) -> tuple:
        return self.grid[0] if self.grid else ()

    @property
    def data_rows(self) -> int:
        return max(len(self.grid) - 1, 0) if self.grid else 0


def upload(
    state: ViewState,
    raw: bytes,
    file_name: str = "",
    settings: Optional[StatusSettings] = None,
) -> ViewState:
    """Replace the grid and counts from a new file; table visibility carries over."""
    grid = load_grid(raw, file_name)
    status_column, counts = aggregate(grid, state.counts, settings)
    return replace(
        state,
        grid=grid,
        counts=counts,
        file_name=file_name,
        status_column=status_column,
    )


def toggle_table(state: ViewState) -> ViewState:
    return replace(state, table_visible=not state.table_visible)


def _column_labels(header: tuple, width: int) -> list:
    labels = []
    seen = {}
    for idx in range(width):
        cell = header[idx] if idx < len(header) else None
        label = "" if cell is None else str(cell)
        # st.dataframe needs unique column names
        if label in seen:
            seen[label] += 1
            label = f"{label}.{seen[label]}"
        else:
            seen[label] = 0
        labels.append(label)
    return labels


def table_frame(state: ViewState) -> Optional[pd.DataFrame]:
    """Header row as column labels, remaining rows as body; short rows padded."""
    if state.grid is None:
        return None
    if not state.grid:
        return pd.DataFrame()
    body = state.grid[1:]
    width = max([len(state.header)] + [len(r) for r in body])
    records = [list(r) + [None] * (width - len(r)) for r in body]
    return pd.DataFrame(records, columns=_column_labels(state.header, width), dtype=object)
