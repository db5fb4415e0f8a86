from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from jobstatus.grid import Grid
from jobstatus.settings import DEFAULT_SETTINGS, StatusSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Counts:
    success: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.success + self.failed

    @property
    def axis_max(self) -> int:
        """Upper bound of the value axis: one above the tallest bar."""
        return max(self.success, self.failed) + 1


ZERO_COUNTS = Counts()


def find_status_column(header: Sequence[object], keyword: str = "status") -> Optional[int]:
    """Index of the first header containing `keyword` (case-insensitive)."""
    needle = keyword.lower()
    for idx, cell in enumerate(header):
        if cell is None:
            continue
        if needle in str(cell).lower():
            return idx
    return None


def count_statuses(rows: Iterable[Sequence[object]], index: int, success_value: str = "SUCCESS") -> Counts:
    success = 0
    failed = 0
    for row in rows:
        value = row[index] if index < len(row) else None
        if isinstance(value, str) and value == success_value:
            success += 1
        else:
            failed += 1
    return Counts(success=success, failed=failed)


def aggregate(
    grid: Grid,
    previous: Counts = ZERO_COUNTS,
    settings: Optional[StatusSettings] = None,
) -> Tuple[Optional[int], Counts]:
    """Locate the status column and tally data rows.

    Without a status column the previous counts are returned untouched.
    """
    settings = settings or DEFAULT_SETTINGS
    if not grid:
        logger.info("empty grid; keeping counts %s", previous)
        return None, previous

    index = find_status_column(grid[0], settings.keyword)
    if index is None:
        logger.info("no header contains %r; keeping counts %s", settings.keyword, previous)
        return None, previous

    counts = count_statuses(grid[1:], index, settings.success_value)
    logger.debug("status column %d -> %s", index, counts)
    return index, counts
