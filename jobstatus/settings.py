from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ChartStyle:
    width: int = 300
    height: int = 200
    title: str = "Job Status"
    y_title: str = "Count"
    colors: Tuple[str, str] = ("green", "red")


@dataclass(frozen=True)
class StatusSettings:
    keyword: str = "status"
    success_value: str = "SUCCESS"
    success_label: str = "SUCCESS"
    failed_label: str = "FAILED"
    chart: ChartStyle = field(default_factory=ChartStyle)

    @property
    def labels(self) -> Tuple[str, str]:
        return (self.success_label, self.failed_label)


DEFAULT_SETTINGS = StatusSettings()


def _as_text(value: object, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _as_size(value: object, default: int) -> int:
    try:
        out = int(value)  # type: ignore[arg-type]
    except Exception:
        return default
    return max(50, min(2000, out))


def normalize_settings(raw: Optional[dict]) -> StatusSettings:
    raw = raw or {}

    # the success value is an exact match, so only None falls back
    success_value = raw.get("success_value")
    success_value = DEFAULT_SETTINGS.success_value if success_value is None else str(success_value)

    c = raw.get("chart") or {}
    colors = c.get("colors") or DEFAULT_SETTINGS.chart.colors
    if len(colors) != 2:
        colors = DEFAULT_SETTINGS.chart.colors
    chart = ChartStyle(
        width=_as_size(c.get("width"), DEFAULT_SETTINGS.chart.width),
        height=_as_size(c.get("height"), DEFAULT_SETTINGS.chart.height),
        title=_as_text(c.get("title"), DEFAULT_SETTINGS.chart.title),
        y_title=_as_text(c.get("y_title"), DEFAULT_SETTINGS.chart.y_title),
        colors=(str(colors[0]), str(colors[1])),
    )

    return StatusSettings(
        keyword=_as_text(raw.get("keyword"), DEFAULT_SETTINGS.keyword).lower(),
        success_value=success_value,
        success_label=_as_text(raw.get("success_label"), DEFAULT_SETTINGS.success_label),
        failed_label=_as_text(raw.get("failed_label"), DEFAULT_SETTINGS.failed_label),
        chart=chart,
    )
