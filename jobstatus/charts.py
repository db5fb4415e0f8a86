from __future__ import annotations

from typing import Optional

import altair as alt
import pandas as pd

from jobstatus.settings import DEFAULT_SETTINGS, StatusSettings
from jobstatus.status import Counts


def build_status_chart(counts: Counts, settings: Optional[StatusSettings] = None) -> alt.Chart:
    """Bar chart of SUCCESS/FAILED counts; the value axis ends one above the tallest bar."""
    settings = settings or DEFAULT_SETTINGS
    style = settings.chart
    labels = list(settings.labels)
    data = pd.DataFrame({"status": labels, "count": [counts.success, counts.failed]})
    return (
        alt.Chart(data, title=style.title)
        .mark_bar()
        .encode(
            x=alt.X("status:N", title="", sort=labels),
            y=alt.Y(
                "count:Q",
                title=style.y_title,
                scale=alt.Scale(domain=[0, counts.axis_max], nice=False),
                axis=alt.Axis(tickMinStep=1),
            ),
            color=alt.Color(
                "status:N",
                scale=alt.Scale(domain=labels, range=list(style.colors)),
                legend=None,
            ),
            tooltip=["status", alt.Tooltip("count:Q", format=",")],
        )
        .properties(width=style.width, height=style.height)
    )
