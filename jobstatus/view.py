"""Streamlit wiring for the job status page.

Everything here reads and writes ``st.session_state``; the page script in
``app.py`` only lays the pieces out.
"""

from __future__ import annotations

import html
import logging

import streamlit as st

from jobstatus.charts import build_status_chart
from jobstatus.settings import DEFAULT_SETTINGS, StatusSettings, normalize_settings
from jobstatus.state import ViewState, table_frame, toggle_table, upload
from jobstatus.status import Counts

logger = logging.getLogger(__name__)

STATE_KEY = "view_state"
UPLOAD_KEY = "_last_upload"
CHART_KEY = "_status_chart"


def inject_base_styles():
    st.markdown(
        """
        <style>
        .summary-container {margin-top: 24px;text-align: center;}
        .file-name-container {text-align: center;}
        </style>
        """,
        unsafe_allow_html=True,
    )


class ChartSurface:
    """One drawing slot for the status chart.

    A new chart is built only when the counts (or settings) differ from the one
    last built; the slot is cleared before the rebuilt chart is attached.
    """

    def __init__(self):
        self._slot = st.empty()

    def redraw(self, counts: Counts, settings: StatusSettings):
        key = (counts, settings)
        cached = st.session_state.get(CHART_KEY)
        if cached is None or cached[0] != key:
            logger.debug("rebuilding chart for %s", counts)
            self._slot.empty()
            cached = (key, build_status_chart(counts, settings))
            st.session_state[CHART_KEY] = cached
        self._slot.altair_chart(cached[1], use_container_width=True)


def get_state() -> ViewState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = ViewState()
    return st.session_state[STATE_KEY]


def set_state(state: ViewState):
    st.session_state[STATE_KEY] = state


def on_toggle():
    set_state(toggle_table(get_state()))


def handle_upload(uploaded, settings: StatusSettings):
    if uploaded is None:
        return
    # streamlit reruns on every interaction; only a new file (or new settings) is an upload
    marker = (getattr(uploaded, "file_id", None) or (uploaded.name, uploaded.size), settings)
    if st.session_state.get(UPLOAD_KEY) == marker:
        return
    state = upload(get_state(), uploaded.getvalue(), uploaded.name, settings)
    st.session_state[UPLOAD_KEY] = marker
    set_state(state)
    if state.status_column is None:
        logger.info("%s has no status column; counts unchanged", uploaded.name)


def render_file_name(state: ViewState):
    if not state.file_name:
        return
    st.markdown(
        f"<div class='file-name-container'><h2>{html.escape(state.file_name)}</h2></div>",
        unsafe_allow_html=True,
    )


def render_summary(state: ViewState, settings: StatusSettings):
    st.markdown("<div class='summary-container'><h2>Status Summary:</h2></div>", unsafe_allow_html=True)
    cols = st.columns(2)
    cols[0].metric(f"{settings.success_label}:", f"{state.counts.success:,}")
    cols[1].metric(f"{settings.failed_label}:", f"{state.counts.failed:,}")
    if state.status_column is None:
        st.caption(f"No column containing '{settings.keyword}' found; showing previous counts.")
    label = "Hide Excel Content" if state.table_visible else "Show Excel Content"
    st.button(label, on_click=on_toggle)


def render_table(state: ViewState):
    df = table_frame(state)
    if df is None:
        return
    st.dataframe(df, use_container_width=True, hide_index=True)


def read_settings() -> StatusSettings:
    with st.sidebar:
        with st.expander("Advanced settings", expanded=False):
            keyword = st.text_input("Status column contains", DEFAULT_SETTINGS.keyword)
            success_value = st.text_input("Success value (exact match)", DEFAULT_SETTINGS.success_value)
    return normalize_settings({"keyword": keyword, "success_value": success_value})
