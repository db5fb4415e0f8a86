import streamlit as st

from jobstatus.view import (
    ChartSurface,
    get_state,
    handle_upload,
    inject_base_styles,
    read_settings,
    render_file_name,
    render_summary,
    render_table,
)

# ---------- UI setup ----------
st.set_page_config(page_title="Dashlabs Database Tool", layout="centered")
inject_base_styles()
st.title("Dashlabs Database Tool")

settings = read_settings()
uploaded_file = st.file_uploader("Upload a spreadsheet", type=["xlsx", "csv"])
handle_upload(uploaded_file, settings)

view_state = get_state()
render_file_name(view_state)

if view_state.loaded:
    render_summary(view_state, settings)
    if view_state.table_visible:
        render_table(view_state)

ChartSurface().redraw(view_state.counts, settings)
