"""Core job status logic.

This package contains:
- grid loading (XLSX/CSV bytes -> immutable grid of cells)
- status column detection and SUCCESS/FAILED tallies
- view state and its two actions (upload, toggle table)
- chart helpers (Altair)
- Streamlit wiring (view.py, the only module that imports streamlit)
"""
