"""
Core package for the Libya tourism atlas dashboard.

Submodules provide configuration, remote data loading with fallbacks, activity
aggregation, the in-memory dashboard state, and the Streamlit rendering
helpers that are orchestrated by the top-level `app.py`.
"""
