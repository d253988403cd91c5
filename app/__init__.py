"""
Dashboard app — Streamlit UI over the projection engine.
"""
