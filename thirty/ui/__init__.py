"""Streamlit presentation layer for Thirty."""
