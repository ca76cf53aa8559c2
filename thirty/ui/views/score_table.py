"""Score table page — final score and per-option breakdown of the last game."""

from __future__ import annotations

import streamlit as st

from thirty.engine import GameSummary
from thirty.ui.session import last_summary


def format_rows(summary: GameSummary) -> list[str]:
    """One line per scored option, points right-aligned."""
    return [f"Option {label:<8} {points:>30d}" for label, points in summary.rows()]


def render_score_table_page() -> None:
    """Render the score table of the last finished game."""
    ss = st.session_state
    summary = last_summary()

    if summary is None:
        ss["page"] = "home"
        st.rerun()
        return

    st.title("Score table")
    st.subheader(f"Total Score last game: {summary.final_score}")

    rows = format_rows(summary)
    if rows:
        st.code("\n".join(rows), language=None)
    else:
        st.info("No options scored.")

    if st.button("Return Home", use_container_width=True):
        ss["page"] = "home"
        st.rerun()
