"""Home page — title, rules, new game and last result."""

from __future__ import annotations

import streamlit as st

from thirty.config import get_settings
from thirty.ui.session import last_summary, render_flash, start_game

RULES = """
**Score as many points as possible over ten rounds.**

- Each round you get up to **3 rolls** of six dice. The first roll throws
  all dice; after that, select the dice you want to throw again.
- When the rolls are used up, pick a **score option** and select dice
  that match it, then press **Calculate**. You may score several groups
  of dice in one round, each against a different option.
- **Low**: every selected die shows 3 or less; scores their sum.
- **4 – 12**: the selected dice must add up to exactly that number;
  scores the number.
- Every option can be used once per game. Press **Next round** to give up
  the chosen option and move on.
"""


def render_home_page() -> None:
    """Render the home / landing page."""
    st.title("Thirty")
    st.caption("Ten rounds, six dice, one chance per score option")

    render_flash()

    if st.button("Start game", type="primary", use_container_width=True):
        start_game()
        st.session_state["page"] = "game"
        st.rerun()

    summary = last_summary()
    if summary is not None:
        st.subheader(f"Total score: {summary.final_score}")
        if st.button("Score table", use_container_width=True):
            st.session_state["page"] = "score_table"
            st.rerun()

    if get_settings().show_rules:
        st.divider()
        with st.expander("Rules"):
            st.markdown(RULES)
