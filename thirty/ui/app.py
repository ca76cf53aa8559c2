"""Thirty — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from thirty.config import configure_logging, get_settings


_SIDEBAR_RULES = """\
**Goal:** Highest total after 10 rounds.

**Each round:**
- Up to 3 rolls of 6 dice
- Select dice to re-roll
- Score dice against one unused option

**Options:**
| Option | Points |
|---|---|
| Low | Sum of dice showing 1-3 |
| 4 - 12 | The target, for dice summing to it |
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Thirty",
        page_icon="🎲",
        layout="centered",
        initial_sidebar_state="collapsed",
    )
    configure_logging()

    # Session state defaults
    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from thirty.ui.views.home import render_home_page
        render_home_page()
    elif page == "game":
        from thirty.ui.views.game import render_game_page
        render_game_page()
    elif page == "score_table":
        from thirty.ui.views.score_table import render_score_table_page
        render_score_table_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()

    if page == "game" and get_settings().show_rules:
        with st.sidebar:
            st.markdown("### Thirty Rules")
            st.markdown(_SIDEBAR_RULES)


if __name__ == "__main__":
    main()
