"""Scoreboard component — round, rolls, total and per-option scores."""

from __future__ import annotations

import streamlit as st

from thirty.engine import SCORE_OPTIONS


def render_scoreboard(
    round_number: int,
    num_rounds: int,
    total_score: int,
    rolls_remaining: int,
    score_by_option: dict[str, int],
    available_options: tuple[str, ...],
) -> None:
    """Render the scoreboard panel.

    Args:
        round_number: Current round (1-based).
        num_rounds: Rounds in a game.
        total_score: Score accumulated so far.
        rolls_remaining: Rolls left this round.
        score_by_option: Points earned per option.
        available_options: Options not yet used.
    """
    cols = st.columns(3)
    cols[0].metric("Round", f"{round_number} / {num_rounds}")
    cols[1].metric("Total score", total_score)
    cols[2].metric("Rolls left", rolls_remaining)

    chips = []
    for option in SCORE_OPTIONS:
        if option in score_by_option:
            chips.append(f"~~{option}~~ **{score_by_option[option]}**")
        elif option not in available_options:
            chips.append(f"~~{option}~~ 0")
        else:
            chips.append(option)
    st.caption(" · ".join(chips))
