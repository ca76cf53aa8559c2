"""Turn control buttons — Roll / Re-roll / Next round and Calculate."""

from __future__ import annotations

import streamlit as st


def roll_button_label(rolls_remaining: int, rolls_per_round: int, pending_round_advance: bool) -> str:
    """Label of the roll button for the current state."""
    if pending_round_advance:
        return "Next round"
    if rolls_remaining == rolls_per_round:
        return "Roll"
    return f"Re-roll ({rolls_remaining} left)"


def roll_button_disabled(pending_round_advance: bool, can_advance: bool) -> bool:
    """Next round stays disabled until the round can actually advance."""
    return pending_round_advance and not can_advance


def render_turn_controls(
    rolls_remaining: int,
    rolls_per_round: int,
    pending_round_advance: bool,
    has_selection: bool,
    option_chosen: bool,
    can_advance: bool,
    key_suffix: str,
) -> str | None:
    """Render contextual round-action buttons.

    Returns:
        ``"roll"``, ``"calculate"``, or ``None`` if no action taken.
    """
    cols = st.columns(2)

    with cols[0]:
        if st.button(
            roll_button_label(rolls_remaining, rolls_per_round, pending_round_advance),
            key=f"btn_roll_{key_suffix}",
            use_container_width=True,
            type="primary",
            disabled=roll_button_disabled(pending_round_advance, can_advance),
        ):
            return "roll"

    # Scoring opens once the round's rolls are used up
    with cols[1]:
        can_calculate = pending_round_advance and option_chosen and has_selection
        if st.button(
            "Calculate",
            key=f"btn_calculate_{key_suffix}",
            use_container_width=True,
            disabled=not can_calculate,
        ):
            return "calculate"

    if not pending_round_advance:
        st.caption("Select the dice to re-roll, then roll again.")
    elif not option_chosen:
        st.caption("Choose a score option, select dice that match it, then **Calculate**.")

    return None
