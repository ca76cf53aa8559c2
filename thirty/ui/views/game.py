"""Game page — the main play area with dice, score option and controls."""

from __future__ import annotations

import logging

import streamlit as st

from thirty.engine import SENTINEL_OPTION, InvalidOption, RoundEngine, ThirtyError
from thirty.engine.validators import validate_option
from thirty.ui.components.dice_tray import render_dice_tray
from thirty.ui.components.scoreboard import render_scoreboard
from thirty.ui.components.turn_controls import render_turn_controls
from thirty.ui.session import finish_game, flash, load_engine, render_flash, save_engine

logger = logging.getLogger(__name__)


def render_game_page() -> None:
    """Render the main game page."""
    ss = st.session_state
    engine = load_engine()

    if engine is None:
        ss["page"] = "home"
        st.rerun()
        return

    key_suffix = f"r{engine.round_number}_{engine.rolls_remaining}"

    render_scoreboard(
        round_number=engine.round_number,
        num_rounds=engine.config.num_rounds,
        total_score=engine.total_score,
        rolls_remaining=engine.rolls_remaining,
        score_by_option=engine.score_by_option,
        available_options=engine.available_options,
    )
    render_flash()

    toggled = render_dice_tray(
        dice=engine.dice.values,
        selected_indices=engine.selected_indices,
        locked_indices=engine.locked_indices,
        key_suffix=key_suffix,
        disabled=not engine.reroll_enabled,
    )
    if toggled:
        _apply(engine, lambda: engine.select_dice(toggled))
        return

    if _render_option_select(engine):
        return

    action = render_turn_controls(
        rolls_remaining=engine.rolls_remaining,
        rolls_per_round=engine.config.rolls_per_round,
        pending_round_advance=engine.pending_round_advance,
        has_selection=bool(engine.selected_indices),
        option_chosen=engine.selected_option != SENTINEL_OPTION,
        can_advance=engine.can_advance,
        key_suffix=key_suffix,
    )

    if action == "roll":
        _handle_roll(engine)
    elif action == "calculate":
        _handle_calculate(engine)


def _render_option_select(engine: RoundEngine) -> bool:
    """Score option picker. Returns True when the choice changed."""
    options = [SENTINEL_OPTION, *engine.available_options]
    current = engine.selected_option
    if current not in options:
        # Already scored this round; keep it visible so the round can advance
        options.insert(1, current)

    choice = st.selectbox(
        "Score option",
        options,
        index=options.index(current),
        key=f"option_r{engine.round_number}_{len(engine.available_options)}",
    )
    if choice == current:
        return False

    _apply(engine, lambda: engine.choose_option(choice))
    return True


def _handle_roll(engine: RoundEngine) -> None:
    try:
        result = engine.roll()
    except ThirtyError as exc:
        st.warning(str(exc))
        return

    outcome = result.round_outcome
    if outcome is not None and outcome.game_over:
        finish_game(engine.summary())
        flash("success", f"Game Over! Your final score is: {outcome.final_score}")
        st.session_state["page"] = "home"
        st.rerun()
        return

    if result.scoring_required:
        flash("info", "No rolls left. Choose a score option for this round.")

    save_engine(engine)
    st.rerun()


def _handle_calculate(engine: RoundEngine) -> None:
    option = engine.selected_option
    try:
        validate_option(option, allow_sentinel=False)
    except InvalidOption as exc:
        st.warning(str(exc))
        return

    points = engine.compute_score()
    if points > 0:
        flash("success", f"You scored: {points}")
    else:
        flash("warning", f"Invalid dice value for {option}")

    save_engine(engine)
    st.rerun()


def _apply(engine: RoundEngine, operation) -> None:
    """Run an engine operation, persist the engine, and rerun."""
    try:
        operation()
    except ThirtyError as exc:
        logger.warning("Rejected UI action: %s", exc)
        flash("warning", str(exc))
    save_engine(engine)
    st.rerun()
