"""Session helpers — keep the engine in ``st.session_state`` between reruns.

Streamlit reruns the whole script on every interaction. The engine is stored
as an ``EngineSnapshot`` dict and rebuilt on each run; the dice source is kept
as-is so a seeded session does not replay the same faces.
"""

from __future__ import annotations

import logging

import streamlit as st

from thirty.config import get_settings
from thirty.engine import GameSummary, RandomDiceSource, RoundEngine

logger = logging.getLogger(__name__)

_SNAPSHOT_KEY = "engine_snapshot"
_DICE_KEY = "dice_source"
_FLASH_KEY = "_flash"


def start_game() -> RoundEngine:
    """Create a fresh engine and store it in the session."""
    ss = st.session_state
    ss[_DICE_KEY] = RandomDiceSource(seed=get_settings().dice_seed)
    engine = RoundEngine(dice_source=ss[_DICE_KEY])
    save_engine(engine)
    logger.info("New game started")
    return engine


def load_engine() -> RoundEngine | None:
    """Rebuild the session's engine, or None when no game is running."""
    ss = st.session_state
    data = ss.get(_SNAPSHOT_KEY)
    if data is None:
        return None
    if _DICE_KEY not in ss:
        ss[_DICE_KEY] = RandomDiceSource(seed=get_settings().dice_seed)
    return RoundEngine.from_snapshot(data, dice_source=ss[_DICE_KEY])


def save_engine(engine: RoundEngine) -> None:
    st.session_state[_SNAPSHOT_KEY] = engine.to_snapshot().model_dump()


def finish_game(summary: GameSummary) -> None:
    """Drop the running game and keep its result for the home page."""
    ss = st.session_state
    ss["last_summary"] = {
        "final_score": summary.final_score,
        "score_by_option": dict(summary.score_by_option),
    }
    ss.pop(_SNAPSHOT_KEY, None)
    ss.pop(_DICE_KEY, None)


def last_summary() -> GameSummary | None:
    data = st.session_state.get("last_summary")
    if data is None:
        return None
    return GameSummary(final_score=data["final_score"], score_by_option=data["score_by_option"])


def flash(kind: str, message: str) -> None:
    """Queue a message to show after the next rerun (``kind``: success/info/warning)."""
    st.session_state[_FLASH_KEY] = (kind, message)


def render_flash() -> None:
    entry = st.session_state.pop(_FLASH_KEY, None)
    if entry is None:
        return
    kind, message = entry
    getattr(st, kind)(message)
