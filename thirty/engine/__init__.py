"""
Thirty Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, option scoring, and the ten-round state machine.
"""

from thirty.engine.base import (
    LOW_OPTION,
    SCORE_OPTIONS,
    SENTINEL_OPTION,
    DiceRoll,
    GameConfig,
    GameSummary,
    RollResult,
    RoundOutcome,
    RoundPhase,
    ScoringResult,
)
from thirty.engine.dice import DiceSource, RandomDiceSource, ScriptedDiceSource
from thirty.engine.round_engine import RoundEngine
from thirty.engine.scoring import ThirtyScorer
from thirty.engine.snapshot import EngineSnapshot
from thirty.engine.validators import (
    GameOverError,
    InvalidIndex,
    InvalidOption,
    RoundAdvanceBlocked,
    ThirtyError,
)

__all__ = [
    # Constants
    "LOW_OPTION",
    "SCORE_OPTIONS",
    "SENTINEL_OPTION",
    # Data Classes
    "DiceRoll",
    "GameConfig",
    "GameSummary",
    "RollResult",
    "RoundOutcome",
    "ScoringResult",
    "EngineSnapshot",
    # Enums
    "RoundPhase",
    # Dice
    "DiceSource",
    "RandomDiceSource",
    "ScriptedDiceSource",
    # Engines
    "RoundEngine",
    "ThirtyScorer",
    # Errors
    "ThirtyError",
    "InvalidIndex",
    "InvalidOption",
    "RoundAdvanceBlocked",
    "GameOverError",
]
