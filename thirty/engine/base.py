"""
Thirty - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects are frozen dataclasses; the only mutable state
in the engine lives on RoundEngine itself.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


SENTINEL_OPTION = "Choose your score"
LOW_OPTION = "Low"

# Display order: Low first, then the numeric targets.
SCORE_OPTIONS: tuple[str, ...] = (
    LOW_OPTION, "4", "5", "6", "7", "8", "9", "10", "11", "12",
)

LOW_MAX_FACE = 3
DIE_FACES = 6


class RoundPhase(Enum):
    """Where the current round is in its lifecycle."""
    ROLLING = "rolling"        # rolls remain
    EXHAUSTED = "exhausted"    # no rolls left, waiting for an option + advance
    GAME_OVER = "game_over"    # round 10 has been advanced


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of the six dice on the table.

    Attributes:
        values: Tuple of dice face values
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        for value in self.values:
            if not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. "
                    f"Must be between 1 and {DIE_FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))


@dataclass(frozen=True)
class ScoringResult:
    """
    Result of scoring a set of dice against one option.

    Attributes:
        option: The option label the dice were scored against
        dice_values: The dice that were offered for scoring
        points: Points awarded (0 for an invalid attempt)
        description: Human-readable description
    """
    option: str
    dice_values: tuple[int, ...]
    points: int
    description: str

    @property
    def is_valid(self) -> bool:
        """Returns True if the attempt earned points."""
        return self.points > 0

    def __str__(self) -> str:
        return f"{self.description}: {self.points}"


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of a round transition.

    Attributes:
        game_over: True once round 10 has been advanced
        final_score: The final total when the game is over, else None
    """
    game_over: bool
    final_score: int | None = None

    def __iter__(self):
        # Allows ``game_over, final_score = engine.advance_round()``
        return iter((self.game_over, self.final_score))


@dataclass(frozen=True)
class RollResult:
    """
    Result of pressing the roll button.

    Attributes:
        dice: Dice on the table after the call
        rolls_remaining: Rolls left in the round
        scoring_required: True when this roll used the last roll of the round
        round_outcome: Set when the call was forwarded to a round transition
    """
    dice: DiceRoll
    rolls_remaining: int
    scoring_required: bool = False
    round_outcome: RoundOutcome | None = None

    @property
    def advanced(self) -> bool:
        """Returns True if this call moved the game to the next round."""
        return self.round_outcome is not None


@dataclass(frozen=True)
class GameSummary:
    """
    Final result handed to the score table.

    Attributes:
        final_score: Total score for the game
        score_by_option: Points earned per option label
    """
    final_score: int
    score_by_option: dict[str, int] = field(default_factory=dict)

    def rows(self) -> list[tuple[str, int]]:
        """Breakdown rows in spinner order."""
        return [
            (option, self.score_by_option[option])
            for option in SCORE_OPTIONS
            if option in self.score_by_option
        ]


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        num_rounds: Rounds in a game
        rolls_per_round: Rolls available at the start of each round
        num_dice: Dice on the table
    """
    num_rounds: int = 10
    rolls_per_round: int = 3
    num_dice: int = 6

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.num_rounds != len(SCORE_OPTIONS):
            raise ValueError(
                f"Thirty is played over {len(SCORE_OPTIONS)} rounds, "
                f"one per score option."
            )
        if not 1 <= self.rolls_per_round <= 3:
            raise ValueError("Rolls per round must be between 1 and 3.")
        if self.num_dice != 6:
            raise ValueError("Thirty is played with exactly 6 dice.")
