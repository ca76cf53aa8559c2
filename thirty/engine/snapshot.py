"""
Thirty - Engine Snapshot

Pydantic model of every RoundEngine field. Used to save and restore a game
at session boundaries (e.g. across Streamlit reruns).
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from thirty.engine.base import SCORE_OPTIONS, SENTINEL_OPTION


class EngineSnapshot(BaseModel):
    """Serializable state of one game of Thirty."""

    total_score: int = Field(default=0, ge=0)
    round_number: int = Field(default=1, ge=1, le=11)
    rolls_per_round: int = Field(default=3, ge=1, le=3)
    rolls_remaining: int = Field(default=3, ge=0, le=3)
    dice: list[int] = Field(default_factory=lambda: [1, 2, 3, 4, 5, 6])
    selected_indices: list[int] = Field(default_factory=list)
    locked_indices: list[int] = Field(default_factory=list)
    available_options: list[str] = Field(default_factory=lambda: list(SCORE_OPTIONS))
    score_by_option: dict[str, int] = Field(default_factory=dict)
    pending_round_advance: bool = False
    reroll_enabled: bool = False
    selected_option: str = SENTINEL_OPTION

    model_config = {"frozen": True}

    @field_validator("dice")
    @classmethod
    def _check_dice(cls, value: list[int]) -> list[int]:
        if len(value) != 6:
            raise ValueError(f"Exactly 6 dice required, got {len(value)}.")
        for face in value:
            if not (1 <= face <= 6):
                raise ValueError(f"Invalid die value {face}.")
        return value

    @field_validator("selected_indices", "locked_indices")
    @classmethod
    def _check_indices(cls, value: list[int]) -> list[int]:
        for idx in value:
            if not (0 <= idx <= 5):
                raise ValueError(f"Die index {idx} is out of range.")
        return sorted(set(value))

    @field_validator("available_options")
    @classmethod
    def _check_options(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("Option labels must be distinct.")
        for option in value:
            if option not in SCORE_OPTIONS:
                raise ValueError(f"Unknown score option {option!r}.")
        return value

    @field_validator("score_by_option")
    @classmethod
    def _check_breakdown(cls, value: dict[str, int]) -> dict[str, int]:
        for option, points in value.items():
            if option not in SCORE_OPTIONS:
                raise ValueError(f"Unknown score option {option!r}.")
            if points < 0:
                raise ValueError(f"Score for {option} cannot be negative.")
        return value

    @model_validator(mode="after")
    def _check_invariants(self) -> "EngineSnapshot":
        if set(self.selected_indices) & set(self.locked_indices):
            raise ValueError("Selected and locked dice must not overlap.")
        if self.selected_option not in SCORE_OPTIONS and self.selected_option != SENTINEL_OPTION:
            raise ValueError(f"Unknown score option {self.selected_option!r}.")
        if sum(self.score_by_option.values()) != self.total_score:
            raise ValueError("Total score does not match the score breakdown.")
        reused = set(self.score_by_option) & set(self.available_options)
        if reused:
            raise ValueError(
                f"Scored options cannot still be available: {', '.join(sorted(reused))}."
            )
        if self.rolls_remaining > self.rolls_per_round:
            raise ValueError("Rolls remaining cannot exceed rolls per round.")

        # Only rounds still in play; round 11 is the finished game
        if self.round_number <= len(SCORE_OPTIONS):
            if self.pending_round_advance != (self.rolls_remaining == 0):
                raise ValueError("Round advance is pending exactly when no rolls remain.")
            if self.reroll_enabled != (self.rolls_remaining < self.rolls_per_round):
                raise ValueError("Re-rolls are enabled exactly once the round has been rolled.")
        return self
