"""
Thirty - Scoring Rules

Scores a handful of dice against one option:

- "Low": every die must show 3 or less; scores the sum of the dice
- "4" .. "12": the dice must sum to exactly the target; scores the target

Anything else scores 0. All methods are stateless class methods.
"""

from typing import ClassVar, Iterable

from thirty.engine.base import (
    LOW_MAX_FACE,
    LOW_OPTION,
    SENTINEL_OPTION,
    ScoringResult,
)


class ThirtyScorer:
    """
    Stateless scorer for Thirty.

    All methods are class methods operating on immutable data.
    """

    LOW_MAX_FACE: ClassVar[int] = LOW_MAX_FACE

    @classmethod
    def is_low(cls, values: Iterable[int]) -> bool:
        """Check that every die qualifies for the Low option."""
        return all(value <= cls.LOW_MAX_FACE for value in values)

    @classmethod
    def target_for(cls, option: str) -> int | None:
        """Numeric target of an option, or None for Low and the sentinel."""
        if option in (LOW_OPTION, SENTINEL_OPTION):
            return None
        try:
            return int(option)
        except ValueError:
            return None

    @classmethod
    def calculate_score(cls, option: str, values: Iterable[int]) -> ScoringResult:
        """Score dice values against an option.

        Args:
            option: Option label ("Low", "4" .. "12")
            values: Face values of the selected dice

        Returns:
            ScoringResult with zero points for an invalid attempt
        """
        dice_values = tuple(values)

        if not dice_values or option == SENTINEL_OPTION:
            return cls.invalid_result(option, dice_values)

        if option == LOW_OPTION:
            if not cls.is_low(dice_values):
                return cls.invalid_result(option, dice_values)
            points = sum(dice_values)
            return ScoringResult(
                option=option,
                dice_values=dice_values,
                points=points,
                description=f"Low with {len(dice_values)} dice",
            )

        target = cls.target_for(option)
        if target is None or sum(dice_values) != target:
            return cls.invalid_result(option, dice_values)

        return ScoringResult(
            option=option,
            dice_values=dice_values,
            points=target,
            description=f"{'+'.join(str(v) for v in dice_values)} = {target}",
        )

    @classmethod
    def invalid_result(cls, option: str, dice_values: tuple[int, ...]) -> ScoringResult:
        return ScoringResult(
            option=option,
            dice_values=dice_values,
            points=0,
            description=f"Invalid dice value for {option}",
        )
