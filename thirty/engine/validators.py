"""
Thirty - Input Validation Utilities

Provides the engine's exception types and validation functions for its
inputs. All validators either return validated data or raise a descriptive
exception.
"""

from typing import Iterable, Sequence

from thirty.engine.base import DIE_FACES, SCORE_OPTIONS, SENTINEL_OPTION


class ThirtyError(Exception):
    """Base class for rejected engine operations."""


class InvalidIndex(ThirtyError, ValueError):
    """A die index is out of range or refers to a locked die."""


class InvalidOption(ThirtyError, ValueError):
    """A score option label is unknown or already consumed."""


class RoundAdvanceBlocked(ThirtyError):
    """The round cannot advance yet (no option chosen or rolls remain)."""


class GameOverError(ThirtyError):
    """The game has finished; only reporting is allowed."""


def validate_dice_values(
    values: Sequence[int],
    num_dice: int = 6,
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        num_dice: Exact number of dice required

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count != num_dice:
        raise ValueError(f"Exactly {num_dice} dice required, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_die_indices(
    indices: Iterable[int],
    dice_count: int,
    locked: frozenset[int] | set[int] = frozenset(),
) -> frozenset[int]:
    """
    Validate indices of dice the player wants to select.

    Args:
        indices: Collection of dice indices
        dice_count: Total number of dice on the table
        locked: Indices already consumed by a scoring action this round

    Returns:
        Validated indices as a frozenset

    Raises:
        InvalidIndex: If any index is out of range or locked
    """
    indices_set = frozenset(indices)

    for idx in indices_set:
        if not isinstance(idx, int) or isinstance(idx, bool):
            raise InvalidIndex(f"Die index must be an integer, got {type(idx).__name__}.")
        if not (0 <= idx < dice_count):
            raise InvalidIndex(
                f"Die index {idx} is out of range. Must be between 0 and {dice_count - 1}."
            )
        if idx in locked:
            raise InvalidIndex(f"Die {idx} is already used for scoring this round.")

    return indices_set


def validate_option(option: str, allow_sentinel: bool = True) -> str:
    """
    Validate a score option label.

    Args:
        option: Label to validate
        allow_sentinel: Whether the "no selection" placeholder is accepted

    Returns:
        Validated label

    Raises:
        InvalidOption: If the label is not a known option
    """
    if option == SENTINEL_OPTION:
        if not allow_sentinel:
            raise InvalidOption("Please select a score option.")
        return option

    if option not in SCORE_OPTIONS:
        raise InvalidOption(
            f"Unknown score option {option!r}. Must be one of {', '.join(SCORE_OPTIONS)}."
        )

    return option

