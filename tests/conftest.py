"""
Thirty - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from thirty.engine import RoundEngine, ScriptedDiceSource


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_cases() -> dict[str, tuple[str, tuple[int, ...], int]]:
    """
    Option / dice combinations with expected points.

    Returns:
        Dict mapping name to (option, dice_values, expected_points)
    """
    return {
        # Low
        "low_one_two_three": ("Low", (1, 2, 3), 6),
        "low_single_three": ("Low", (3,), 3),
        "low_all_ones": ("Low", (1, 1, 1, 1, 1, 1), 6),
        "low_with_four": ("Low", (1, 2, 4), 0),
        "low_with_six": ("Low", (6,), 0),

        # Exact sums
        "four_from_single": ("4", (4,), 4),
        "nine_from_pair": ("9", (4, 5), 9),
        "twelve_from_pair": ("12", (6, 6), 12),
        "twelve_from_three": ("12", (5, 5, 2), 12),
        "seven_overshoot": ("7", (6, 6), 0),
        "twelve_mismatch": ("12", (5, 5, 5), 0),
        "ten_undershoot": ("10", (3, 3), 0),
    }


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def make_engine():
    """Factory for engines driven by a scripted dice source."""

    def _make(faces=()) -> RoundEngine:
        return RoundEngine(dice_source=ScriptedDiceSource(faces))

    return _make


@pytest.fixture
def exhaust_round():
    """Roll until the round's rolls are used up.

    The first roll draws six faces; the following rolls re-roll nothing,
    so the dice end up as the next six scripted faces.
    """

    def _exhaust(engine: RoundEngine, faces: tuple[int, ...]) -> RoundEngine:
        engine.dice_source.extend(faces)
        engine.deselect_dice()
        while not engine.pending_round_advance:
            engine.roll()
        return engine

    return _exhaust


@pytest.fixture
def exhausted_engine(make_engine, exhaust_round) -> RoundEngine:
    """Round 1 with rolls used up and dice (1, 2, 3, 4, 5, 6)."""
    return exhaust_round(make_engine(), (1, 2, 3, 4, 5, 6))
