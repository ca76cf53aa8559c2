"""
Thirty - Snapshot Tests

Tests for EngineSnapshot validation and RoundEngine save/restore.
"""

import pytest
from pydantic import ValidationError

from thirty.engine.base import SCORE_OPTIONS, SENTINEL_OPTION, GameConfig
from thirty.engine.dice import ScriptedDiceSource
from thirty.engine.round_engine import RoundEngine
from thirty.engine.snapshot import EngineSnapshot


class TestEngineSnapshot:
    """Tests for EngineSnapshot validation."""

    def test_defaults_match_new_game(self):
        snapshot = EngineSnapshot()
        assert snapshot.round_number == 1
        assert snapshot.rolls_remaining == 3
        assert snapshot.dice == [1, 2, 3, 4, 5, 6]
        assert snapshot.available_options == list(SCORE_OPTIONS)
        assert snapshot.selected_option == SENTINEL_OPTION

    def test_rejects_bad_die(self):
        with pytest.raises(ValidationError, match="Invalid die value 9"):
            EngineSnapshot(dice=[1, 2, 3, 4, 5, 9])

    def test_rejects_wrong_dice_count(self):
        with pytest.raises(ValidationError, match="Exactly 6 dice"):
            EngineSnapshot(dice=[1, 2, 3])

    def test_rejects_overlap(self):
        with pytest.raises(ValidationError, match="must not overlap"):
            EngineSnapshot(selected_indices=[1, 2], locked_indices=[2])

    def test_rejects_unknown_option(self):
        with pytest.raises(ValidationError, match="Unknown score option"):
            EngineSnapshot(available_options=["Low", "13"])

    def test_rejects_duplicate_options(self):
        with pytest.raises(ValidationError, match="distinct"):
            EngineSnapshot(available_options=["Low", "Low"])

    def test_rejects_total_mismatch(self):
        with pytest.raises(ValidationError, match="does not match"):
            EngineSnapshot(total_score=10, score_by_option={"9": 9})

    def test_rejects_round_out_of_range(self):
        with pytest.raises(ValidationError):
            EngineSnapshot(round_number=12)

    def test_rejects_too_many_rolls(self):
        with pytest.raises(ValidationError):
            EngineSnapshot(rolls_remaining=4)

    def test_rejects_scored_option_still_available(self):
        with pytest.raises(ValidationError, match="cannot still be available: Low"):
            EngineSnapshot(total_score=6, score_by_option={"Low": 6})

    def test_rejects_pending_with_rolls_left(self):
        with pytest.raises(ValidationError, match="pending exactly when no rolls remain"):
            EngineSnapshot(rolls_remaining=1, reroll_enabled=True, pending_round_advance=True)

    def test_rejects_exhausted_without_pending(self):
        with pytest.raises(ValidationError, match="pending exactly when no rolls remain"):
            EngineSnapshot(rolls_remaining=0, reroll_enabled=True)

    def test_rejects_reroll_flag_mismatch(self):
        with pytest.raises(ValidationError, match="Re-rolls are enabled"):
            EngineSnapshot(rolls_remaining=2, reroll_enabled=False)

    def test_rejects_rolls_above_round_limit(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            EngineSnapshot(rolls_per_round=2, rolls_remaining=3)

    def test_finished_game_skips_round_checks(self):
        snapshot = EngineSnapshot(round_number=11, available_options=[])
        assert snapshot.pending_round_advance is False


class TestEngineSaveRestore:
    """Tests for RoundEngine.to_snapshot() / from_snapshot()."""

    def test_restores_mid_round(self, exhausted_engine):
        exhausted_engine.select_dice({3, 4})
        exhausted_engine.compute_score("9")
        exhausted_engine.select_dice({0})

        restored = RoundEngine.from_snapshot(exhausted_engine.to_snapshot())

        assert restored.to_snapshot() == exhausted_engine.to_snapshot()
        assert restored.total_score == 9
        assert restored.locked_indices == frozenset({3, 4})
        assert restored.selected_indices == frozenset({0})
        assert "9" not in restored.available_options
        assert restored.pending_round_advance is True

    def test_restores_from_dict(self, exhausted_engine):
        data = exhausted_engine.to_snapshot().model_dump()
        restored = RoundEngine.from_snapshot(data)
        assert restored.dice.values == (1, 2, 3, 4, 5, 6)
        assert restored.rolls_remaining == 0

    def test_uses_given_dice_source(self):
        engine = RoundEngine.from_snapshot(EngineSnapshot(), dice_source=ScriptedDiceSource([6] * 6))
        assert engine.roll().dice.values == (6,) * 6

    def test_restored_game_continues(self, exhausted_engine, exhaust_round):
        exhausted_engine.choose_option("12")
        exhausted_engine.advance_round()
        restored = RoundEngine.from_snapshot(
            exhausted_engine.to_snapshot(),
            dice_source=ScriptedDiceSource([]),
        )
        exhaust_round(restored, (6, 6, 1, 1, 1, 1))
        restored.select_dice({0, 1})
        assert restored.compute_score("12") == 0
        assert restored.round_number == 2

    def test_restore_cannot_rescore_used_option(self):
        data = EngineSnapshot().model_dump()
        data.update(total_score=6, score_by_option={"Low": 6})
        with pytest.raises(ValidationError):
            RoundEngine.from_snapshot(data)

    def test_restores_rolls_per_round(self):
        engine = RoundEngine(
            dice_source=ScriptedDiceSource([1] * 6),
            config=GameConfig(rolls_per_round=2),
        )
        engine.roll()

        restored = RoundEngine.from_snapshot(engine.to_snapshot())

        assert restored.config.rolls_per_round == 2
        assert restored.rolls_remaining == 1
        assert restored.to_snapshot() == engine.to_snapshot()

    def test_snapshot_is_frozen(self):
        snapshot = EngineSnapshot()
        with pytest.raises(ValidationError):
            snapshot.total_score = 5
