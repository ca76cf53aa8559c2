"""
Thirty - Round Engine

One game of Thirty: ten rounds, six dice, up to three rolls per round.

Round lifecycle:
- ROLLING: the first roll replaces every die, later rolls replace only the
  selected dice
- EXHAUSTED: no rolls left; the player picks an option, scores selected dice
  against it, and advances
- GAME_OVER: round 10 has been advanced; the total is final

Scoring follows ThirtyScorer. Each option can be scored or forfeited once
per game.
"""

import logging
from typing import Iterable

from thirty.engine.base import (
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
from thirty.engine.dice import DiceSource, RandomDiceSource
from thirty.engine.scoring import ThirtyScorer
from thirty.engine.snapshot import EngineSnapshot
from thirty.engine.validators import (
    GameOverError,
    InvalidOption,
    RoundAdvanceBlocked,
    validate_dice_values,
    validate_die_indices,
    validate_option,
)

logger = logging.getLogger(__name__)

INITIAL_DICE: tuple[int, ...] = (1, 2, 3, 4, 5, 6)


class RoundEngine:
    """
    Stateful engine for a single game of Thirty.

    Read state through the properties; change it only through the
    operations. Collections are returned as immutable copies.
    """

    def __init__(
        self,
        dice_source: DiceSource | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.dice_source = dice_source or RandomDiceSource()

        self._total_score = 0
        self._round_number = 1
        self._rolls_remaining = self.config.rolls_per_round
        self._dice = list(INITIAL_DICE[: self.config.num_dice])
        self._selected: set[int] = set()
        self._locked: set[int] = set()
        self._available_options = list(SCORE_OPTIONS)
        self._score_by_option: dict[str, int] = {}
        self._pending_round_advance = False
        self._reroll_enabled = False
        self._selected_option = SENTINEL_OPTION

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def total_score(self) -> int:
        return self._total_score

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def rolls_remaining(self) -> int:
        return self._rolls_remaining

    @property
    def dice(self) -> DiceRoll:
        return DiceRoll(values=tuple(self._dice))

    @property
    def selected_indices(self) -> frozenset[int]:
        return frozenset(self._selected)

    @property
    def locked_indices(self) -> frozenset[int]:
        return frozenset(self._locked)

    @property
    def available_options(self) -> tuple[str, ...]:
        return tuple(self._available_options)

    @property
    def score_by_option(self) -> dict[str, int]:
        return dict(self._score_by_option)

    @property
    def pending_round_advance(self) -> bool:
        return self._pending_round_advance

    @property
    def reroll_enabled(self) -> bool:
        """False until the first roll of the round."""
        return self._reroll_enabled

    @property
    def selected_option(self) -> str:
        return self._selected_option

    @property
    def is_game_over(self) -> bool:
        return self._round_number > self.config.num_rounds

    @property
    def phase(self) -> RoundPhase:
        if self.is_game_over:
            return RoundPhase.GAME_OVER
        if self._pending_round_advance:
            return RoundPhase.EXHAUSTED
        return RoundPhase.ROLLING

    @property
    def can_advance(self) -> bool:
        """True when ``advance_round`` would succeed."""
        return (
            not self.is_game_over
            and self._pending_round_advance
            and (self._selected_option != SENTINEL_OPTION or not self._available_options)
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def roll(self, reroll_mask: Iterable[int] | None = None) -> RollResult:
        """Roll the dice, or move to the next round once rolls are used up.

        Args:
            reroll_mask: Dice to replace on a re-roll. Defaults to the
                current selection. Ignored on the first roll of a round.

        Returns:
            RollResult; ``round_outcome`` is set when the call advanced
            the round instead of rolling.

        Raises:
            RoundAdvanceBlocked: Rolls are exhausted and no option is chosen
            InvalidIndex: The mask names an out-of-range or locked die
            GameOverError: The game has finished
        """
        self._ensure_in_progress()

        if self._pending_round_advance:
            outcome = self.advance_round()
            return RollResult(
                dice=self.dice,
                rolls_remaining=self._rolls_remaining,
                round_outcome=outcome,
            )

        if not self._reroll_enabled:
            indices = range(self.config.num_dice)
        else:
            mask = self._selected if reroll_mask is None else reroll_mask
            indices = sorted(
                validate_die_indices(mask, self.config.num_dice, self._locked)
            )

        for index in indices:
            self._dice[index] = self.dice_source.next_face()

        self._rolls_remaining -= 1
        self._reroll_enabled = True
        logger.debug(
            "Round %d roll: %s (%d left)",
            self._round_number, self._dice, self._rolls_remaining,
        )

        if self._rolls_remaining <= 0:
            self._pending_round_advance = True
            logger.debug("Round %d rolls exhausted, scoring required", self._round_number)

        return RollResult(
            dice=self.dice,
            rolls_remaining=self._rolls_remaining,
            scoring_required=self._pending_round_advance,
        )

    def select_dice(self, indices: Iterable[int]) -> frozenset[int]:
        """Toggle each index in or out of the selection.

        Raises:
            InvalidIndex: An index is out of range or locked
        """
        self._ensure_in_progress()
        for index in validate_die_indices(indices, self.config.num_dice, self._locked):
            if index in self._selected:
                self._selected.discard(index)
            else:
                self._selected.add(index)
        return self.selected_indices

    def toggle_die(self, index: int) -> frozenset[int]:
        """Toggle a single die."""
        return self.select_dice((index,))

    def deselect_dice(self, indices: Iterable[int] | None = None) -> frozenset[int]:
        """Remove indices from the selection (all of them when None)."""
        self._ensure_in_progress()
        if indices is None:
            self._selected.clear()
        else:
            self._selected -= validate_die_indices(indices, self.config.num_dice)
        return self.selected_indices

    def choose_option(self, option: str) -> str:
        """Pick the option the round will be scored against.

        Raises:
            InvalidOption: Unknown label, or one consumed in an earlier round
        """
        self._ensure_in_progress()
        validate_option(option)
        if option != SENTINEL_OPTION and option not in self._available_options:
            raise InvalidOption(f"Score option {option} has already been used.")
        self._selected_option = option
        return option

    def evaluate(self, option: str | None = None) -> ScoringResult:
        """Score the current selection against an option without applying it."""
        option = self._selected_option if option is None else option
        values = tuple(self._dice[i] for i in sorted(self._selected))
        if option not in self._available_options:
            return ThirtyScorer.invalid_result(option, values)
        return ThirtyScorer.calculate_score(option, values)

    def compute_score(self, option: str | None = None) -> int:
        """Score the selected dice and apply the result.

        Args:
            option: Option to score against. Defaults to the chosen option;
                on success it also becomes the chosen option.

        Returns:
            Points earned, or 0 for an invalid attempt (nothing changes)

        Raises:
            InvalidOption: Unknown label
            GameOverError: The game has finished
        """
        self._ensure_in_progress()
        if option is None:
            option = self._selected_option
        else:
            validate_option(option)

        result = self.evaluate(option)
        if not result.is_valid:
            logger.debug("Rejected %s with dice %s", option, result.dice_values)
            return 0

        self._selected_option = option
        self._score_by_option[option] = self._score_by_option.get(option, 0) + result.points
        self._total_score += result.points
        self._locked |= self._selected
        self._selected.clear()
        self._available_options.remove(option)
        logger.info(
            "Round %d: scored %d on %s (total %d)",
            self._round_number, result.points, option, self._total_score,
        )
        return result.points

    def advance_round(self) -> RoundOutcome:
        """Finish the round and start the next one.

        An option chosen but never scored is forfeited. With the sentinel
        still selected the transition is rejected, unless every option is
        already used.

        Raises:
            RoundAdvanceBlocked: No option chosen, or rolls remain
            GameOverError: The game has finished
        """
        self._ensure_in_progress()

        if not self._pending_round_advance:
            logger.warning("Round %d: advance requested with rolls remaining", self._round_number)
            raise RoundAdvanceBlocked(
                f"Use all {self.config.rolls_per_round} rolls before moving to the next round."
            )
        if self._selected_option == SENTINEL_OPTION and self._available_options:
            logger.warning("Round %d: advance requested without a score option", self._round_number)
            raise RoundAdvanceBlocked("Choose a score option to remove before continuing!")

        if self._selected_option in self._available_options:
            self._available_options.remove(self._selected_option)
            logger.info("Round %d: forfeited %s", self._round_number, self._selected_option)

        self._selected.clear()
        self._locked.clear()
        self._rolls_remaining = self.config.rolls_per_round
        self._pending_round_advance = False
        self._reroll_enabled = False
        self._selected_option = SENTINEL_OPTION
        self._round_number += 1

        if self.is_game_over:
            logger.info("Game over, final score %d", self._total_score)
            return RoundOutcome(game_over=True, final_score=self._total_score)

        logger.debug("Starting round %d", self._round_number)
        return RoundOutcome(game_over=False)

    def summary(self) -> GameSummary:
        """Total score and per-option breakdown for the score table."""
        return GameSummary(
            final_score=self._total_score,
            score_by_option=self.score_by_option,
        )

    # ------------------------------------------------------------------
    # Save / restore
    # ------------------------------------------------------------------

    def to_snapshot(self) -> EngineSnapshot:
        """Capture every field of the engine."""
        return EngineSnapshot(
            total_score=self._total_score,
            round_number=self._round_number,
            rolls_per_round=self.config.rolls_per_round,
            rolls_remaining=self._rolls_remaining,
            dice=list(self._dice),
            selected_indices=sorted(self._selected),
            locked_indices=sorted(self._locked),
            available_options=list(self._available_options),
            score_by_option=dict(self._score_by_option),
            pending_round_advance=self._pending_round_advance,
            reroll_enabled=self._reroll_enabled,
            selected_option=self._selected_option,
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: EngineSnapshot | dict,
        dice_source: DiceSource | None = None,
    ) -> "RoundEngine":
        """Rebuild an engine from a snapshot (or its dict form)."""
        if not isinstance(snapshot, EngineSnapshot):
            snapshot = EngineSnapshot.model_validate(snapshot)

        engine = cls(
            dice_source=dice_source,
            config=GameConfig(rolls_per_round=snapshot.rolls_per_round),
        )
        engine._total_score = snapshot.total_score
        engine._round_number = snapshot.round_number
        engine._rolls_remaining = snapshot.rolls_remaining
        engine._dice = list(validate_dice_values(snapshot.dice, engine.config.num_dice))
        engine._selected = set(snapshot.selected_indices)
        engine._locked = set(snapshot.locked_indices)
        engine._available_options = list(snapshot.available_options)
        engine._score_by_option = dict(snapshot.score_by_option)
        engine._pending_round_advance = snapshot.pending_round_advance
        engine._reroll_enabled = snapshot.reroll_enabled
        engine._selected_option = snapshot.selected_option
        return engine

    def _ensure_in_progress(self) -> None:
        if self.is_game_over:
            raise GameOverError(f"The game is over. Final score: {self._total_score}.")
