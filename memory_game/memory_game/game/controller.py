"""Game controller: the state machine driving one board."""

from __future__ import annotations

import logging
import random
from typing import Callable

from memory_game.config import GameConfig
from memory_game.logging import GameLogger
from memory_game.models.card import Card
from memory_game.models.game_state import GamePhase, GameStats, Outcome
from memory_game.utils.scheduler import ManualScheduler, Scheduler, TimerHandle

from .clock import Clock
from .deck import Deck
from .match_engine import MatchEngine
from .selection import SelectionArbiter

logger = logging.getLogger(__name__)


class GameController:
    """Owns the deck, stats, selection and clock of a single game.

    Reacts to two intents (card selected, restart requested) and to clock
    ticks, and reports everything to the presentation layer through the
    callbacks registered with ``set_callbacks``.

    Delayed callbacks are tagged with the epoch in force when they were
    scheduled. Restart bumps the epoch and cancels them, so a callback from a
    previous layout never touches the new deck.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize controller and build the first deck.

        Args:
            config: Game configuration (uses defaults if not provided)
            scheduler: Scheduler for ticks and delays (ManualScheduler if not provided)
            rng: Random source for shuffling (seeded from config if not provided)
            game_logger: GameLogger for JSONL event logging

        Raises:
            InvalidConfig: If the configured symbols cannot form a deck
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler or ManualScheduler()
        self.rng = rng or random.Random(self.config.seed)
        self.game_logger = game_logger

        self.arbiter = SelectionArbiter()
        self.engine = MatchEngine(self.config.max_stars)
        self.clock = Clock(self.scheduler, on_tick=self._on_clock_tick)

        self.deck = Deck.build(self.config.symbols, self.rng)
        self.phase = GamePhase.IDLE
        self.epoch = 0
        self.game_number = 1
        self.games_played = 0  # Games that got at least one selection
        self.games_completed = 0
        self._stats = GameStats.initial(self.config.max_stars)
        self._timers: set[TimerHandle] = set()

        self._on_deck_built: Callable[[list[Card]], None] | None = None
        self._on_card_flipped: Callable[[int, bool], None] | None = None
        self._on_match: Callable[[tuple[int, ...]], None] | None = None
        self._on_no_match: Callable[[tuple[int, ...]], None] | None = None
        self._on_stats_changed: Callable[[GameStats], None] | None = None
        self._on_game_over: Callable[[GameStats], None] | None = None

    def set_callbacks(
        self,
        on_deck_built: Callable[[list[Card]], None] | None = None,
        on_card_flipped: Callable[[int, bool], None] | None = None,
        on_match: Callable[[tuple[int, ...]], None] | None = None,
        on_no_match: Callable[[tuple[int, ...]], None] | None = None,
        on_stats_changed: Callable[[GameStats], None] | None = None,
        on_game_over: Callable[[GameStats], None] | None = None,
    ) -> None:
        """Set presentation callbacks.

        Args:
            on_deck_built: Called with copies of the cards of a new layout
            on_card_flipped: Called with (card_id, face_up) when a card turns
            on_match: Called with the ids of a matched pair
            on_no_match: Called with the ids of a mismatched pair
            on_stats_changed: Called with a copy of the stats after any change
            on_game_over: Called with the final stats when all pairs are found
        """
        self._on_deck_built = on_deck_built
        self._on_card_flipped = on_card_flipped
        self._on_match = on_match
        self._on_no_match = on_no_match
        self._on_stats_changed = on_stats_changed
        self._on_game_over = on_game_over

    @property
    def stats(self) -> GameStats:
        """Copy of the current stats."""
        return self._stats.model_copy()

    @property
    def cards(self) -> tuple[Card, ...]:
        return self.deck.cards

    @property
    def pending(self) -> tuple[int, ...]:
        return self.arbiter.pending

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.FINISHED

    def begin(self) -> None:
        """Publish the current layout and stats to the presentation layer."""
        logger.info(f"Game {self.game_number} ready with {len(self.deck)} cards")
        if self.game_logger:
            self.game_logger.log_game_start(self.game_number, self.deck.cards)
        self._emit_deck_built()
        self._emit_stats()

    def on_card_selected(self, card_id: int) -> bool:
        """Handle a selection intent.

        Invalid targets (unknown id, matched or face-up card, full selection,
        finished game) are ignored.

        Returns:
            True if the card was flipped, False if the selection was ignored
        """
        card = self.deck.get(card_id)
        if card is None:
            logger.debug(f"Ignoring selection of unknown card {card_id}")
            return False
        if self.phase == GamePhase.FINISHED or not self.arbiter.can_select(card):
            logger.debug(f"Ignoring selection of {card} in phase {self.phase.value}")
            return False

        if not self.clock.running:
            self.clock.start()
            self._stats.running = True

        if self.phase == GamePhase.IDLE:
            self.games_played += 1

        self.arbiter.select(card)
        card.face_up = True
        logger.debug(f"Selected {card}")
        if self._on_card_flipped:
            self._on_card_flipped(card.card_id, True)

        if self.arbiter.is_full():
            self._adjudicate()
        else:
            self.phase = GamePhase.SELECTING
        return True

    def on_restart_requested(self) -> None:
        """Discard the current game and deal a new layout."""
        previous = self._stats
        self.epoch += 1
        for handle in self._timers:
            handle.cancel()
        self._timers.clear()

        self.clock.reset()
        self.arbiter.clear()

        if self.game_logger and (previous.moves or previous.running):
            self.game_logger.log_restart(self.game_number, previous)
        logger.info(
            f"Restarting after game {self.game_number} "
            f"({previous.moves} moves, epoch {self.epoch})"
        )

        self._stats = GameStats.initial(self.config.max_stars)
        self.deck = Deck.build(self.config.symbols, self.rng)
        self.phase = GamePhase.IDLE
        self.game_number += 1
        self.begin()

    def _adjudicate(self) -> None:
        """Compare the two pending cards and schedule the cleanup."""
        self.phase = GamePhase.ADJUDICATING
        pair = [self.deck[card_id] for card_id in self.arbiter.pending]
        ids = tuple(c.card_id for c in pair)

        self._stats = self.engine.record_move(self._stats)
        outcome = self.engine.adjudicate(pair)
        logger.debug(f"Move {self._stats.moves}: {ids} -> {outcome.value}")
        self._emit_stats()

        if outcome == Outcome.MATCH:
            for card in pair:
                card.matched = True
            if self._on_match:
                self._on_match(ids)
            if self.engine.check_game_over(self.deck):
                outcome = Outcome.GAME_OVER
        else:
            if self._on_no_match:
                self._on_no_match(ids)
            self._schedule(self.config.flip_back_delay, lambda: self._flip_back(ids))

        if self.game_logger:
            self.game_logger.log_turn(self.game_number, pair, outcome, self._stats)

        if outcome == Outcome.GAME_OVER:
            self._finish()

        self._schedule(self.config.adjudication_delay, self._release_selection)

    def _finish(self) -> None:
        self.clock.stop()
        self._stats.running = False
        self.phase = GamePhase.FINISHED
        self.games_completed += 1
        logger.info(
            f"Game {self.game_number} over: {self._stats.moves} moves, "
            f"{self._stats.star_rating} stars, {self._stats.elapsed_seconds}s"
        )
        if self.game_logger:
            self.game_logger.log_game_end(self.game_number, self._stats)
        self._emit_stats()
        if self._on_game_over:
            self._on_game_over(self.stats)

    def _flip_back(self, ids: tuple[int, ...]) -> None:
        for card_id in ids:
            self.deck[card_id].face_up = False
            if self._on_card_flipped:
                self._on_card_flipped(card_id, False)

    def _release_selection(self) -> None:
        self.arbiter.clear()
        if self.phase == GamePhase.ADJUDICATING:
            self.phase = GamePhase.SELECTING

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        """Schedule a callback bound to the current epoch."""
        epoch = self.epoch

        def fire() -> None:
            self._timers.discard(handle)
            if epoch != self.epoch:
                logger.debug(f"Discarding stale callback from epoch {epoch}")
                return
            callback()

        handle = self.scheduler.call_later(delay, fire)
        self._timers.add(handle)

    def _on_clock_tick(self, elapsed: int) -> None:
        self._stats.elapsed_seconds = elapsed
        self._emit_stats()

    def _emit_deck_built(self) -> None:
        if self._on_deck_built:
            self._on_deck_built([c.model_copy() for c in self.deck])

    def _emit_stats(self) -> None:
        if self._on_stats_changed:
            self._on_stats_changed(self.stats)

    def __str__(self) -> str:
        return (
            f"Game {self.game_number} [{self.phase.value}] "
            f"{self.deck.matched_count() // 2}/{len(self.deck) // 2} pairs, {self._stats}"
        )
