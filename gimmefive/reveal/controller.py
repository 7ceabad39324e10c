import logging
from typing import Optional, Sequence
from gimmefive.draw.pool import IndexPool
from gimmefive.errors import InvariantViolation
from gimmefive.reveal.models import (
    NewRoundRequested,
    Phase,
    QuitRequested,
    RoundSnapshot,
    StartRound,
    TimerFired
)
from gimmefive.reveal.rules import REVEAL_DELAYS_MS, ROUND_SIZE, is_past_final_step
from gimmefive.runtime.scheduler import Scheduler
from gimmefive.words.catalog import WordCatalog

logger = logging.getLogger(__name__)

class RoundController:
    """
    Drives the timed reveal of one round at a time.

    A round shows the 16 drawn words in draw order, one per timer tick, and
    stops on the last one. Input can only start a new round once stopped.
    """

    def __init__(
        self,
        catalog: WordCatalog,
        pool: IndexPool,
        scheduler: Scheduler,
        delays_ms: Sequence[int] = REVEAL_DELAYS_MS
    ):
        catalog.require_round_size(ROUND_SIZE)
        if pool.size != len(catalog):
            raise InvariantViolation(f"Pool covers {pool.size} indices but catalog has {len(catalog)} words")
        if len(delays_ms) != ROUND_SIZE:
            raise ValueError(f"Need {ROUND_SIZE} reveal delays, got {len(delays_ms)}")

        self.catalog = catalog
        self.pool = pool
        self.scheduler = scheduler
        self.delays_ms = tuple(delays_ms)

        self.phase = Phase.ROLLING
        self.round_indices: list[int] = []
        self.step = -1
        self.round_number = 0
        self.running = True
        self._timer = None

    def handle(self, event) -> None:
        if not self.running:
            return
        if isinstance(event, StartRound):
            if self.round_number == 0:
                self.begin_round()
        elif isinstance(event, TimerFired):
            if event.round_number == self.round_number:
                self.on_timer_fire()
        elif isinstance(event, NewRoundRequested):
            self.on_new_round_request(event.source)
        elif isinstance(event, QuitRequested):
            self.on_quit_request()
        else:
            logger.debug(f"Ignoring event {event!r}")

    def begin_round(self) -> None:
        self.pool.ensure_capacity(ROUND_SIZE)
        self.round_indices = self.pool.take(ROUND_SIZE)
        self.step = 0
        self.phase = Phase.ROLLING
        self.round_number += 1
        logger.debug(f"Round {self.round_number} started (pool generation {self.pool.generation})")
        self._schedule_tick()

    def on_timer_fire(self) -> None:
        if self.phase != Phase.ROLLING or self.step < 0:
            return
        self._timer = None
        self.step += 1
        if is_past_final_step(self.step):
            self.step = ROUND_SIZE - 1
            self.phase = Phase.STOPPED
            logger.info(f"Round {self.round_number} stopped on '{self.current_word()}'")
            return
        self._schedule_tick()

    def on_new_round_request(self, source: str = "confirm") -> None:
        if self.phase != Phase.STOPPED:
            logger.debug(f"Ignoring new round request ({source}) while rolling")
            return
        self.begin_round()

    def on_quit_request(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self.running = False

    def current_word(self) -> str:
        if self.step < 0 or not self.round_indices:
            return ""
        return self.catalog.word_at(self.round_indices[self.step])

    def final_word(self) -> Optional[str]:
        if self.phase != Phase.STOPPED or not self.round_indices:
            return None
        return self.catalog.word_at(self.round_indices[-1])

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            word=self.current_word(),
            phase=self.phase,
            step=self.step,
            round_number=self.round_number
        )

    def _schedule_tick(self):
        self._timer = self.scheduler.schedule(
            self.delays_ms[self.step], TimerFired(round_number=self.round_number)
        )
