import asyncio
import logging
from typing import Callable, List, Optional
from pydantic import BaseModel
from gimmefive.reveal.controller import RoundController
from gimmefive.reveal.models import NewRoundRequested, RoundSnapshot, StartRound
from gimmefive.runtime.scheduler import ManualScheduler

logger = logging.getLogger(__name__)

class RevealSession:
    """
    Feeds queued events to the controller one at a time.

    Timers and the input reader only ever put events on the queue, so every
    handler runs to completion before the next event is looked at.
    """

    def __init__(
        self,
        controller: RoundController,
        queue: asyncio.Queue,
        on_change: Optional[Callable[[RoundSnapshot], None]] = None
    ):
        self.controller = controller
        self.queue = queue
        self.on_change = on_change

    def post(self, event):
        self.queue.put_nowait(event)

    async def run(self) -> RoundSnapshot:
        self.post(StartRound())
        while self.controller.running:
            event = await self.queue.get()
            self.controller.handle(event)
            if self.on_change:
                self.on_change(self.controller.snapshot())
        logger.debug(f"Session ended after {self.controller.round_number} round(s)")
        return self.controller.snapshot()

class RoundResult(BaseModel):
    round_number: int
    revealed: List[str]          # Every word shown, in order
    final_word: str

def run_headless(controller: RoundController, scheduler: ManualScheduler, rounds: int = 1) -> List[RoundResult]:
    """
    Plays complete rounds against a fake clock and collects what was shown.
    """
    results = []
    for _ in range(rounds):
        controller.handle(StartRound() if controller.round_number == 0 else NewRoundRequested())
        revealed = [controller.current_word()]
        while True:
            event = scheduler.pop_next()
            if event is None:
                break
            step = controller.step
            controller.handle(event)
            if controller.step != step:
                revealed.append(controller.current_word())

        results.append(RoundResult(
            round_number=controller.round_number,
            revealed=revealed,
            final_word=controller.final_word()
        ))
    return results
