import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Any, Optional

class Scheduler(ABC):
    """
    Delivers an event once after a delay. Never periodic.
    """

    @abstractmethod
    def schedule(self, delay_ms: int, event: Any):
        """
        Queue event for delivery after delay_ms. Returns a handle with cancel().
        """
        pass

class AsyncioScheduler(Scheduler):
    """
    Puts events on the session queue using the running event loop's timers.
    """

    def __init__(self, queue: asyncio.Queue, loop: Optional[asyncio.AbstractEventLoop] = None, time_scale: float = 1.0):
        self.queue = queue
        self.loop = loop
        self.time_scale = time_scale

    def schedule(self, delay_ms: int, event: Any) -> asyncio.TimerHandle:
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000 * self.time_scale, self.queue.put_nowait, event)

class ManualTimer:
    def __init__(self, due_ms: int, event: Any):
        self.due_ms = due_ms
        self.event = event
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

class ManualScheduler(Scheduler):
    """
    Fake clock for tests and headless runs. Time only moves when asked to.
    """

    def __init__(self):
        self.now_ms = 0
        self._heap = []
        self._seq = itertools.count()

    def schedule(self, delay_ms: int, event: Any) -> ManualTimer:
        timer = ManualTimer(self.now_ms + delay_ms, event)
        heapq.heappush(self._heap, (timer.due_ms, next(self._seq), timer))
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._heap if not t.cancelled)

    def advance(self, ms: int) -> list:
        """
        Moves the clock forward and returns the events that came due, in order.
        """
        target = self.now_ms + ms
        fired = []
        while self._heap and self._heap[0][0] <= target:
            due, _, timer = heapq.heappop(self._heap)
            self.now_ms = due
            if not timer.cancelled:
                fired.append(timer.event)
        self.now_ms = target
        return fired

    def pop_next(self):
        while self._heap:
            due, _, timer = heapq.heappop(self._heap)
            self.now_ms = due
            if not timer.cancelled:
                return timer.event
        return None
