from __future__ import annotations
import asyncio
import inspect
import logging
from typing import Callable, Optional

from ..schemas import TimerState

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.1  # seconds
NOTIFY_DELAY = 0.01  # seconds

# Called with elapsed seconds; may be a plain function or a coroutine function
TimerCallback = Callable[[float], object]

class SessionClock:
    """Counts ticks for one game and reports them to an optional observer.

    The observer is scheduled, never awaited, so a slow observer does not hold
    up the next tick and several notifications may be in flight at once.
    """

    def __init__(self, callback: Optional[TimerCallback] = None,
                 tick_interval: float = TICK_INTERVAL, notify_delay: float = NOTIFY_DELAY):
        self.callback = callback
        self.tick_interval = tick_interval
        self.notify_delay = notify_delay
        self.ticks = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def seconds(self) -> float:
        return round(self.ticks / 10, 1)

    def start(self):
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        self._task = None

    def snapshot(self) -> TimerState:
        return TimerState(elapsed=self.seconds, isPaused=not self.running)

    def tick(self):
        self.ticks += 1
        if self.callback is not None:
            loop = asyncio.get_running_loop()
            loop.call_later(self.notify_delay, self._notify, self.seconds)

    def _notify(self, seconds: float):
        try:
            result = self.callback(seconds)
            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result)
                task.add_done_callback(_log_failure)
        except Exception:
            logger.exception("Timer callback failed at %.1fs", seconds)

    async def _run(self):
        try:
            while True:
                await asyncio.sleep(self.tick_interval)
                self.tick()
        except asyncio.CancelledError:
            return

def _log_failure(task: asyncio.Future):
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Timer callback failed: %r", exc)
