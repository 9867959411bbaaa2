"""Schedulers driving the per-question countdown and the post-answer delay.

Every scheduled callback returns a ``TimerHandle``. Cancelling the handle is
enough to stop it: workers check the flag before firing, so no forced
interruption is needed.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class TimerHandle:
    def __init__(self, label: str = '') -> None:
        self.label = label
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self):
        return f"TimerHandle(label={self.label!r}, cancelled={self.cancelled})"


class Scheduler:
    """Interface for scheduling one-shot and repeating callbacks."""

    def call_later(self, delay: float, callback: Callable[[], None], label: str = '') -> TimerHandle:
        raise NotImplementedError

    def call_every(self, interval: float, callback: Callable[[], None], label: str = '') -> TimerHandle:
        raise NotImplementedError


class SocketIOScheduler(Scheduler):
    """Runs timers as Socket.IO background tasks.

    Works with whichever async mode the server picked (threading, eventlet,
    gevent) because it only sleeps through ``socketio.sleep``.
    """

    def __init__(self, socketio) -> None:
        self._socketio = socketio

    def _fire(self, handle: TimerHandle, callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception:
            logger.exception(f"[timer-error] {handle.label}")

    def call_later(self, delay, callback, label=''):
        handle = TimerHandle(label)

        def _worker():
            self._socketio.sleep(delay)
            if handle.cancelled:
                return
            self._fire(handle, callback)

        logger.debug(f"[timer-set] {label} delay={delay}s")
        self._socketio.start_background_task(_worker)
        return handle

    def call_every(self, interval, callback, label=''):
        handle = TimerHandle(label)

        def _worker():
            while True:
                self._socketio.sleep(interval)
                if handle.cancelled:
                    return
                self._fire(handle, callback)

        logger.debug(f"[timer-set] {label} interval={interval}s")
        self._socketio.start_background_task(_worker)
        return handle


class ManualScheduler(Scheduler):
    """Virtual clock; callbacks fire only when ``advance`` moves time forward."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list = []
        self._seq = itertools.count()

    def _push(self, due, handle, callback, interval):
        heapq.heappush(self._queue, (due, next(self._seq), handle, callback, interval))

    def call_later(self, delay, callback, label=''):
        handle = TimerHandle(label)
        self._push(self.now + delay, handle, callback, None)
        return handle

    def call_every(self, interval, callback, label=''):
        handle = TimerHandle(label)
        self._push(self.now + interval, handle, callback, interval)
        return handle

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while self._queue and self._queue[0][0] <= target:
            due, _, handle, callback, interval = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = due
            if interval is not None:
                self._push(due + interval, handle, callback, interval)
            callback()
        self.now = target

    def pending(self) -> int:
        return sum(1 for item in self._queue if not item[2].cancelled)

    def next_due(self) -> Optional[float]:
        live = [item[0] for item in self._queue if not item[2].cancelled]
        return min(live) if live else None
