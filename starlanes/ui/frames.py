"""Next-frame callback scheduling, driven by the game loop.

Works like a browser's animation-frame queue: ``schedule_frame`` registers a
callback for the next frame and returns a handle, ``cancel_frame`` revokes it.
The main loop calls ``run_frame(now)`` once per frame. A callback scheduled
while a frame is running waits for the following frame.
"""

from __future__ import annotations

import itertools
from typing import Callable

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """Handle-based frame queue. Cancelled handles never fire."""

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._handles = itertools.count(1)

    def schedule_frame(self, callback: FrameCallback) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int | None) -> None:
        if handle is not None:
            self._pending.pop(handle, None)

    def is_scheduled(self, handle: int | None) -> bool:
        return handle in self._pending

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_frame(self, now: float) -> int:
        """Fire every callback due this frame; returns how many ran."""
        due = list(self._pending)
        ran = 0
        for handle in due:
            # An earlier callback this frame may have cancelled this one
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback(now)
            ran += 1
        return ran
