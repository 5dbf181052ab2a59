# pong_arena/scheduler.py
from typing import Callable, List, Tuple


class TickToken:
    """Handle for one requested tick; cancelling it revokes the tick."""

    def __init__(self, epoch: int):
        self.epoch = epoch
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not self.cancelled


class FrameScheduler:
    """
    requestAnimationFrame-style queue pumped once per host frame.

    Callbacks requested while a frame is running land on the next frame,
    so a tick that reschedules itself runs exactly once per frame.
    """

    def __init__(self):
        self._pending: List[Tuple[TickToken, Callable[[TickToken], None]]] = []
        self.frame = 0

    def request(self, callback: Callable[[TickToken], None], epoch: int) -> TickToken:
        token = TickToken(epoch)
        self._pending.append((token, callback))
        return token

    def pending(self) -> int:
        return sum(1 for token, _ in self._pending if token.active)

    def run_frame(self) -> int:
        """Run this frame's callbacks; returns how many actually ran."""
        self.frame += 1
        batch, self._pending = self._pending, []
        ran = 0
        for token, callback in batch:
            if not token.active:
                continue
            callback(token)
            ran += 1
        return ran

    def cancel_all(self):
        for token, _ in self._pending:
            token.cancel()
        self._pending.clear()
