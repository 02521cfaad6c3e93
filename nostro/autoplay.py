"""
autoplay.py - Autoplay timer on a logical clock

The timer is driven by its owner: the owner reports elapsed time through
advance(), and the timer fires one Playback.next() per full period while the
playback is playing. There are no threads and no wall-clock reads, so replays
are deterministic.

Stale timers:
    A timer remembers the playback generation it was armed under. Once the
    playback is reconfigured for another sequence the generation moves on,
    and the old timer cancels itself on its next advance without touching
    the cursor.
"""

from __future__ import annotations
from decimal import Decimal
import logging

from .core import AUTOPLAY_PERIOD, Number, to_decimal
from .playback import Playback


logger = logging.getLogger(__name__)


class AutoplayTimer:
    """
    Fixed-period timer that advances a Playback while it is playing.

    Example:
        timer = AutoplayTimer(playback)
        playback.toggle_play()
        timer.advance(Decimal("5"))   # two periods: two next() calls
    """

    def __init__(self, playback: Playback, period: Number = AUTOPLAY_PERIOD):
        period = to_decimal(period)
        if not period.is_finite() or period <= 0:
            raise ValueError(f"Autoplay period must be positive, got {period}")
        self.playback = playback
        self.period = period
        self.generation = playback.generation
        self.elapsed = Decimal("0")
        self.fired = 0
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def stale(self) -> bool:
        """True once the playback has been reconfigured since arming."""
        return self.generation != self.playback.generation

    @property
    def remaining(self) -> Decimal:
        """Logical time until the next firing."""
        return self.period - self.elapsed

    def cancel(self) -> None:
        self._cancelled = True
        self.elapsed = Decimal("0")

    def advance(self, elapsed: Number) -> int:
        """
        Let `elapsed` logical time pass.

        Fires once per full period. Time spent paused still accumulates but a
        firing while paused does nothing, so resuming never releases a burst
        of queued advances.

        Returns:
            Number of steps the cursor moved forward
        """
        elapsed = to_decimal(elapsed)
        if not elapsed.is_finite() or elapsed < 0:
            raise ValueError(f"Elapsed time must be finite and non-negative, got {elapsed}")
        if self._cancelled:
            return 0
        if self.stale:
            logger.debug("Autoplay timer for generation %d is stale; cancelling", self.generation)
            self.cancel()
            return 0

        self.elapsed += elapsed
        advanced = 0
        while self.elapsed >= self.period:
            self.elapsed -= self.period
            if self.playback.is_playing:
                # length is read from the playback at fire time
                if self.playback.cursor < self.playback.length - 1:
                    advanced += 1
                self.playback.next()
        self.fired += advanced
        return advanced

    def tick(self) -> int:
        """Advance to the next firing."""
        return self.advance(self.remaining)

    def run_until_stopped(self, max_ticks: int = 1000) -> int:
        """
        Tick until the playback stops playing or the timer is cancelled.

        Returns:
            Number of steps the cursor moved forward
        """
        advanced = 0
        for _ in range(max_ticks):
            if self._cancelled or self.stale or not self.playback.is_playing:
                break
            advanced += self.tick()
        return advanced

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else ("stale" if self.stale else "armed")
        return f"AutoplayTimer(period={self.period}, {state}, fired={self.fired})"
