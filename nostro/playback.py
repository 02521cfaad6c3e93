"""
playback.py - Playback State Machine

Tracks which step of the active sequence is current and whether autoplay is
running.

State:
    cursor: NOT_STARTED (-1) or an index 0..n-1 into the active sequence
    is_playing: autoplay flag
    generation: bumped on every configure(); timers armed under an older
        generation are stale and must not advance the cursor

Transitions:
    next()         advance one step; stops playing when called on the last step
    prev()         step back, never below NOT_STARTED
    reset()        back to (NOT_STARTED, paused)
    toggle_play()  play/pause; restarts from step 0 when already complete
    jump_to(i)     go straight to step i and pause

Steps before the cursor are completed, the step at the cursor is active, and
the rest are pending.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from .core import NOT_STARTED, StepOutOfRange, StepStatus


class Playback:
    """
    Cursor over a sequence of `length` steps.

    Example:
        pb = Playback(7)
        pb.toggle_play()   # cursor 0, playing
        pb.next()          # cursor 1
        pb.jump_to(6)      # cursor 6, paused, complete
    """

    def __init__(self, length: int = 0):
        self.length = 0
        self.cursor = NOT_STARTED
        self.is_playing = False
        self.generation = 0
        self.configure(length)

    def configure(self, length: int) -> None:
        """Point the playback at a new sequence and reset it."""
        if length < 0:
            raise ValueError(f"Sequence length cannot be negative, got {length}")
        self.length = length
        self.cursor = NOT_STARTED
        self.is_playing = False
        self.generation += 1

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def next(self) -> None:
        if self.cursor < self.length - 1:
            self.cursor += 1
        else:
            self.is_playing = False

    def prev(self) -> None:
        self.cursor = max(NOT_STARTED, self.cursor - 1)

    def reset(self) -> None:
        self.cursor = NOT_STARTED
        self.is_playing = False

    def toggle_play(self) -> None:
        """
        Start, pause, resume or replay.

        From a completed sequence this restarts at step 0 and plays. From
        NOT_STARTED it moves to step 0 before playing.
        """
        if self.length == 0:
            return
        if self.is_complete:
            self.cursor = 0
            self.is_playing = True
            return
        if self.cursor == NOT_STARTED:
            self.cursor = 0
        self.is_playing = not self.is_playing

    def jump_to(self, index: int) -> None:
        """
        Make step `index` current and pause.

        Raises:
            StepOutOfRange: if index is outside 0..length-1 (state unchanged)
        """
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < self.length:
            raise StepOutOfRange(f"Step index {index!r} out of range 0..{self.length - 1}")
        self.cursor = index
        self.is_playing = False

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def started(self) -> bool:
        return self.cursor != NOT_STARTED

    @property
    def is_complete(self) -> bool:
        return self.cursor >= self.length - 1

    def completed(self) -> List[int]:
        return list(range(0, max(0, self.cursor)))

    def active(self) -> Optional[int]:
        return self.cursor if self.started else None

    def pending(self) -> List[int]:
        return list(range(self.cursor + 1, self.length))

    def status_of(self, index: int) -> StepStatus:
        if not 0 <= index < self.length:
            raise StepOutOfRange(f"Step index {index!r} out of range 0..{self.length - 1}")
        if index < self.cursor:
            return StepStatus.COMPLETED
        if index == self.cursor:
            return StepStatus.ACTIVE
        return StepStatus.PENDING

    def control_label(self) -> str:
        """Label for a single play/pause control."""
        if self.is_playing:
            return "Pause"
        if self.is_complete:
            return "Replay"
        if not self.started:
            return "Start"
        return "Play"

    def progress(self) -> Tuple[int, int]:
        """(steps reached, total steps)."""
        return (max(0, self.cursor + 1), self.length)

    def __repr__(self) -> str:
        state = "playing" if self.is_playing else "paused"
        return f"Playback(cursor={self.cursor}/{self.length - 1}, {state}, gen={self.generation})"
