"""
Playback Conformance Tests

INVARIANT: The cursor stays inside its sequence and moves only as asked.

    ∀ length n, ∀ operation sequence O:
        NOT_STARTED ≤ cursor ≤ n - 1      (cursor = NOT_STARTED when n = 0)
        next() never moves the cursor back
        prev() never moves the cursor forward
        next() stops playing only when the cursor was already on n - 1
        reset() ⟹ (cursor, is_playing) = (NOT_STARTED, False)
        completed ∪ {active} ∪ pending = 0..n-1, pairwise disjoint

    ∀ timer T armed before configure():
        T never moves the cursor again
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from nostro import AutoplayTimer, NOT_STARTED, Playback


operations = st.lists(
    st.one_of(
        st.sampled_from(["next", "prev", "reset", "toggle"]),
        st.tuples(st.just("jump"), st.integers(min_value=0, max_value=20)),
    ),
    max_size=40,
)


def _apply(pb: Playback, op) -> None:
    if isinstance(op, tuple):
        _, index = op
        if index < pb.length:
            pb.jump_to(index)
    elif op == "toggle":
        pb.toggle_play()
    else:
        getattr(pb, op)()


class TestPlaybackProperties:
    """Property-based playback tests."""

    @given(st.integers(min_value=0, max_value=12), operations)
    @settings(max_examples=200)
    def test_cursor_stays_in_range(self, length, ops):
        pb = Playback(length)
        for op in ops:
            _apply(pb, op)
            assert NOT_STARTED <= pb.cursor <= max(NOT_STARTED, length - 1)

    @given(st.integers(min_value=0, max_value=12), operations)
    @settings(max_examples=200)
    def test_next_and_prev_are_monotone(self, length, ops):
        pb = Playback(length)
        for op in ops:
            _apply(pb, op)
            before = pb.cursor
            pb.next()
            assert pb.cursor >= before
            before = pb.cursor
            pb.prev()
            assert pb.cursor <= before

    @given(st.integers(min_value=0, max_value=12), operations)
    @settings(max_examples=200)
    def test_next_stops_playing_only_on_last_step(self, length, ops):
        pb = Playback(length)
        for op in ops:
            _apply(pb, op)
            was_last = pb.cursor == length - 1
            pb.is_playing = True
            pb.next()
            assert pb.is_playing != was_last

    @given(st.integers(min_value=0, max_value=12), operations)
    @settings(max_examples=100)
    def test_reset_always_returns_to_start(self, length, ops):
        pb = Playback(length)
        for op in ops:
            _apply(pb, op)
        pb.reset()
        assert (pb.cursor, pb.is_playing) == (NOT_STARTED, False)

    @given(st.integers(min_value=1, max_value=12), operations)
    @settings(max_examples=100)
    def test_step_partition(self, length, ops):
        pb = Playback(length)
        for op in ops:
            _apply(pb, op)
            active = [] if pb.active() is None else [pb.active()]
            indices = pb.completed() + active + pb.pending()
            assert indices == list(range(length))

    @given(
        st.integers(min_value=1, max_value=12),
        st.integers(min_value=1, max_value=12),
        operations,
        st.decimals(min_value=0, max_value=100, places=1),
    )
    @settings(max_examples=100)
    def test_stale_timer_never_moves_cursor(self, old_length, new_length, ops, elapsed):
        pb = Playback(old_length)
        stale = AutoplayTimer(pb)
        pb.configure(new_length)
        for op in ops:
            _apply(pb, op)
            before = pb.cursor
            assert stale.advance(elapsed) == 0
            assert pb.cursor == before

    @given(st.integers(min_value=1, max_value=12), st.decimals(min_value=0, max_value=100, places=1))
    @settings(max_examples=100)
    def test_autoplay_never_overshoots(self, length, elapsed):
        pb = Playback(length)
        pb.toggle_play()
        timer = AutoplayTimer(pb)
        timer.advance(elapsed)
        assert 0 <= pb.cursor <= length - 1
        if pb.cursor < length - 1:
            assert pb.is_playing
