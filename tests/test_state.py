"""Tests for the cooldown timestamp shared by the watch loop and repair engine."""

import math

from state import CooldownState


def test_never_written_is_not_cooling_down(clock):
    cooldown = CooldownState(clock=clock)
    assert cooldown.last_write is None
    assert math.isinf(cooldown.elapsed())
    assert not cooldown.is_cooling_down(5.0)


def test_elapsed_tracks_clock(clock):
    cooldown = CooldownState(clock=clock)
    cooldown.mark()
    clock.advance(2.0)

    assert cooldown.elapsed() == 2.0
    assert cooldown.is_cooling_down(5.0)


def test_window_expires(clock):
    cooldown = CooldownState(clock=clock)
    cooldown.mark()
    clock.advance(5.0)

    assert not cooldown.is_cooling_down(5.0)


def test_mark_is_never_reset(clock):
    cooldown = CooldownState(clock=clock)
    first = cooldown.mark()
    clock.advance(10.0)
    second = cooldown.mark()

    assert second == first + 10.0
    assert cooldown.last_write == second
