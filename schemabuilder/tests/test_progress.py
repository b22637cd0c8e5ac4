"""Tests for level progression and the session timer."""

import pytest
from schemabuilder.ir.verdict import Outcome, ValidationVerdict
from schemabuilder.scenarios.repository import UnknownScenarioError
from schemabuilder.session.progress import SessionTimer, format_time, next_level


def test_next_level():
    """Test advancing within a set."""
    advance = next_level("university", 1)
    assert advance.set_id == "university"
    assert advance.next_level == 2
    assert not advance.set_complete


def test_next_level_after_last():
    """Test the last level completes the set."""
    advance = next_level("retail", 3)
    assert advance.set_complete
    assert advance.next_level is None
    assert advance.message == "You have mastered this scenario. Try the next problem set!"


def test_next_level_unknown():
    """Test an unknown current level or set raises."""
    with pytest.raises(UnknownScenarioError):
        next_level("retail", 4)
    with pytest.raises(UnknownScenarioError):
        next_level("library", 1)


def test_timer_pauses_on_passing_verdict():
    """Test the clock stops on success and keeps running on failure."""
    timer = SessionTimer()
    timer.reset()
    timer.observe(ValidationVerdict(outcome=Outcome.FAILURE, headline="h", detail="d"))
    timer.tick()
    assert timer.running and timer.elapsed == 1

    timer.observe(ValidationVerdict(outcome=Outcome.SUCCESS, headline="h", detail="d"))
    timer.tick()
    assert not timer.running and timer.elapsed == 1


def test_timer_runs_only_after_reset():
    """Test ticks count only while running."""
    timer = SessionTimer()
    timer.tick()
    assert timer.elapsed == 0

    timer.reset()
    for _ in range(3):
        timer.tick()
    assert timer.elapsed == 3

    timer.pause()
    timer.tick()
    assert timer.elapsed == 3

    timer.reset()
    assert timer.elapsed == 0 and timer.running


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "00:00"), (59, "00:59"), (61, "01:01"), (600, "10:00")],
)
def test_format_time(seconds, expected):
    """Test MM:SS rendering."""
    assert format_time(seconds) == expected


def test_format_elapsed():
    timer = SessionTimer()
    timer.reset()
    for _ in range(75):
        timer.tick()
    assert timer.format_elapsed() == "01:15"
