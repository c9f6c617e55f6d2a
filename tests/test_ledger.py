"""Test ledger capacity, totals and completion percentages."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from playbook_tracker.core.models import Session, PlayStat, TrackerConfig, Difficulty
from playbook_tracker.core.ledger import (
    Ledger, LedgerFullError, completion_percentage,
    create_session_ledger, create_play_ledger
)
from playbook_tracker.core.validation import ValidationError


def make_session(attempts: int, completions: int, name: str = "Slant Right") -> Session:
    return Session(
        date="2026-01-18",
        play_name=name,
        attempts=attempts,
        completions=completions,
        minutes=10.0,
        difficulty=Difficulty.EASY
    )


def test_completion_percentage():
    """Test per-record percentage, with zero attempts guarded."""
    assert completion_percentage(make_session(10, 7)) == pytest.approx(70.0)
    assert completion_percentage(make_session(0, 0)) == 0.0
    assert completion_percentage(make_session(3, 3)) == pytest.approx(100.0)


def test_totals_and_overall_percentage():
    """Test (10,7) + (10,3) gives 20 attempts, 10 completions, 50%."""
    ledger = create_session_ledger()
    ledger.add(make_session(10, 7))
    ledger.add(make_session(10, 3))

    assert ledger.total_attempts() == 20
    assert ledger.total_completions() == 10
    assert ledger.overall_completion_percentage() == pytest.approx(50.0)


def test_overall_percentage_is_ratio_of_totals():
    """Test overall % is not the mean of per-record percentages."""
    ledger = create_session_ledger()
    ledger.add(make_session(2, 2))
    ledger.add(make_session(8, 2))

    expected = 100.0 * ledger.total_completions() / ledger.total_attempts()
    assert ledger.overall_completion_percentage() == pytest.approx(expected)
    assert ledger.overall_completion_percentage() == pytest.approx(40.0)


def test_empty_ledger():
    """Test an empty ledger has zero totals and no division error."""
    ledger = create_session_ledger()
    assert ledger.is_empty
    assert ledger.total_attempts() == 0
    assert ledger.total_completions() == 0
    assert ledger.overall_completion_percentage() == 0.0


def test_zero_attempt_sessions():
    """Test totals of zero attempts still report 0%."""
    ledger = create_session_ledger()
    ledger.add(make_session(0, 0))
    assert ledger.overall_completion_percentage() == 0.0


def test_capacity_enforced():
    """Test the (N+1)-th add is rejected without changing the ledger."""
    ledger = create_session_ledger()
    assert ledger.capacity == 7

    for i in range(7):
        ledger.add(make_session(10, i, name=f"Play {i}"))

    assert ledger.is_full
    before = ledger.list()

    with pytest.raises(LedgerFullError):
        ledger.add(make_session(10, 9, name="Overflow"))

    assert ledger.count() == 7
    assert ledger.list() == before


def test_play_ledger_capacity():
    """Test the per-play ledger holds ten records."""
    ledger = create_play_ledger()
    assert ledger.capacity == 10

    for i in range(10):
        ledger.add(PlayStat(play_name=f"Play {i}", attempts=5, completions=1))

    with pytest.raises(LedgerFullError):
        ledger.add(PlayStat(play_name="Overflow", attempts=5, completions=1))


def test_insertion_order_preserved():
    """Test records come back in the order they were added."""
    ledger = create_session_ledger()
    for name in ["Slant", "Post", "Wheel"]:
        ledger.add(make_session(4, 2, name=name))

    assert [r.play_name for r in ledger] == ["Slant", "Post", "Wheel"]


def test_configured_attempt_bounds():
    """Test the ledger validator applies the configured attempts range."""
    config = TrackerConfig(capacity=3, min_attempts=5, max_attempts=20)
    ledger = create_session_ledger(config)

    with pytest.raises(ValidationError):
        ledger.add(make_session(2, 1))

    assert ledger.is_empty
    ledger.add(make_session(5, 1))
    assert ledger.count() == 1


def test_invalid_capacity():
    """Test that a ledger needs a positive capacity."""
    with pytest.raises(ValueError):
        Ledger("session", 0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
