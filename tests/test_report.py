"""Test text report rendering and saving."""

import io
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from playbook_tracker.core.models import (
    Session, PlayStat, Difficulty, SESSION_CONFIG, PLAY_STAT_CONFIG
)
from playbook_tracker.core.ledger import create_session_ledger, create_play_ledger
from playbook_tracker.stats.report_generator import (
    ReportGenerator, generate_report, FILE_TITLE, SEPARATOR
)


@pytest.fixture
def session_ledger():
    ledger = create_session_ledger()
    ledger.add(Session(
        date="2026-01-18", play_name="Slant Right", attempts=10, completions=7,
        minutes=12.5, difficulty=Difficulty.INTERMEDIATE
    ))
    ledger.add(Session(
        date="2026-01-19", play_name="Post Corner", attempts=10, completions=3,
        minutes=8.0, difficulty=Difficulty.HARD
    ))
    return ledger


def test_table_layout(session_ledger):
    """Test header, separator, one row per record, separator, totals."""
    lines = ReportGenerator(session_ledger, SESSION_CONFIG).table_lines()

    assert len(lines) == 2 + 2 + 2
    assert lines[0].startswith("Date")
    assert lines[1] == SEPARATOR
    assert lines[-2] == SEPARATOR
    assert lines[-1] == (
        "TOTAL Attempts: 20 | TOTAL Completions: 10 | OVERALL Completion %: 50.0%"
    )


def test_session_row_contents(session_ledger):
    """Test a session row shows every field with one decimal place."""
    row = ReportGenerator(session_ledger, SESSION_CONFIG).table_lines()[2]

    assert row.startswith("2026-01-18")
    assert "Slant Right" in row
    assert "12.5" in row
    assert "70.0" in row
    assert row.endswith("Intermed")


def test_file_report(session_ledger, tmp_path):
    """Test the saved file has the title block followed by the table."""
    path = ReportGenerator(session_ledger, SESSION_CONFIG).save(tmp_path / "report.txt")
    lines = path.read_text(encoding="utf-8").splitlines()

    assert lines[0] == FILE_TITLE
    assert lines[1] == "=" * len(FILE_TITLE)
    assert lines[2] == ""
    assert lines[3].startswith("Date")
    assert lines[-1].startswith("TOTAL Attempts: 20")


def test_console_and_file_share_table(session_ledger):
    """Test both targets render the same table lines."""
    generator = ReportGenerator(session_ledger, SESSION_CONFIG)
    console = generate_report(session_ledger, SESSION_CONFIG, format="console")
    file_text = generate_report(session_ledger, SESSION_CONFIG, format="file")

    table = "\n".join(generator.table_lines())
    assert table in console
    assert table in file_text
    assert "WEEKLY REPORT" in console


def test_empty_file_report(tmp_path):
    """Test an empty ledger writes a no-data notice."""
    ledger = create_session_ledger()
    path = ReportGenerator(ledger, SESSION_CONFIG).save(tmp_path / "empty.txt")
    text = path.read_text(encoding="utf-8")

    assert text.startswith(FILE_TITLE)
    assert "No sessions recorded." in text
    assert "TOTAL" not in text


def test_play_report():
    """Test the per-play table omits session-only columns."""
    ledger = create_play_ledger()
    ledger.add(PlayStat(play_name="Mesh", attempts=4, completions=1))

    out = io.StringIO()
    ReportGenerator(ledger, PLAY_STAT_CONFIG).render(out)
    text = out.getvalue()

    assert "PLAY REPORT" in text
    assert "Minutes" not in text
    assert "Diff" not in text
    assert "25.0" in text


def test_save_to_missing_directory(session_ledger, tmp_path):
    """Test save propagates OSError when the file cannot be opened."""
    with pytest.raises(OSError):
        ReportGenerator(session_ledger, SESSION_CONFIG).save(tmp_path / "missing" / "report.txt")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
