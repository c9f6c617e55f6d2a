"""
Report Generator - Renders the ledger as a fixed-column text table.

The same table is used for the console view and the saved report file:
- Column header row
- One row per record
- Totals row with the overall completion percentage
"""

import logging
from pathlib import Path
from typing import List, TextIO, Union

from ..core.models import Session, TrackerConfig, TrackerMode, SESSION_CONFIG
from ..core.ledger import Ledger

logger = logging.getLogger("playbook_tracker.report")

SEPARATOR = "-" * 51
FILE_TITLE = "FLAG FOOTBALL PLAY TRACKER REPORT"
CONSOLE_TITLES = {
    TrackerMode.SESSIONS: "WEEKLY REPORT",
    TrackerMode.PLAYS: "PLAY REPORT",
}


class ReportGenerator:
    """Renders ledger contents for the console and for report files."""

    def __init__(self, ledger: Ledger, config: TrackerConfig = SESSION_CONFIG):
        self.ledger = ledger
        self.config = config

    def _is_session_ledger(self) -> bool:
        return self.config.mode == TrackerMode.SESSIONS

    def header_row(self) -> str:
        if self._is_session_ledger():
            return (
                f"{'Date':<12}{'Play':<18}"
                f"{'Att':>10}{'Comp':>10}{'Minutes':>12}{'Comp%':>12}{'Diff':>12}"
            )
        return f"{'Play':<18}{'Att':>10}{'Comp':>10}{'Comp%':>12}"

    def record_row(self, record) -> str:
        pct = self.ledger.completion_percentage(record)
        if isinstance(record, Session):
            return (
                f"{record.date:<12}{record.play_name:<18}"
                f"{record.attempts:>10}{record.completions:>10}"
                f"{record.minutes:>12.1f}{pct:>12.1f}{record.difficulty.label:>12}"
            )
        return (
            f"{record.play_name:<18}"
            f"{record.attempts:>10}{record.completions:>10}{pct:>12.1f}"
        )

    def totals_row(self) -> str:
        return (
            f"TOTAL Attempts: {self.ledger.total_attempts()}"
            f" | TOTAL Completions: {self.ledger.total_completions()}"
            f" | OVERALL Completion %: {self.ledger.overall_completion_percentage():.1f}%"
        )

    def table_lines(self) -> List[str]:
        """Header, separator, records, separator and totals."""
        lines = [self.header_row(), SEPARATOR]
        lines.extend(self.record_row(r) for r in self.ledger)
        lines.extend([SEPARATOR, self.totals_row()])
        return lines

    def to_console_text(self) -> str:
        title = f"{'=' * 18} {CONSOLE_TITLES[self.config.mode]} {'=' * 18}"
        return "\n".join(["", title] + self.table_lines()) + "\n"

    def to_file_text(self) -> str:
        lines = [FILE_TITLE, "=" * len(FILE_TITLE), ""]
        if self.ledger.is_empty:
            lines.append(f"No {self.config.record_label}s recorded.")
        else:
            lines.extend(self.table_lines())
        return "\n".join(lines) + "\n"

    def render(self, target: TextIO, for_file: bool = False) -> None:
        """Write the report to any text stream."""
        target.write(self.to_file_text() if for_file else self.to_console_text())

    def save(self, path: Union[str, Path]) -> Path:
        """
        Write the report file in a single write-then-close.

        Raises OSError if the file cannot be opened or written.
        """
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            self.render(f, for_file=True)
        logger.info(f"Report with {self.ledger.count()} {self.config.record_label}(s) saved to {path}")
        return path


def generate_report(ledger: Ledger, config: TrackerConfig = SESSION_CONFIG, format: str = "console") -> str:
    """
    Generate a report in the specified format.

    Args:
        ledger: The ledger to render
        config: Tracker configuration (labels)
        format: "console" or "file"

    Returns:
        The formatted report string
    """
    generator = ReportGenerator(ledger, config)

    if format == "file":
        return generator.to_file_text()
    else:
        return generator.to_console_text()
