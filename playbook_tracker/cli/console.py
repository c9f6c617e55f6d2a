"""Interactive menu loop for the play tracker."""

import sys
import logging
from typing import Callable, List, Optional, TextIO, Tuple

from ..core.models import (
    Session, PlayStat, Difficulty, TrackerConfig, TrackerMode, SESSION_CONFIG
)
from ..core.ledger import Ledger, create_session_ledger, create_play_ledger
from ..core.validation import (
    ValidationError, parse_int_in_range, parse_float_min, parse_non_empty
)
from ..stats.metrics import recommend_level, practice_tip, best_plays
from ..stats.report_generator import ReportGenerator

logger = logging.getLogger("playbook_tracker.console")

BANNER = [
    "=============================================",
    "      FLAG FOOTBALL PLAY TRACKER",
    "   Track sessions and completion percentage",
    "=============================================",
    "",
]


class Prompter:
    """Retry shell around the pure validators: re-prompts until input is valid."""

    def __init__(self, input_func: Callable[[str], str] = input, out: Optional[TextIO] = None):
        self.input_func = input_func
        self.out = out if out is not None else sys.stdout

    def say(self, message: str = "") -> None:
        print(message, file=self.out)

    def read(self, prompt: str) -> str:
        """Read one raw line. EOFError propagates to the menu loop."""
        return self.input_func(prompt)

    def _retry(self, prompt: str, parse: Callable[[str], object]):
        while True:
            text = self.read(prompt)
            try:
                return parse(text)
            except ValidationError as e:
                self.say(str(e))

    def get_non_empty_line(self, prompt: str) -> str:
        return self._retry(prompt, parse_non_empty)

    def get_int_in_range(self, prompt: str, min_val: int, max_val: int) -> int:
        return self._retry(prompt, lambda text: parse_int_in_range(text, min_val, max_val))

    def get_float_min(self, prompt: str, min_val: float) -> float:
        return self._retry(prompt, lambda text: parse_float_min(text, min_val))


class TrackerConsole:
    """Menu-driven tracker for practice sessions or per-play stats."""

    def __init__(
        self,
        config: TrackerConfig = SESSION_CONFIG,
        ledger: Optional[Ledger] = None,
        input_func: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
    ):
        self.config = config
        if ledger is None:
            if config.mode == TrackerMode.PLAYS:
                ledger = create_play_ledger(config)
            else:
                ledger = create_session_ledger(config)
        self.ledger = ledger
        self.prompter = Prompter(input_func, out)
        self.report = ReportGenerator(self.ledger, config)
        self.user_name = ""

    @property
    def is_session_mode(self) -> bool:
        return self.config.mode == TrackerMode.SESSIONS

    def say(self, message: str = "") -> None:
        self.prompter.say(message)

    # ------------------------------------------------------------------
    # Menu
    # ------------------------------------------------------------------

    def menu_items(self) -> List[Tuple[str, Optional[Callable[[], None]]]]:
        """Menu labels and handlers. The final entry (handler None) quits."""
        if self.is_session_mode:
            return [
                ("Add session", self.add_record),
                ("View weekly report", self.view_report),
                ("Recommend difficulty level", self.recommend),
                ("Save report to file", self.save_report),
                ("Quit", None),
            ]
        return [
            ("Add play stats", self.add_record),
            ("View report", self.view_report),
            ("Show best plays", self.show_best_plays),
            ("Save report to file", self.save_report),
            ("Quit", None),
        ]

    def show_banner(self) -> None:
        for line in BANNER:
            self.say(line)

    def show_menu(self) -> None:
        self.say("\nMenu:")
        for i, (label, _) in enumerate(self.menu_items(), 1):
            self.say(f"{i}) {label}")

    def run(self) -> None:
        """Run until the user selects Quit (or input ends)."""
        self.show_banner()
        try:
            self.user_name = self.prompter.read("Enter your name: ").strip()
        except EOFError:
            self.quit()
            return

        items = self.menu_items()
        while True:
            self.show_menu()
            try:
                choice = self.prompter.get_int_in_range(
                    f"Choose an option (1-{len(items)}): ", 1, len(items)
                )
            except EOFError:
                self.say()
                self.quit()
                return

            label, handler = items[choice - 1]
            if handler is None:
                self.quit()
                return

            logger.debug(f"Menu choice {choice}: {label}")
            try:
                handler()
            except EOFError:
                self.say()
                self.quit()
                return

    def quit(self) -> None:
        name = self.user_name or "coach"
        self.say(f"Goodbye, {name}. Thanks for using the tracker.")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _no_data_message(self) -> str:
        label = self.config.record_label
        return f"No {label}s yet. Add a {label} first."

    def add_record(self) -> None:
        """Prompt for one record and append it, unless the ledger is full."""
        label = self.config.record_label
        if self.ledger.is_full:
            self.say(f"You already have {self.ledger.capacity} {label}s. View or save the report.")
            return

        self.say(f"\n--- Add a {label.title()} ({self.ledger.count() + 1}/{self.ledger.capacity}) ---")
        if self.is_session_mode:
            record = self._prompt_session()
        else:
            record = self._prompt_play_stat()

        self.ledger.add(record)
        pct = self.ledger.completion_percentage(record)
        self.say(f"{label.title()} added. Completion % = {pct:.1f}%")

    def _prompt_attempts_and_completions(self) -> Tuple[int, int]:
        lo, hi = self.config.min_attempts, self.config.max_attempts
        attempts = self.prompter.get_int_in_range(f"Enter pass attempts ({lo} to {hi}): ", lo, hi)
        completions = self.prompter.get_int_in_range(
            "Enter completions (0 to attempts): ", 0, attempts
        )
        return attempts, completions

    def _prompt_session(self) -> Session:
        date = self.prompter.get_non_empty_line("Enter date (example 2026-01-18): ")
        play_name = self.prompter.get_non_empty_line("Enter play name (example Slant Right): ")
        attempts, completions = self._prompt_attempts_and_completions()
        minutes = self.prompter.get_float_min("Enter minutes spent running the play (>= 0): ", 0.0)
        choice = self.prompter.get_int_in_range(
            "Difficulty (1=Easy, 2=Intermediate, 3=Hard): ", 1, 3
        )
        return Session(
            date=date,
            play_name=play_name,
            attempts=attempts,
            completions=completions,
            minutes=minutes,
            difficulty=Difficulty.from_choice(choice),
        )

    def _prompt_play_stat(self) -> PlayStat:
        play_name = self.prompter.get_non_empty_line("Enter play name (example Slant Right): ")
        attempts, completions = self._prompt_attempts_and_completions()
        return PlayStat(play_name=play_name, attempts=attempts, completions=completions)

    def view_report(self) -> None:
        if self.ledger.is_empty:
            self.say(self._no_data_message())
            return
        self.report.render(self.prompter.out)

    def recommend(self) -> None:
        """Difficulty recommendation plus a practice tip."""
        if self.ledger.is_empty:
            self.say(self._no_data_message())
            return

        overall_pct = self.ledger.overall_completion_percentage()
        attempts = self.ledger.total_attempts()
        level = recommend_level(overall_pct, attempts)
        self.say(f"Recommendation: {level.value} ({level.reason})")
        self.say(f"Tip: {practice_tip(overall_pct, attempts)}")

    def show_best_plays(self) -> None:
        best = best_plays(self.ledger.list())
        if best is None:
            self.say(self._no_data_message())
            return

        self.say(
            f"Best play vs man coverage: {best.vs_man.play_name} "
            f"({best.vs_man_pct:.1f}% completions)"
        )
        self.say(
            f"Best play vs zone coverage: {best.vs_zone.play_name} "
            f"({best.vs_zone.completions} completions)"
        )

    def save_report(self) -> None:
        filename = self.config.report_filename
        try:
            self.report.save(filename)
        except OSError as e:
            logger.error(f"Failed to write report to {filename}: {e}")
            self.say("Error: Could not open file for writing.")
            return

        if self.ledger.is_empty:
            self.say(f"Saved (empty) report to {filename}")
        else:
            self.say(f"Report saved to {filename}")
