"""In-memory ledger holding the records of the current run."""

import logging
from typing import Callable, Generic, List, Optional, TypeVar

from .models import Session, PlayStat, TrackerConfig, SESSION_CONFIG, PLAY_STAT_CONFIG
from .validation import ValidationError, validate_completions

logger = logging.getLogger("playbook_tracker.ledger")

T = TypeVar('T', Session, PlayStat)


class LedgerFullError(Exception):
    """Raised when adding to a ledger that has reached its capacity."""
    pass


def completion_percentage(record) -> float:
    """Completions / attempts as a percentage, 0 when there were no attempts."""
    if record.attempts == 0:
        return 0.0
    return (record.completions / record.attempts) * 100.0


class Ledger(Generic[T]):
    """Fixed-capacity, insertion-ordered collection of records."""

    def __init__(self, name: str, capacity: int, validator: Optional[Callable[[T], None]] = None):
        if capacity < 1:
            raise ValueError(f"{name} ledger capacity must be positive, got {capacity}")
        self.name = name
        self.capacity = capacity
        self.validator = validator
        self._records: List[T] = []

    def add(self, record: T) -> T:
        """Append a record. Raises LedgerFullError when at capacity."""
        if self.is_full:
            raise LedgerFullError(f"{self.name} ledger is full ({self.capacity} records)")

        if self.validator:
            self.validator(record)

        self._records.append(record)
        logger.info(f"Added {self.name} '{record.play_name}' ({self.count()}/{self.capacity})")
        return record

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._records

    def list(self) -> List[T]:
        """All records in insertion order."""
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    # ------------------------------------------------------------------
    # Derived totals
    # ------------------------------------------------------------------

    def total_attempts(self) -> int:
        return sum(r.attempts for r in self._records)

    def total_completions(self) -> int:
        return sum(r.completions for r in self._records)

    def completion_percentage(self, record: T) -> float:
        return completion_percentage(record)

    def overall_completion_percentage(self) -> float:
        """Ratio of total completions to total attempts, 0 when empty."""
        attempts = self.total_attempts()
        if attempts == 0:
            return 0.0
        return (self.total_completions() / attempts) * 100.0


def make_record_validator(config: TrackerConfig) -> Callable:
    """Build a validator enforcing the configured attempt bounds."""

    def validate_record(record) -> None:
        if record.attempts < config.min_attempts or record.attempts > config.max_attempts:
            raise ValidationError(
                f"Attempts ({record.attempts}) must be between "
                f"{config.min_attempts} and {config.max_attempts}"
            )
        validate_completions(record.completions, record.attempts)

    return validate_record


def create_session_ledger(config: TrackerConfig = SESSION_CONFIG) -> Ledger[Session]:
    """Ledger for practice sessions."""
    return Ledger[Session](config.record_label, config.capacity, make_record_validator(config))


def create_play_ledger(config: TrackerConfig = PLAY_STAT_CONFIG) -> Ledger[PlayStat]:
    """Ledger for per-play stats."""
    return Ledger[PlayStat](config.record_label, config.capacity, make_record_validator(config))
