"""Canonical data models for the play tracker."""

from enum import Enum
from typing import Union
from pydantic import BaseModel, Field, model_validator


# ============================================================================
# Enums
# ============================================================================

class Difficulty(str, Enum):
    EASY = "EASY"
    INTERMEDIATE = "INTERMEDIATE"
    HARD = "HARD"

    @classmethod
    def from_choice(cls, choice: int) -> "Difficulty":
        """Map a menu choice (1=Easy, 2=Intermediate, 3=Hard) to a level."""
        choices = {1: cls.EASY, 2: cls.INTERMEDIATE, 3: cls.HARD}
        if choice not in choices:
            raise ValueError(f"Difficulty choice must be 1, 2 or 3, got {choice}")
        return choices[choice]

    @property
    def label(self) -> str:
        """Short label used in report tables."""
        return difficulty_label(self)


_DIFFICULTY_LABELS = {
    Difficulty.EASY: "Easy",
    Difficulty.INTERMEDIATE: "Intermed",
    Difficulty.HARD: "Hard",
}


def difficulty_label(difficulty: Difficulty) -> str:
    """Table label for a difficulty; every member must be mapped."""
    assert difficulty in _DIFFICULTY_LABELS, f"Unmapped difficulty {difficulty!r}"
    return _DIFFICULTY_LABELS[difficulty]


class TrackerMode(str, Enum):
    SESSIONS = "sessions"
    PLAYS = "plays"


# ============================================================================
# Configuration
# ============================================================================

class TrackerConfig(BaseModel):
    """Ledger capacity, input bounds and report output."""
    mode: TrackerMode = TrackerMode.SESSIONS
    capacity: int = Field(default=7, ge=1, le=100)
    min_attempts: int = Field(default=0, ge=0, le=100)
    max_attempts: int = Field(default=100, ge=1, le=100)
    record_label: str = "session"
    report_filename: str = "report.txt"

    @model_validator(mode='before')
    @classmethod
    def apply_mode_defaults(cls, data):
        """Plays mode defaults to 10 plays with at least one attempt each."""
        if isinstance(data, dict) and data.get("mode") in (TrackerMode.PLAYS, TrackerMode.PLAYS.value):
            data = dict(data)
            data.setdefault("capacity", 10)
            data.setdefault("min_attempts", 1)
            data.setdefault("record_label", "play")
        return data

    @model_validator(mode='after')
    def validate_attempt_bounds(self):
        """Ensure the attempts range is not empty and fits the record models."""
        if self.min_attempts > self.max_attempts:
            raise ValueError(
                f"min_attempts ({self.min_attempts}) exceeds max_attempts ({self.max_attempts})"
            )
        # PlayStat requires at least one attempt
        if self.mode == TrackerMode.PLAYS and self.min_attempts < 1:
            raise ValueError(f"Plays mode needs min_attempts >= 1, got {self.min_attempts}")
        return self


SESSION_CONFIG = TrackerConfig(
    mode=TrackerMode.SESSIONS,
    capacity=7,
    min_attempts=0,
    max_attempts=100,
    record_label="session",
)

PLAY_STAT_CONFIG = TrackerConfig(
    mode=TrackerMode.PLAYS,
    capacity=10,
    min_attempts=1,
    max_attempts=100,
    record_label="play",
)


def config_for_mode(mode: TrackerMode) -> TrackerConfig:
    """Preset configuration for a tracker mode."""
    if mode == TrackerMode.PLAYS:
        return PLAY_STAT_CONFIG
    return SESSION_CONFIG


# ============================================================================
# Records
# ============================================================================

class Session(BaseModel):
    """One practice session running a single play."""
    date: str = Field(min_length=1)
    play_name: str = Field(min_length=1)
    attempts: int = Field(ge=0, le=100)
    completions: int = Field(ge=0, le=100)
    minutes: float = Field(default=0.0, ge=0.0)
    difficulty: Difficulty = Difficulty.EASY

    @model_validator(mode='after')
    def validate_completions(self):
        """Completions can never exceed attempts."""
        if self.completions > self.attempts:
            raise ValueError(
                f"Completions ({self.completions}) cannot exceed attempts ({self.attempts})"
            )
        return self


class PlayStat(BaseModel):
    """Attempt/completion counts for one play call."""
    play_name: str = Field(min_length=1)
    attempts: int = Field(ge=1, le=100)
    completions: int = Field(ge=0, le=100)

    @model_validator(mode='after')
    def validate_completions(self):
        """Completions can never exceed attempts."""
        if self.completions > self.attempts:
            raise ValueError(
                f"Completions ({self.completions}) cannot exceed attempts ({self.attempts})"
            )
        return self


Record = Union[Session, PlayStat]
