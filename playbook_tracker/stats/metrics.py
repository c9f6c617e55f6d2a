"""Recommendations and best-play analysis."""

import numpy as np
from typing import Optional, Sequence
from dataclasses import dataclass
from enum import Enum

from ..core.models import Difficulty, PlayStat
from ..core.ledger import completion_percentage


class Recommendation(str, Enum):
    EASY = "EASY"
    INTERMEDIATE = "INTERMEDIATE"
    HARD = "HARD"

    @property
    def difficulty(self) -> Difficulty:
        return Difficulty(self.value)

    @property
    def reason(self) -> str:
        return _RECOMMENDATION_REASONS[self]


_RECOMMENDATION_REASONS = {
    Recommendation.HARD: "You are consistent and have enough reps.",
    Recommendation.INTERMEDIATE: "Good progress. Keep practicing.",
    Recommendation.EASY: "Focus on fundamentals and reps.",
}

SHORT_ROUTES_TIP = "Slow down and run shorter routes first (slants, quick outs)."
TIMING_TIP = "Work timing with the receiver (same steps every rep)."
PRESSURE_TIP = "Add defensive pressure drills to simulate game speed."


def recommend_level(overall_pct: float, total_attempts: int) -> Recommendation:
    """
    Pick a practice difficulty from overall completion % and volume.

    >=70% over at least 20 attempts -> HARD
    >=50% over at least 10 attempts -> INTERMEDIATE
    otherwise                       -> EASY
    """
    if overall_pct >= 70.0 and total_attempts >= 20:
        return Recommendation.HARD
    elif overall_pct >= 50.0 and total_attempts >= 10:
        return Recommendation.INTERMEDIATE
    else:
        return Recommendation.EASY


def practice_tip(overall_pct: float, total_attempts: int) -> str:
    """Practice tip, chosen independently of the difficulty recommendation."""
    if overall_pct < 40.0 and total_attempts >= 10:
        return SHORT_ROUTES_TIP
    elif 40.0 <= overall_pct < 60.0:
        return TIMING_TIP
    else:
        return PRESSURE_TIP


@dataclass
class BestPlays:
    """Best play against man (highest completion %) and zone (most completions)."""
    vs_man_index: int
    vs_man: PlayStat
    vs_man_pct: float
    vs_zone_index: int
    vs_zone: PlayStat


def best_plays(records: Sequence[PlayStat]) -> Optional[BestPlays]:
    """
    Find the best plays vs man and vs zone coverage.

    Ties go to the earliest record: argmax returns the first maximum, which is
    the same as a single scan that only replaces on a strictly greater value.
    Returns None for an empty sequence.
    """
    if not records:
        return None

    pcts = np.array([completion_percentage(r) for r in records], dtype=float)
    comps = np.array([r.completions for r in records], dtype=int)

    man_idx = int(np.argmax(pcts))
    zone_idx = int(np.argmax(comps))

    return BestPlays(
        vs_man_index=man_idx,
        vs_man=records[man_idx],
        vs_man_pct=float(pcts[man_idx]),
        vs_zone_index=zone_idx,
        vs_zone=records[zone_idx],
    )