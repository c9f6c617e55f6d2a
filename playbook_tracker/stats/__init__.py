"""Stats module for recommendations and reporting."""

from .metrics import recommend_level, practice_tip, best_plays, Recommendation, BestPlays
from .report_generator import ReportGenerator, generate_report

__all__ = [
    "recommend_level", "practice_tip", "best_plays", "Recommendation", "BestPlays",
    "ReportGenerator", "generate_report",
]
