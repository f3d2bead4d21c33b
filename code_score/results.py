"""
Result assembly: base skeleton, overall score, recommendation limit.
"""

import math
from typing import Iterable, Sequence, Tuple

from .config import CATEGORY_MAX, DEFAULT_MAX_RECOMMENDATIONS, NO_ISSUES_MESSAGE
from .models import AnalysisResult, Breakdown


def create_base_result(file_name: str, file_content: str, file_type: str) -> AnalysisResult:
    """Result with file metadata and a zeroed breakdown."""
    return AnalysisResult(
        overall_score=0,
        breakdown=Breakdown(),
        recommendations=(),
        file_name=file_name,
        file_size=len(file_content.encode('utf-8')),
        file_content=file_content,
        file_type=file_type,
    )


def calculate_overall_score(breakdown: Breakdown) -> int:
    """Percentage of the maximum total, rounded half-up."""
    max_total = sum(CATEGORY_MAX.values())
    return int(math.floor(breakdown.total() / max_total * 100 + 0.5))


def limit_recommendations(
    recommendations: Iterable[str],
    count: int = DEFAULT_MAX_RECOMMENDATIONS,
    no_issues_message: str = NO_ISSUES_MESSAGE,
) -> Tuple[str, ...]:
    """Keep the first `count` recommendations in production order.

    A file with nothing to recommend still gets one entry, the no-issues message.
    """
    limited = tuple(recommendations)[:count]
    return limited or (no_issues_message,)


def clamp_score(category: str, score: int) -> int:
    return min(CATEGORY_MAX[category], max(0, score))


def combine_recommendations(groups: Sequence[Sequence[str]]) -> list:
    """Flatten per-category recommendation lists, preserving order."""
    return [rec for group in groups for rec in group]
