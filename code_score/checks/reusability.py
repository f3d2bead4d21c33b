"""
Duplication and magic number check.
Language-agnostic: works on trimmed lines and numeric literals.
"""

import re

from ..config import (
    CATEGORY_MAX,
    HIGH_DUPLICATION_PENALTY,
    HIGH_DUPLICATION_RATIO,
    MAGIC_NUMBER_LIMIT,
    MAGIC_NUMBER_PENALTY,
    SOME_DUPLICATION_PENALTY,
    SOME_DUPLICATION_RATIO,
)
from ..models import CheckResult


# 2-9 or any multi-digit literal not touching identifier or quote characters
MAGIC_NUMBER = re.compile(r'[^A-Za-z0-9_\'"]([2-9]|[1-9][0-9]+)[^A-Za-z0-9_\'"]')


def duplication_ratio(code: str) -> float:
    """1 - distinct/total over trimmed lines, blank lines included."""
    lines = [l.strip() for l in code.split('\n')]
    return 1 - len(set(lines)) / len(lines)


def count_magic_numbers(code: str) -> int:
    return len(MAGIC_NUMBER.findall(code))


def check_reusability(code: str, language: str = None) -> CheckResult:
    """Check for repeated lines and unnamed numeric constants."""
    recommendations = []
    score = CATEGORY_MAX['reusability']

    ratio = duplication_ratio(code)
    if ratio > HIGH_DUPLICATION_RATIO:
        recommendations.append(
            "High code duplication detected, extract repeated logic into functions"
        )
        score -= HIGH_DUPLICATION_PENALTY
    elif ratio > SOME_DUPLICATION_RATIO:
        recommendations.append("Some code duplication detected, consider refactoring")
        score -= SOME_DUPLICATION_PENALTY

    if count_magic_numbers(code) > MAGIC_NUMBER_LIMIT:
        recommendations.append("Replace magic numbers with named constants")
        score -= MAGIC_NUMBER_PENALTY

    return CheckResult(max(0, score), recommendations)
