"""
Comment density and documentation check.
Scores the ratio of comment lines, then penalizes undocumented functions.
"""

import re
from typing import List

from ..config import COMMENT_BANDS, COMMENT_FULL_SCORE, MISSING_DOCS_PENALTY
from ..models import CheckResult


COMMENT_MARKERS = {
    'javascript': re.compile(r'//|/\*|\*/'),
    'python': re.compile(r'#|"""|\'\'\''),
}

FUNCTION_DECLARATIONS = {
    'javascript': re.compile(r'\bfunction\s+[A-Za-z_$][A-Za-z0-9_$]*'),
    'python': re.compile(r'\bdef\s+[A-Za-z_][A-Za-z0-9_]*'),
}

# JSDoc block directly above a function declaration
JS_DOC_COMMENT = re.compile(
    r'/\*\*(?:[^*]|\*(?!/))*\*/\s*(?:export\s+)?(?:default\s+)?(?:async\s+)?function\b'
)
# Triple-quoted string as the first statement after a def line
PY_DOCSTRING = re.compile(
    r'\bdef\s+[A-Za-z_][A-Za-z0-9_]*\s*\([^)]*\)[^:\n]*:[ \t]*\n'
    r'(?:[ \t]*\n)*[ \t]+[rRuUbB]{0,2}(?:"""|\'\'\')'
)

DOC_COMMENT_PATTERNS = {
    'javascript': JS_DOC_COMMENT,
    'python': PY_DOCSTRING,
}

MISSING_DOCS_MESSAGES = {
    'javascript': "Add JSDoc comments for functions to document their purpose and parameters",
    'python': "Add a docstring to explain the purpose of the function",
}


def comment_ratio(code: str, language: str) -> float:
    """Comment lines divided by non-blank lines."""
    marker = COMMENT_MARKERS[language]
    lines = code.split('\n')
    non_blank = [l for l in lines if l.strip()]
    comment_lines = [l for l in lines if marker.search(l)]
    return len(comment_lines) / (len(non_blank) or 1)


def score_ratio(ratio: float) -> int:
    """Map a comment ratio onto its score band."""
    if ratio == 0:
        return 0
    for upper, score in COMMENT_BANDS:
        if ratio < upper:
            return score
    return COMMENT_FULL_SCORE


def count_doc_comments(code: str, language: str) -> int:
    return len(DOC_COMMENT_PATTERNS[language].findall(code))


def check_comments(code: str, language: str) -> CheckResult:
    """Check comment density and function documentation."""
    recommendations: List[str] = []

    ratio = comment_ratio(code, language)
    score = score_ratio(ratio)

    if ratio == 0:
        recommendations.append("Add comments to explain complex code sections")
    elif ratio < COMMENT_BANDS[0][0]:
        recommendations.append("Add more comments to improve code readability")

    has_functions = bool(FUNCTION_DECLARATIONS[language].search(code))
    if has_functions and count_doc_comments(code, language) == 0:
        recommendations.append(MISSING_DOCS_MESSAGES[language])
        score = max(0, score - MISSING_DOCS_PENALTY)

    return CheckResult(score, recommendations)
