"""
Language best-practice check.
JavaScript: var, console.log, unguarded async code, modern syntax.
Python: shadowed built-ins, exception handling, list comprehensions.
"""

import re
from typing import List

from ..config import (
    CATEGORY_MAX,
    CONSOLE_LOG_LIMIT,
    PY_FOR_LOOP_LIMIT,
    PY_SHORT_FILE_CHARS,
)
from ..models import CheckResult


JS_VAR = re.compile(r'\bvar\b')
JS_CONSOLE_LOG = re.compile(r'console\.log')
JS_TRY = re.compile(r'\btry\s*\{')
JS_ASYNC_LIKE = re.compile(r'async\s+function|function\s*\(\s*\)\s*\{|=>\s*\{')
JS_MODERN = re.compile(r'=>|\.\.\.|\bconst\b')

SHADOWED_BUILTINS = ('sum', 'id', 'type', 'list')
PY_BUILTIN_ASSIGNMENT = re.compile(
    r'(?<![\w.])(' + '|'.join(SHADOWED_BUILTINS) + r')\s*=(?!=)'
)
PY_TRY = re.compile(r'\btry\s*:')
PY_FOR = re.compile(r'\bfor\b')
PY_LIST_COMPREHENSION = re.compile(r'\[\s*[A-Za-z0-9_]+\s+for\s+')


def _check_javascript(code: str) -> tuple:
    recommendations: List[str] = []
    penalty = 0

    if JS_VAR.search(code):
        recommendations.append("Use 'let' and 'const' instead of 'var' for better scoping")
        penalty += 3

    if len(JS_CONSOLE_LOG.findall(code)) > CONSOLE_LOG_LIMIT:
        recommendations.append("Remove or replace console.log statements in production code")
        penalty += 2

    if JS_ASYNC_LIKE.search(code) and not JS_TRY.search(code):
        recommendations.append("Add proper error handling for asynchronous operations")
        penalty += 3

    if not JS_MODERN.search(code):
        recommendations.append("Consider using modern JavaScript features for cleaner code")
        penalty += 2

    return penalty, recommendations


def _check_python(code: str) -> tuple:
    recommendations: List[str] = []
    penalty = 0

    shadowed = sorted(set(PY_BUILTIN_ASSIGNMENT.findall(code)))
    if shadowed:
        names = ', '.join(f"'{name}'" for name in shadowed)
        recommendations.append(f"Avoid using built-in names as variables ({names})")
        penalty += 3

    if not PY_TRY.search(code) and len(code) > PY_SHORT_FILE_CHARS:
        recommendations.append("Add exception handling with try/except for robust code")
        penalty += 2

    loops = len(PY_FOR.findall(code))
    if loops > PY_FOR_LOOP_LIMIT and not PY_LIST_COMPREHENSION.search(code):
        recommendations.append("Consider using list comprehensions for more readable code")
        penalty += 2

    return penalty, recommendations


PRACTICE_RULES = {
    'javascript': _check_javascript,
    'python': _check_python,
}


def check_best_practices(code: str, language: str) -> CheckResult:
    """Deduct points for each language-specific anti-pattern found."""
    penalty, recommendations = PRACTICE_RULES[language](code)
    return CheckResult(max(0, CATEGORY_MAX['best_practices'] - penalty), recommendations)
