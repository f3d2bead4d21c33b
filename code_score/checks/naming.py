"""
Naming convention check.
camelCase for JavaScript, snake_case for Python. ALL_CAPS constants pass in both.
"""

import re
from typing import List

from ..config import CATEGORY_MAX, NAMING_PENALTY
from ..models import CheckResult


# $-prefixed names such as $el are left alone
JS_VARIABLE = re.compile(r'\b(?:const|let|var)\s+([A-Za-z_][A-Za-z0-9_]*)\b')
JS_FUNCTION = re.compile(r'\bfunction\s+([A-Za-z_][A-Za-z0-9_]*)\b')
PY_FUNCTION = re.compile(r'\bdef\s+([A-Za-z_][A-Za-z0-9_]*)\b')
# Simple assignment target; excludes ==, and the left side of augmented ops
PY_ASSIGNMENT = re.compile(r'\b([A-Za-z_][A-Za-z0-9_]*)\s*=(?!=)')

CAMEL_CASE = re.compile(r'^[a-z][A-Za-z0-9]*$')
SNAKE_CASE = re.compile(r'^[a-z_][a-z0-9_]*$')
CONSTANT_CASE = re.compile(r'^[A-Z_][A-Z0-9_]*$')


def to_snake_case(name: str) -> str:
    """calculateTotal -> calculate_total"""
    snake = re.sub(r'([A-Z])', r'_\1', name).lower()
    snake = re.sub(r'_+', '_', snake)
    return snake.lstrip('_') or name.lower()


def is_camel_case(name: str) -> bool:
    return bool(CAMEL_CASE.match(name) or CONSTANT_CASE.match(name))


def is_snake_case(name: str) -> bool:
    return bool(SNAKE_CASE.match(name) or CONSTANT_CASE.match(name))


def _check_javascript(code: str) -> List[str]:
    recommendations = []
    for match in JS_VARIABLE.finditer(code):
        name = match.group(1)
        if not is_camel_case(name):
            recommendations.append(f"Use camelCase for variable '{name}'")
    for match in JS_FUNCTION.finditer(code):
        name = match.group(1)
        if not is_camel_case(name):
            recommendations.append(f"Use camelCase for function '{name}'")
    return recommendations


def _check_python(code: str) -> List[str]:
    recommendations = []
    for match in PY_FUNCTION.finditer(code):
        name = match.group(1)
        if not is_snake_case(name):
            recommendations.append(
                f"Use snake_case for function names in Python "
                f"(should be '{to_snake_case(name)}')"
            )
    for match in PY_ASSIGNMENT.finditer(code):
        name = match.group(1)
        if not is_snake_case(name):
            recommendations.append(
                f"Use snake_case for variable names in Python "
                f"('{name}' should be '{to_snake_case(name)}')"
            )
    return recommendations


NAMING_RULES = {
    'javascript': _check_javascript,
    'python': _check_python,
}


def check_naming(code: str, language: str) -> CheckResult:
    """Deduct points for every identifier that breaks the language convention."""
    recommendations = NAMING_RULES[language](code)
    score = CATEGORY_MAX['naming'] - NAMING_PENALTY * len(recommendations)
    return CheckResult(max(0, score), recommendations)
