"""
Function length and nesting check.
Long functions and stacked conditionals/loops cost modularity points.
"""

import re
from typing import List, Tuple

from ..config import (
    CATEGORY_MAX,
    GROWING_FUNCTION_LINES,
    GROWING_FUNCTION_PENALTY,
    LONG_FUNCTION_LINES,
    LONG_FUNCTION_PENALTY,
    NESTED_CONSTRUCT_LIMIT,
    NESTED_CONSTRUCT_PENALTY,
)
from ..models import CheckResult


# Function with a body of at most two brace levels
JS_FUNCTION_BLOCK = re.compile(
    r'function\s+([A-Za-z_$][A-Za-z0-9_$]*)\s*\([^)]*\)\s*\{([^{}]*(?:\{[^{}]*\}[^{}]*)*)\}'
)
PY_FUNCTION_HEADER = re.compile(
    r'^([ \t]*)(?:async\s+)?def\s+([A-Za-z_][A-Za-z0-9_]*)\s*\(',
    re.MULTILINE
)

NESTED_PATTERNS = {
    'javascript': (
        re.compile(r'if\s*\([^)]*\)\s*\{[^{}]*if\s*\('),
        re.compile(r'(?:for|while)\s*\([^)]*\)\s*\{[^{}]*(?:for|while)\s*\('),
    ),
    # Block header followed by a more deeply indented header of the same kind
    'python': (
        re.compile(r'^([ \t]*)(?:if|elif)\b[^\n]*:[ \t]*\n(?:[ \t]*\n)*\1[ \t]+if\b', re.MULTILINE),
        re.compile(
            r'^([ \t]*)(?:for|while)\b[^\n]*:[ \t]*\n(?:[ \t]*\n)*\1[ \t]+(?:for|while)\b',
            re.MULTILINE
        ),
    ),
}

NESTING_MESSAGE = "Reduce nested conditionals and loops for better readability"


def _count_non_blank(text: str) -> int:
    return len([l for l in text.split('\n') if l.strip()])


def find_js_functions(code: str) -> List[Tuple[str, int]]:
    """Return (name, body line count) for each matched JavaScript function."""
    return [
        (match.group(1), _count_non_blank(match.group(2)))
        for match in JS_FUNCTION_BLOCK.finditer(code)
    ]


def find_py_functions(code: str) -> List[Tuple[str, int]]:
    """Return (name, body line count) for each def, delimited by indentation."""
    lines = code.split('\n')
    functions = []

    for match in PY_FUNCTION_HEADER.finditer(code):
        name = match.group(2)
        base_indent = len(match.group(1))
        start = code.count('\n', 0, match.start())

        # Body starts after the line that closes the signature's parentheses
        idx = start
        depth = 0
        while idx < len(lines):
            depth += lines[idx].count('(') - lines[idx].count(')')
            idx += 1
            if depth <= 0:
                break

        line_count = 0
        while idx < len(lines):
            line = lines[idx]
            idx += 1
            if not line.strip():
                continue
            if len(line) - len(line.lstrip()) <= base_indent:
                break
            line_count += 1

        functions.append((name, line_count))

    return functions


FUNCTION_FINDERS = {
    'javascript': find_js_functions,
    'python': find_py_functions,
}


def count_nested_constructs(code: str, language: str) -> int:
    return sum(len(p.findall(code)) for p in NESTED_PATTERNS[language])


def check_modularity(code: str, language: str) -> CheckResult:
    """Check function lengths and nesting."""
    recommendations = []
    score = CATEGORY_MAX['modularity']

    for name, lines in FUNCTION_FINDERS[language](code):
        if lines > LONG_FUNCTION_LINES:
            recommendations.append(
                f"Function '{name}' is too long ({lines} lines), consider refactoring"
            )
            score -= LONG_FUNCTION_PENALTY
        elif lines > GROWING_FUNCTION_LINES:
            recommendations.append(
                f"Function '{name}' is getting long, consider breaking it down"
            )
            score -= GROWING_FUNCTION_PENALTY

    if count_nested_constructs(code, language) > NESTED_CONSTRUCT_LIMIT:
        recommendations.append(NESTING_MESSAGE)
        score -= NESTED_CONSTRUCT_PENALTY

    return CheckResult(max(0, score), recommendations)
