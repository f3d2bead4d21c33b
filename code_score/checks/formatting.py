"""
Indentation consistency check.
Every indented line must use a multiple of the file's first indent width.
"""

from ..config import INDENT_CONSISTENT_SCORE, INDENT_INCONSISTENT_SCORE
from ..models import CheckResult


INCONSISTENT_INDENT_MESSAGE = "Use consistent indentation throughout your code"


def leading_whitespace(line: str) -> int:
    """Count leading whitespace characters."""
    return len(line) - len(line.lstrip())


def check_formatting(code: str, language: str = None) -> CheckResult:
    """Check that indentation widths share one unit."""
    indent_size = 0
    inconsistent = False

    for line in code.split('\n'):
        if not line.strip():
            continue

        indent = leading_whitespace(line)
        if indent == 0:
            continue

        # First indented line sets the unit
        if indent_size == 0:
            indent_size = indent
            continue

        if indent % indent_size != 0:
            inconsistent = True
            break

    if inconsistent:
        return CheckResult(INDENT_INCONSISTENT_SCORE, [INCONSISTENT_INDENT_MESSAGE])
    return CheckResult(INDENT_CONSISTENT_SCORE)
