"""
Code Score - heuristic quality scoring for a single source file.

Scores JavaScript/JSX and Python files out of 100 across six categories:
- Naming conventions (10)
- Modularity: function length, nesting (20)
- Comments and documentation (20)
- Formatting: indentation consistency (15)
- Reusability: duplication, magic numbers (15)
- Best practices (20)

Usage:
    python -m code_score PATH [--report] [--json] [--verbose]
"""

__version__ = '1.0.0'

from .analyzer import CodeAnalyzer, analyze, analyze_javascript, analyze_python
from .models import AnalysisResult, Breakdown, CheckResult
from .scanner import detect_language


__all__ = [
    'AnalysisResult',
    'Breakdown',
    'CheckResult',
    'CodeAnalyzer',
    'analyze',
    'analyze_javascript',
    'analyze_python',
    'detect_language',
]
