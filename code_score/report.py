"""
Report generation for the code scorer.
Console and markdown output.
"""

from typing import Dict

from .config import CATEGORY_MAX
from .models import AnalysisResult


CATEGORY_LABELS: Dict[str, str] = {
    'naming': 'Naming',
    'modularity': 'Modularity',
    'comments': 'Comments',
    'formatting': 'Formatting',
    'reusability': 'Reusability',
    'best_practices': 'Best Practices',
}

PREVIEW_LINES = 40
BAR_WIDTH = 20


def format_file_size(size: int) -> str:
    """Human-readable size: 0 Bytes, 512 Bytes, 1.5 KB, 2 MB."""
    if size <= 0:
        return '0 Bytes'

    units = ['Bytes', 'KB', 'MB', 'GB']
    i = 0
    while size >= 1024 ** (i + 1) and i < len(units) - 1:
        i += 1
    value = round(size / 1024 ** i, 1)
    if value == int(value):
        value = int(value)
    return f"{value} {units[i]}"


def score_icon(score: int) -> str:
    if score >= 80:
        return "🟢"
    if score >= 50:
        return "🟡"
    return "🔴"


def score_bar(value: int, maximum: int, width: int = BAR_WIDTH) -> str:
    filled = round(width * value / maximum) if maximum else 0
    return '█' * filled + '░' * (width - filled)


def generate_markdown_report(result: AnalysisResult, include_code: bool = True) -> str:
    """Generate markdown report."""
    lines = [
        "# Code Quality Report",
        "",
        f"**File:** `{result.file_name}` ({result.file_type}, {format_file_size(result.file_size)})",
        f"**Overall score:** {score_icon(result.overall_score)} {result.overall_score}/100",
        "",
        "## Breakdown",
        "",
        "| Category | Score | Max |",
        "|----------|-------|-----|",
    ]

    breakdown = result.breakdown.as_dict()
    for category, maximum in CATEGORY_MAX.items():
        lines.append(f"| {CATEGORY_LABELS[category]} | {breakdown[category]} | {maximum} |")
    lines.append("")

    lines.append("## Recommendations")
    lines.append("")
    for i, rec in enumerate(result.recommendations, 1):
        lines.append(f"{i}. {rec}")
    lines.append("")

    if include_code:
        fence_lang = 'python' if result.file_type == 'py' else 'javascript'
        code_lines = result.file_content.split('\n')
        lines.append("## Code Preview")
        lines.append("")
        lines.append(f"```{fence_lang}")
        lines.extend(code_lines[:PREVIEW_LINES])
        lines.append("```")
        if len(code_lines) > PREVIEW_LINES:
            lines.append(f"... and {len(code_lines) - PREVIEW_LINES} more lines")
        lines.append("")

    return '\n'.join(lines)


def print_summary(result: AnalysisResult) -> None:
    """Print summary to console."""
    print(f"\n{score_icon(result.overall_score)} {result.file_name}: "
          f"{result.overall_score}/100 ({format_file_size(result.file_size)})\n")

    breakdown = result.breakdown.as_dict()
    for category, maximum in CATEGORY_MAX.items():
        value = breakdown[category]
        print(f"  {CATEGORY_LABELS[category]:<15} {score_bar(value, maximum)} {value:>2}/{maximum}")

    print("\n📋 Recommendations:")
    for rec in result.recommendations:
        print(f"  - {rec}")
