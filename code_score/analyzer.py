"""
Language dispatcher.
Runs every category checker against one source text and assembles the result.
"""

from dataclasses import replace
from pathlib import Path
from typing import Callable

from .checks import CHECKS
from .config import DEFAULT_SETTINGS, EXTENSION_LANGUAGES, Settings
from .exceptions import UnsupportedLanguageError
from .models import AnalysisResult, Breakdown
from .results import (
    calculate_overall_score,
    clamp_score,
    combine_recommendations,
    create_base_result,
    limit_recommendations,
)
from .scanner import detect_language, load_source


LANGUAGES = frozenset(language for language, _ in EXTENSION_LANGUAGES.values())


def _file_type_for(file_name: str, language: str) -> str:
    if language == 'python':
        return 'py'
    return 'jsx' if file_name.lower().endswith('.jsx') else 'js'


def analyze(
    code: str,
    file_name: str,
    language: str,
    settings: Settings = DEFAULT_SETTINGS,
    log: Callable[[str], None] = lambda x: None,
) -> AnalysisResult:
    """Score one source text. Deterministic for identical input."""
    if language not in LANGUAGES:
        raise UnsupportedLanguageError(language)

    result = create_base_result(file_name, code, _file_type_for(file_name, language))

    scores = {}
    groups = []
    for category, checker in CHECKS:
        check = checker(code, language)
        scores[category] = clamp_score(category, check.score)
        groups.append(check.recommendations)
        log(f"{category}: {scores[category]} ({len(check.recommendations)} recommendations)")

    breakdown = Breakdown(**scores)
    return replace(
        result,
        breakdown=breakdown,
        overall_score=calculate_overall_score(breakdown),
        recommendations=limit_recommendations(
            combine_recommendations(groups),
            settings.max_recommendations,
            settings.no_issues_message,
        ),
    )


def analyze_javascript(code: str, file_name: str, **kwargs) -> AnalysisResult:
    return analyze(code, file_name, 'javascript', **kwargs)


def analyze_python(code: str, file_name: str, **kwargs) -> AnalysisResult:
    return analyze(code, file_name, 'python', **kwargs)


class CodeAnalyzer:
    """Facade: load a file, analyze it, report progress when verbose."""

    def __init__(self, settings: Settings = DEFAULT_SETTINGS, verbose: bool = False):
        self.settings = settings
        self.verbose = verbose

    def log(self, msg: str) -> None:
        """Print if verbose mode."""
        if self.verbose:
            print(f"   {msg}")

    def analyze_code(self, code: str, file_name: str) -> AnalysisResult:
        language, _ = detect_language(file_name)
        return analyze(code, file_name, language, self.settings, self.log)

    def analyze_file(self, path: Path) -> AnalysisResult:
        source = load_source(path, self.settings.max_source_bytes)
        self.log(f"Loaded {source.path} ({source.size} bytes, {source.language})")
        return analyze(
            source.content, source.path.name, source.language, self.settings, self.log
        )
