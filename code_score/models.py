"""
Data models for the code scorer.
Pure dataclasses - no business logic.
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple


@dataclass
class CheckResult:
    """Score and recommendations produced by one category checker."""
    score: int
    recommendations: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Breakdown:
    """Per-category sub-scores."""
    naming: int = 0
    modularity: int = 0
    comments: int = 0
    formatting: int = 0
    reusability: int = 0
    best_practices: int = 0

    def total(self) -> int:
        return sum(self.as_dict().values())

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing one file."""
    overall_score: int
    breakdown: Breakdown
    recommendations: Tuple[str, ...]
    file_name: str
    file_size: int
    file_content: str
    file_type: str  # js, jsx, py

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['recommendations'] = list(self.recommendations)
        return data


@dataclass
class SourceFile:
    """A source file loaded from disk."""
    path: Path
    content: str
    language: str
    file_type: str
    size: int
