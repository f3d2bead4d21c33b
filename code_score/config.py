"""
Configuration for the code scorer.
Scoring tables, checker thresholds, and operator settings loaded from YAML.
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Optional

import yaml

from .exceptions import ConfigError


# Maximum points per category (sum = 100)
CATEGORY_MAX = MappingProxyType({
    'naming': 10,
    'modularity': 20,
    'comments': 20,
    'formatting': 15,
    'reusability': 15,
    'best_practices': 20,
})

# Comment ratio bands: (upper bound exclusive, score)
COMMENT_BANDS = (
    (0.1, 5),
    (0.2, 10),
    (0.3, 15),
)
COMMENT_FULL_SCORE = 20
MISSING_DOCS_PENALTY = 5

# Formatting
INDENT_CONSISTENT_SCORE = 15
INDENT_INCONSISTENT_SCORE = 5

# Naming
NAMING_PENALTY = 2

# Modularity: function length in non-blank lines
LONG_FUNCTION_LINES = 30
LONG_FUNCTION_PENALTY = 5
GROWING_FUNCTION_LINES = 20
GROWING_FUNCTION_PENALTY = 2
NESTED_CONSTRUCT_LIMIT = 3
NESTED_CONSTRUCT_PENALTY = 3

# Reusability
HIGH_DUPLICATION_RATIO = 0.3
HIGH_DUPLICATION_PENALTY = 8
SOME_DUPLICATION_RATIO = 0.15
SOME_DUPLICATION_PENALTY = 4
MAGIC_NUMBER_LIMIT = 5
MAGIC_NUMBER_PENALTY = 3

# Best practices
CONSOLE_LOG_LIMIT = 2
PY_SHORT_FILE_CHARS = 100
PY_FOR_LOOP_LIMIT = 2

# Accepted extensions -> (language, file_type)
EXTENSION_LANGUAGES = MappingProxyType({
    '.js': ('javascript', 'js'),
    '.jsx': ('javascript', 'jsx'),
    '.py': ('python', 'py'),
})

DEFAULT_MAX_SOURCE_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_MAX_RECOMMENDATIONS = 5
NO_ISSUES_MESSAGE = "No major issues found. Keep up the good work!"

CONFIG_ENV_VAR = 'CODE_SCORE_CONFIG'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class Settings:
    """Operator-tunable settings. Scoring tables above are not tunable."""
    max_source_bytes: int = DEFAULT_MAX_SOURCE_BYTES
    max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS
    no_issues_message: str = NO_ISSUES_MESSAGE
    host: str = '127.0.0.1'
    port: int = 8000
    remote_timeout: float = 10.0
    log_level: str = 'INFO'


DEFAULT_SETTINGS = Settings()


def _validate(settings: Settings) -> Settings:
    if settings.max_source_bytes <= 0:
        raise ConfigError("max_source_bytes must be positive")
    if not 1 <= settings.max_recommendations <= DEFAULT_MAX_RECOMMENDATIONS:
        raise ConfigError(
            f"max_recommendations must be between 1 and {DEFAULT_MAX_RECOMMENDATIONS}"
        )
    if not settings.no_issues_message.strip():
        raise ConfigError("no_issues_message must not be empty")
    if settings.log_level.upper() not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
    return settings


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from a YAML file.

    Falls back to the CODE_SCORE_CONFIG environment variable, then to defaults.
    Unknown keys are rejected so typos don't silently fall back to defaults.
    """
    path = path or os.getenv(CONFIG_ENV_VAR)
    if not path:
        return DEFAULT_SETTINGS

    config_file = Path(path)
    try:
        with open(config_file, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_file}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a mapping of settings")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings in {config_file}: {', '.join(unknown)}")

    overrides = {}
    for key, value in data.items():
        expected = type(getattr(DEFAULT_SETTINGS, key))
        if expected is float and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(f"Setting '{key}' must be {expected.__name__}")
        overrides[key] = value

    return _validate(replace(DEFAULT_SETTINGS, **overrides))
