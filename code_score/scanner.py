"""
Source file loading for the code scorer.
Handles language detection from the extension, size limits, and decoding.
"""

from pathlib import Path, PurePath
from typing import Tuple

from .config import DEFAULT_MAX_SOURCE_BYTES, EXTENSION_LANGUAGES
from .exceptions import (
    FileTooLargeError,
    MissingExtensionError,
    MissingFileError,
    UnsupportedFileTypeError,
)
from .models import SourceFile


def detect_language(file_name: str) -> Tuple[str, str]:
    """Map a file name to (language, file_type)."""
    suffix = PurePath(file_name).suffix.lower()
    if not suffix:
        raise MissingExtensionError(file_name)
    if suffix not in EXTENSION_LANGUAGES:
        raise UnsupportedFileTypeError(file_name)
    return EXTENSION_LANGUAGES[suffix]


def decode_source(data: bytes) -> str:
    """Decode uploaded bytes as UTF-8, replacing undecodable bytes."""
    return data.decode('utf-8', errors='replace')


def check_size(size: int, limit: int = DEFAULT_MAX_SOURCE_BYTES) -> None:
    if size > limit:
        raise FileTooLargeError(size, limit)


def load_source(path: Path, max_bytes: int = DEFAULT_MAX_SOURCE_BYTES) -> SourceFile:
    """Read one source file from disk."""
    path = Path(path)
    if not path.is_file():
        raise MissingFileError(f"File not found: {path}")

    language, file_type = detect_language(path.name)
    check_size(path.stat().st_size, max_bytes)

    data = path.read_bytes()
    return SourceFile(
        path=path,
        content=decode_source(data),
        language=language,
        file_type=file_type,
        size=len(data),
    )
