"""
Exceptions raised by the code scorer.
"""

from typing import Optional


class CodeScoreError(Exception):
    """Base class for all code scorer errors."""


class ConfigError(CodeScoreError):
    """Settings file is unreadable or malformed."""


class InputRejectedError(CodeScoreError):
    """Input cannot be analyzed. Surfaced to callers as a client error."""
    status_code = 400


class MissingFileError(InputRejectedError):
    def __init__(self, message: str = "No file uploaded"):
        super().__init__(message)


class MissingExtensionError(InputRejectedError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__("Could not determine file extension")


class UnsupportedFileTypeError(InputRejectedError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__("Unsupported file type. Only .js, .jsx, and .py files are allowed")


class UnsupportedLanguageError(InputRejectedError):
    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class FileTooLargeError(InputRejectedError):
    status_code = 413

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"File is too large ({size} bytes, limit {limit} bytes)")


class SchemaViolationError(CodeScoreError):
    """The engine produced a result that does not match the wire schema."""


class RemoteAnalysisError(CodeScoreError):
    """The analysis service answered with an error, or could not be reached.

    status_code is None when no HTTP response was received.
    """

    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(f"Error analyzing code: {message}")
        else:
            super().__init__(f"Error analyzing code: {status_code} {message}")
