"""
Client for a running code-score service.

Usage:
    from code_score.client import analyze_remote

    data = analyze_remote("app.py", "http://localhost:8000")
    print(data["overall_score"])
"""

from pathlib import Path
from typing import Any, Dict, Optional

import requests

from .exceptions import RemoteAnalysisError


ANALYZE_ENDPOINT = "/api/analyze-code"
DEFAULT_TIMEOUT = 10


def _error_message(response: requests.Response) -> str:
    try:
        return response.json().get("message", response.text)
    except ValueError:
        return response.text


def analyze_remote(
    path: Path,
    base_url: str,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Upload a file to the analysis endpoint and return the JSON result."""
    path = Path(path)
    http = session or requests.Session()
    url = f"{base_url.rstrip('/')}{ANALYZE_ENDPOINT}"

    with open(path, "rb") as f:
        try:
            response = http.post(url, files={"file": (path.name, f)}, timeout=timeout)
        except requests.RequestException as e:
            raise RemoteAnalysisError(None, f"Cannot reach {url}: {e}") from e

    if not response.ok:
        raise RemoteAnalysisError(response.status_code, _error_message(response))

    return response.json()
