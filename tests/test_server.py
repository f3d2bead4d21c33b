"""
HTTP Service Tests

Upload handling, status codes, and error bodies for /api/analyze-code.
"""

import pytest
from fastapi.testclient import TestClient

from code_score import __version__
from code_score import server
from code_score.config import Settings
from code_score.server import create_app

from .conftest import CLEAN_PYTHON, MESSY_JAVASCRIPT


ENDPOINT = "/api/analyze-code"


@pytest.fixture
def client():
    # Unhandled errors must come back as 500 responses, not raise in the test
    return TestClient(create_app(Settings()), raise_server_exceptions=False)


class TestHealth:
    """Health probe."""

    def test_health_check(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200, f"Expected 200, got {response.status_code}"
        assert response.json() == {"status": "ok", "version": __version__}


class TestAnalyzeEndpoint:
    """POST /api/analyze-code."""

    def test_python_upload(self, client):
        response = client.post(
            ENDPOINT, files={"file": ("orders.py", CLEAN_PYTHON.encode(), "text/x-python")}
        )
        assert response.status_code == 200, response.text

        data = response.json()
        assert data["overall_score"] >= 80, f"Score: {data['overall_score']}"
        assert data["file_name"] == "orders.py"
        assert data["file_type"] == "py"
        assert data["file_content"] == CLEAN_PYTHON
        assert data["file_size"] == len(CLEAN_PYTHON.encode())
        assert set(data["breakdown"]) == {
            "naming", "modularity", "comments", "formatting", "reusability", "best_practices"
        }
        assert 1 <= len(data["recommendations"]) <= 5

    def test_jsx_upload(self, client):
        response = client.post(
            ENDPOINT, files={"file": ("Cart.jsx", MESSY_JAVASCRIPT.encode(), "text/javascript")}
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["file_type"] == "jsx"
        assert data["overall_score"] == 69

    def test_uppercase_extension(self, client):
        response = client.post(ENDPOINT, files={"file": ("APP.PY", b"x = 1\n", "text/plain")})
        assert response.status_code == 200, response.text
        assert response.json()["file_type"] == "py"

    def test_txt_upload_is_rejected(self, client):
        response = client.post(ENDPOINT, files={"file": ("notes.txt", b"hello", "text/plain")})
        assert response.status_code == 400, f"Expected 400, got {response.status_code}"
        assert "Unsupported file type" in response.json()["message"]

    def test_missing_extension(self, client):
        response = client.post(ENDPOINT, files={"file": ("Makefile", b"all:", "text/plain")})
        assert response.status_code == 400
        assert response.json() == {"message": "Could not determine file extension"}

    def test_missing_file(self, client):
        response = client.post(ENDPOINT, data={"note": "no file attached"})
        assert response.status_code == 400
        assert response.json() == {"message": "No file uploaded"}

    def test_oversize_upload(self):
        small = TestClient(create_app(Settings(max_source_bytes=16)), raise_server_exceptions=False)
        response = small.post(ENDPOINT, files={"file": ("big.py", b"x = 1\n" * 10, "text/plain")})
        assert response.status_code == 413
        assert "too large" in response.json()["message"]

    def test_schema_violation_is_generic_500(self, client, monkeypatch):
        def broken_validate(result):
            from code_score.exceptions import SchemaViolationError
            raise SchemaViolationError("naming out of range")

        monkeypatch.setattr(server, "validate_result", broken_validate)
        response = client.post(ENDPOINT, files={"file": ("a.py", b"x = 1\n", "text/plain")})
        assert response.status_code == 500
        assert response.json() == {"message": "Error generating analysis result"}

    def test_unexpected_error_is_generic_500(self, client, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("internal detail")

        monkeypatch.setattr(server, "analyze", explode)
        response = client.post(ENDPOINT, files={"file": ("a.py", b"x = 1\n", "text/plain")})
        assert response.status_code == 500
        assert response.json() == {"message": "Error analyzing code"}
        assert "internal detail" not in response.text
