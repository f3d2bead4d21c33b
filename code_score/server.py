"""
HTTP service for the code scorer.

Endpoints:
    POST /api/analyze-code   multipart field `file` (.js, .jsx, .py, max 5MB)
    GET  /api/health

Usage:
    python -m code_score.server [--config FILE]
"""

import argparse
import logging
from typing import Optional

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse

from . import __version__
from .analyzer import analyze
from .config import Settings, load_settings
from .exceptions import InputRejectedError, MissingFileError, SchemaViolationError
from .scanner import check_size, decode_source, detect_language
from .schema import AnalysisSchema, ErrorResponse, validate_result

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = 'INFO') -> logging.Logger:
    """Configure console logging for the service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
    return logging.getLogger('code_score')


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or load_settings()

    app = FastAPI(
        title="Code Score",
        description="Heuristic code quality scoring for JavaScript and Python files",
        version=__version__,
    )
    app.state.settings = settings

    @app.exception_handler(InputRejectedError)
    async def input_rejected_handler(request: Request, exc: InputRejectedError):
        logger.info(f"Rejected upload: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc)})

    @app.exception_handler(SchemaViolationError)
    async def schema_violation_handler(request: Request, exc: SchemaViolationError):
        logger.error(f"Validation error: {exc}")
        return JSONResponse(
            status_code=500, content={"message": "Error generating analysis result"}
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Error analyzing code")
        return JSONResponse(status_code=500, content={"message": "Error analyzing code"})

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok", "version": __version__}

    @app.post(
        "/api/analyze-code",
        response_model=AnalysisSchema,
        responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse},
                   500: {"model": ErrorResponse}},
    )
    async def analyze_code(file: Optional[UploadFile] = File(None)):
        """Analyze an uploaded source file."""
        if file is None or not file.filename:
            raise MissingFileError()

        language, _ = detect_language(file.filename)

        limit = app.state.settings.max_source_bytes
        data = await file.read(limit + 1)
        check_size(len(data), limit)

        result = analyze(decode_source(data), file.filename, language, app.state.settings)
        validated = validate_result(result)

        logger.info(f"Analyzed {file.filename}: {result.overall_score}/100")
        return validated

    return app


def main():
    parser = argparse.ArgumentParser(description='Code Score HTTP service')
    parser.add_argument('--config', type=str, help='YAML settings file')
    parser.add_argument('--host', type=str, help='Bind address')
    parser.add_argument('--port', type=int, help='Bind port')
    args = parser.parse_args()

    import uvicorn

    settings = load_settings(args.config)
    setup_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=args.host or settings.host,
        port=args.port or settings.port,
    )


if __name__ == '__main__':
    main()
