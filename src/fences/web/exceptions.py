"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fences.application.config import ConfigError


class LayoutComputationError(Exception):
    """Raised when a plan cannot be computed from the request."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Layout computation failed: {errors}")


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(LayoutComputationError)
    async def layout_error_handler(
        request: Request, exc: LayoutComputationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Layout computation failed",
                "error_type": "computation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
