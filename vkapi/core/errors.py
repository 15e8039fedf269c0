import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vkapi.models.forecast import FieldError

logger = logging.getLogger(__name__)


class WeatherApiError(Exception):
    """
    Base error for the forecast handlers.

    Carries the HTTP status it maps to and renders the
    ``{"Error": ...}`` body returned to clients.
    """

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"Error": self.message}


class InvalidArgumentError(WeatherApiError):
    """A caller-supplied parameter is outside its accepted domain."""

    status_code = 400


class NotFoundError(WeatherApiError):
    """The requested result does not logically exist."""

    status_code = 404


class ValidationFailedError(WeatherApiError):
    """One or more field rules failed on a create request."""

    status_code = 400

    def __init__(self, errors: Sequence[FieldError], message: str = "One or more validation errors occurred."):
        super().__init__(message)
        self.errors: List[FieldError] = list(errors)

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        out["Errors"] = [e.model_dump() for e in self.errors]
        return out


def _loc_to_field(loc) -> str:
    # ("body", "temperatureC") -> "temperatureC"; ("query", "days") -> "days"
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


async def weather_api_error_handler(request: Request, exc: WeatherApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        FieldError(field=_loc_to_field(err.get("loc", ())), message=str(err.get("msg", "Invalid value")))
        for err in exc.errors()
    ]
    logger.info(f"Rejected malformed request to {request.url.path}: {len(errors)} error(s)")
    return JSONResponse(
        status_code=400,
        content={
            "Error": "The request is malformed.",
            "Errors": [e.model_dump() for e in errors],
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(status_code=500, content={"Error": "An unexpected error occurred"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WeatherApiError, weather_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
