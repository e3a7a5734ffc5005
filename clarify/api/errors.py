"""Map domain exceptions onto HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from clarify.ai.http import CompletionAPIError
from clarify.ai.parser import SuggestionParseError
from clarify.core.exceptions import ConfigurationError, NotFoundError, ValidationError

logger = logging.getLogger("clarify.api.errors")


async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


async def _validation(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


async def _configuration(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Configuration error on %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": exc.message}
    )


async def _suggestion_parse(request: Request, exc: SuggestionParseError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message, "raw": exc.raw, "extracted": exc.extracted},
    )


async def _completion_api(request: Request, exc: CompletionAPIError) -> JSONResponse:
    logger.error("Completion backend error: %s (status %d)", exc, exc.status_code)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _validation)
    app.add_exception_handler(ConfigurationError, _configuration)
    app.add_exception_handler(SuggestionParseError, _suggestion_parse)
    app.add_exception_handler(CompletionAPIError, _completion_api)
