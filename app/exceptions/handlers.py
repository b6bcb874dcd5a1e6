import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.mappers.reply_builder import DATA_ERROR_REPLY, GENERIC_ERROR_REPLY

from .custom import CompletionError, EventDataError

logger = logging.getLogger(__name__)


async def event_data_error_handler(_request: Request, exc: EventDataError) -> JSONResponse:
    logger.error(
        "Event data error (%s): %s (status=%s)", exc.kind, exc.message, exc.status_code
    )
    return JSONResponse(status_code=500, content={"reply": DATA_ERROR_REPLY})


async def completion_error_handler(_request: Request, exc: CompletionError) -> JSONResponse:
    logger.error("Completion API error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(status_code=500, content={"reply": GENERIC_ERROR_REPLY})


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error in request: %r", exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"reply": GENERIC_ERROR_REPLY})


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Rejected chat request body: %s", exc.errors())
    return JSONResponse(status_code=422, content={"reply": GENERIC_ERROR_REPLY})
