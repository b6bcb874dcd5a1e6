import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.routing import Mount

from app.config import Settings
from app.exceptions.custom import CompletionError, EventDataError
from app.exceptions.handlers import (
    completion_error_handler,
    event_data_error_handler,
    request_validation_error_handler,
    unhandled_error_handler,
)
from app.routers.chat import router as chat_router
from app.services.chat import ChatService
from app.services.claude import ClaudeService
from app.services.event_data import EventDataCache, EventDataLoader
from app.services.sheets import SheetsService


def _static_mount(directory: str) -> Mount | None:
    if not directory or not Path(directory).is_dir():
        return None
    return Mount("/", app=StaticFiles(directory=directory, html=True), name="static")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # Chat UI; appended after the API routes so /api wins
    static = _static_mount(settings.static_dir)
    if static is not None:
        app.router.routes.append(static)

    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
            loader = EventDataLoader(
                SheetsService(client),
                meta_url=settings.meta_csv_url,
                events_url=settings.events_csv_url,
                hotels_url=settings.hotels_csv_url,
                guests_url=settings.guests_csv_url,
            )
            cache = EventDataCache(loader.load, ttl_seconds=settings.cache_ttl_seconds)
            claude = ClaudeService(settings.anthropic_api_key, timeout=settings.http_timeout)

            app.state.event_data_cache = cache
            app.state.chat_service = ChatService(
                cache, claude, max_message_length=settings.max_message_length
            )

            yield
    finally:
        if static is not None:
            app.router.routes.remove(static)


app = FastAPI(title="Wedding Assistant", lifespan=lifespan)

app.add_exception_handler(EventDataError, event_data_error_handler)
app.add_exception_handler(CompletionError, completion_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(chat_router)
