import logging
import os
from logging.handlers import TimedRotatingFileHandler

from fastapi import FastAPI

from src.controller import router
from src.helpers import IdGenerator
from src.middleware import AccessLogMiddleware
from src.repository import LinkStore
from src.services import ShortenerService
from src.views import router as views_router

LOG_FILE = os.getenv("LOG_FILE")
SEED_URLS = [
    url.strip()
    for url in os.getenv(
        "SEED_URLS",
        "https://google.com,https://reddit.com,https://youtu.be/dQw4w9WgXcQ",
    ).split(",")
    if url.strip()
]

# Logging
handlers: list = [logging.StreamHandler()]
if LOG_FILE:
    handlers.append(
        TimedRotatingFileHandler(
            filename=LOG_FILE,
            when="W0",
            interval=1,
            backupCount=4,
            encoding="utf-8",
        )
    )
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s - %(asctime)s - %(message)s",
    handlers=handlers,
)
logger = logging.getLogger(__name__)

# Set up app
app = FastAPI(title="MiniLink - URL Shortener")
app.add_middleware(AccessLogMiddleware)
app.include_router(router)
app.include_router(views_router)


# App lifecycle
@app.on_event("startup")
async def startup_event():
    app.state.service = ShortenerService(LinkStore(), IdGenerator())
    app.state.service.seed(SEED_URLS)
    logger.info("Application started, link store initialized")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info(
        f"Application shut down, discarding {app.state.service.count_known()} links"
    )
