import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import certifi
from fastapi import FastAPI
from mongoengine import connect, disconnect

from cinedata.utils.config import settings


logger = logging.getLogger(__name__)


def init_mongo(**kwargs) -> None:
    """Open the default connection every document class resolves its collection through.

    Extra keyword arguments are handed to ``mongoengine.connect``; tests use this
    to pass ``mongo_client_class``.
    """
    options = {"tz_aware": True}
    if settings.mongo_tls:
        options["tlsCAFile"] = certifi.where()
    options.update(kwargs)
    connect(host=settings.mongo_uri, alias="default", **options)
    logger.info("Connected to MongoDB database %s", settings.mongo_db)


def close_mongo() -> None:
    disconnect(alias="default")
    logger.info("Disconnected from MongoDB")


@asynccontextmanager
async def mongo_lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_mongo()
    try:
        yield
    finally:
        close_mongo()
