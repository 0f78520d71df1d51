from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import config
from core.db import Database
from core.errors import register_error_handlers
from core.logging_config import setup_logging
from dogs.repository import DogGateway, DogRepository
from dogs.router import build_router
from dogs.service import DogService

logger = logging.getLogger(__name__)


def create_app(repository: DogGateway | None = None) -> FastAPI:
    """
    Build the API around a dog store.

    With no repository given, a Postgres-backed one is created from
    DATABASE_URL and its pool lives for the duration of the app lifespan.
    """
    setup_logging(config.log_level())

    database: Database | None = None
    store: DogRepository | None = None
    if repository is None:
        database = Database()
        repository = store = DogRepository(database)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if database is None or store is None:
            yield
            return
        await database.connect()
        try:
            await store.ensure_schema()
            yield
        finally:
            await database.close()

    app = FastAPI(lifespan=lifespan)
    app.include_router(build_router(DogService(repository)), tags=["dogs"])
    register_error_handlers(app)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "Hello World!"}

    return app


app = create_app()


def run() -> None:
    host = config.listen_host()
    port = config.listen_port()
    logger.info("Server ready at: http://localhost:%s", port)
    uvicorn.run(app, host=host, port=port, log_level=config.log_level().lower())


if __name__ == "__main__":
    run()
