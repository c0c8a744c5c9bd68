import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import db, settings
from core.errors import register_error_handlers
from core.logging import setup_logging
from core.migrations import auto_migrate
from users import router as users_router
from users.models import USERS_TABLE

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level())
    # Open the pool once per process; a failure here aborts startup.
    database = await db.connect()
    try:
        await auto_migrate(database, USERS_TABLE)
        app.state.db = database
        yield
    finally:
        app.state.db = None
        await database.close()
        logger.info("Database pool closed")


def create_app() -> FastAPI:
    app = FastAPI(title="users-api", lifespan=lifespan)
    register_error_handlers(app)
    app.include_router(users_router.router, prefix=API_PREFIX, tags=["users"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "users api"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host(), port=settings.port(), log_level=settings.log_level().lower())
