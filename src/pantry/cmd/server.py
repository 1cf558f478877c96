import copy
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from uvicorn.config import LOGGING_CONFIG

from pantry.lib.seed import seed_store
from pantry.lib.store import RecipeStore
from pantry.settings import Settings, get_settings
from pantry.web.errors import register_error_handlers
from pantry.web.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Serving {len(app.state.store)} recipe(s)")
    yield
    logger.info("Shutting down")


def create_app(
    store: Optional[RecipeStore] = None, settings: Optional[Settings] = None
) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = RecipeStore()
        if settings.seed:
            seed_store(store)

    app = FastAPI(title=settings.title, lifespan=lifespan)
    app.state.store = store

    register_error_handlers(app)
    app.include_router(router)

    return app


app = create_app()


def build_log_config(log_level: str) -> dict:
    # uvicorn applies this in every process it starts, reloader workers included
    config = copy.deepcopy(LOGGING_CONFIG)
    config["formatters"]["app"] = {
        "()": "uvicorn.logging.DefaultFormatter",
        "fmt": "%(levelprefix)s %(name)s: %(message)s",
    }
    config["handlers"]["app"] = {
        "formatter": "app",
        "class": "logging.StreamHandler",
        "stream": "ext://sys.stderr",
    }
    config["root"] = {"handlers": ["app"], "level": log_level}
    return config


def main():
    settings = get_settings()
    uvicorn.run(
        "pantry.cmd.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=build_log_config(settings.log_level),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
