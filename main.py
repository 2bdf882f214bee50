import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.interfaces.api.routes import register_routes
from app.interfaces.api.routes_helpers import validation_exception_handler
from app.infrastructure.database import SessionLocal, engine, initialize_database
from app.infrastructure.seed import seed_activities

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    """Configure the root logger from the ``LOG_LEVEL`` setting."""

    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        logger.warning(
            "Invalid log level %s, defaulting to INFO", level_name
        )
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    if get_settings().seed_on_startup:
        with SessionLocal() as session:
            seed_activities(session)
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Activities API", lifespan=lifespan)

    # Autoriza peticiones desde el cliente React.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    register_routes(app)
    logger.debug("Application created with origins %s", settings.cors_origins)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn; ``HOST`` and ``PORT`` override the bind address."""

    uvicorn.run(
        "main:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8000")),
        log_level=get_settings().log_level.lower(),
    )


if __name__ == "__main__":
    run()
