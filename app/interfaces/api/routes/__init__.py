from fastapi import FastAPI

from .activities import router as activities_router
from .health import router as health_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(health_router)
    app.include_router(activities_router)
