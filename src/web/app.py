"""
Application FastAPI de CineSync.

Initialise l'application web avec le Container DI et monte les routes
d'administration du catalogue.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..container import Container
from .routes.catalog import router as catalog_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage (sauf s'il est déjà fourni)."""
    if getattr(app.state, "container", None) is None:
        container = Container()
        container.database.init()
        app.state.container = container
    yield


def create_app() -> FastAPI:
    """Construit l'application et monte les routes."""
    application = FastAPI(title="CineSync", lifespan=lifespan)
    application.include_router(catalog_router)
    return application


app = create_app()
