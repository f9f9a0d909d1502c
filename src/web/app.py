"""
Application FastAPI d'OrderDesk.

Initialise l'application web avec le Container DI, cree les tables au
demarrage, enregistre les handlers d'erreurs du domaine et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from ..container import Container
from ..infrastructure.persistence.database import init_db
from .errors import register_exception_handlers
from .routes.orders import router as orders_router
from .routes.products import router as products_router
from .routes.users import router as users_router


def create_app(
    container: Optional[Container] = None,
    init_database: bool = True,
) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI a utiliser (un nouveau par defaut)
        init_database: Cree les tables au demarrage et ferme l'engine a l'arret
    """
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Attache le Container DI au demarrage et libere l'engine a l'arret."""
        app.state.container = container
        if init_database:
            await init_db(container.engine())
        logger.info("API demarree")
        yield
        if init_database:
            await container.engine().dispose()

    app = FastAPI(title=container.config().api_title, lifespan=lifespan)
    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(users_router)
    app.include_router(products_router)
    app.include_router(orders_router)
    return app


app = create_app()
