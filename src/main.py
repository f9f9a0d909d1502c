"""
Point d'entree CLI d'OrderDesk.

Configure le logging et fournit les commandes CLI (utilisateurs, produits,
commandes, base de donnees et serveur HTTP).
"""

import asyncio
from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import order_app, product_app, user_app
from .config import Settings
from .container import Container
from .infrastructure.persistence.database import init_db
from .logging_config import configure_logging

app = typer.Typer(
    name="orderdesk",
    help="Gestion des utilisateurs, du catalogue et des commandes",
)
container = Container()

# Monter les sous-commandes
app.add_typer(user_app, name="user")
app.add_typer(product_app, name="product")
app.add_typer(order_app, name="order")


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration OrderDesk")
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"Taille de page par defaut : {config.default_page_limit}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"OrderDesk v{__version__}")


@app.command(name="init-db")
def init_database() -> None:
    """Cree les tables et index manquants."""

    async def _run() -> None:
        engine = container.engine()
        try:
            await init_db(engine)
        finally:
            await engine.dispose()

    asyncio.run(_run())
    typer.echo("Base de donnees initialisee")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'ecoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'ecoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur HTTP OrderDesk."""
    import uvicorn

    typer.echo(f"Demarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Demarrage d'OrderDesk", version=__version__)

    app()


if __name__ == "__main__":
    main()
