"""
Utilitaires partages pour les commandes CLI d'OrderDesk.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise et
  traduisant les erreurs du domaine en code de sortie 1
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from src.container import Container
from src.core.errors import DomainError
from src.infrastructure.persistence.database import init_db

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), cree les tables avant la commande
                     et ferme l'engine apres.

    Une DomainError levee par la commande est affichee en rouge et
    termine la commande avec le code 1.

    Usage:
        @with_container()
        async def my_command(container, ...):
            service = container.order_service()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                await init_db(container.engine())
            try:
                return await func(container, *args, **kwargs)
            except DomainError as e:
                console.print(f"[red]Erreur ({e.kind.value}) : {e.message}[/red]")
                raise typer.Exit(1) from e
            finally:
                if requires_db:
                    await container.engine().dispose()
        return wrapper
    return decorator
