"""
Commandes CLI pour la gestion des utilisateurs (create, list).
"""

import asyncio
from typing import Annotated

import typer

from src.adapters.cli.display import users_table
from src.adapters.cli.helpers import console, suppress_loguru, with_container
from src.core.value_objects.pagination import Pagination


user_app = typer.Typer(
    name="user",
    help="Gestion des utilisateurs",
    rich_markup_mode="rich",
)


@user_app.command("create")
def user_create(
    name: Annotated[str, typer.Argument(help="Nom de l'utilisateur")],
    email: Annotated[str, typer.Argument(help="Adresse email (unique)")],
) -> None:
    """Cree un utilisateur."""
    asyncio.run(_user_create_async(name, email))


@with_container()
async def _user_create_async(container, name: str, email: str) -> None:
    """Implementation async de la commande user create."""
    user = await container.user_service().create_user(name, email)
    console.print(f"[green]Utilisateur cree :[/green] {user.id} ({user.email})")


@user_app.command("list")
def user_list(
    page: Annotated[int, typer.Option("--page", "-p", help="Page (0-based)")] = 0,
    limit: Annotated[int, typer.Option("--limit", "-l", help="Elements par page")] = 10,
) -> None:
    """Liste les utilisateurs actifs."""
    asyncio.run(_user_list_async(page, limit))


@with_container()
async def _user_list_async(container, page: int, limit: int) -> None:
    """Implementation async de la commande user list."""
    service = container.user_service()
    users = await service.list_users(Pagination(page=page, limit=limit))
    total = await service.count_users()

    with suppress_loguru():
        if not users:
            console.print("[yellow]Aucun utilisateur.[/yellow]")
            return
        console.print(users_table(users))
        console.print(f"[dim]{len(users)} affiche(s) sur {total}[/dim]")
