"""
Commandes CLI pour les commandes clients (create, list).
"""

import asyncio
from typing import Annotated, Optional

import typer

from src.adapters.cli.display import order_panel, orders_table
from src.adapters.cli.helpers import console, suppress_loguru, with_container
from src.core.value_objects.identifiers import ProductId, UserId
from src.core.value_objects.pagination import Pagination


order_app = typer.Typer(
    name="order",
    help="Gestion des commandes",
    rich_markup_mode="rich",
)


@order_app.command("create")
def order_create(
    user_id: Annotated[str, typer.Argument(help="ID de l'utilisateur")],
    product_id: Annotated[str, typer.Argument(help="ID du produit")],
    quantity: Annotated[int, typer.Option("--quantity", "-q", help="Quantite")] = 1,
) -> None:
    """Passe une commande et reserve le stock correspondant."""
    asyncio.run(_order_create_async(user_id, product_id, quantity))


@with_container()
async def _order_create_async(
    container, user_id: str, product_id: str, quantity: int
) -> None:
    """Implementation async de la commande order create."""
    order = await container.order_service().create_order(
        UserId(user_id), ProductId(product_id), quantity
    )
    with suppress_loguru():
        console.print(order_panel(order))


@order_app.command("list")
def order_list(
    user_id: Annotated[
        Optional[str],
        typer.Option("--user", "-u", help="Filtrer par utilisateur"),
    ] = None,
    page: Annotated[int, typer.Option("--page", "-p", help="Page (0-based)")] = 0,
    limit: Annotated[int, typer.Option("--limit", "-l", help="Elements par page")] = 10,
) -> None:
    """Liste les commandes actives, eventuellement celles d'un seul utilisateur."""
    asyncio.run(_order_list_async(user_id, page, limit))


@with_container()
async def _order_list_async(
    container, user_id: Optional[str], page: int, limit: int
) -> None:
    """Implementation async de la commande order list."""
    service = container.order_service()
    pagination = Pagination(page=page, limit=limit)
    if user_id:
        orders = await service.list_orders_by_user(UserId(user_id), pagination)
    else:
        orders = await service.list_orders(pagination)

    with suppress_loguru():
        if not orders:
            console.print("[yellow]Aucune commande.[/yellow]")
            return
        console.print(orders_table(orders))
