"""
Affichage Rich des entites (tables de listing et panneau de commande).
"""

from typing import Iterable

from rich.panel import Panel
from rich.table import Table

from src.core.entities.order import Order
from src.core.entities.product import Product
from src.core.entities.user import User


def _fmt_date(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else "-"


def users_table(users: Iterable[User]) -> Table:
    table = Table(title="Utilisateurs")
    table.add_column("ID", style="dim")
    table.add_column("Nom")
    table.add_column("Email", style="cyan")
    table.add_column("Cree le")
    for user in users:
        table.add_row(str(user.id), user.name, user.email, _fmt_date(user.created_at))
    return table


def products_table(products: Iterable[Product]) -> Table:
    table = Table(title="Produits")
    table.add_column("ID", style="dim")
    table.add_column("Nom")
    table.add_column("SKU", style="cyan")
    table.add_column("Prix", justify="right")
    table.add_column("Stock", justify="right")
    table.add_column("Statut")
    for product in products:
        stock_style = "red" if product.stock == 0 else "green"
        table.add_row(
            str(product.id),
            product.name,
            product.metadata.sku,
            f"{product.price:.2f}",
            f"[{stock_style}]{product.stock}[/{stock_style}]",
            product.status.value,
        )
    return table


def orders_table(orders: Iterable[Order]) -> Table:
    table = Table(title="Commandes")
    table.add_column("ID", style="dim")
    table.add_column("Utilisateur")
    table.add_column("Produit")
    table.add_column("Quantite", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Creee le")
    for order in orders:
        table.add_row(
            str(order.id),
            str(order.user_id),
            str(order.product_id),
            str(order.quantity),
            f"{order.total_price:.2f}",
            _fmt_date(order.created_at),
        )
    return table


def order_panel(order: Order) -> Panel:
    """Panneau recapitulatif d'une commande creee."""
    body = (
        f"[bold]ID :[/bold] {order.id}\n"
        f"[bold]Utilisateur :[/bold] {order.user_id}\n"
        f"[bold]Produit :[/bold] {order.product_id}\n"
        f"[bold]Quantite :[/bold] {order.quantity}\n"
        f"[bold]Total :[/bold] {order.total_price:.2f}"
    )
    return Panel(body, title="Commande creee", border_style="green")
