"""Sous-package CLI commands - re-exporte les sous-applications Typer."""

from src.adapters.cli.commands.order_commands import (
    order_app,
    order_create,
    order_list,
)
from src.adapters.cli.commands.product_commands import (
    product_app,
    product_create,
    product_list,
    product_stock,
)
from src.adapters.cli.commands.user_commands import (
    user_app,
    user_create,
    user_list,
)

__all__ = [
    # users
    "user_app",
    "user_create",
    "user_list",
    # products
    "product_app",
    "product_create",
    "product_list",
    "product_stock",
    # orders
    "order_app",
    "order_create",
    "order_list",
]
