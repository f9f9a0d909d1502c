"""
Commandes CLI pour le catalogue produits (create, list, stock).
"""

import asyncio
from typing import Annotated, Optional

import typer

from src.adapters.cli.display import products_table
from src.adapters.cli.helpers import console, suppress_loguru, with_container
from src.core.entities.product import ProductMetadata, ProductStatus
from src.core.value_objects.identifiers import ProductId
from src.core.value_objects.pagination import Pagination


product_app = typer.Typer(
    name="product",
    help="Gestion du catalogue produits",
    rich_markup_mode="rich",
)


@product_app.command("create")
def product_create(
    name: Annotated[str, typer.Argument(help="Nom du produit")],
    price: Annotated[float, typer.Option("--price", help="Prix unitaire")],
    sku: Annotated[str, typer.Option("--sku", help="Reference unique")],
    category: Annotated[str, typer.Option("--category", "-c", help="Categorie")],
    stock: Annotated[int, typer.Option("--stock", "-s", help="Stock initial")] = 0,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d", help="Description")
    ] = None,
    tags: Annotated[
        Optional[list[str]], typer.Option("--tag", "-t", help="Tag (repetable)")
    ] = None,
    status: Annotated[
        ProductStatus, typer.Option("--status", help="Statut du produit")
    ] = ProductStatus.DRAFT,
) -> None:
    """
    Cree un produit dans le catalogue.

    Exemples:
      orderdesk product create "Clavier" --price 49.9 --sku KB-01 -c peripheriques -s 20
      orderdesk product create "Souris" --price 19 --sku MS-01 -c peripheriques -t usb -t sans-fil
    """
    metadata = ProductMetadata(
        category=category,
        sku=sku,
        description=description,
        tags=tuple(tags or ()),
    )
    asyncio.run(_product_create_async(name, price, stock, metadata, status))


@with_container()
async def _product_create_async(
    container,
    name: str,
    price: float,
    stock: int,
    metadata: ProductMetadata,
    status: ProductStatus,
) -> None:
    """Implementation async de la commande product create."""
    product = await container.product_service().create_product(
        name, price, stock, metadata, status
    )
    console.print(
        f"[green]Produit cree :[/green] {product.id} "
        f"({product.metadata.sku}, stock {product.stock})"
    )


@product_app.command("list")
def product_list(
    page: Annotated[int, typer.Option("--page", "-p", help="Page (0-based)")] = 0,
    limit: Annotated[int, typer.Option("--limit", "-l", help="Elements par page")] = 10,
) -> None:
    """Liste les produits actifs."""
    asyncio.run(_product_list_async(page, limit))


@with_container()
async def _product_list_async(container, page: int, limit: int) -> None:
    """Implementation async de la commande product list."""
    service = container.product_service()
    products = await service.list_products(Pagination(page=page, limit=limit))
    total = await service.count_products()

    with suppress_loguru():
        if not products:
            console.print("[yellow]Aucun produit.[/yellow]")
            return
        console.print(products_table(products))
        console.print(f"[dim]{len(products)} affiche(s) sur {total}[/dim]")


@product_app.command("stock")
def product_stock(
    product_id: Annotated[str, typer.Argument(help="ID du produit")],
    delta: Annotated[
        int, typer.Argument(help="Variation du stock (negative pour un retrait)")
    ],
) -> None:
    """
    Ajuste le stock d'un produit.

    Le stock ne peut jamais devenir negatif.

    Exemples:
      orderdesk product stock 65f1c0ffee0000000000beef 10
      orderdesk product stock 65f1c0ffee0000000000beef -- -3
    """
    asyncio.run(_product_stock_async(product_id, delta))


@with_container()
async def _product_stock_async(container, product_id: str, delta: int) -> None:
    """Implementation async de la commande product stock."""
    product = await container.product_service().adjust_stock(ProductId(product_id), delta)
    console.print(f"[green]Stock mis a jour :[/green] {product.name} -> {product.stock}")
