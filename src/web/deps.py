"""
Dependances partagees de l'application web.

Fournit l'acces au Container DI (stocke dans app.state au demarrage), aux
services, et la construction des parametres de pagination.
"""

from typing import Optional

from fastapi import Query, Request

from ..container import Container
from ..core.value_objects.pagination import MAX_PAGE_LIMIT, Pagination
from ..services.orders import OrderService
from ..services.products import ProductService
from ..services.users import UserService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_user_service(request: Request) -> UserService:
    return get_container(request).user_service()


def get_product_service(request: Request) -> ProductService:
    return get_container(request).product_service()


def get_order_service(request: Request) -> OrderService:
    return get_container(request).order_service()


def get_pagination(
    request: Request,
    page: int = Query(0, ge=0, description="Numero de page (a partir de 0)"),
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_LIMIT, description="Taille de page"),
) -> Pagination:
    """Construit la pagination, avec la taille par defaut de la configuration."""
    if limit is None:
        limit = get_container(request).config().default_page_limit
    return Pagination(page=page, limit=limit)
