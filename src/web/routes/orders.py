"""
Routes des commandes.

La creation delegue entierement au workflow de OrderService : validation
de l'utilisateur et du produit, reservation atomique du stock, persistance.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ...core.value_objects.identifiers import OrderId, ProductId, UserId
from ...core.value_objects.pagination import Pagination
from ...services.orders import OrderService
from ..deps import get_order_service, get_pagination
from ..schemas import OrderCreate, OrderOut, Page

router = APIRouter(prefix="/orders", tags=["orders"])

OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
async def create_order(payload: OrderCreate, service: OrderServiceDep) -> OrderOut:
    """
    Cree une commande.

    404 si l'utilisateur ou le produit n'existe pas, 422 si le stock est
    insuffisant ou n'a pas pu etre reserve.
    """
    order = await service.create_order(
        UserId(payload.user_id),
        ProductId(payload.product_id),
        payload.quantity,
    )
    return OrderOut.from_entity(order)


@router.get("", response_model=Page[OrderOut])
async def list_orders(
    service: OrderServiceDep,
    pagination: Annotated[Pagination, Depends(get_pagination)],
) -> Page[OrderOut]:
    orders = await service.list_orders(pagination)
    return Page[OrderOut](
        items=[OrderOut.from_entity(order) for order in orders],
        page=pagination.page,
        limit=pagination.limit,
        total=await service.count_orders(),
    )


@router.get("/{order_id}", response_model=OrderOut)
async def get_order(order_id: str, service: OrderServiceDep) -> OrderOut:
    return OrderOut.from_entity(await service.get_order(OrderId(order_id)))


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: str, service: OrderServiceDep) -> None:
    """Suppression logique (404 si deja supprimee). Le stock n'est pas restitue."""
    await service.delete_order(OrderId(order_id))
