"""
Routes des utilisateurs.

CRUD des utilisateurs et listing de leurs commandes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ...core.value_objects.identifiers import UserId
from ...core.value_objects.pagination import Pagination
from ...services.orders import OrderService
from ...services.users import UserService
from ..deps import get_order_service, get_pagination, get_user_service
from ..schemas import OrderOut, Page, UserCreate, UserOut, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])

UserServiceDep = Annotated[UserService, Depends(get_user_service)]
PaginationDep = Annotated[Pagination, Depends(get_pagination)]


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, service: UserServiceDep) -> UserOut:
    """Cree un utilisateur (409 si l'email est deja utilise)."""
    user = await service.create_user(payload.name, payload.email)
    return UserOut.from_entity(user)


@router.get("", response_model=Page[UserOut])
async def list_users(service: UserServiceDep, pagination: PaginationDep) -> Page[UserOut]:
    users = await service.list_users(pagination)
    return Page[UserOut](
        items=[UserOut.from_entity(user) for user in users],
        page=pagination.page,
        limit=pagination.limit,
        total=await service.count_users(),
    )


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, service: UserServiceDep) -> UserOut:
    return UserOut.from_entity(await service.get_user(UserId(user_id)))


@router.patch("/{user_id}", response_model=UserOut)
async def update_user(user_id: str, payload: UserUpdate, service: UserServiceDep) -> UserOut:
    """Met a jour le nom et/ou l'email."""
    user = await service.update_user(UserId(user_id), name=payload.name, email=payload.email)
    return UserOut.from_entity(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, service: UserServiceDep) -> None:
    """Suppression logique (404 si deja supprime)."""
    await service.delete_user(UserId(user_id))


@router.get("/{user_id}/orders", response_model=Page[OrderOut])
async def list_user_orders(
    user_id: str,
    service: Annotated[OrderService, Depends(get_order_service)],
    pagination: PaginationDep,
) -> Page[OrderOut]:
    """Commandes d'un utilisateur, les plus recentes d'abord."""
    orders = await service.list_orders_by_user(UserId(user_id), pagination)
    return Page[OrderOut](
        items=[OrderOut.from_entity(order) for order in orders],
        page=pagination.page,
        limit=pagination.limit,
    )
