"""
Routes du catalogue produits.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ...core.value_objects.identifiers import ProductId
from ...core.value_objects.pagination import Pagination
from ...services.products import ProductService
from ..deps import get_pagination, get_product_service
from ..schemas import (
    Page,
    ProductCreate,
    ProductMetadataSchema,
    ProductOut,
    StockAdjustment,
)

router = APIRouter(prefix="/products", tags=["products"])

ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductCreate, service: ProductServiceDep) -> ProductOut:
    """Cree un produit (409 si le SKU est deja utilise)."""
    product = await service.create_product(
        name=payload.name,
        price=payload.price,
        stock=payload.stock,
        status=payload.status,
        metadata=payload.metadata.to_domain(),
    )
    return ProductOut.from_entity(product)


@router.get("", response_model=Page[ProductOut])
async def list_products(
    service: ProductServiceDep,
    pagination: Annotated[Pagination, Depends(get_pagination)],
) -> Page[ProductOut]:
    products = await service.list_products(pagination)
    return Page[ProductOut](
        items=[ProductOut.from_entity(product) for product in products],
        page=pagination.page,
        limit=pagination.limit,
        total=await service.count_products(),
    )


@router.get("/{product_id}", response_model=ProductOut)
async def get_product(product_id: str, service: ProductServiceDep) -> ProductOut:
    return ProductOut.from_entity(await service.get_product(ProductId(product_id)))


@router.patch("/{product_id}/metadata", response_model=ProductOut)
async def update_product_metadata(
    product_id: str, payload: ProductMetadataSchema, service: ProductServiceDep
) -> ProductOut:
    product = await service.update_metadata(ProductId(product_id), payload.to_domain())
    return ProductOut.from_entity(product)


@router.patch("/{product_id}/stock", response_model=ProductOut)
async def adjust_product_stock(
    product_id: str, payload: StockAdjustment, service: ProductServiceDep
) -> ProductOut:
    """Ajuste le stock (422 si le stock deviendrait negatif)."""
    product = await service.adjust_stock(ProductId(product_id), payload.delta)
    return ProductOut.from_entity(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, service: ProductServiceDep) -> None:
    await service.delete_product(ProductId(product_id))
