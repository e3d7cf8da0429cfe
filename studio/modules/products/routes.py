from fastapi import APIRouter, Depends
from studio.core.dependencies import get_current_user
from studio.database.supabase_client import get_supabase
from studio.modules.products.schemas import (
    ProductDeleteResponse, ProductEnvelope, ProductListResponse, ProductUpdate
)
from studio.modules.products.service import ProductService
from studio.modules.users.schemas import UserResponse
from supabase import Client

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(supabase: Client = Depends(get_supabase)) -> ProductService:
    return ProductService(supabase)


@router.get("", response_model=ProductListResponse)
async def list_products(
    current_user: UserResponse = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    """List the current user's products with a total count"""
    products = service.list_products(current_user.id)
    return ProductListResponse(products=products, total=len(products))


@router.get("/{product_id}", response_model=ProductEnvelope)
async def get_product(
    product_id: str,
    current_user: UserResponse = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    return ProductEnvelope(product=service.get_product(product_id, current_user.id))


@router.patch("/{product_id}", response_model=ProductEnvelope)
async def update_product(
    product_id: str,
    product_data: ProductUpdate,
    current_user: UserResponse = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    """Update product name and physical dimensions"""
    return ProductEnvelope(product=service.update_product(product_id, current_user.id, product_data))


@router.delete("/{product_id}", response_model=ProductDeleteResponse)
async def delete_product(
    product_id: str,
    current_user: UserResponse = Depends(get_current_user),
    service: ProductService = Depends(get_product_service)
):
    service.delete_product(product_id, current_user.id)
    return ProductDeleteResponse(success=True, message="Product deleted successfully")
