from datetime import datetime, timezone
from supabase import Client
from studio.core.errors import BadRequest, ResourceNotFound, UpstreamFailure, is_invalid_input
from studio.core.naming import generate_tag, generate_unique_name
from studio.modules.products.schemas import ProductResponse, ProductUpdate
from fastapi import HTTPException
from typing import List
import logging

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_products(self, user_id: str) -> List[ProductResponse]:
        """List the user's products, newest first"""
        try:
            result = self.supabase.table("products")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return [ProductResponse(**product) for product in result.data or []]
        except Exception as e:
            logger.error(f"Error listing products for {user_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to fetch products")

    def get_product(self, product_id: str, user_id: str) -> ProductResponse:
        """Get one of the user's products"""
        try:
            result = self.supabase.table("products")\
                .select("*")\
                .eq("id", product_id)\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            if is_invalid_input(e):
                raise ResourceNotFound("Product not found")
            logger.error(f"Error fetching product {product_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to fetch product")

        if not result.data:
            raise ResourceNotFound("Product not found")
        return ProductResponse(**result.data[0])

    def update_product(self, product_id: str, user_id: str, product_data: ProductUpdate) -> ProductResponse:
        """Rename a product and optionally set its physical dimensions"""
        if not product_data.name or not product_data.name.strip():
            raise BadRequest("Product name is required")

        self.get_product(product_id, user_id)
        trimmed = product_data.name.strip()
        try:
            # Only names sharing the prefix can collide with the requested one
            siblings = self.supabase.table("products")\
                .select("name")\
                .eq("user_id", user_id)\
                .ilike("name", f"{trimmed}%")\
                .neq("id", product_id)\
                .execute()
            unique_name = generate_unique_name(trimmed, [p["name"] for p in siblings.data or []])

            update_data = {
                "name": unique_name,
                "tag": generate_tag(unique_name),
                "updated_at": datetime.now(timezone.utc).isoformat()
            }
            if product_data.physical_dimensions:
                update_data["physical_dimensions"] = product_data.physical_dimensions

            result = self.supabase.table("products")\
                .update(update_data)\
                .eq("id", product_id)\
                .eq("user_id", user_id)\
                .execute()
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error updating product {product_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to update product")

        if not result.data:
            raise ResourceNotFound("Product not found")
        return ProductResponse(**result.data[0])

    def delete_product(self, product_id: str, user_id: str) -> None:
        """Delete one of the user's products"""
        self.get_product(product_id, user_id)
        try:
            self.supabase.table("products")\
                .delete()\
                .eq("id", product_id)\
                .eq("user_id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting product {product_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to delete product from database")
        logger.info(f"Deleted product {product_id}")
