from supabase import Client
from studio.core.errors import BadRequest, ResourceNotFound, UpstreamFailure, is_invalid_input
from studio.modules.photoshoots.schemas import PhotoshootCreate, PhotoshootResponse
from fastapi import HTTPException
from typing import List
import logging

logger = logging.getLogger(__name__)

# Embedded summaries of the shoot's product and model (PostgREST foreign-key joins)
PHOTOSHOOT_WITH_RELATIONS = (
    "*,"
    "products:product_id(id,name,tag,image_url),"
    "models:model_id(id,name,tag,image_url)"
)

DEFAULT_SCENE_DESCRIPTION = "AI-generated photoshoot"


class PhotoshootService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_photoshoots(self, user_id: str) -> List[PhotoshootResponse]:
        """List the user's photoshoots, newest first"""
        try:
            result = self.supabase.table("photoshoots")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return [PhotoshootResponse(**shoot) for shoot in result.data or []]
        except Exception as e:
            logger.error(f"Error listing photoshoots for {user_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to fetch photoshoots")

    def get_photoshoot(self, photoshoot_id: str, user_id: str) -> PhotoshootResponse:
        """Get one of the user's photoshoots with its product and model summaries"""
        try:
            result = self.supabase.table("photoshoots")\
                .select(PHOTOSHOOT_WITH_RELATIONS)\
                .eq("id", photoshoot_id)\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            if is_invalid_input(e):
                raise ResourceNotFound("Photoshoot not found")
            logger.error(f"Error fetching photoshoot {photoshoot_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to fetch photoshoot")

        if not result.data:
            raise ResourceNotFound("Photoshoot not found")
        return PhotoshootResponse(**result.data[0])

    def create_photoshoot(self, shoot_data: PhotoshootCreate, user_id: str) -> PhotoshootResponse:
        """Create a pending photoshoot for one of the user's products (and models)"""
        if not shoot_data.product_id:
            raise BadRequest("Product ID is required")

        with_model = shoot_data.type == "with_model"
        if with_model and not shoot_data.model_id:
            raise BadRequest("Model ID is required for a photoshoot with a model")

        try:
            self._require_owned("products", shoot_data.product_id, user_id, "Product not found")
            if with_model:
                self._require_owned("models", shoot_data.model_id, user_id, "Model not found")

            result = self.supabase.table("photoshoots").insert({
                "user_id": user_id,
                "product_id": shoot_data.product_id,
                "model_id": shoot_data.model_id if with_model else None,
                "style_type": "professional" if shoot_data.style == "professional" else "ugc",
                "scene_description": shoot_data.final_prompt
                or shoot_data.product_analysis
                or DEFAULT_SCENE_DESCRIPTION,
                "ai_suggested": True,
                "generation_settings": {
                    "type": shoot_data.type,
                    "style": shoot_data.style,
                    "name": shoot_data.name,
                    "scene_details": shoot_data.scene_details,
                    "product_analysis": shoot_data.product_analysis,
                    "final_prompt": shoot_data.final_prompt
                },
                "status": "pending"
            }).execute()
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error creating photoshoot for {user_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to create photoshoot")

        if not result.data:
            raise UpstreamFailure("Failed to create photoshoot")
        photoshoot = PhotoshootResponse(**result.data[0])
        logger.info(f"Created photoshoot {photoshoot.id}")
        return photoshoot

    def _require_owned(self, table: str, record_id: str, user_id: str, not_found_message: str):
        try:
            result = self.supabase.table(table)\
                .select("id")\
                .eq("id", record_id)\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            if is_invalid_input(e):
                raise ResourceNotFound(not_found_message)
            raise
        if not result.data:
            raise ResourceNotFound(not_found_message)
