from datetime import datetime, timezone
from supabase import Client
from studio.core.errors import BadRequest, ResourceNotFound, UpstreamFailure, is_invalid_input
from studio.core.naming import generate_tag, generate_unique_name
from studio.modules.models.schemas import ModelResponse, ModelUpdate
from fastapi import HTTPException
from typing import List
import logging

logger = logging.getLogger(__name__)


class ModelService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_models(self, user_id: str) -> List[ModelResponse]:
        """List the user's models, newest first"""
        try:
            result = self.supabase.table("models")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return [ModelResponse(**model) for model in result.data or []]
        except Exception as e:
            logger.error(f"Error listing models for {user_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to fetch models")

    def get_model(self, model_id: str, user_id: str) -> ModelResponse:
        """Get one of the user's models; another owner's model is reported as not found"""
        try:
            result = self.supabase.table("models")\
                .select("*")\
                .eq("id", model_id)\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            if is_invalid_input(e):
                raise ResourceNotFound("Model not found")
            logger.error(f"Error fetching model {model_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to fetch model")

        if not result.data:
            raise ResourceNotFound("Model not found")
        return ModelResponse(**result.data[0])

    def rename_model(self, model_id: str, user_id: str, model_data: ModelUpdate) -> ModelResponse:
        """Rename a model, suffixing a number when the owner already has one by that name"""
        if not model_data.name or not model_data.name.strip():
            raise BadRequest("Model name is required")

        self.get_model(model_id, user_id)
        try:
            siblings = self.supabase.table("models")\
                .select("name")\
                .eq("user_id", user_id)\
                .neq("id", model_id)\
                .execute()
            unique_name = generate_unique_name(model_data.name, [m["name"] for m in siblings.data or []])

            result = self.supabase.table("models")\
                .update({
                    "name": unique_name,
                    "tag": generate_tag(unique_name),
                    "updated_at": datetime.now(timezone.utc).isoformat()
                })\
                .eq("id", model_id)\
                .eq("user_id", user_id)\
                .execute()
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error renaming model {model_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to update model")

        if not result.data:
            raise ResourceNotFound("Model not found")
        return ModelResponse(**result.data[0])

    def delete_model(self, model_id: str, user_id: str) -> None:
        """Delete one of the user's models"""
        self.get_model(model_id, user_id)
        try:
            self.supabase.table("models")\
                .delete()\
                .eq("id", model_id)\
                .eq("user_id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting model {model_id}: {e}")
            raise UpstreamFailure(str(e), fallback="Failed to delete model")
        logger.info(f"Deleted model {model_id}")
