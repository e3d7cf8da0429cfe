from fastapi import APIRouter, Depends
from studio.core.dependencies import get_current_user
from studio.database.supabase_client import get_supabase
from studio.modules.models.schemas import (
    DeleteResponse, ModelEnvelope, ModelListResponse, ModelUpdate
)
from studio.modules.models.service import ModelService
from studio.modules.users.schemas import UserResponse
from supabase import Client

router = APIRouter(prefix="/models", tags=["models"])


def get_model_service(supabase: Client = Depends(get_supabase)) -> ModelService:
    return ModelService(supabase)


@router.get("", response_model=ModelListResponse)
async def list_models(
    current_user: UserResponse = Depends(get_current_user),
    service: ModelService = Depends(get_model_service)
):
    """List the current user's models"""
    return ModelListResponse(models=service.list_models(current_user.id))


@router.get("/{model_id}", response_model=ModelEnvelope)
async def get_model(
    model_id: str,
    current_user: UserResponse = Depends(get_current_user),
    service: ModelService = Depends(get_model_service)
):
    return ModelEnvelope(model=service.get_model(model_id, current_user.id))


@router.patch("/{model_id}", response_model=ModelEnvelope)
async def update_model(
    model_id: str,
    model_data: ModelUpdate,
    current_user: UserResponse = Depends(get_current_user),
    service: ModelService = Depends(get_model_service)
):
    """Rename a model; name and tag are made unique among the user's models"""
    return ModelEnvelope(model=service.rename_model(model_id, current_user.id, model_data))


@router.delete("/{model_id}", response_model=DeleteResponse)
async def delete_model(
    model_id: str,
    current_user: UserResponse = Depends(get_current_user),
    service: ModelService = Depends(get_model_service)
):
    service.delete_model(model_id, current_user.id)
    return DeleteResponse(success=True)
