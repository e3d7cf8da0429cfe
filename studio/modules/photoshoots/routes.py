from fastapi import APIRouter, Depends
from studio.core.dependencies import get_current_user
from studio.database.supabase_client import get_supabase
from studio.modules.photoshoots.schemas import (
    PhotoshootCreate, PhotoshootCreatedResponse, PhotoshootEnvelope, PhotoshootListResponse
)
from studio.modules.photoshoots.service import PhotoshootService
from studio.modules.users.schemas import UserResponse
from supabase import Client

router = APIRouter(prefix="/photoshoots", tags=["photoshoots"])


def get_photoshoot_service(supabase: Client = Depends(get_supabase)) -> PhotoshootService:
    return PhotoshootService(supabase)


@router.get("", response_model=PhotoshootListResponse)
async def list_photoshoots(
    current_user: UserResponse = Depends(get_current_user),
    service: PhotoshootService = Depends(get_photoshoot_service)
):
    """List the current user's photoshoots with a total count"""
    photoshoots = service.list_photoshoots(current_user.id)
    return PhotoshootListResponse(photoshoots=photoshoots, total=len(photoshoots))


@router.post("", response_model=PhotoshootCreatedResponse, status_code=201)
async def create_photoshoot(
    shoot_data: PhotoshootCreate,
    current_user: UserResponse = Depends(get_current_user),
    service: PhotoshootService = Depends(get_photoshoot_service)
):
    """Create a pending photoshoot"""
    return PhotoshootCreatedResponse(success=True, photoshoot=service.create_photoshoot(shoot_data, current_user.id))


@router.get("/{photoshoot_id}", response_model=PhotoshootEnvelope)
async def get_photoshoot(
    photoshoot_id: str,
    current_user: UserResponse = Depends(get_current_user),
    service: PhotoshootService = Depends(get_photoshoot_service)
):
    """Get a photoshoot with related product and model data"""
    return PhotoshootEnvelope(photoshoot=service.get_photoshoot(photoshoot_id, current_user.id))
