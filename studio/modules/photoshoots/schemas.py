from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, List, Optional
from datetime import datetime


class PhotoshootCreate(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    name: Optional[str] = None
    product_id: Optional[str] = None
    type: Optional[str] = None  # "with_model" | "product_only"
    style: Optional[str] = None  # "professional" | "ugc"
    model_id: Optional[str] = None
    scene_details: Optional[Any] = None
    product_analysis: Optional[str] = None
    final_prompt: Optional[str] = None


class PhotoshootResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, extra="allow", protected_namespaces=())

    id: str
    user_id: str
    product_id: str
    model_id: Optional[str] = None
    style_type: str  # "professional" | "ugc"
    scene_description: str
    ai_suggested: bool = False
    generation_settings: Optional[Dict[str, Any]] = None
    status: str = "pending"  # "pending" | "processing" | "completed" | "failed"
    generated_image_url: Optional[str] = None
    generated_images: Optional[List[Dict[str, Any]]] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class PhotoshootEnvelope(BaseModel):
    photoshoot: PhotoshootResponse


class PhotoshootCreatedResponse(BaseModel):
    success: bool = True
    photoshoot: PhotoshootResponse


class PhotoshootListResponse(BaseModel):
    photoshoots: List[PhotoshootResponse]
    total: int
