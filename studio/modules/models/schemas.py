from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from datetime import datetime


class ModelUpdate(BaseModel):
    name: Optional[str] = None


class ModelResponse(BaseModel):
    id: str
    user_id: str
    name: str
    tag: Optional[str] = None
    image_url: Optional[str] = None
    dimensions: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        extra = "allow"


class ModelEnvelope(BaseModel):
    model: ModelResponse


class ModelListResponse(BaseModel):
    models: List[ModelResponse]


class DeleteResponse(BaseModel):
    success: bool = True
