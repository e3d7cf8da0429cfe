from pydantic import BaseModel
from typing import Any, Dict, List, Optional
from datetime import datetime


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    physical_dimensions: Optional[Dict[str, Any]] = None


class ProductResponse(BaseModel):
    id: str
    user_id: str
    name: str
    tag: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    dimensions: Optional[Dict[str, Any]] = None
    physical_dimensions: Optional[Dict[str, Any]] = None
    ai_description: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        extra = "allow"


class ProductEnvelope(BaseModel):
    product: ProductResponse


class ProductListResponse(BaseModel):
    products: List[ProductResponse]
    total: int


class ProductDeleteResponse(BaseModel):
    success: bool = True
    message: str
