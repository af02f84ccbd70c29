"""
Product Pydantic models
"""

from typing import Any, Mapping, Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, validator


class ProductFields(BaseModel):
    """Mutable product fields shared by create and update requests"""
    name: str = Field(..., max_length=255, description="Product name")
    description: Optional[str] = Field(None, description="Free-form description")
    price: Decimal = Field(..., description="Unit price, stored as DECIMAL(10,2)")

    @validator('name')
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError('name cannot be empty')
        return v


class ProductCreateRequest(ProductFields):
    pass


class ProductUpdateRequest(ProductFields):
    """Full replacement of name, description and price"""
    pass


class ProductResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ProductResponse":
        """Map a Products row to the wire shape"""
        return cls(
            id=record['id'],
            name=record['name'],
            description=record['description'],
            price=float(record['price']),
            createdAt=record['created_at']
        )
