# app/domain/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List


class QuantityIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    quantity: int | None = None


class CartItemOut(BaseModel):
    """Schema dla produktu w koszyku (response)."""

    product_id: int = Field(..., alias="productId")
    quantity: int

    model_config = ConfigDict(populate_by_name=True)


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: int
    items: List[CartItemOut]


class MessageOut(BaseModel):
    """Schema dla komunikatu (response)."""

    message: str


class ErrorOut(BaseModel):
    """Schema dla bledu 404 (response)."""

    error: str


class HealthOut(BaseModel):
    """Schema dla health checka (response)."""

    status: str
