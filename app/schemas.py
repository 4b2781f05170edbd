# app/schemas.py
# Role: Request / response models for the JSON API.

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str


class TransactionCreate(BaseModel):
    """Body of POST /transactions."""

    title: str = Field(..., min_length=1)
    value: float = Field(..., ge=0)
    type: Literal["income", "outcome"]
    category: str = Field(..., min_length=1)

    @field_validator("title", "category")
    @classmethod
    def strip_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    value: float
    type: Literal["income", "outcome"]
    category_id: Optional[UUID] = None
    category: Optional[CategoryOut] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Balance(BaseModel):
    income: float
    outcome: float
    total: float


class TransactionList(BaseModel):
    transactions: List[TransactionOut]
    balance: Balance
