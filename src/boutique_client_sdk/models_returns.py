from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from .models import CamelModel

ReturnType = Literal["refund", "exchange"]
RETURN_TYPES: tuple[str, ...] = ("refund", "exchange")


class ReturnHeaderCreate(CamelModel):
    original_sale_id: str
    return_type: ReturnType
    refund_amount: str


class ReturnItemCreate(CamelModel):
    product_id: str
    color: str
    size: str
    quantity: int = Field(ge=1)


class ReturnCreateRequest(CamelModel):
    header: ReturnHeaderCreate = Field(alias="return")
    items: list[ReturnItemCreate] = Field(min_length=1)


class ReturnRecord(CamelModel):
    id: str | None = None
    original_sale_id: str | None = None
    return_type: str | None = None
    refund_amount: str | None = None
    created_at: datetime | None = None
