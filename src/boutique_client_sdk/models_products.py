from __future__ import annotations

from typing import Literal

from .models import CamelModel

ProductType = Literal["dress", "evening-wear", "hijab", "abaya", "accessories"]
StockStatus = Literal["in-stock", "low-stock", "out-of-stock"]

PRODUCT_TYPES: tuple[str, ...] = ("dress", "evening-wear", "hijab", "abaya", "accessories")
STOCK_STATUSES: tuple[str, ...] = ("in-stock", "low-stock", "out-of-stock")


class ProductSummary(CamelModel):
    id: str
    model_number: str
    company_name: str


class Product(ProductSummary):
    product_type: str | None = None
    store_price: str | None = None
    online_price: str | None = None
    total_quantity: int | None = None
    status: str | None = None


class ProductUpdateRequest(CamelModel):
    model_number: str
    company_name: str
    product_type: ProductType
    store_price: str
    online_price: str
