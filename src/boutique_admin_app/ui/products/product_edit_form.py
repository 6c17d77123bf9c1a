from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from boutique_client_sdk import Product, ProductUpdateRequest

from ...services.products_service import ProductsService, ProductsServiceError
from ..shared.notification_center import LEVEL_ERROR, LEVEL_SUCCESS, NotificationCenter
from ..shared.query_cache import PRODUCTS_KEY, QueryCache
from ..shared.validators import validate_product_form
from .product_table_view import PRODUCT_TYPE_LABELS

logger = logging.getLogger(__name__)

FORM_FIELDS: tuple[str, ...] = ("model_number", "company_name", "product_type", "store_price", "online_price")

SUCCESS_TITLE = "Updated"
SUCCESS_MESSAGE = "The product was updated successfully."
ERROR_TITLE = "Error"
ERROR_MESSAGE = "An error occurred while updating the product."


def _form_data(product: Product) -> dict[str, str]:
    return {
        "model_number": product.model_number,
        "company_name": product.company_name,
        "product_type": product.product_type or "",
        "store_price": str(product.store_price or ""),
        "online_price": str(product.online_price or ""),
    }


@dataclass
class ProductEditForm:
    product: Product
    service: ProductsService
    cache: QueryCache = field(default_factory=QueryCache)
    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    on_close: Callable[[], None] | None = None
    form_data: dict[str, str] = field(default_factory=dict)
    field_errors: dict[str, str] = field(default_factory=dict)
    is_open: bool = True
    is_submitting: bool = False

    def __post_init__(self) -> None:
        if not self.form_data:
            self.form_data = _form_data(self.product)

    def set_field(self, name: str, value: Any) -> dict[str, Any]:
        if name not in FORM_FIELDS:
            return {"ok": False, "error": f"unknown field: {name}"}
        self.form_data = {**self.form_data, name: "" if value is None else str(value)}
        return {"ok": True, "field": name, "value": self.form_data[name]}

    def submit(self) -> dict[str, Any]:
        if not self.is_open:
            return {"ok": False, "error": "Product form is closed"}
        if self.is_submitting:
            return {"ok": False, "error": "Product update already in progress"}
        validation = validate_product_form(self.form_data)
        if not validation.ok:
            self.field_errors = validation.field_errors
            return {"ok": False, "error": "Invalid product", "field_errors": dict(validation.field_errors)}
        self.field_errors = {}

        request = ProductUpdateRequest.model_validate(self.form_data)
        self.is_submitting = True
        try:
            updated = self.service.update_product(self.product.id, request)
        except ProductsServiceError as exc:
            self.notifications.push(
                level=LEVEL_ERROR,
                title=ERROR_TITLE,
                message=ERROR_MESSAGE,
                details={"reason": exc.message, "trace_id": exc.trace_id},
            )
            return {"ok": False, "error": ERROR_MESSAGE, "trace_id": exc.trace_id, "not_applied": True}
        finally:
            self.is_submitting = False

        self.cache.invalidate([PRODUCTS_KEY])
        self.notifications.push(level=LEVEL_SUCCESS, title=SUCCESS_TITLE, message=SUCCESS_MESSAGE)
        self.close()
        return {"ok": True, "product_id": updated.id}

    def close(self) -> None:
        self.is_open = False
        if self.on_close:
            self.on_close()

    def render(self) -> dict[str, Any]:
        return {
            "open": self.is_open,
            "title": f"Edit product - {self.product.model_number}",
            "values": dict(self.form_data),
            "field_errors": dict(self.field_errors),
            "product_type_options": [{"value": key, "label": label} for key, label in PRODUCT_TYPE_LABELS.items()],
            "submit_enabled": not self.is_submitting,
            "submit_label": "Updating..." if self.is_submitting else "Save changes",
        }
