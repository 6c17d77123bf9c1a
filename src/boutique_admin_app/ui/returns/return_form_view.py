from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from boutique_client_sdk import DEFAULT_ERROR_MESSAGE, ProductSummary, SaleSummary, new_idempotency_key

from ...services.returns_service import ReturnsService, ReturnsServiceError
from ..shared.notification_center import LEVEL_ERROR, LEVEL_SUCCESS, NotificationCenter
from ..shared.query_cache import DASHBOARD_STATS_KEY, PRODUCTS_KEY, RETURNS_KEY, SALES_KEY, QueryCache
from .draft import ReturnDraft, ReturnItemDraft
from .rules import (
    RETURN_TYPE_LABELS,
    build_return_payload,
    derive_default_refund,
    find_sale,
    sale_details,
    sale_option_label,
    validate_return_draft,
)

logger = logging.getLogger(__name__)

RETURN_INVALIDATION_KEYS: tuple[str, ...] = (RETURNS_KEY, PRODUCTS_KEY, DASHBOARD_STATS_KEY)

SUCCESS_TITLE = "Return recorded"
SUCCESS_MESSAGE = "The return was saved and inventory has been updated."
ERROR_TITLE = "Could not record the return"


@dataclass
class ReturnFormView:
    service: ReturnsService
    cache: QueryCache = field(default_factory=QueryCache)
    notifications: NotificationCenter = field(default_factory=NotificationCenter)
    on_close: Callable[[], None] | None = None
    currency_label: str = "AED"
    draft: ReturnDraft | None = None
    # shared by every submit of the same draft
    idempotency_key: str | None = None
    sales: list[SaleSummary] = field(default_factory=list)
    products: list[ProductSummary] = field(default_factory=list)
    field_errors: dict[str, str] = field(default_factory=dict)
    error_message: str | None = None
    trace_id: str | None = None
    is_open: bool = False
    is_submitting: bool = False

    def open(self) -> dict[str, Any]:
        self.draft = ReturnDraft()
        self.idempotency_key = new_idempotency_key()
        self.field_errors = {}
        self.error_message = None
        self.trace_id = None
        self.is_open = True
        try:
            self.sales = self.cache.fetch(SALES_KEY, self.service.list_sales)
            self.products = self.cache.fetch(PRODUCTS_KEY, self.service.list_products)
        except ReturnsServiceError as exc:
            self.error_message = exc.message
            self.trace_id = exc.trace_id
            return {"ok": False, "error": exc.message, "trace_id": exc.trace_id}
        return {"ok": True, "sales": len(self.sales), "products": len(self.products)}

    def selected_sale(self) -> SaleSummary | None:
        if self.draft is None:
            return None
        return find_sale(self.sales, self.draft.original_sale_id)

    def select_sale(self, sale_id: str) -> dict[str, Any]:
        draft = self._require_draft()
        draft.set_field("original_sale_id", sale_id)
        draft.set_field("refund_amount", derive_default_refund(self.sales, sale_id, draft.refund_amount))
        return {"ok": True, "refund_amount": draft.refund_amount}

    def set_field(self, name: str, value: Any) -> dict[str, Any]:
        if name == "original_sale_id":
            return self.select_sale("" if value is None else str(value))
        return self._require_draft().set_field(name, value)

    def set_item_field(self, index: int, name: str, value: Any) -> dict[str, Any]:
        return self._require_draft().set_item_field(index, name, value)

    def add_item(self, default: ReturnItemDraft | dict[str, Any] | None = None) -> dict[str, Any]:
        return self._require_draft().append_item(default)

    def remove_item(self, index: int) -> dict[str, Any]:
        return self._require_draft().remove_item(index)

    def submit(self) -> dict[str, Any]:
        if self.draft is None:
            return {"ok": False, "error": "Return form is not open"}
        if self.is_submitting:
            return {"ok": False, "error": "Return submission already in progress"}

        validation = validate_return_draft(self.draft)
        if not validation.ok:
            self.field_errors = validation.field_errors
            return {
                "ok": False,
                "error": "Invalid return",
                "field_errors": dict(validation.field_errors),
                "issues": validation.summary,
            }
        self.field_errors = {}

        payload = build_return_payload(self.draft)
        logger.info(
            "return_submit_attempt",
            extra={"original_sale_id": self.draft.original_sale_id, "item_count": len(self.draft.items)},
        )
        self.is_submitting = True
        try:
            record = self.service.create_return(payload, idempotency_key=self.idempotency_key)
        except ReturnsServiceError as exc:
            message = exc.message or DEFAULT_ERROR_MESSAGE
            self.error_message = message
            self.trace_id = exc.trace_id
            self.notifications.push(
                level=LEVEL_ERROR,
                title=ERROR_TITLE,
                message=message,
                details={"trace_id": exc.trace_id} if exc.trace_id else None,
            )
            return {"ok": False, "error": message, "trace_id": exc.trace_id, "details": exc.details, "not_applied": True}
        finally:
            self.is_submitting = False

        invalidated = self.cache.invalidate(RETURN_INVALIDATION_KEYS)
        self.notifications.push(level=LEVEL_SUCCESS, title=SUCCESS_TITLE, message=SUCCESS_MESSAGE)
        logger.info("return_submit_success", extra={"return_id": record.id})
        self._close()
        return {"ok": True, "return_id": record.id, "invalidated": invalidated}

    def cancel(self) -> dict[str, Any]:
        self._close()
        return {"ok": True}

    def render(self) -> dict[str, Any]:
        if self.draft is None:
            return {"open": False}
        sale = self.selected_sale()
        return {
            "open": self.is_open,
            "values": self.draft.snapshot(),
            "field_errors": dict(self.field_errors),
            "sale_options": [
                {"value": row.id, "label": sale_option_label(row, self.currency_label)} for row in self.sales
            ],
            "return_type_options": [{"value": key, "label": label} for key, label in RETURN_TYPE_LABELS.items()],
            "product_options": [
                {"value": row.id, "label": f"{row.model_number} - {row.company_name}"} for row in self.products
            ],
            "sale_details": sale_details(sale, self.currency_label) if sale else None,
            "item_keys": [item.key for item in self.draft.items],
            "can_remove_items": self.draft.can_remove_items(),
            "submit_enabled": not self.is_submitting,
            "submit_label": "Saving..." if self.is_submitting else "Record return",
            "error": self.error_message,
            "trace_id": self.trace_id,
        }

    def _require_draft(self) -> ReturnDraft:
        if self.draft is None:
            raise RuntimeError("Return form is not open")
        return self.draft

    def _close(self) -> None:
        self.draft = None
        self.idempotency_key = None
        self.field_errors = {}
        self.is_open = False
        if self.on_close:
            self.on_close()
