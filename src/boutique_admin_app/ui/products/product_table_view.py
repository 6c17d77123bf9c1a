from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from boutique_client_sdk import Product

from ...services.products_service import ProductsService, ProductsServiceError
from ..shared.query_cache import PRODUCTS_KEY, QueryCache
from ..shared.view_state import resolve_state

logger = logging.getLogger(__name__)

STATUS_FILTER_ALL = "all"
STATUS_FILTER_OPTIONS = {
    STATUS_FILTER_ALL: "All products",
    "in-stock": "In stock",
    "low-stock": "Low stock",
    "out-of-stock": "Out of stock",
}
STATUS_LABELS = {
    "in-stock": "In stock",
    "low-stock": "Low stock",
    "out-of-stock": "Out of stock",
}
UNKNOWN_STATUS_LABEL = "Unknown"
PRODUCT_TYPE_LABELS = {
    "dress": "Dress",
    "evening-wear": "Evening wear",
    "hijab": "Hijab",
    "abaya": "Abaya",
    "accessories": "Accessories",
}


def filter_products(
    products: Iterable[Product] | None,
    search_term: str = "",
    status_filter: str = STATUS_FILTER_ALL,
) -> list[Product]:
    needle = (search_term or "").lower()
    matches: list[Product] = []
    for product in products or ():
        matches_search = needle in product.model_number.lower() or needle in product.company_name.lower()
        matches_status = status_filter == STATUS_FILTER_ALL or product.status == status_filter
        if matches_search and matches_status:
            matches.append(product)
    return matches


def product_type_label(product_type: str | None) -> str:
    if not product_type:
        return ""
    return PRODUCT_TYPE_LABELS.get(product_type, product_type)


def status_label(status: str | None) -> str:
    return STATUS_LABELS.get(status or "", UNKNOWN_STATUS_LABEL)


@dataclass
class ProductTableView:
    service: ProductsService
    cache: QueryCache = field(default_factory=QueryCache)
    currency_label: str = "AED"
    search_term: str = ""
    status_filter: str = STATUS_FILTER_ALL
    products: list[Product] = field(default_factory=list)
    is_loading: bool = False
    error_message: str | None = None
    trace_id: str | None = None
    _unsubscribe: Callable[[], None] | None = None

    def load(self) -> bool:
        self.is_loading = True
        try:
            self.products = self.cache.fetch(PRODUCTS_KEY, self.service.list_products)
            self.error_message = None
            self.trace_id = None
            return True
        except ProductsServiceError as exc:
            logger.warning("product_list_failure", extra={"error_message": exc.message, "trace_id": exc.trace_id})
            self.error_message = exc.message
            self.trace_id = exc.trace_id
            return False
        finally:
            self.is_loading = False

    def watch(self) -> None:
        """Refetch whenever the products key is invalidated."""
        if self._unsubscribe is None:
            self._unsubscribe = self.cache.subscribe(PRODUCTS_KEY, lambda _key: self.load())

    def unwatch(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def set_search(self, term: str) -> None:
        self.search_term = term or ""

    def set_status_filter(self, status: str) -> dict[str, Any]:
        if status not in STATUS_FILTER_OPTIONS:
            return {"ok": False, "error": f"unknown status filter: {status}"}
        self.status_filter = status
        return {"ok": True}

    def visible_products(self) -> list[Product]:
        return filter_products(self.products, self.search_term, self.status_filter)

    def render(self) -> dict[str, Any]:
        visible = self.visible_products()
        state = resolve_state(
            is_loading=self.is_loading,
            error=self.error_message,
            total_rows=len(self.products),
            visible_rows=len(visible),
            trace_id=self.trace_id,
        )
        return {
            "state": state.render(),
            "search_term": self.search_term,
            "status_filter": self.status_filter,
            "status_filter_options": [{"value": key, "label": label} for key, label in STATUS_FILTER_OPTIONS.items()],
            "rows": [self._row(position, product) for position, product in enumerate(visible, start=1)],
        }

    def _row(self, position: int, product: Product) -> dict[str, Any]:
        return {
            "position": position,
            "id": product.id,
            "model_number": product.model_number,
            "company_name": product.company_name,
            "product_type": product_type_label(product.product_type),
            "store_price": f"{product.store_price} {self.currency_label}",
            "online_price": f"{product.online_price} {self.currency_label}",
            "total_quantity": f"{product.total_quantity or 0} pcs",
            "status": status_label(product.status),
        }
