from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..models_products import Product, ProductUpdateRequest
from ..routes import PRODUCTS_PATH, product_path
from .base import BaseClient, _coerce_model, _expect_list, _expect_object


@dataclass
class ProductsClient(BaseClient):
    def list_products(self, *, use_cache: bool = True) -> list[Product]:
        data = self._request(
            "GET",
            PRODUCTS_PATH,
            module="products",
            operation="list_products",
            use_get_cache=use_cache,
        )
        return [Product.model_validate(row) for row in _expect_list(data, "list products")]

    def update_product(self, product_id: str, payload: ProductUpdateRequest | Mapping[str, Any]) -> Product:
        request = _coerce_model(payload, ProductUpdateRequest)
        data = self._request(
            "PUT",
            product_path(product_id),
            json_body=request.to_payload(),
            module="products",
            operation="update_product",
            invalidate_paths=[PRODUCTS_PATH],
        )
        return Product.model_validate(_expect_object(data, "update product"))
