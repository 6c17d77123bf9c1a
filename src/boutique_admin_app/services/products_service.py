from __future__ import annotations

import logging
from typing import Any, Mapping

from boutique_client_sdk import ApiSession, Product, ProductUpdateRequest

from .errors import ServiceError, normalize_error

logger = logging.getLogger(__name__)


class ProductsServiceError(ServiceError):
    pass


class ProductsService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_products(self) -> list[Product]:
        try:
            return self.session.products_client().list_products()
        except Exception as exc:
            raise self._normalize_error(exc) from exc

    def update_product(self, product_id: str, payload: ProductUpdateRequest | Mapping[str, Any]) -> Product:
        logger.info("product_update_request", extra={"product_id": product_id})
        try:
            product = self.session.products_client().update_product(product_id, payload)
        except Exception as exc:
            error = self._normalize_error(exc)
            logger.warning(
                "product_update_failure",
                extra={"product_id": product_id, "error_message": error.message, "trace_id": error.trace_id},
            )
            raise error from exc
        logger.info("product_update_success", extra={"product_id": product_id})
        return product

    @staticmethod
    def _normalize_error(exc: Exception) -> ProductsServiceError:
        if isinstance(exc, ProductsServiceError):
            return exc
        error = normalize_error(exc, "Products client error")
        return ProductsServiceError(
            message=error.message,
            details=error.details,
            trace_id=error.trace_id,
            status_code=error.status_code,
        )
