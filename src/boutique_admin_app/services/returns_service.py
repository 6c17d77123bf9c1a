from __future__ import annotations

import logging
from typing import Any, Mapping

from boutique_client_sdk import ApiSession, ProductSummary, ReturnCreateRequest, ReturnRecord, SaleSummary

from .errors import ServiceError, normalize_error

logger = logging.getLogger(__name__)


class ReturnsServiceError(ServiceError):
    pass


class ReturnsService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def list_sales(self) -> list[SaleSummary]:
        try:
            return self.session.sales_client().list_sales()
        except Exception as exc:
            raise self._normalize_error(exc) from exc

    def list_products(self) -> list[ProductSummary]:
        try:
            return list(self.session.products_client().list_products())
        except Exception as exc:
            raise self._normalize_error(exc) from exc

    def create_return(
        self,
        payload: ReturnCreateRequest | Mapping[str, Any],
        idempotency_key: str | None = None,
    ) -> ReturnRecord:
        logger.info("return_create_request", extra={"idempotency_key": idempotency_key})
        try:
            record = self.session.returns_client().create_return(payload, idempotency_key=idempotency_key)
        except Exception as exc:
            error = self._normalize_error(exc)
            logger.warning(
                "return_create_failure",
                extra={"error_message": error.message, "trace_id": error.trace_id},
            )
            raise error from exc
        logger.info("return_create_success", extra={"return_id": record.id})
        return record

    @staticmethod
    def _normalize_error(exc: Exception) -> ReturnsServiceError:
        if isinstance(exc, ReturnsServiceError):
            return exc
        error = normalize_error(exc, "Returns client error")
        return ReturnsServiceError(
            message=error.message,
            details=error.details,
            trace_id=error.trace_id,
            status_code=error.status_code,
        )
