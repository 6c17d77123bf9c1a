from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..idempotency import idempotency_headers
from ..models_returns import ReturnCreateRequest, ReturnRecord
from ..routes import DASHBOARD_STATS_PATH, PRODUCTS_PATH, RETURNS_PATH
from .base import BaseClient, _coerce_model, _expect_list

RETURN_INVALIDATES: tuple[str, ...] = (PRODUCTS_PATH, RETURNS_PATH, DASHBOARD_STATS_PATH)


@dataclass
class ReturnsClient(BaseClient):
    def create_return(
        self,
        payload: ReturnCreateRequest | Mapping[str, Any],
        idempotency_key: str | None = None,
    ) -> ReturnRecord:
        request = _coerce_model(payload, ReturnCreateRequest)
        data = self._request(
            "POST",
            RETURNS_PATH,
            json_body=request.to_payload(),
            headers=idempotency_headers(idempotency_key),
            module="returns",
            operation="create_return",
            invalidate_paths=list(RETURN_INVALIDATES),
        )
        if data is None:
            return ReturnRecord()
        if not isinstance(data, dict):
            raise ValueError("Expected create return response to be a JSON object")
        return ReturnRecord.model_validate(data)

    def list_returns(self, *, use_cache: bool = True) -> list[ReturnRecord]:
        data = self._request(
            "GET",
            RETURNS_PATH,
            module="returns",
            operation="list_returns",
            use_get_cache=use_cache,
        )
        return [ReturnRecord.model_validate(row) for row in _expect_list(data, "list returns")]
