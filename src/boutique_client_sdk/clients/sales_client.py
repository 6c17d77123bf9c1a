from __future__ import annotations

from dataclasses import dataclass

from ..models_sales import SaleSummary
from ..routes import SALES_PATH
from .base import BaseClient, _expect_list


@dataclass
class SalesClient(BaseClient):
    def list_sales(self, *, use_cache: bool = True) -> list[SaleSummary]:
        data = self._request(
            "GET",
            SALES_PATH,
            module="sales",
            operation="list_sales",
            use_get_cache=use_cache,
        )
        return [SaleSummary.model_validate(row) for row in _expect_list(data, "list sales")]
