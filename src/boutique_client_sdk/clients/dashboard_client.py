from __future__ import annotations

from dataclasses import dataclass

from ..models import DashboardStats
from ..routes import DASHBOARD_STATS_PATH
from .base import BaseClient, _expect_object


@dataclass
class DashboardClient(BaseClient):
    def get_stats(self, *, use_cache: bool = True) -> DashboardStats:
        data = self._request(
            "GET",
            DASHBOARD_STATS_PATH,
            module="dashboard",
            operation="get_stats",
            use_get_cache=use_cache,
        )
        return DashboardStats.model_validate(_expect_object(data, "dashboard stats"))
