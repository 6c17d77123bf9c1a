from __future__ import annotations

from dataclasses import dataclass

from .clients.dashboard_client import DashboardClient
from .clients.products_client import ProductsClient
from .clients.returns_client import ReturnsClient
from .clients.sales_client import SalesClient
from .config import ClientConfig
from .http_client import HttpClient
from .tracing import TraceContext


@dataclass
class ApiSession:
    """One shared HTTP client (and GET cache) for every resource client."""

    config: ClientConfig
    trace: TraceContext | None = None
    token: str | None = None
    http: HttpClient | None = None

    def __post_init__(self) -> None:
        self.trace = self.trace or TraceContext()
        self.token = self.token or self.config.access_token
        if self.http is None:
            self.http = HttpClient(config=self.config, trace=self.trace)

    def products_client(self) -> ProductsClient:
        return ProductsClient(http=self.http, access_token=self.token)

    def sales_client(self) -> SalesClient:
        return SalesClient(http=self.http, access_token=self.token)

    def returns_client(self) -> ReturnsClient:
        return ReturnsClient(http=self.http, access_token=self.token)

    def dashboard_client(self) -> DashboardClient:
        return DashboardClient(http=self.http, access_token=self.token)
