from .dashboard_client import DashboardClient
from .products_client import ProductsClient
from .returns_client import ReturnsClient
from .sales_client import SalesClient

__all__ = [
    "DashboardClient",
    "ProductsClient",
    "ReturnsClient",
    "SalesClient",
]
