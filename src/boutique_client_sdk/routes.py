from __future__ import annotations

PRODUCTS_PATH = "/api/products"
SALES_PATH = "/api/sales"
RETURNS_PATH = "/api/returns"
DASHBOARD_STATS_PATH = "/api/dashboard/stats"


def product_path(product_id: str) -> str:
    return f"{PRODUCTS_PATH}/{product_id}"
