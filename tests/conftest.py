from __future__ import annotations

from typing import Any, Callable

import pytest

from boutique_client_sdk import ApiSession, load_config

BASE_URL = "https://api.example.com"


@pytest.fixture(autouse=True)
def _client_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("BOUTIQUE_ENV", "BOUTIQUE_API_BASE_URL_DEV", "BOUTIQUE_ACCESS_TOKEN"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("BOUTIQUE_API_BASE_URL", BASE_URL)
    monkeypatch.setenv("BOUTIQUE_RETRIES", "0")


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def session() -> ApiSession:
    return ApiSession(load_config())


@pytest.fixture
def sale_row() -> Callable[..., dict[str, Any]]:
    def build(sale_id: str = "S1", total: str = "150.00", **overrides: Any) -> dict[str, Any]:
        row = {
            "id": sale_id,
            "invoiceNumber": f"INV-{sale_id}",
            "total": total,
            "channel": "in-store",
            "paymentMethod": "cash",
        }
        row.update(overrides)
        return row

    return build


@pytest.fixture
def product_row() -> Callable[..., dict[str, Any]]:
    def build(product_id: str = "P1", **overrides: Any) -> dict[str, Any]:
        row = {
            "id": product_id,
            "modelNumber": f"M-{product_id}",
            "companyName": "Lamasat",
            "productType": "abaya",
            "storePrice": "250.00",
            "onlinePrice": "270.00",
            "totalQuantity": 12,
            "status": "in-stock",
        }
        row.update(overrides)
        return row

    return build
