from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import responses

from boutique_client_sdk import DEFAULT_ERROR_MESSAGE, ApiSession, ProductSummary, ReturnRecord, SaleSummary
from boutique_client_sdk.idempotency import IDEMPOTENCY_HEADER

from boutique_admin_app.services.returns_service import ReturnsService, ReturnsServiceError
from boutique_admin_app.ui.returns.return_form_view import (
    SUCCESS_MESSAGE,
    ReturnFormView,
)
from boutique_admin_app.ui.shared.query_cache import (
    DASHBOARD_STATS_KEY,
    PRODUCTS_KEY,
    RETURNS_KEY,
    SALES_KEY,
    QueryCache,
)


@dataclass
class FakeReturnsService:
    sales: list[SaleSummary] = field(default_factory=list)
    products: list[ProductSummary] = field(default_factory=list)
    fail_create: Exception | None = None
    create_calls: list[Any] = field(default_factory=list)
    idempotency_keys: list[str | None] = field(default_factory=list)
    on_create: Any = None

    def list_sales(self) -> list[SaleSummary]:
        return self.sales

    def list_products(self) -> list[ProductSummary]:
        return self.products

    def create_return(self, payload: Any, idempotency_key: str | None = None) -> ReturnRecord:
        self.create_calls.append(payload)
        self.idempotency_keys.append(idempotency_key)
        if self.on_create:
            self.on_create()
        if self.fail_create:
            raise self.fail_create
        return ReturnRecord(id="R1")


def _fill_scenario_draft(form: ReturnFormView) -> None:
    form.select_sale("S1")
    form.set_field("return_type", "refund")
    form.set_field("refund_amount", "150.00")
    form.set_item_field(0, "product_id", "P1")
    form.set_item_field(0, "color", "أسود")
    form.set_item_field(0, "size", "L")
    form.set_item_field(0, "quantity", 2)


def _register_lists(base_url: str, sale_row, product_row) -> None:
    responses.add(responses.GET, f"{base_url}/api/sales", json=[sale_row("S1", total="150.00")], status=200)
    responses.add(responses.GET, f"{base_url}/api/products", json=[product_row("P1")], status=200)


def _seed_cache(cache: QueryCache) -> None:
    for key in (PRODUCTS_KEY, RETURNS_KEY, DASHBOARD_STATS_KEY):
        cache.fetch(key, lambda: ["stale"])


@responses.activate
def test_scenario_success_invalidates_and_closes(session: ApiSession, base_url: str, sale_row, product_row) -> None:
    _register_lists(base_url, sale_row, product_row)
    responses.add(responses.POST, f"{base_url}/api/returns", json={"id": "R1"}, status=201)
    cache = QueryCache()
    refetched: list[str] = []
    cache.subscribe(DASHBOARD_STATS_KEY, refetched.append)
    closed: list[bool] = []
    form = ReturnFormView(service=ReturnsService(session), cache=cache, on_close=lambda: closed.append(True))
    assert form.open()["ok"] is True
    _seed_cache(cache)
    _fill_scenario_draft(form)

    result = form.submit()

    assert result["ok"] is True
    assert result["return_id"] == "R1"
    assert form.notifications.latest()["level"] == "success"
    assert form.notifications.latest()["message"] == SUCCESS_MESSAGE
    for key in (PRODUCTS_KEY, RETURNS_KEY, DASHBOARD_STATS_KEY):
        assert cache.is_cached(key) is False
    assert cache.is_cached(SALES_KEY) is True
    assert refetched == [DASHBOARD_STATS_KEY]
    assert form.draft is None
    assert form.is_open is False
    assert closed == [True]
    body = json.loads(responses.calls[-1].request.body)
    assert body == {
        "return": {"originalSaleId": "S1", "returnType": "refund", "refundAmount": "150.00"},
        "items": [{"productId": "P1", "color": "أسود", "size": "L", "quantity": 2}],
    }


@responses.activate
def test_scenario_server_error_keeps_draft(session: ApiSession, base_url: str, sale_row, product_row) -> None:
    _register_lists(base_url, sale_row, product_row)
    responses.add(responses.POST, f"{base_url}/api/returns", json={"message": "stock mismatch"}, status=500)
    cache = QueryCache()
    form = ReturnFormView(service=ReturnsService(session), cache=cache)
    form.open()
    _seed_cache(cache)
    _fill_scenario_draft(form)
    before = form.draft.snapshot()
    keys_before = [item.key for item in form.draft.items]

    result = form.submit()

    assert result["ok"] is False
    assert result["error"] == "stock mismatch"
    assert form.notifications.latest()["level"] == "error"
    assert form.notifications.latest()["message"] == "stock mismatch"
    assert form.draft is not None
    assert form.draft.snapshot() == before
    assert [item.key for item in form.draft.items] == keys_before
    assert form.is_open is True
    assert form.is_submitting is False
    assert cache.is_cached(PRODUCTS_KEY) is True
    assert len([call for call in responses.calls if call.request.method == "POST"]) == 1


@responses.activate
def test_scenario_invalid_items_never_reach_network(session: ApiSession, base_url: str, sale_row, product_row) -> None:
    _register_lists(base_url, sale_row, product_row)
    form = ReturnFormView(service=ReturnsService(session))
    form.open()
    form.select_sale("S1")
    form.set_field("return_type", "refund")
    calls_before = len(responses.calls)

    result = form.submit()

    assert result["ok"] is False
    assert set(result["field_errors"]) == {"items[0].product_id", "items[0].color", "items[0].size"}
    assert form.render()["field_errors"] == result["field_errors"]
    assert len(responses.calls) == calls_before
    assert form.notifications.messages == []


def test_selecting_sale_overwrites_refund_once_and_stays_editable() -> None:
    service = FakeReturnsService(
        sales=[
            SaleSummary(id="S1", invoice_number="INV-1", total="150.00", channel="online", payment_method="card"),
            SaleSummary(id="S2", invoice_number="INV-2", total="90.00"),
        ]
    )
    form = ReturnFormView(service=service)
    form.open()
    assert form.draft.refund_amount == "0"

    form.set_field("original_sale_id", "S1")
    assert form.draft.refund_amount == "150.00"
    form.set_field("refund_amount", "120.00")
    assert form.draft.refund_amount == "120.00"

    form.select_sale("gone")
    assert form.draft.original_sale_id == "gone"
    assert form.draft.refund_amount == "120.00"

    form.select_sale("S2")
    assert form.draft.refund_amount == "90.00"


def test_render_shows_selected_sale_details() -> None:
    service = FakeReturnsService(
        sales=[SaleSummary(id="S1", invoice_number="INV-1", total="150.00", channel="online", payment_method="card")],
        products=[ProductSummary(id="P1", model_number="M-1", company_name="Lamasat")],
    )
    form = ReturnFormView(service=service, currency_label="AED")
    form.open()
    form.select_sale("S1")

    rendered = form.render()

    assert rendered["sale_options"] == [{"value": "S1", "label": "INV-1 - 150.00 AED"}]
    assert rendered["product_options"] == [{"value": "P1", "label": "M-1 - Lamasat"}]
    assert rendered["sale_details"]["channel"] == "Online"
    assert rendered["can_remove_items"] is False
    assert rendered["submit_enabled"] is True


def test_lists_are_fetched_once_per_cache() -> None:
    calls: list[str] = []

    class CountingService(FakeReturnsService):
        def list_sales(self) -> list[SaleSummary]:
            calls.append("sales")
            return []

    cache = QueryCache()
    service = CountingService()
    ReturnFormView(service=service, cache=cache).open()
    ReturnFormView(service=service, cache=cache).open()

    assert calls == ["sales"]


def test_submit_rejected_while_in_flight() -> None:
    service = FakeReturnsService(
        sales=[SaleSummary(id="S1", invoice_number="INV-1", total="150.00")],
    )
    form = ReturnFormView(service=service)
    nested: list[dict[str, Any]] = []
    service.on_create = lambda: nested.append(form.submit())
    form.open()
    _fill_scenario_draft(form)

    result = form.submit()

    assert result["ok"] is True
    assert nested[0]["ok"] is False
    assert "in progress" in nested[0]["error"]
    assert len(service.create_calls) == 1


def test_failure_without_message_uses_generic_fallback() -> None:
    service = FakeReturnsService(
        sales=[SaleSummary(id="S1", invoice_number="INV-1", total="150.00")],
        fail_create=ReturnsServiceError(message=""),
    )
    form = ReturnFormView(service=service)
    form.open()
    _fill_scenario_draft(form)

    result = form.submit()

    assert result["error"] == DEFAULT_ERROR_MESSAGE
    assert form.notifications.latest()["message"] == DEFAULT_ERROR_MESSAGE
    assert form.draft is not None


def test_cancel_discards_draft() -> None:
    closed: list[bool] = []
    form = ReturnFormView(service=FakeReturnsService(), on_close=lambda: closed.append(True))
    form.open()
    form.add_item()

    form.cancel()

    assert form.draft is None
    assert closed == [True]
    assert form.render() == {"open": False}
    assert form.submit()["ok"] is False


@responses.activate
def test_created_without_json_body_counts_as_success(session: ApiSession, base_url: str, sale_row, product_row) -> None:
    _register_lists(base_url, sale_row, product_row)
    responses.add(responses.POST, f"{base_url}/api/returns", body="Created", status=201)
    cache = QueryCache()
    form = ReturnFormView(service=ReturnsService(session), cache=cache)
    form.open()
    _seed_cache(cache)
    _fill_scenario_draft(form)

    result = form.submit()

    assert result["ok"] is True
    assert form.notifications.latest()["level"] == "success"
    assert form.draft is None
    assert cache.is_cached(PRODUCTS_KEY) is False


@responses.activate
def test_resubmit_after_failure_reuses_idempotency_key(
    session: ApiSession, base_url: str, sale_row, product_row
) -> None:
    _register_lists(base_url, sale_row, product_row)
    responses.add(responses.POST, f"{base_url}/api/returns", json={"message": "busy"}, status=503)
    responses.add(responses.POST, f"{base_url}/api/returns", json={"id": "R1"}, status=201)
    form = ReturnFormView(service=ReturnsService(session))
    form.open()
    _fill_scenario_draft(form)

    assert form.submit()["ok"] is False
    assert form.submit()["ok"] is True

    posts = [call for call in responses.calls if call.request.method == "POST"]
    assert len(posts) == 2
    assert posts[0].request.headers[IDEMPOTENCY_HEADER] == posts[1].request.headers[IDEMPOTENCY_HEADER]


@responses.activate
def test_server_error_without_message_uses_default_message(
    session: ApiSession, base_url: str, sale_row, product_row
) -> None:
    _register_lists(base_url, sale_row, product_row)
    responses.add(responses.POST, f"{base_url}/api/returns", body="", status=500)
    form = ReturnFormView(service=ReturnsService(session))
    form.open()
    _fill_scenario_draft(form)

    result = form.submit()

    assert result["error"] == DEFAULT_ERROR_MESSAGE
    assert form.notifications.latest()["message"] == DEFAULT_ERROR_MESSAGE


def test_each_draft_gets_its_own_idempotency_key() -> None:
    service = FakeReturnsService(sales=[SaleSummary(id="S1", invoice_number="INV-1", total="150.00")])
    form = ReturnFormView(service=service)

    form.open()
    _fill_scenario_draft(form)
    form.submit()
    form.open()
    _fill_scenario_draft(form)
    form.submit()

    assert len(service.idempotency_keys) == 2
    assert all(service.idempotency_keys)
    assert service.idempotency_keys[0] != service.idempotency_keys[1]
