from __future__ import annotations

from typing import Any, Iterable, Mapping

from boutique_client_sdk import (
    RETURN_TYPES,
    ReturnCreateRequest,
    ReturnHeaderCreate,
    ReturnItemCreate,
    SaleSummary,
)

from ..shared.validators import ValidationResult, is_blank, parse_amount, result_from
from .draft import ReturnDraft

CHANNEL_LABELS = {"online": "Online", "in-store": "In store"}
RETURN_TYPE_LABELS = {"refund": "Refund", "exchange": "Exchange"}


def find_sale(sales: Iterable[SaleSummary] | None, sale_id: str) -> SaleSummary | None:
    for sale in sales or ():
        if sale.id == sale_id:
            return sale
    return None


def derive_default_refund(sales: Iterable[SaleSummary] | None, sale_id: str, current: str) -> str:
    sale = find_sale(sales, sale_id)
    if sale is None:
        return current
    return sale.total


def sale_details(sale: SaleSummary, currency_label: str = "AED") -> dict[str, str]:
    channel = sale.channel or ""
    return {
        "invoice_number": sale.invoice_number,
        "channel": CHANNEL_LABELS.get(channel, channel),
        "payment_method": sale.payment_method or "",
        "total": f"{sale.total} {currency_label}",
    }


def sale_option_label(sale: SaleSummary, currency_label: str = "AED") -> str:
    return f"{sale.invoice_number} - {sale.total} {currency_label}"


def validate_return_draft(draft: ReturnDraft | Mapping[str, Any]) -> ValidationResult:
    data = draft.snapshot() if isinstance(draft, ReturnDraft) else draft
    errors: dict[str, str] = {}

    if is_blank(data.get("original_sale_id")):
        errors["original_sale_id"] = "Original invoice is required."

    return_type = data.get("return_type")
    if is_blank(return_type):
        errors["return_type"] = "Return type is required."
    elif return_type not in RETURN_TYPES:
        errors["return_type"] = "Return type must be refund or exchange."

    refund_amount = data.get("refund_amount")
    if is_blank(refund_amount):
        errors["refund_amount"] = "Refund amount is required."
    elif parse_amount(refund_amount) is None:
        errors["refund_amount"] = "Refund amount must be a non-negative number."

    items = list(data.get("items") or [])
    if not items:
        errors["items"] = "At least one item must be added."
    for idx, item in enumerate(items):
        if is_blank(item.get("product_id")):
            errors[f"items[{idx}].product_id"] = "Product is required."
        if is_blank(item.get("color")):
            errors[f"items[{idx}].color"] = "Color is required."
        if is_blank(item.get("size")):
            errors[f"items[{idx}].size"] = "Size is required."
        quantity = item.get("quantity")
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            errors[f"items[{idx}].quantity"] = "Quantity must be at least 1."

    return result_from(errors)


def build_return_payload(draft: ReturnDraft) -> ReturnCreateRequest:
    """Header fields and item lines only; row keys stay in the form."""
    return ReturnCreateRequest(
        header=ReturnHeaderCreate(
            original_sale_id=draft.original_sale_id,
            return_type=draft.return_type,
            refund_amount=draft.refund_amount,
        ),
        items=[
            ReturnItemCreate(
                product_id=item.product_id,
                color=item.color,
                size=item.size,
                quantity=item.quantity,
            )
            for item in draft.items
        ],
    )
