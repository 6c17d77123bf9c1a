from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from boutique_client_sdk import PRODUCT_TYPES


@dataclass
class ValidationResult:
    ok: bool
    field_errors: dict[str, str] = field(default_factory=dict)
    summary: list[str] = field(default_factory=list)

    @property
    def issues(self) -> list[tuple[str, str]]:
        return list(self.field_errors.items())


def result_from(errors: dict[str, str]) -> ValidationResult:
    return ValidationResult(ok=not errors, field_errors=errors, summary=list(errors.values()))


def is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def parse_amount(value: Any) -> Decimal | None:
    """Non-negative decimal, or None when the text is not an amount."""
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount < 0:
        return None
    return amount


def validate_product_form(data: dict[str, Any]) -> ValidationResult:
    errors: dict[str, str] = {}
    if is_blank(data.get("model_number")):
        errors["model_number"] = "Model number is required."
    if is_blank(data.get("company_name")):
        errors["company_name"] = "Company name is required."
    if data.get("product_type") not in PRODUCT_TYPES:
        errors["product_type"] = "Choose a valid product type."
    for price_field, label in (("store_price", "Store price"), ("online_price", "Online price")):
        raw = data.get(price_field)
        if is_blank(raw):
            errors[price_field] = f"{label} is required."
        elif parse_amount(raw) is None:
            errors[price_field] = f"{label} must be a non-negative amount."
    return result_from(errors)
