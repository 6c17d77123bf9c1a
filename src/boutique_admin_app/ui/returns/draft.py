from __future__ import annotations

import math
import re
import uuid
from dataclasses import dataclass, field, replace
from typing import Any

HEADER_FIELDS: tuple[str, ...] = ("original_sale_id", "return_type", "refund_amount")
ITEM_FIELDS: tuple[str, ...] = ("product_id", "color", "size", "quantity")

INITIAL_REFUND_AMOUNT = "0"

_LEADING_INT = re.compile(r"[+-]?\d+")


def _new_key() -> str:
    return uuid.uuid4().hex


def coerce_quantity(value: Any) -> int:
    """Leading integer of the input, truncating decimals; no digits or zero gives 1."""
    if isinstance(value, bool):
        return 1
    if isinstance(value, float):
        if not math.isfinite(value):
            return 1
        return int(value) or 1
    match = _LEADING_INT.match("" if value is None else str(value).strip())
    if match is None:
        return 1
    return int(match.group()) or 1


@dataclass
class ReturnItemDraft:
    product_id: str = ""
    color: str = ""
    size: str = ""
    quantity: int = 1
    # row identity for the item list only; never sent to the API
    key: str = field(default_factory=_new_key)

    def as_dict(self) -> dict[str, Any]:
        return {
            "product_id": self.product_id,
            "color": self.color,
            "size": self.size,
            "quantity": self.quantity,
        }


@dataclass
class ReturnDraft:
    original_sale_id: str = ""
    return_type: str = ""
    refund_amount: str = INITIAL_REFUND_AMOUNT
    items: list[ReturnItemDraft] = field(default_factory=lambda: [ReturnItemDraft()])

    def set_field(self, name: str, value: Any) -> dict[str, Any]:
        if name not in HEADER_FIELDS:
            return {"ok": False, "error": f"unknown field: {name}"}
        setattr(self, name, "" if value is None else str(value))
        return {"ok": True, "field": name, "value": getattr(self, name)}

    def set_item_field(self, index: int, name: str, value: Any) -> dict[str, Any]:
        if index < 0 or index >= len(self.items):
            return {"ok": False, "error": "item index is out of range"}
        if name not in ITEM_FIELDS:
            return {"ok": False, "error": f"unknown item field: {name}"}
        item = self.items[index]
        if name == "quantity":
            item.quantity = coerce_quantity(value)
        else:
            setattr(item, name, "" if value is None else str(value))
        return {"ok": True, "index": index, "field": name, "value": getattr(item, name)}

    def append_item(self, default: ReturnItemDraft | dict[str, Any] | None = None) -> dict[str, Any]:
        if default is None:
            item = ReturnItemDraft()
        elif isinstance(default, ReturnItemDraft):
            item = replace(default, key=_new_key())
        else:
            item = ReturnItemDraft(
                product_id=str(default.get("product_id") or ""),
                color=str(default.get("color") or ""),
                size=str(default.get("size") or ""),
                quantity=coerce_quantity(default.get("quantity", 1)),
            )
        self.items.append(item)
        return {"ok": True, "index": len(self.items) - 1, "count": len(self.items)}

    def remove_item(self, index: int) -> dict[str, Any]:
        if len(self.items) <= 1:
            return {"ok": False, "error": "at least one return item is required", "count": len(self.items)}
        if index < 0 or index >= len(self.items):
            return {"ok": False, "error": "item index is out of range", "count": len(self.items)}
        self.items.pop(index)
        return {"ok": True, "count": len(self.items)}

    def can_remove_items(self) -> bool:
        return len(self.items) > 1

    def snapshot(self) -> dict[str, Any]:
        return {
            "original_sale_id": self.original_sale_id,
            "return_type": self.return_type,
            "refund_amount": self.refund_amount,
            "items": [item.as_dict() for item in self.items],
        }
