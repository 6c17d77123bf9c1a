from __future__ import annotations

from .models import CamelModel

SALE_CHANNELS: tuple[str, ...] = ("online", "in-store")


class SaleSummary(CamelModel):
    id: str
    invoice_number: str
    total: str
    channel: str | None = None
    payment_method: str | None = None
