from .draft import ReturnDraft, ReturnItemDraft
from .return_form_view import ReturnFormView
from .rules import build_return_payload, derive_default_refund, validate_return_draft

__all__ = [
    "ReturnDraft",
    "ReturnFormView",
    "ReturnItemDraft",
    "build_return_payload",
    "derive_default_refund",
    "validate_return_draft",
]
