from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ViewStateStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    NO_MATCHES = "no_matches"
    SUCCESS = "success"
    FATAL_ERROR = "fatal_error"


@dataclass(frozen=True)
class ViewState:
    status: ViewStateStatus
    message: str | None = None
    trace_id: str | None = None
    data_available: bool = False

    def render(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "trace_id": self.trace_id,
            "data_available": self.data_available,
        }


def resolve_state(
    *,
    is_loading: bool,
    error: str | None,
    total_rows: int,
    visible_rows: int,
    trace_id: str | None = None,
) -> ViewState:
    if is_loading:
        return ViewState(ViewStateStatus.LOADING, "Loading data...", trace_id=trace_id, data_available=total_rows > 0)
    if error:
        return ViewState(ViewStateStatus.FATAL_ERROR, error, trace_id=trace_id)
    if total_rows == 0:
        return ViewState(ViewStateStatus.EMPTY, "No products have been added yet", trace_id=trace_id)
    if visible_rows == 0:
        return ViewState(ViewStateStatus.NO_MATCHES, "No matching products found", trace_id=trace_id, data_available=True)
    return ViewState(ViewStateStatus.SUCCESS, "Ready", trace_id=trace_id, data_available=True)
