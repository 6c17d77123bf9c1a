from __future__ import annotations

from boutique_client_sdk.error_mapper import map_error
from boutique_client_sdk.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from boutique_client_sdk.ui_errors import to_user_facing_error


def test_error_mapper_classes() -> None:
    assert isinstance(map_error(401, {"message": "bad"}, "trace"), UnauthorizedError)
    assert isinstance(map_error(403, {"message": "no"}, "trace"), ForbiddenError)
    assert isinstance(map_error(404, {"message": "missing"}, "trace"), NotFoundError)
    assert isinstance(map_error(422, {"message": "bad"}, "trace"), ValidationError)
    assert isinstance(map_error(409, {"message": "dup"}, "trace"), ConflictError)
    assert isinstance(map_error(500, {"message": "oops"}, "trace"), ServerError)


def test_error_mapper_keeps_payload_message_and_trace() -> None:
    err = map_error(500, {"message": "stock mismatch", "trace_id": "trace-500"}, "header-trace")
    assert err.message == "stock mismatch"
    assert err.code == "HTTP_ERROR"
    assert err.trace_id == "trace-500"
    assert "trace_id=trace-500" in str(err)


def test_error_mapper_generic_message_when_payload_is_empty() -> None:
    err = map_error(502, None, None)
    assert err.message == "Request failed"
    assert err.raw_payload == {}


def test_user_facing_error_details() -> None:
    err = map_error(409, {"code": "CONFLICT", "message": " already returned ", "details": "S1"}, "t")
    facing = to_user_facing_error(err)
    assert facing.message == "already returned"
    assert facing.technical_details == "CONFLICT (HTTP 409): S1"
    assert facing.trace_id == "t"
