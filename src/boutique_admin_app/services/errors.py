from __future__ import annotations

from dataclasses import dataclass

from boutique_client_sdk import ApiError, to_user_facing_error


@dataclass(frozen=True)
class ServiceError(RuntimeError):
    message: str
    details: str | None = None
    trace_id: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message


def normalize_error(exc: Exception, fallback: str) -> ServiceError:
    if isinstance(exc, ServiceError):
        return exc
    if isinstance(exc, ApiError):
        user_error = to_user_facing_error(exc)
        return ServiceError(
            message=user_error.message,
            details=user_error.technical_details,
            trace_id=exc.trace_id,
            status_code=exc.status_code,
        )
    return ServiceError(message=str(exc) or fallback)
