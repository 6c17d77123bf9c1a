from .config import ClientConfig, ConfigError, load_config
from .error_mapper import DEFAULT_ERROR_MESSAGE, map_error
from .exceptions import (
    ApiError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from .http_client import HttpClient
from .idempotency import idempotency_headers, new_idempotency_key
from .models import DashboardStats
from .models_products import PRODUCT_TYPES, STOCK_STATUSES, Product, ProductSummary, ProductUpdateRequest
from .models_returns import RETURN_TYPES, ReturnCreateRequest, ReturnHeaderCreate, ReturnItemCreate, ReturnRecord
from .models_sales import SALE_CHANNELS, SaleSummary
from .routes import DASHBOARD_STATS_PATH, PRODUCTS_PATH, RETURNS_PATH, SALES_PATH, product_path
from .session import ApiSession
from .tracing import TraceContext
from .ui_errors import UserFacingError, to_user_facing_error

__all__ = [
    "ApiError",
    "ApiSession",
    "ClientConfig",
    "ConfigError",
    "ConflictError",
    "DASHBOARD_STATS_PATH",
    "DEFAULT_ERROR_MESSAGE",
    "DashboardStats",
    "ForbiddenError",
    "HttpClient",
    "NotFoundError",
    "PRODUCTS_PATH",
    "PRODUCT_TYPES",
    "Product",
    "ProductSummary",
    "ProductUpdateRequest",
    "RETURNS_PATH",
    "RETURN_TYPES",
    "ReturnCreateRequest",
    "ReturnHeaderCreate",
    "ReturnItemCreate",
    "ReturnRecord",
    "SALES_PATH",
    "SALE_CHANNELS",
    "STOCK_STATUSES",
    "SaleSummary",
    "ServerError",
    "TraceContext",
    "TransportError",
    "UnauthorizedError",
    "UserFacingError",
    "ValidationError",
    "idempotency_headers",
    "load_config",
    "map_error",
    "new_idempotency_key",
    "product_path",
    "to_user_facing_error",
]
