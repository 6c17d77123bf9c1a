from .errors import ServiceError
from .products_service import ProductsService, ProductsServiceError
from .returns_service import ReturnsService, ReturnsServiceError

__all__ = [
    "ProductsService",
    "ProductsServiceError",
    "ReturnsService",
    "ReturnsServiceError",
    "ServiceError",
]
