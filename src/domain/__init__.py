"""Domain layer: errors, constants and schemas."""

from .errors import ErrorCodes, FileHostError
from .schemas import HomePage, PageVariant, RouteSpec

__all__ = [
    "ErrorCodes",
    "FileHostError",
    "HomePage",
    "PageVariant",
    "RouteSpec",
]
