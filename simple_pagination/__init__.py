from .config import CONFIG_KEYS, filter_config
from .exceptions import CallbackNotFoundError, InvalidPageNumberError, PaginationError
from .pagination import PaginationResult
from .paginator import (
    UNBOUNDED_ITEMS_PER_PAGE,
    UNBOUNDED_SLICE_LENGTH,
    ItemTotalCallback,
    Paginator,
    QueryCallback,
    SliceCallback,
)

__all__ = [
    "Paginator",
    "PaginationResult",
    # Configuration
    "CONFIG_KEYS",
    "filter_config",
    "UNBOUNDED_ITEMS_PER_PAGE",
    "UNBOUNDED_SLICE_LENGTH",
    # Callback types
    "ItemTotalCallback",
    "SliceCallback",
    "QueryCallback",
    # Exceptions
    "PaginationError",
    "CallbackNotFoundError",
    "InvalidPageNumberError",
]
