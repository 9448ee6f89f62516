class PaginationError(Exception):
    """Base exception for all simple_pagination errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CallbackNotFoundError(PaginationError, LookupError):
    """Raised when paginate() is called before a required callback is set."""

    def __init__(self, callback_name: str) -> None:
        super().__init__(
            f"{_CALLBACK_LABELS.get(callback_name, callback_name)} not found, "
            f"set it using Paginator.{callback_name}"
        )
        self.callback_name = callback_name


class InvalidPageNumberError(PaginationError, ValueError):
    """Raised when the requested page number is zero or negative."""

    def __init__(self, page_number: int) -> None:
        super().__init__(
            f"Current page number must have a value of 1 or more, {page_number} given"
        )
        self.page_number = page_number


_CALLBACK_LABELS = {
    "item_total_callback": "Item total callback",
    "slice_callback": "Slice callback",
}
