"""Domain-specific exceptions (framework-independent)."""


class CatalogApiError(Exception):
    """Raised when the catalog backend rejects a request or cannot be reached.

    ``status_code`` is 0 for transport failures (connection refused,
    timeouts) where no HTTP response was received.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[catalog-api] {status_code}: {message}")


class FormValidationError(Exception):
    """Raised when a submitted form fails its client-side validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Form validation failed for: {fields}")


class UnknownScreenError(Exception):
    """Raised when a screen key is not registered."""

    def __init__(self, screen_key: str):
        self.screen_key = screen_key
        super().__init__(f"Screen '{screen_key}' does not exist")


class ScreenOperationError(Exception):
    """Raised when a screen does not offer the requested operation."""

    def __init__(self, screen_key: str, operation: str):
        self.screen_key = screen_key
        self.operation = operation
        super().__init__(f"Screen '{screen_key}' does not support '{operation}'")
