"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class StoreUnavailableError(ProviderError):
    """The content store could not be reached or rejected the request."""

    def __init__(
        self, message: str, status_code: int | None = None, code: str | None = None
    ):
        self.status_code = status_code
        self.code = code
        super().__init__(message)
