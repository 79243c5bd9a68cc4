"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class MalformedRecordError(DomainError):
    """Raised when a store record does not have the expected property shape.

    Usually means the database schema was edited (a column renamed or its
    type changed) without updating the configured property names.
    """

    def __init__(self, record_id: str, property_name: str, expected: str):
        self.record_id = record_id
        self.property_name = property_name
        self.expected = expected
        super().__init__(
            f"Record {record_id}: property '{property_name}' is missing or not of type '{expected}'"
        )


class TransientFetchError(DomainError):
    """Raised when an auxiliary download (e.g. an image) fails or times out."""

    pass
