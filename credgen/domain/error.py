"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when a generation option or argument fails validation.

    Attributes:
        field: Name of the option that failed (e.g. ``id_length``)
        message: Human-readable description of the violated constraint
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)
