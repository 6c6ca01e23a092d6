"""Error taxonomy shared by the domain, the storage adapters and the HTTP layer."""


class ProductoError(Exception):
    """Base class for every error raised by the service."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(ProductoError, ValueError):
    """A field is missing, blank or out of range. Always caused by the client."""


class ProductoNotFoundError(ProductoError, LookupError):
    """No product exists with the requested id."""


class StorageError(ProductoError, RuntimeError):
    """The storage backend or its transport failed."""
