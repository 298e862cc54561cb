"""Persistence-layer exceptions."""


class StorageError(RuntimeError):
    """Raised when the store fails to read or write a record.

    The underlying driver exception is chained as ``__cause__``.
    """
