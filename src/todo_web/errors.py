from __future__ import annotations


# PUBLIC_INTERFACE
class PersistenceError(Exception):
    """
    Raised by storage backends when the store is unreachable or a write
    cannot be committed. The original error is chained as ``__cause__``.
    """

    def __init__(self, message: str = "Storage operation failed") -> None:
        self.message = message
        super().__init__(message)
