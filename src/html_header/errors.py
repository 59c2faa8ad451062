from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when builder input cannot be turned into markup (e.g. unserializable JSON-LD)."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code
