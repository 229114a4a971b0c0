class SourceClientError(Exception):
    """Base exception for payment source errors."""


class DecodeError(SourceClientError):
    """Raised when a payload cannot be decoded into a Source."""

    def __init__(self, reason: str, index: int | None = None) -> None:
        self.reason = reason
        self.index = index
        if index is None:
            super().__init__(f"Cannot decode source: {reason}")
        else:
            super().__init__(f"Cannot decode source at index {index}: {reason}")
