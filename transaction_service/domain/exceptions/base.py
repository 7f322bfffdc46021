"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for transaction rule violations.

    Subclasses set ``code`` to a stable machine-readable identifier;
    ``message`` is the human-readable text returned to API clients.
    """

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
