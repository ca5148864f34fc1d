"""
Exception hierarchy for Kavenegar API failures.
Every error carries a numeric code alongside its message.
"""


class KavenegarError(RuntimeError):
    """Base error for everything raised by the client."""

    def __init__(self, message: str, code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code

    @property
    def name(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return f"{self.name}[{self.code}] : {self.message}"


class TransportError(KavenegarError):
    """Network failure or an unparseable HTTP response."""


class ApiError(KavenegarError):
    """The gateway answered but reported a non-200 status in its envelope."""


class RemovedMethodError(KavenegarError):
    """Endpoint has been decommissioned by the provider."""

    def __init__(self, message: str = "Method is removed", code: int = 0):
        super().__init__(message, code)
