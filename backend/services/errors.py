class ValidationError(ValueError):
    """Raised when caller-supplied input is missing, out of range or not a recognized value.

    The message is user-facing and is surfaced verbatim by the routers.
    """

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class ExternalSignalError(RuntimeError):
    """A brand signal lookup failed. Never escapes brand vetting."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source
