"""Exception hierarchy for the basecrud package."""


class BaseCrudError(Exception):
    """Base exception for all basecrud errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class JobError(BaseCrudError):
    """Raised when job file parsing, templating or validation fails."""

    pass


class ConnectorError(BaseCrudError):
    """Raised when a connector cannot be configured."""

    pass


class ParameterError(BaseCrudError):
    """Raised when a required per-item parameter is missing or invalid.

    Always raised before any request is sent for the item.
    """

    pass


class OperationError(BaseCrudError):
    """Raised when the Base API rejects a request with a non-zero code."""

    def __init__(
        self,
        msg: str | None,
        code: int | None = None,
        context: dict | None = None,
    ):
        super().__init__(
            f"Base API error: {msg or 'unknown error'}",
            context={"code": code, **(context or {})},
        )
        self.code = code
        self.msg = msg
