"""
Gateway Failure Taxonomy.

Every failure raised by the gateway is a GatewayError subclass carrying
enough context (method, path, status, body) for the consumer to render a
diagnostic. Consumers decide what the user sees; this module only
classifies.

Failure kinds:
- HttpError: the backend answered with a non-2xx status
- NotFoundError: a card code is absent from every lookup strategy
- DecodeError: the response claimed JSON but could not be parsed
- TransportError: the request never produced a response
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of gateway failures."""

    HTTP_ERROR = "http_error"
    NOT_FOUND = "not_found"
    DECODE_ERROR = "decode_error"
    TRANSPORT_ERROR = "transport_error"


class FailureDetail(BaseModel):
    """Renderable description of a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Short explanation of what went wrong",
    )
    method: str | None = Field(
        default=None,
        description="HTTP method of the failed request",
    )
    path: str | None = Field(
        default=None,
        description="Request path relative to the API base URL",
    )
    status: int | None = Field(
        default=None,
        description="HTTP status code, when the backend answered",
    )
    detail: str | None = Field(
        default=None,
        description="Raw response body or underlying error text",
    )


class GatewayError(Exception):
    """
    Base class for every failure the gateway raises.

    Subclass this for errors where the gateway knows exactly what went wrong.
    """

    kind: FailureKind = FailureKind.HTTP_ERROR

    def __init__(
        self,
        message: str,
        method: str | None = None,
        path: str | None = None,
        detail: str | None = None,
    ):
        self.message = message
        self.method = method
        self.path = path
        self.detail = detail
        super().__init__(message)

    @property
    def status(self) -> int | None:
        return None

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            method=self.method,
            path=self.path,
            status=self.status,
            detail=self.detail,
        )


class HttpError(GatewayError):
    """Raised when the backend answers with a non-success status."""

    kind = FailureKind.HTTP_ERROR

    def __init__(self, method: str, path: str, status: int, body_text: str = ""):
        self._status = status
        self.body_text = body_text
        super().__init__(
            f"{method} {path} failed: HTTP {status}",
            method=method,
            path=path,
            detail=body_text or None,
        )

    @property
    def status(self) -> int:
        return self._status


class NotFoundError(GatewayError):
    """Raised when a card code resolves through neither direct lookup nor catalog."""

    kind = FailureKind.NOT_FOUND

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Card not found: {code}", detail=code)


class DecodeError(GatewayError):
    """Raised when a response body cannot be decoded into the expected shape."""

    kind = FailureKind.DECODE_ERROR

    def __init__(self, method: str, path: str, body_text: str = "", reason: str | None = None):
        self.body_text = body_text
        self.reason = reason
        message = f"{method} {path} returned an undecodable body"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, method=method, path=path, detail=body_text or None)


class TransportError(GatewayError):
    """Raised when a request fails before any response arrives."""

    kind = FailureKind.TRANSPORT_ERROR

    def __init__(self, method: str, path: str, reason: str):
        self.reason = reason
        super().__init__(
            f"{method} {path} failed: {reason}",
            method=method,
            path=path,
            detail=reason,
        )
