"""Error shapes returned by the Spotify web API and the decoder."""

import dataclasses
from typing import ClassVar, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .utils import body_preview


class AuthenticationError(BaseModel):
    """Error body returned by the accounts service.

    Wire format: ``{"error": "invalid_token", "error_description": "..."}``.
    """
    model_config = {"frozen": True}

    kind: ClassVar[str] = "authentication"

    code: str = Field(alias="error")
    description: str = Field(alias="error_description")

    def __str__(self) -> str:
        return f"authentication error | code={self.code} | description={self.description}"


class ApiError(BaseModel):
    """Regular error object, found under the ``error`` key of the body."""
    model_config = {"frozen": True}

    kind: ClassVar[str] = "api"

    status_code: int = Field(alias="status")
    message: str
    reason: Optional[str] = None

    def __str__(self) -> str:
        text = f"api error | status={self.status_code} | message={self.message}"
        if self.reason:
            text += f" | reason={self.reason}"
        return text


class ApiErrorEnvelope(BaseModel):
    error: ApiError


class RateLimitedError(BaseModel):
    """HTTP 429. ``retry_after`` is the advisory wait in seconds, if known."""
    model_config = {"frozen": True}

    kind: ClassVar[str] = "rate_limited"

    retry_after: Optional[int] = Field(default=None, ge=0)

    def __str__(self) -> str:
        if self.retry_after is None:
            return "rate limited (429) | retry_after=unknown"
        return f"rate limited (429) | retry_after={self.retry_after}s"


ErrorShape = Union[AuthenticationError, ApiError, RateLimitedError]


@dataclasses.dataclass(frozen=True)
class DecodingDiagnostic:
    """Neither the expected shape nor any error shape matched the body.

    ``underlying_error`` is always the failure from parsing the expected
    shape, never one from the error shapes.
    """

    kind: ClassVar[str] = "decoding_diagnostic"

    raw_body: bytes
    expected_shape_name: str
    http_status: int
    underlying_error: ValidationError

    def __str__(self) -> str:
        return (
            f"Could not decode {self.expected_shape_name} | status={self.http_status} | "
            f"body={body_preview(self.raw_body)!r} | error={self.underlying_error}"
        )


DecodeError = Union[AuthenticationError, ApiError, RateLimitedError, DecodingDiagnostic]


class ResponseError(Exception):
    """Raised when a decode failure has to leave a pipeline as an exception."""

    def __init__(self, error: DecodeError):
        super().__init__(str(error))
        self.error = error
