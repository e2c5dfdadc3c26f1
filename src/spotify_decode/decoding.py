"""Decode raw Spotify web API responses into typed values or known errors.

The expected response shape is always tried first. If it does not match,
the body is checked against the error objects the API returns for most
endpoints:

* ``RateLimitedError`` (status 429, read from the ``Retry-After`` header)
* ``AuthenticationError``
* ``ApiError``

If none of those match either, a ``DecodingDiagnostic`` is returned. It
carries the error from decoding the *expected* shape, which is the useful one:
the server most likely sent the requested data in a form the shape does not
model.
"""

import dataclasses
import functools
import logging
from typing import Any, Callable, Generic, Optional, Tuple, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from .config import ERROR_STATUS_CODES, RATE_LIMIT_STATUS
from .errors import (
    ApiErrorEnvelope,
    AuthenticationError,
    DecodeError,
    DecodingDiagnostic,
    ErrorShape,
    RateLimitedError,
    ResponseError,
)
from .models import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Success(Generic[T]):
    """The body decoded as the expected shape."""

    value: T

    is_success = True

    def unwrap(self) -> T:
        return self.value


@dataclasses.dataclass(frozen=True)
class Failure:
    """The body matched an error shape, or nothing at all."""

    error: DecodeError

    is_success = False

    def unwrap(self):
        raise ResponseError(self.error)


DecodeOutcome = Union[Success[T], Failure]


# -- error-shape resolution --------------------------------------------------

def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        seconds = int(value.strip())
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


def _match_rate_limit(raw: RawResponse) -> Optional[ErrorShape]:
    if raw.status != RATE_LIMIT_STATUS:
        return None
    header = raw.header("Retry-After")
    retry_after = _parse_retry_after(header)
    if retry_after is not None:
        logger.info(f"Hit rate limit; retry after {retry_after} seconds")
    else:
        logger.warning(f"Got 429 rate limit, but Retry-After header is missing or invalid: {header!r}")
    return RateLimitedError(retry_after=retry_after)


def _match_authentication_error(raw: RawResponse) -> Optional[ErrorShape]:
    try:
        return AuthenticationError.model_validate_json(raw.body)
    except ValidationError:
        return None


def _match_api_error(raw: RawResponse) -> Optional[ErrorShape]:
    try:
        return ApiErrorEnvelope.model_validate_json(raw.body).error
    except ValidationError:
        return None


# Order matters: the rate-limit check is status-gated and must run before any
# body parsing, and the authentication shape is the more specific of the two.
ERROR_SHAPE_MATCHERS: Tuple[Callable[[RawResponse], Optional[ErrorShape]], ...] = (
    _match_rate_limit,
    _match_authentication_error,
    _match_api_error,
)


def resolve_error_shape(raw: RawResponse) -> Optional[ErrorShape]:
    """Classify ``raw`` as one of the known error objects, or return None.

    The status code is not cross-checked against a matching body, so an
    error body that arrives with a 2xx status is still reported.
    """
    for matcher in ERROR_SHAPE_MATCHERS:
        error = matcher(raw)
        if error is not None:
            return error
    return None


# -- typed decoding ----------------------------------------------------------

@functools.lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


def decode(raw: RawResponse, shape: Type[T]) -> DecodeOutcome[T]:
    """Decode ``raw`` as ``shape``, falling back to the known error objects.

    Args:
        raw: The response body, status and headers.
        shape: The expected response type. Anything ``pydantic.TypeAdapter``
            accepts, e.g. a model class or ``List[Model]``.

    Returns:
        ``Success(value)`` if the body matches ``shape``; otherwise
        ``Failure`` holding an error shape or a ``DecodingDiagnostic``.
    """
    try:
        return Success(_adapter(shape).validate_json(raw.body))
    except ValidationError as e:
        expected_error = e

    name = shape_name(shape)
    logger.debug(f"Couldn't decode response as {name} (status={raw.status})")

    error = resolve_error_shape(raw)
    if error is not None:
        return Failure(error)

    logger.error(f"Couldn't decode {name} or the Spotify error objects")
    if raw.status in ERROR_STATUS_CODES:
        logger.critical(
            f"HTTP status code was {raw.status} (error), "
            "but couldn't decode the error response objects"
        )

    return Failure(DecodingDiagnostic(
        raw_body=raw.body,
        expected_shape_name=name,
        http_status=raw.status,
        underlying_error=expected_error,
    ))


def decode_or_raise(raw: RawResponse, shape: Type[T]) -> T:
    """Decode ``raw`` as ``shape`` or raise ``ResponseError``."""
    return decode(raw, shape).unwrap()
