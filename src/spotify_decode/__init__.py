"""Response decoding for the Spotify web API."""

import logging
import sys

from .config import apply_log_level
from .decoding import (
    DecodeOutcome,
    Failure,
    Success,
    decode,
    decode_or_raise,
    resolve_error_shape,
)
from .errors import (
    ApiError,
    AuthenticationError,
    DecodingDiagnostic,
    ErrorShape,
    RateLimitedError,
    ResponseError,
)
from .models import CursorPagingObject, RawResponse, SpotifyCursor
from .stream import decode_typed, filter_errors, iter_decode_typed, iter_filter_errors

# ---------------------------------------------------------------------------
# Configure the package-level logger once. Child loggers
# (spotify_decode.decoding, spotify_decode.stream, ...) propagate here.
# ---------------------------------------------------------------------------
_root_logger = logging.getLogger("spotify_decode")
if not _root_logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _root_logger.addHandler(_handler)
apply_log_level()

__all__ = [
    "ApiError",
    "AuthenticationError",
    "CursorPagingObject",
    "DecodeOutcome",
    "DecodingDiagnostic",
    "ErrorShape",
    "Failure",
    "RateLimitedError",
    "RawResponse",
    "ResponseError",
    "SpotifyCursor",
    "Success",
    "decode",
    "decode_or_raise",
    "decode_typed",
    "filter_errors",
    "iter_decode_typed",
    "iter_filter_errors",
    "resolve_error_shape",
]
