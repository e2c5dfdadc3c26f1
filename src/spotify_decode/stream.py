"""Pipeline stages that apply the decoder to streams of responses.

Each stage pulls one element from upstream, transforms it, and yields at most
one element. Nothing is buffered. A failure is raised as ``ResponseError``
and ends the stream. When a stage ends for any reason, it closes the upstream
iterator.
"""

import logging
from typing import Any, AsyncIterable, AsyncIterator, Callable, Iterable, Iterator, Type, TypeVar

from .decoding import decode, resolve_error_shape, shape_name
from .errors import ResponseError
from .models import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
E = TypeVar("E")


def check_errors(element: E) -> E:
    """Return the element unchanged, or raise if it is a known error."""
    error = resolve_error_shape(RawResponse.coerce(element))
    if error is not None:
        raise ResponseError(error)
    return element


def decode_element(element: Any, shape: Type[T]) -> T:
    """Decode a single stream element as ``shape`` or raise ``ResponseError``."""
    return decode(RawResponse.coerce(element), shape).unwrap()


async def _map_async(source: AsyncIterable[Any], transform: Callable[[Any], R]) -> AsyncIterator[R]:
    iterator = source.__aiter__()
    try:
        async for element in iterator:
            yield transform(element)
    finally:
        aclose = getattr(iterator, "aclose", None)
        if aclose is not None:
            await aclose()


def _map_sync(source: Iterable[Any], transform: Callable[[Any], R]) -> Iterator[R]:
    iterator = iter(source)
    try:
        for element in iterator:
            yield transform(element)
    finally:
        close = getattr(iterator, "close", None)
        if close is not None:
            close()


def filter_errors(responses: AsyncIterable[E]) -> AsyncIterator[E]:
    """Raise the first known error object in ``responses``; pass the rest through.

    Elements that are not errors are yielded as the same objects they came
    in as. They are never converted or changed.
    """
    return _map_async(responses, check_errors)


def decode_typed(responses: AsyncIterable[Any], shape: Type[T]) -> AsyncIterator[T]:
    """Decode each element of ``responses`` as ``shape``.

    Yields the decoded values. Raises ``ResponseError`` on the first element
    that fails to decode.
    """
    logger.debug(f"Decoding stream elements as {shape_name(shape)}")
    return _map_async(responses, lambda element: decode_element(element, shape))


def iter_filter_errors(responses: Iterable[E]) -> Iterator[E]:
    """Synchronous form of ``filter_errors``."""
    return _map_sync(responses, check_errors)


def iter_decode_typed(responses: Iterable[Any], shape: Type[T]) -> Iterator[T]:
    """Synchronous form of ``decode_typed``."""
    return _map_sync(responses, lambda element: decode_element(element, shape))
