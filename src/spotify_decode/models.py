"""Response and paging models shared by the decoder."""

import dataclasses
from typing import Any, Generic, List, Mapping, Optional, TypeVar

import requests
from pydantic import BaseModel
from requests.structures import CaseInsensitiveDict

Item = TypeVar("Item")


@dataclasses.dataclass(frozen=True)
class RawResponse:
    """Body, status and headers of a single HTTP round-trip."""

    body: bytes
    status: int
    headers: Mapping[str, str] = dataclasses.field(default=None, hash=False)

    def __post_init__(self):
        # Always copy so later changes to the caller's mapping are not seen.
        object.__setattr__(self, "headers", CaseInsensitiveDict(self.headers or {}))

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    @classmethod
    def from_requests(cls, response: requests.Response) -> "RawResponse":
        return cls(body=response.content, status=response.status_code, headers=response.headers)

    @classmethod
    def coerce(cls, element: Any) -> "RawResponse":
        """Build a RawResponse from a stream element.

        Accepts a ``RawResponse``, a ``requests.Response`` or a
        ``(bytes, requests.Response)`` pair.
        """
        if isinstance(element, cls):
            return element
        if isinstance(element, requests.Response):
            return cls.from_requests(element)
        if isinstance(element, tuple) and len(element) == 2:
            data, response = element
            if isinstance(data, (bytes, bytearray)) and isinstance(response, requests.Response):
                return cls(body=bytes(data), status=response.status_code, headers=response.headers)
        raise TypeError(f"Cannot build RawResponse from {type(element).__name__}")


class SpotifyCursor(BaseModel):
    """Cursors used to find the next and previous items."""
    after: Optional[str] = None
    before: Optional[str] = None


class CursorPagingObject(BaseModel, Generic[Item]):
    """A cursor-based paging object, e.g. recently played tracks."""

    href: str
    items: List[Item]
    limit: int
    next: Optional[str] = None
    cursors: SpotifyCursor
    total: Optional[int] = None

    def __str__(self) -> str:
        return (
            "Cursor page\n"
            f"- href: `{self.href}`\n"
            f"- limit: `{self.limit}`\n"
            f"- total: `{self.total}`\n"
            f"- next: `{self.next}`\n"
            f"- items: `{len(self.items)}`\n"
            f"- after: `{self.cursors.after}`"
        )
