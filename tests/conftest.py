"""Shared fixtures and sample shapes for the decoder tests."""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests
from pydantic import BaseModel
from requests.structures import CaseInsensitiveDict

from spotify_decode.models import RawResponse


class Artist(BaseModel):
    id: str
    name: str


class Track(BaseModel):
    id: str
    name: str
    duration_ms: int
    uri: str
    artists: List[Artist] = []


class PlaylistOwner(BaseModel):
    id: str
    display_name: Optional[str] = None


class Playlist(BaseModel):
    id: str
    name: str
    owner: PlaylistOwner
    public: Optional[bool] = None


TRACK_JSON: Dict[str, Any] = {
    "id": "4uLU6hMCjMI75M1A2tKUQC",
    "name": "Never Gonna Give You Up",
    "duration_ms": 213573,
    "uri": "spotify:track:4uLU6hMCjMI75M1A2tKUQC",
    "artists": [{"id": "0gxyHStUsqpMadRV0Di1Qt", "name": "Rick Astley"}],
}

PLAYLIST_JSON: Dict[str, Any] = {
    "id": "37i9dQZF1DXcBWIGoYBM5M",
    "name": "Today's Top Hits",
    "owner": {"id": "spotify", "display_name": "Spotify"},
    "public": True,
}

AUTH_ERROR_JSON = {"error": "invalid_token", "error_description": "token expired"}

API_ERROR_JSON = {"error": {"status": 404, "message": "not found"}}


def raw(body: Any, status: int = 200, headers: Optional[Dict[str, str]] = None) -> RawResponse:
    """Build a RawResponse; dicts and lists are JSON-encoded."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode()
    elif isinstance(body, str):
        body = body.encode()
    return RawResponse(body=body, status=status, headers=headers)


def requests_response(body: bytes, status: int = 200, headers: Optional[Dict[str, str]] = None) -> requests.Response:
    response = requests.Response()
    response._content = body
    response.status_code = status
    response.headers = CaseInsensitiveDict(headers or {})
    return response


@pytest.fixture
def track_response():
    return raw(TRACK_JSON)


@pytest.fixture
def playlist_response():
    return raw(PLAYLIST_JSON)
