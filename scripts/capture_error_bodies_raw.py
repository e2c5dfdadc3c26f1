"""Capture raw Spotify web API responses and how the decoder classifies them.

Useful for checking that the error-body wire formats have not drifted.

Run with a valid (or deliberately expired) bearer token:
    SPOTIFY_TOKEN=... python3 scripts/capture_error_bodies_raw.py
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

import requests

from spotify_decode import RawResponse, resolve_error_shape
from spotify_decode.utils import body_preview

BASE = "https://api.spotify.com/v1"


def _record(url: str, response: requests.Response) -> Dict[str, Any]:
    raw = RawResponse.from_requests(response)
    error = resolve_error_shape(raw)
    return {
        "request": {"method": "GET", "url": url},
        "response": {
            "status_code": raw.status,
            "headers": dict(raw.headers),
            "body_preview": body_preview(raw.body, limit=4000),
        },
        "classified_as": error.kind if error is not None else None,
        "error": error.model_dump(mode="json") if error is not None else None,
    }


def main() -> None:
    token = os.environ.get("SPOTIFY_TOKEN", "")
    session = requests.Session()
    session.headers.update({"Authorization": f"Bearer {token}"})
    out: Dict[str, Any] = {"endpoints": {}}

    # Valid request; expected to decode as data, not as an error
    me_url = f"{BASE}/me"
    out["endpoints"]["me"] = _record(me_url, session.get(me_url, timeout=30))

    # Unknown id; expected regular error object with status 404 or 400
    track_url = f"{BASE}/tracks/0000000000000000000000"
    out["endpoints"]["missing_track"] = _record(track_url, session.get(track_url, timeout=30))

    # Bad token; expected 401 error body
    bad_url = f"{BASE}/me"
    bad_resp = requests.get(bad_url, headers={"Authorization": "Bearer invalid"}, timeout=30)
    out["endpoints"]["invalid_token"] = _record(bad_url, bad_resp)

    # Accounts service error format
    token_url = "https://accounts.spotify.com/api/token"
    token_resp = requests.post(token_url, data={"grant_type": "client_credentials"}, timeout=30)
    out["endpoints"]["accounts_token"] = _record(token_url, token_resp)

    output = Path("assets/logs/error_bodies_raw_probe.json")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(out, indent=2), encoding="utf-8")
    print(output)


if __name__ == "__main__":
    main()
