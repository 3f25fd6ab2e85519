"""
Async API wrapper around the Animal Spotter service endpoints.

Provides a typed interface for:
- Creating an account (`register`)
- Logging in and keeping the bearer token (`authenticate`)
- Listing animal names (`list_animal_names`)
- Fetching details for a single animal (`fetch_animal_detail`)
- Downloading an animal picture (`fetch_image`)

Each call is one round trip, never retried. Failures are raised as the typed
errors from `errors.py`; nothing is swallowed.
"""
from __future__ import annotations
import io, json, sys
from typing import Optional

import httpx
from PIL import Image, UnidentifiedImageError

from http_client import HttpClient

from .errors import (
    BadAuth, BadData, DecodeError, HTTPStatusError, NoAuth, NoDecode,
    OtherError, SerializationError, TransportError,
)
from .models import AnimalDetail, AnimalNames, Bearer, Credentials
from .session import Session
from .utils import decode_name_list, decode_record, encode_path_segment

class APIClient:

    def __init__(self, http: HttpClient, session: Optional[Session] = None):
        self.http = http
        self.session = session if session is not None else Session()

    @property
    def base_url(self) -> str:
        return self.http.base_url

    # account

    async def _post_credentials(self, path: str, credentials: Credentials) -> httpx.Response:
        try:
            body = json.dumps(credentials).encode("utf-8")
        except (TypeError, ValueError) as e:
            print(f"[warn] could not encode credentials for {path}: {e}", file=sys.stderr)
            raise SerializationError(str(e)) from e

        try:
            resp = await self.http.request(
                "POST", path, content=body, headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise TransportError(e) from e

        if not resp.is_success:
            raise HTTPStatusError(resp.status_code)
        return resp

    async def register(self, credentials: Credentials) -> None:
        await self._post_credentials("/users/signup", credentials)

    async def authenticate(self, credentials: Credentials) -> None:
        resp = await self._post_credentials("/users/login", credentials)
        try:
            record = decode_record(resp.content, "token")
        except ValueError as e:
            print(f"[warn] undecodable login response: {e}", file=sys.stderr)
            raise DecodeError(str(e)) from e
        bearer: Bearer = {"token": record["token"]}
        self.session.store(bearer)

    # animals

    def _auth_headers(self) -> dict[str, str]:
        headers = self.session.auth_header()
        if headers is None:
            raise NoAuth("not logged in; call authenticate() first")
        return headers

    async def list_animal_names(self) -> AnimalNames:
        headers = self._auth_headers()
        try:
            resp = await self.http.request("GET", "/animals/all", headers=headers)
        except httpx.HTTPError as e:
            raise BadData(str(e)) from e

        if resp.status_code == 401:
            raise BadAuth()
        try:
            return decode_name_list(resp.content)
        except ValueError as e:
            print(f"[warn] undecodable animal list: {resp.text[:200]}", file=sys.stderr)
            raise NoDecode(str(e)) from e

    async def fetch_animal_detail(self, name: str) -> AnimalDetail:
        headers = self._auth_headers()
        try:
            resp = await self.http.request(
                "GET", f"/animals/{encode_path_segment(name)}", headers=headers,
            )
        except httpx.HTTPError as e:
            raise BadData(str(e)) from e

        if resp.status_code == 401:
            raise BadAuth()
        if not resp.content:
            raise BadData(f"empty body for animal {name!r}")
        try:
            return decode_record(resp.content, "name")
        except ValueError as e:
            print(f"[warn] undecodable detail for {name!r}: {resp.text[:200]}", file=sys.stderr)
            raise NoDecode(str(e)) from e

    async def fetch_image(self, url: str) -> Image.Image:
        try:
            if httpx.URL(url).is_relative_url:
                raise OtherError(f"not an absolute URL: {url!r}")
            resp = await self.http.request("GET", url, headers={"Accept": "image/*"})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise OtherError(str(e)) from e

        if not resp.content:
            raise BadData(f"empty body for image {url}")
        try:
            image = Image.open(io.BytesIO(resp.content))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
            print(f"[warn] undecodable image at {url}: {e}", file=sys.stderr)
            raise BadData(f"not a decodable image: {e}") from e
        return image
