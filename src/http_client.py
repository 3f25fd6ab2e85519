# src/http_client.py
from __future__ import annotations
import sys, uuid
from typing import Optional
import httpx

class HttpClient:
    """
    - Reusable async HTTP client with:
      - base_url
      - httpx timeouts
      - default headers
      - one attempt per request (status handling is left to the caller)
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        *,
        default_headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=read_timeout,
        )
        self.default_headers = {"Accept": "application/json", **(default_headers or {})}
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.default_headers,
            transport=self.transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._client is not None:
            await self._client.aclose()

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Send a single request and return the response whatever its status.
        `path` is joined to base_url; an absolute URL is used as-is.
        Each request tagged with X-Request-Id for traceability.
        Transport failures propagate as httpx.HTTPError.
        """
        assert self._client is not None, "HttpClient used outside 'async with'"

        req_id = kwargs.pop("req_id", str(uuid.uuid4()))
        headers = kwargs.pop("headers", {})
        headers.setdefault("X-Request-Id", req_id)
        kwargs["headers"] = headers

        url = path if "://" in path else self.base_url + path # for logs

        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            print(f"[req#{req_id}] {method} {url} failed: {type(e).__name__}: {e}", file=sys.stderr)
            raise

        status = resp.status_code
        if not (200 <= status < 300):
            print(f"[req#{req_id}] {method} {url} returned {status}", file=sys.stderr)
        return resp
