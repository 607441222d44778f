"""Key-value clients for guest records.

Production talks to a hosted Redis through its REST API; a native Redis URL is
also accepted. Remote failures are logged and surface as ``None`` / ``False`` so
callers only ever see "missing" rather than an exception.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol
from urllib.parse import quote

import httpx
import redis

from app.utils.tracing import traced_span

logger = logging.getLogger(__name__)


class KVClient(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> bool:
        ...

    def clear(self) -> None:
        ...


class RedisRestClient:
    """Client for a Redis REST endpoint (``/GET/{key}`` and ``/SET``)."""

    def __init__(self, endpoint: str, token: str | None = None, http_client: httpx.Client | None = None):
        self.endpoint = endpoint.rstrip("/")
        self.token = token
        self._owns_http = http_client is None
        self.http = http_client or httpx.Client(timeout=10)

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, command: str, *args: str) -> Dict[str, Any]:
        url = f"{self.endpoint}/{command}"
        with traced_span(f"kv.{command.split('/', 1)[0].lower()}"):
            try:
                if args:
                    response = self.http.post(url, json={"args": list(args)}, headers=self._headers())
                else:
                    response = self.http.get(url, headers=self._headers())
                response.raise_for_status()
                return response.json()
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning("Redis request %s failed: %s", command, exc)
                return {"result": None, "error": str(exc)}

    def get(self, key: str) -> Optional[str]:
        payload = self._request(f"GET/{quote(key, safe='')}")
        return payload.get("result")

    def set(self, key: str, value: str) -> bool:
        payload = self._request("SET", key, value)
        return payload.get("result") is not None and not payload.get("error")

    def clear(self) -> None:
        payload = self._request("FLUSHDB")
        if payload.get("error"):
            logger.warning("FLUSHDB rejected: %s", payload["error"])

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "RedisRestClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class RedisDirectClient:
    """Same contract over the native Redis protocol."""

    def __init__(self, url: str):
        self.client = redis.from_url(url, decode_responses=True)

    def get(self, key: str) -> Optional[str]:
        with traced_span("kv.get"):
            try:
                return self.client.get(key)
            except redis.RedisError as exc:
                logger.warning("Redis GET %s failed: %s", key, exc)
                return None

    def set(self, key: str, value: str) -> bool:
        with traced_span("kv.set"):
            try:
                return bool(self.client.set(key, value))
            except redis.RedisError as exc:
                logger.warning("Redis SET %s failed: %s", key, exc)
                return False

    def clear(self) -> None:
        try:
            self.client.flushdb()
        except redis.RedisError as exc:
            logger.warning("Redis FLUSHDB failed: %s", exc)


class InMemoryKVClient:
    def __init__(self, initial: Dict[str, str] | None = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True

    def clear(self) -> None:
        self.data.clear()


def build_kv_client(
    rest_endpoint: str | None,
    rest_token: str | None = None,
    redis_url: str | None = None,
    offline: bool = False,
) -> KVClient:
    """Pick a backend: offline → memory, then REST endpoint, then native URL."""
    if offline:
        return InMemoryKVClient()
    if rest_endpoint:
        return RedisRestClient(rest_endpoint, rest_token)
    if redis_url:
        return RedisDirectClient(redis_url)
    logger.warning("REDIS_REST_URL is not set; guest records are kept in memory only.")
    return InMemoryKVClient()
