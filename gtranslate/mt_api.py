"""Thin HTTP transport used by the translation client."""
from __future__ import annotations

import json
import logging
import ssl
import urllib.error
import urllib.request
from typing import Dict, Optional, Protocol

from config import DEFAULT_TIMEOUT_SEC, DEFAULT_VERIFY_SSL

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"


class TransportError(RuntimeError):
    """Raised when the HTTP request cannot be completed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class Transport(Protocol):
    def send(self, method: str, url: str, query: str) -> str:
        """Send a request and return the response body, raising TransportError on failure."""
        ...


def _error_detail(body: str) -> Optional[str]:
    """Extract ``error.message`` from a JSON error body, if there is one."""
    try:
        payload = json.loads(body)
    except json.JSONDecodeError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        message = payload["error"].get("message")
        return str(message) if message else None
    return None


class UrllibTransport:
    """Send form-encoded requests with the standard library."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        verify_ssl: bool = DEFAULT_VERIFY_SSL,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.headers = dict(headers or {})

    def _ssl_context(self) -> Optional[ssl.SSLContext]:
        if self.verify_ssl:
            return None
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    def _build_request(self, method: str, url: str, query: str) -> urllib.request.Request:
        method = method.upper()
        req_headers = {"Accept": "application/json"}
        req_headers.update(self.headers)
        if method == "POST":
            req_headers["Content-Type"] = FORM_CONTENT_TYPE
            return urllib.request.Request(url, data=query.encode("utf-8"), headers=req_headers, method="POST")
        if method == "GET":
            full_url = f"{url}?{query}" if query else url
            return urllib.request.Request(full_url, headers=req_headers, method="GET")
        raise ValueError(f"Unsupported HTTP method: {method}")

    def send(self, method: str, url: str, query: str) -> str:
        request = self._build_request(method, url, query)
        logger.debug("%s %s (%d bytes of params)", request.get_method(), url, len(query))
        try:
            with urllib.request.urlopen(request, timeout=self.timeout, context=self._ssl_context()) as response:
                charset = response.headers.get_content_charset() or "utf-8"
                return response.read().decode(charset, errors="replace")
        except urllib.error.HTTPError as exc:
            body = exc.read().decode("utf-8", errors="replace") if exc.fp is not None else ""
            detail = _error_detail(body) or exc.reason
            raise TransportError(f"HTTP {exc.code}: {detail}", status_code=exc.code) from exc
        except urllib.error.URLError as exc:
            raise TransportError(str(exc.reason)) from exc
        except OSError as exc:
            raise TransportError(str(exc)) from exc
