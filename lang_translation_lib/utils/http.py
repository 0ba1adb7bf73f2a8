"""
Thin transports that send an :class:`ApiRequest` and return a :class:`RawResponse`.

Two flavours share the same contract:

* :class:`HttpRequester` wraps a ``requests.Session`` for blocking callers,
* :class:`AsyncHttpRequester` wraps an ``httpx.AsyncClient`` for ``asyncio``
  callers; awaiting a call never blocks the event loop.

Both centralise construction of absolute URLs from the configured endpoint,
credentials (basic auth or bearer token) and request logging.  Neither retries
nor inspects the status code; that belongs to the response decoder.  Transport
exceptions propagate unchanged.
"""

import logging
from typing import Any, Dict, Optional

import httpx
import requests

from lang_translation_lib.config import ServiceConfig
from lang_translation_lib.data_models.api_request import ApiRequest, RawResponse

DEFAULT_HEADERS = {"Accept": "application/json"}


def full_url(base_url: str, path: str) -> str:
    """
    Build the absolute URL for a request.

    The function ensures exactly one ``/`` separates the base and the path.
    """
    base_url = base_url.rstrip("/")
    return f"{base_url}{path if path.startswith('/') else '/' + path}"


def _auth_headers(config: ServiceConfig) -> Dict[str, str]:
    if config.token:
        return {"Authorization": f"Bearer {config.token}"}
    return {}


class HttpRequester:
    """
    Blocking transport built on ``requests``.

    Parameters
    ----------
    config : ServiceConfig
        Endpoint, credentials and timeout.
    session : Optional[requests.Session]
        Session to use; a new one is created when omitted.  Headers and
        credentials are sent with each request, the session itself is left
        untouched.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        config: ServiceConfig,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.timeout = config.timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)

    def send(self, request: ApiRequest) -> RawResponse:
        """
        Perform ``request`` and return its status, body and headers.

        Parameters
        ----------
        request : ApiRequest
            Request produced by one of the builders.

        Returns
        -------
        RawResponse
            The unvalidated response; non‑2xx codes are not raised here.
        """
        url = full_url(self.config.endpoint_url, request.path)
        self.logger.debug(
            "%s %s | params=%s payload=%s",
            request.method,
            url,
            request.params,
            request.json_body,
        )

        kwargs: Dict[str, Any] = {
            "params": request.params or None,
            "headers": {
                **DEFAULT_HEADERS,
                **_auth_headers(self.config),
                **request.headers,
            },
            "timeout": self.timeout,
        }
        if self.config.basic_auth:
            kwargs["auth"] = self.config.basic_auth
        if request.json_body is not None:
            kwargs["json"] = request.json_body
        elif request.content is not None:
            kwargs["data"] = request.content.encode("utf-8")
        elif request.parts:
            kwargs["files"] = request.parts

        resp = self.session.request(request.method, url, **kwargs)
        return RawResponse(
            status_code=resp.status_code,
            body=resp.content,
            headers=dict(resp.headers),
        )

    def close(self) -> None:
        self.session.close()


class AsyncHttpRequester:
    """
    Cooperative transport built on ``httpx.AsyncClient``.

    The client is created lazily on the first call and shared by all
    subsequent calls; :meth:`aclose` releases it.  Cancelling the awaiting
    task aborts the in‑flight request.

    Parameters
    ----------
    config : ServiceConfig
        Endpoint, credentials and timeout.
    client : Optional[httpx.AsyncClient]
        Pre‑built client (e.g. with a custom transport); created when omitted.
        An injected client is never replaced: once closed, calls raise
        ``RuntimeError``.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        config: ServiceConfig,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self._client = client
        self._owns_client = client is None
        self.logger = logger or logging.getLogger(__name__)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None and self._client.is_closed:
            if not self._owns_client:
                raise RuntimeError("The injected httpx.AsyncClient is closed")
            self._client = None
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
        return self._client

    async def send(self, request: ApiRequest) -> RawResponse:
        """Asynchronous counterpart of :meth:`HttpRequester.send`."""
        url = full_url(self.config.endpoint_url, request.path)
        self.logger.debug(
            "%s %s | params=%s payload=%s",
            request.method,
            url,
            request.params,
            request.json_body,
        )

        headers = {**DEFAULT_HEADERS, **_auth_headers(self.config), **request.headers}
        kwargs: Dict[str, Any] = {
            "params": request.params,
            "headers": headers,
            "timeout": self.config.timeout,
        }
        if self.config.basic_auth:
            kwargs["auth"] = self.config.basic_auth
        if request.json_body is not None:
            kwargs["json"] = request.json_body
        elif request.content is not None:
            kwargs["content"] = request.content.encode("utf-8")
        elif request.parts:
            kwargs["files"] = request.parts

        resp = await self._get_client().request(request.method, url, **kwargs)
        return RawResponse(
            status_code=resp.status_code,
            body=resp.content,
            headers=dict(resp.headers),
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
