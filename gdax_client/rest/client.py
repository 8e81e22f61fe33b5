"""Asynchronous REST client for the exchange's public market-data API.

The client owns one pooled ``httpx.AsyncClient`` and exposes a single generic
operation, :meth:`RESTClient.send_request`, which executes any endpoint value
satisfying :class:`~gdax_client.rest.request.EndPointRequest`:

1. ask the endpoint for its :class:`RestRequest`;
2. merge the route's query attributes with the pagination parameters
   (route attributes first, pagination last);
3. send the request with the fixed User-Agent;
4. buffer the body and decode it into the endpoint's ``response_type``.

Nothing is retried, cached or rate limited here. Cancelling the awaiting task
cancels the in-flight httpx call, which releases its pooled connection.
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx

from gdax_client import __version__
from gdax_client.core.config import PRODUCTION_API_URL, SANDBOX_API_URL, Settings, get_settings
from gdax_client.rest.decoding import decode_response
from gdax_client.rest.errors import ConnectorError, DecodeError, TransportError, UriError
from gdax_client.rest.request import EndPointRequest, ResponseT, RestRequest

logger = logging.getLogger(__name__)

USER_AGENT = f"gdax-client/{__version__}"


class RESTClient:
    """Executes endpoint requests against one API host.

    Safe to share between concurrent tasks: the only shared state is the
    transport's connection pool.
    """

    def __init__(
        self,
        api_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
        max_connections: int = 10,
        max_keepalive_connections: int = 5,
    ) -> None:
        self._api_url: str = api_url.rstrip("/")
        try:
            self._http = httpx.AsyncClient(
                transport=transport,
                timeout=httpx.Timeout(timeout),
                limits=httpx.Limits(
                    max_connections=max_connections,
                    max_keepalive_connections=max_keepalive_connections,
                ),
                headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            )
        except (OSError, ValueError) as exc:
            raise ConnectorError(str(exc)) from exc

    @classmethod
    def default(cls, **kwargs) -> RESTClient:  # noqa: ANN003
        """Client connected to the production API."""
        return cls(PRODUCTION_API_URL, **kwargs)

    @classmethod
    def sandbox(cls, **kwargs) -> RESTClient:  # noqa: ANN003
        """Client connected to the sandbox API."""
        return cls(SANDBOX_API_URL, **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs) -> RESTClient:  # noqa: ANN003
        settings = settings or get_settings()
        return cls(
            settings.resolved_api_url,
            timeout=settings.request_timeout_seconds,
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
            **kwargs,
        )

    @property
    def api_url(self) -> str:
        return self._api_url

    async def __aenter__(self) -> RESTClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def build_uri(self, request: RestRequest) -> httpx.URL:
        """Assemble base URL, route path and merged query into the final URI."""
        params = list(request.route.attributes)
        if request.pagination is not None:
            params.extend(request.pagination.query_params())
        query = f"?{urlencode(params)}" if params else ""
        raw = f"{self._api_url}{request.route.path}{query}"

        try:
            url = httpx.URL(raw)
        except (httpx.InvalidURL, ValueError, TypeError) as exc:
            raise UriError(raw, str(exc)) from exc
        if url.scheme not in {"http", "https"}:
            raise UriError(raw, f"unsupported scheme {url.scheme!r}")
        if not url.host:
            raise UriError(raw, "missing host")
        return url

    async def send_request(self, endpoint: EndPointRequest[ResponseT]) -> ResponseT:
        """Execute ``endpoint`` and decode the response into its ``response_type``.

        Raises:
            UriError: the assembled URI is malformed.
            TransportError: network failure or a non-2xx response.
            DecodeError: the body does not decode into the response type.
        """
        request = endpoint.create_request()
        url = self.build_uri(request)
        body = request.body.encode("utf-8")

        http_request = self._http.build_request(
            request.http_method,
            url,
            content=body,
            headers={"Content-Length": str(len(body))},
        )
        logger.debug(
            "Dispatching request",
            extra={"method": request.http_method, "url": str(url), "endpoint": type(endpoint).__name__},
        )

        try:
            response = await self._http.send(http_request)
        except httpx.HTTPError as exc:
            logger.warning(
                "Request failed",
                extra={"method": request.http_method, "url": str(url), "error": str(exc)},
            )
            raise TransportError(request.http_method, str(url), str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            body_snippet = response.text[:200]
            logger.warning(
                "Non-success response",
                extra={
                    "method": request.http_method,
                    "url": str(url),
                    "status": response.status_code,
                    "body_snippet": body_snippet,
                },
            )
            raise TransportError(
                request.http_method,
                str(url),
                body_snippet,
                status_code=response.status_code,
            )

        try:
            result = decode_response(endpoint.response_type, response.content)
        except DecodeError:
            logger.warning(
                "Response decode failed",
                extra={"url": str(url), "response_type": repr(endpoint.response_type)},
            )
            raise

        logger.debug(
            "Response decoded",
            extra={"url": str(url), "status": response.status_code, "bytes": len(response.content)},
        )
        return result
