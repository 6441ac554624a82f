"""Request building and execution for the Gist API.

``build_request`` addresses a request and sets the fixed header pair.
``execute`` sends it and turns a 401 into ``AuthenticationError``; any other
response is handed back with its body unread so that exactly one normalizer
can consume and close it.
"""

from __future__ import annotations

from http import HTTPStatus

import httpx
import structlog

from gist_client.exceptions import AuthenticationError

ACCEPT_HEADER = "application/vnd.github.v3+json"

logger = structlog.get_logger()


def auth_headers(token: str) -> dict[str, str]:
    """Build the complete header set sent with every request."""
    return {
        "Accept": ACCEPT_HEADER,
        "Authorization": f"token {token}",
    }


def build_request(
    method: str,
    url: str,
    token: str,
    *,
    body: bytes | None = None,
    timeout: httpx.Timeout | None = None,
) -> httpx.Request:
    """Build a request carrying only the Accept and Authorization headers.

    The request is constructed directly rather than through
    ``httpx.Client.build_request`` so that client-level default headers are
    never merged in.  ``Host`` and, when a body is present, ``Content-Length``
    are still added by httpx for HTTP framing.

    Args:
        method: HTTP method token.  Not validated.
        url: Absolute URL.  Not validated.
        token: API credential, sent as ``token <credential>``.
        body: Raw request body, or None for a bodiless request.
        timeout: Timeout to attach to the request's extensions.
    """
    extensions = {"timeout": timeout.as_dict()} if timeout is not None else None
    return httpx.Request(
        method,
        url,
        headers=auth_headers(token),
        content=body,
        extensions=extensions,
    )


def execute(client: httpx.Client, request: httpx.Request) -> httpx.Response:
    """Send *request* and return the response with its body unread.

    Raises:
        AuthenticationError: The server answered 401 Unauthorized.  The
            response body is drained and closed before raising.
        httpx.TransportError: Connection, timeout or other network failure,
            propagated unchanged.
    """
    logger.debug("gist_request", method=request.method, url=str(request.url))
    response = client.send(request, stream=True)

    if response.status_code == HTTPStatus.UNAUTHORIZED:
        try:
            response.read()
        finally:
            response.close()
        logger.warning("gist_unauthorized", method=request.method, url=str(request.url))
        raise AuthenticationError()

    logger.debug(
        "gist_response",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
    )
    return response
