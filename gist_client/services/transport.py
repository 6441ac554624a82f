"""HTTP transport configuration for the Gist API client.

Only connection establishment is bounded.  Once a connection is open, reads,
writes and pool waits are unbounded from this layer's point of view; callers
that need an end-to-end deadline must impose one themselves.
"""

from __future__ import annotations

import httpx

from gist_client.config import DEFAULT_CONNECT_TIMEOUT


def connect_timeout(seconds: float = DEFAULT_CONNECT_TIMEOUT) -> httpx.Timeout:
    """Return a timeout that bounds the connect phase only."""
    return httpx.Timeout(None, connect=seconds)


def build_http_client(
    *,
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the ``httpx.Client`` owned by a ``GistClient``.

    Args:
        connect_timeout_seconds: Upper bound for establishing a connection.
            Exceeding it raises ``httpx.ConnectTimeout``.
        transport: Optional transport override, e.g. ``httpx.MockTransport``
            in tests.  Defaults to an ``httpx.HTTPTransport`` that never
            retries.

    Returns:
        A client safe for concurrent use from multiple threads.
    """
    return httpx.Client(
        transport=transport or httpx.HTTPTransport(retries=0),
        timeout=connect_timeout(connect_timeout_seconds),
        follow_redirects=True,
    )
