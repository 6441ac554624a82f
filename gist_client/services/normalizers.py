"""Reduce an executed response to the value an operation returns.

Each normalizer owns the response it is given.  The body is always drained so
the connection can go back to the pool, and the response is closed exactly
once whether or not reading succeeds.
"""

from http import HTTPStatus

import httpx


def read_payload(response: httpx.Response) -> bytes:
    """Return the full response body as bytes, whatever the status code."""
    try:
        return response.read()
    finally:
        response.close()


def matches_status(response: httpx.Response, expected: int = HTTPStatus.NO_CONTENT) -> bool:
    """Return True iff the response status equals *expected*.

    A mismatch is not an error.  The body is read and discarded; a failure
    while reading propagates.
    """
    try:
        response.read()
        return response.status_code == expected
    finally:
        response.close()
