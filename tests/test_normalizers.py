"""Tests for the payload and status-code normalizers."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from gist_client.services.normalizers import matches_status, read_payload


class TrackingStream(httpx.SyncByteStream):
    """Response body that records iteration, counts closes and can fail mid-read."""

    def __init__(self, chunks: list[bytes], fail: bool = False) -> None:
        self.chunks = chunks
        self.fail = fail
        self.close_calls = 0
        self.iterated = False

    def __iter__(self) -> Iterator[bytes]:
        self.iterated = True
        yield from self.chunks
        if self.fail:
            raise httpx.ReadError("connection reset")

    def close(self) -> None:
        self.close_calls += 1


# ---------------------------------------------------------------------------
# read_payload
# ---------------------------------------------------------------------------


def test_read_payload_returns_full_body() -> None:
    """All chunks are joined into one payload and the stream is closed once."""
    stream = TrackingStream([b'{"id": ', b'"1"}'])
    response = httpx.Response(200, stream=stream)

    assert read_payload(response) == b'{"id": "1"}'
    assert response.is_closed
    assert stream.close_calls == 1


def test_read_payload_returns_error_body() -> None:
    """Error statuses still yield their body bytes."""
    response = httpx.Response(500, stream=TrackingStream([b"oops"]))

    assert read_payload(response) == b"oops"


def test_read_payload_closes_on_read_failure() -> None:
    """A failed read propagates after the response is closed."""
    stream = TrackingStream([b"partial"], fail=True)
    response = httpx.Response(200, stream=stream)

    with pytest.raises(httpx.ReadError):
        read_payload(response)

    assert response.is_closed
    assert stream.close_calls == 1


# ---------------------------------------------------------------------------
# matches_status
# ---------------------------------------------------------------------------


def test_matches_status_no_content() -> None:
    """204 is the default expected code."""
    stream = TrackingStream([])
    response = httpx.Response(204, stream=stream)

    assert matches_status(response) is True
    assert response.is_closed
    assert stream.iterated
    assert stream.close_calls == 1


@pytest.mark.parametrize("status", [200, 201, 202, 301, 404, 500])
def test_matches_status_mismatch_is_false(status: int) -> None:
    """A different code is False, not an error; the body is still drained and closed."""
    stream = TrackingStream([b"body"])
    response = httpx.Response(status, stream=stream)

    assert matches_status(response) is False
    assert stream.iterated
    assert stream.close_calls == 1


def test_matches_status_custom_expected() -> None:
    """Callers may expect a code other than 204."""
    response = httpx.Response(201, stream=TrackingStream([]))

    assert matches_status(response, expected=201) is True


def test_matches_status_closes_on_drain_failure() -> None:
    """A failure while draining the body propagates after the close."""
    stream = TrackingStream([b"partial"], fail=True)
    response = httpx.Response(404, stream=stream)

    with pytest.raises(httpx.ReadError):
        matches_status(response)

    assert response.is_closed
    assert stream.close_calls == 1
