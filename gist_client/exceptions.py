"""Exception hierarchy for the Gist API client.

Transport failures are not wrapped here: ``httpx.TransportError`` and its
subclasses (``httpx.ConnectTimeout``, ``httpx.ConnectError``, ...) reach the
caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gist_client.schemas.gist import GistFile

INVALID_TOKEN_MESSAGE = "invalid token"


class GistClientError(Exception):
    """Base class for errors raised by the Gist client."""


class AuthenticationError(GistClientError):
    """The API rejected the credential with 401 Unauthorized."""

    def __init__(self, message: str = INVALID_TOKEN_MESSAGE) -> None:
        super().__init__(message)


class GistValidationError(GistClientError, ValueError):
    """A gist was rejected locally before any request was sent."""

    def __init__(self, message: str, gist_file: GistFile | None = None) -> None:
        super().__init__(message)
        self.gist_file = gist_file
