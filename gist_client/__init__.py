"""Synchronous client library for the Gist API."""

from gist_client.client import GistClient
from gist_client.exceptions import AuthenticationError, GistClientError, GistValidationError
from gist_client.schemas.gist import Gist, GistFile

__all__ = [
    "AuthenticationError",
    "Gist",
    "GistClient",
    "GistClientError",
    "GistFile",
    "GistValidationError",
]
