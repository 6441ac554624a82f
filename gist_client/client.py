"""Synchronous client for the Gist API.

Every operation is a fixed (method, path) pair routed through
``build_request`` -> ``execute`` -> one normalizer.  Payload operations return
the raw response body; toggle operations return whether the server answered
204 No Content.  Only a 401 (``AuthenticationError``) and transport failures
(``httpx.TransportError``) are raised; any other status is left for the
caller to interpret.
"""

from __future__ import annotations

from types import TracebackType

import httpx
import structlog

from gist_client.config import DEFAULT_API_URL, DEFAULT_CONNECT_TIMEOUT, Settings
from gist_client.exceptions import GistValidationError
from gist_client.schemas.gist import Gist, GistFile
from gist_client.services.executor import build_request, execute
from gist_client.services.normalizers import matches_status, read_payload
from gist_client.services.transport import build_http_client, connect_timeout

logger = structlog.get_logger()


class GistClient:
    """Client bound to one credential and one API host.

    Args:
        token: API credential.
        base_url: API root.  Can be reassigned later, e.g. to point at a
            test server, but not while other threads are issuing calls.
        connect_timeout_seconds: Bound on connection establishment.
        transport: Optional ``httpx`` transport override for the owned client.
        http_client: Optional pre-built ``httpx.Client``.  It is used as-is
            and is not closed by ``close()``.  Mutually exclusive with
            *transport*.

    Raises:
        ValueError: Both *transport* and *http_client* were given.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_API_URL,
        connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if transport is not None and http_client is not None:
            raise ValueError("pass either transport or http_client, not both")
        self._token = token
        self.base_url = base_url
        self._timeout = connect_timeout(connect_timeout_seconds)
        self._owns_http_client = http_client is None
        self._http = http_client or build_http_client(
            connect_timeout_seconds=connect_timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> GistClient:
        """Build a client from ``Settings``.

        When *settings* is None they are read from ``GIST_*`` environment
        variables and ``.env`` at call time.
        """
        if settings is None:
            settings = Settings()
        return cls(
            settings.token,
            base_url=settings.api_url,
            connect_timeout_seconds=settings.connect_timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._base_url = value.rstrip("/")

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _send(self, method: str, path: str, body: bytes | None = None) -> httpx.Response:
        request = build_request(
            method,
            self._base_url + path,
            self._token,
            body=body,
            timeout=self._timeout,
        )
        return execute(self._http, request)

    def _payload(self, method: str, path: str, body: bytes | None = None) -> bytes:
        return read_payload(self._send(method, path, body))

    def _no_content(self, method: str, path: str) -> bool:
        return matches_status(self._send(method, path))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_user(self, user: str) -> bytes:
        """List the public gists of *user*."""
        return self._payload("GET", f"/users/{user}/gists")

    def get_public(self) -> bytes:
        """List all public gists."""
        return self._payload("GET", "/gists/public")

    def get_starred(self) -> bytes:
        """List the authenticated user's starred gists."""
        return self._payload("GET", "/gists/starred")

    def get(self, gist_id: str) -> bytes:
        return self._payload("GET", f"/gists/{gist_id}")

    def list_commits(self, gist_id: str) -> bytes:
        return self._payload("GET", f"/gists/{gist_id}/commits")

    def list_forks(self, gist_id: str) -> bytes:
        return self._payload("GET", f"/gists/{gist_id}/forks")

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, description: str, public: bool, *files: GistFile) -> bytes:
        """Create a gist from *files* and return the raw response body.

        Raises:
            GistValidationError: A file has an empty filename.  Nothing is
                sent in that case.
        """
        for gist_file in files:
            if not gist_file.filename:
                raise GistValidationError(
                    f"filename undefined for {gist_file!r}", gist_file=gist_file
                )
        gist = Gist.from_files(description, public, *files)
        logger.info("gist_create", file_count=len(gist.files), public=public)
        return self._payload("POST", "/gists", gist.to_json())

    def edit(self, gist_id: str, gist: Gist) -> bytes:
        """Replace the description and files of an existing gist."""
        return self._payload("PATCH", f"/gists/{gist_id}", gist.to_json())

    def fork(self, gist_id: str) -> bytes:
        return self._payload("POST", f"/gists/{gist_id}/forks")

    # ------------------------------------------------------------------
    # Toggles
    # ------------------------------------------------------------------

    def star(self, gist_id: str) -> bool:
        return self._no_content("PUT", f"/gists/{gist_id}/star")

    def unstar(self, gist_id: str) -> bool:
        return self._no_content("DELETE", f"/gists/{gist_id}/star")

    def check_star(self, gist_id: str) -> bool:
        """Return True if the authenticated user has starred the gist."""
        return self._no_content("GET", f"/gists/{gist_id}/star")

    def delete(self, gist_id: str) -> bool:
        return self._no_content("DELETE", f"/gists/{gist_id}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the connection pool, unless the ``httpx.Client`` was supplied."""
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> GistClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
