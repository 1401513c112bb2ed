"""HTTP client wrapper around httpx."""
from __future__ import annotations

import logging

import httpx

from darkgen.errors import NetworkError

logger = logging.getLogger(__name__)


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps failures into :class:`NetworkError`.

    The underlying ``httpx.Client`` is thread-safe, so one instance is shared by
    all concurrent stylesheet fetches.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        user_agent: str = "darkgen",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        )

    def get_text(self, url: str) -> str:
        """GET *url* and return the decoded body.

        Raises :class:`NetworkError` on transport failure or a non-2xx status.
        """
        logger.debug("GET %s", url)
        try:
            resp = self._client.get(url)
        except httpx.HTTPError as exc:
            raise NetworkError(f"GET {url} failed: {exc}", url=url, cause=exc) from exc

        if not resp.is_success:
            raise NetworkError(
                f"GET {url} returned HTTP {resp.status_code}",
                url=url,
                status_code=resp.status_code,
            )
        return resp.text

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
