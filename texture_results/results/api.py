"""Client for the texture database API.

Covers the three calls the results pipeline makes: texture metadata by ID,
raw image bytes by URL, and the batch contribution POST.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from texture_results.results.models import Contribution, Texture


DEFAULT_TIMEOUT = 30.0  # seconds


class TextureAPIError(Exception):
    """Raised when the texture API (or an image host) returns an error."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Texture API error {status_code}: {message}")


@dataclass
class TextureAPIClient:
    """Async client for the texture API.

    ``base_url`` must end with a slash; endpoint names are appended to it.
    """

    base_url: str
    token: str = ""

    def __post_init__(self) -> None:
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "TextureAPIClient":
        self._client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, follow_redirects=True)
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with.")

        response = await self._client.request(method, url, **kwargs)
        if response.status_code >= 400:
            raise TextureAPIError(response.status_code, response.text)
        return response

    async def get_texture(self, texture_id: str) -> Texture:
        """Fetch a texture with all of its uses and paths."""
        response = await self._request("GET", f"{self.base_url}textures/{texture_id}/all")
        return Texture.model_validate(response.json())

    async def get_image(self, url: str) -> bytes:
        """Download raw image bytes."""
        response = await self._request("GET", url)
        return response.content

    async def post_contributions(self, contributions: list[Contribution]) -> None:
        """Add contributions in one request (needs the bot token).

        The response body is not read; any 2xx status counts as accepted.
        """
        await self._request(
            "POST",
            f"{self.base_url}contributions",
            json=[c.model_dump() for c in contributions],
            headers={"bot": self.token},
        )
