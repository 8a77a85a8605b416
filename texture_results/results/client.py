"""Discord REST API client for the results pipeline.

Async httpx client authenticated with a bot token. Rate limits (429) are
waited out using the Retry-After header; every other error status raises
DiscordAPIError straight away.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

import httpx

from texture_results.results.logger import logger


BASE_URL = "https://discord.com/api/v10"

MAX_RATE_LIMIT_RETRIES = 30
DEFAULT_TIMEOUT = 30.0  # seconds


class DiscordAPIError(Exception):
    """Raised when Discord API returns an error."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Discord API error {status_code}: {message}")


@dataclass
class DiscordClient:
    """Async Discord REST API client for a bot account."""

    token: str
    user_agent: str

    def __post_init__(self) -> None:
        self._client: httpx.AsyncClient | None = None

    @property
    def headers(self) -> dict[str, str]:
        """Build request headers."""
        token = self.token if self.token.startswith("Bot ") else f"Bot {self.token}"
        return {
            "Authorization": token,
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
        }

    async def __aenter__(self) -> "DiscordClient":
        self._client = httpx.AsyncClient(
            base_url=BASE_URL,
            headers=self.headers,
            timeout=DEFAULT_TIMEOUT,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a request, waiting out rate limits."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use async with.")

        for _ in range(MAX_RATE_LIMIT_RETRIES + 1):
            response = await self._client.request(method, path, params=params)

            if response.status_code == 200:
                return response.json()

            # No content (e.g., role added)
            if response.status_code == 204:
                return None

            if response.status_code == 429:
                retry_after = float(response.headers.get("Retry-After", 1.0))
                logger.rate_limit(retry_after)
                await asyncio.sleep(retry_after)
                continue

            error_msg = response.text
            try:
                error_msg = response.json().get("message", response.text)
            except Exception:
                pass
            raise DiscordAPIError(response.status_code, error_msg)

        raise DiscordAPIError(429, "Max rate limit retries exceeded")

    # -------------------------------------------------------------------------
    # Channel endpoints
    # -------------------------------------------------------------------------

    async def get_channel(self, channel_id: int) -> dict[str, Any]:
        """Fetch channel information."""
        return await self._request("GET", f"/channels/{channel_id}")

    async def get_messages(
        self,
        channel_id: int,
        limit: int = 100,
        before: int | None = None,
        after: int | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch messages from a channel.

        Args:
            channel_id: The channel to fetch from
            limit: Max messages to return (1-100)
            before: Get messages before this message ID
            after: Get messages after this message ID

        Returns:
            List of message objects, ordered by ID descending (newest first)
        """
        params: dict[str, Any] = {"limit": min(limit, 100)}
        if before:
            params["before"] = before
        if after:
            params["after"] = after
        return await self._request(
            "GET", f"/channels/{channel_id}/messages", params=params
        )

    # -------------------------------------------------------------------------
    # Guild member endpoints
    # -------------------------------------------------------------------------

    async def get_guild_member(self, guild_id: int, user_id: int) -> dict[str, Any]:
        """Fetch a guild member (includes the member's role IDs)."""
        return await self._request("GET", f"/guilds/{guild_id}/members/{user_id}")

    async def add_guild_member_role(
        self, guild_id: int, user_id: int, role_id: int
    ) -> None:
        """Give a role to a guild member."""
        await self._request(
            "PUT", f"/guilds/{guild_id}/members/{user_id}/roles/{role_id}"
        )
