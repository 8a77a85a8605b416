"""Give the pack contributor role to submission authors."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import httpx

from texture_results.config.settings import PackConfig
from texture_results.results.client import DiscordAPIError
from texture_results.results.logger import logger

if TYPE_CHECKING:
    from texture_results.results.client import DiscordClient


async def _grant_role(
    client: "DiscordClient", guild_id: int, author: str, role: str
) -> bool:
    """Add ``role`` to one member unless they already have it.

    Returns True if the role was added. Failures (member left, missing
    permissions) are not reported beyond a debug line.
    """
    try:
        member = await client.get_guild_member(guild_id, int(author))
        if role in member.get("roles", []):
            return False
        await client.add_guild_member_role(guild_id, int(author), int(role))
    except (DiscordAPIError, httpx.HTTPError, ValueError) as e:
        logger.debug(f"Could not add contributor role to {author}: {e}")
        return False
    return True


async def add_contributor_role(
    client: "DiscordClient",
    pack: PackConfig,
    guild_id: int | None,
    authors: list[str],
) -> int:
    """Add the pack's contributor role to every author without it.

    Returns:
        Number of members the role was added to
    """
    role = pack.submission.contributor_role
    if not guild_id or not role:
        return 0

    granted = await asyncio.gather(
        *(_grant_role(client, guild_id, author, role) for author in dict.fromkeys(authors))
    )
    return sum(granted)


class RoleGrantQueue:
    """Runs role grants in the background so the download loop never waits.

    Call drain() before the Discord client is closed.
    """

    def __init__(self, client: "DiscordClient", pack: PackConfig, guild_id: int | None) -> None:
        self.client = client
        self.pack = pack
        self.guild_id = guild_id
        self._tasks: set[asyncio.Task[Any]] = set()

    def submit(self, authors: list[str]) -> None:
        task = asyncio.create_task(
            add_contributor_role(self.client, self.pack, self.guild_id, authors)
        )
        self._tasks.add(task)

    async def drain(self) -> int:
        """Wait for all queued grants; returns how many roles were added."""
        if not self._tasks:
            return 0
        tasks = list(self._tasks)
        self._tasks.clear()
        results = await asyncio.gather(*tasks, return_exceptions=True)
        granted = 0
        for result in results:
            if isinstance(result, BaseException):
                logger.debug(f"Contributor role task failed: {result}")
            else:
                granted += result
        return granted
