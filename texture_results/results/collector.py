"""Collect today's accepted submissions from a results channel.

Messages are paged forward from local midnight using the ``after``
parameter, so only today's part of the channel is ever fetched.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from texture_results.results.logger import logger
from texture_results.results.mappers import map_downloadable_message
from texture_results.results.models import DownloadableMessage
from texture_results.utils.snowflake import datetime_to_snowflake, snowflake_to_datetime
from texture_results.utils.time import local_midnight, local_today, parse_iso8601

if TYPE_CHECKING:
    from texture_results.results.client import DiscordClient


def message_created_at(message: dict[str, Any]) -> datetime:
    """Creation time of a message, from its timestamp or else its ID."""
    return parse_iso8601(message.get("timestamp")) or snowflake_to_datetime(
        int(message["id"])
    )


def is_same_day(created_at: datetime | None, today: date) -> bool:
    """Whether ``created_at`` falls on ``today`` in local time."""
    if created_at is None:
        return False
    return created_at.astimezone().date() == today


def is_accepted(message: dict[str, Any], upvote: str) -> bool:
    """Whether the status field of the first embed carries the upvote marker."""
    embeds = message.get("embeds") or []
    if not embeds:
        return False
    fields = embeds[0].get("fields") or []
    if len(fields) < 2:
        return False
    return upvote in (fields[1].get("value") or "")


async def fetch_todays_messages(
    client: "DiscordClient",
    channel_id: int,
    today: date | None = None,
    batch_size: int = 100,
) -> list[dict[str, Any]]:
    """Fetch every message posted in ``channel_id`` on ``today``.

    Returns:
        Messages ordered oldest first
    """
    today = today or local_today()
    after_id = datetime_to_snowflake(local_midnight(today))
    messages: dict[int, dict[str, Any]] = {}

    while True:
        batch = await client.get_messages(
            channel_id=channel_id,
            limit=batch_size,
            after=after_id,
        )
        if not batch:
            break

        for message in batch:
            messages[int(message["id"])] = message

        # Discord returns newest first, so resume from the largest ID
        after_id = max(int(m["id"]) for m in batch)

        if len(batch) < batch_size:
            break

    return [
        messages[message_id]
        for message_id in sorted(messages)
        if is_same_day(message_created_at(messages[message_id]), today)
    ]


async def collect_results(
    client: "DiscordClient",
    channel_id: int,
    upvote: str,
    today: date | None = None,
) -> list[DownloadableMessage]:
    """Return today's accepted submissions, oldest first.

    Accepted messages whose embed can't be mapped are dropped.
    """
    messages = await fetch_todays_messages(client, channel_id, today=today)
    accepted = [m for m in messages if is_accepted(m, upvote)]

    results: list[DownloadableMessage] = []
    for message in accepted:
        mapped = map_downloadable_message(message)
        if mapped is not None:
            results.append(mapped)

    logger.debug(
        f"{len(messages)} messages today, {len(accepted)} accepted, "
        f"{len(results)} downloadable"
    )
    return results
