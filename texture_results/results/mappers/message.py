"""Results message JSON to DownloadableMessage mapper.

A results embed looks like::

    title:     "Dirt [#1234]"
    thumbnail: {"url": "https://.../dirt.png"}
    fields[0]: "<@123456789012345678>\\n<@234567890123456789>"   (authors)
    fields[1]: "<:upvote:...> Will be added in a future version!"  (status)
"""

from __future__ import annotations

import re
from typing import Any

from texture_results.results.models import DownloadableMessage
from texture_results.utils.time import parse_iso8601, to_epoch_ms


TEXTURE_ID_PATTERN = re.compile(r"(?<=\[#)(.*?)(?=\])")
DIGITS_PATTERN = re.compile(r"\d+")


def extract_texture_id(title: str) -> str | None:
    """Return the text between ``[#`` and ``]`` in an embed title."""
    match = TEXTURE_ID_PATTERN.search(title)
    return match.group(0) if match else None


def extract_author_ids(value: str) -> list[str]:
    """Return the first run of digits (a user ID) from each line.

    Lines without any digits are dropped.
    """
    authors: list[str] = []
    for line in value.split("\n"):
        match = DIGITS_PATTERN.search(line)
        if match:
            authors.append(match.group(0))
    return authors


def map_downloadable_message(data: dict[str, Any]) -> DownloadableMessage | None:
    """Convert a results message to a DownloadableMessage.

    Args:
        data: Raw message object from Discord API

    Returns:
        The mapped message, or None if the embed is missing any required part
    """
    embeds = data.get("embeds") or []
    if not embeds:
        return None
    embed = embeds[0]

    url = (embed.get("thumbnail") or {}).get("url")
    fields = embed.get("fields") or []
    title = embed.get("title")
    created_at = parse_iso8601(data.get("timestamp"))
    if not url or not fields or not title or created_at is None:
        return None

    texture_id = extract_texture_id(title)
    if texture_id is None:
        return None

    return DownloadableMessage(
        url=url,
        authors=extract_author_ids(fields[0].get("value") or ""),
        date=to_epoch_ms(created_at),
        id=texture_id,
    )
