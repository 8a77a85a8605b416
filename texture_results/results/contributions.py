"""Deduplicate and post contributions for downloaded textures."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Iterable

import httpx

from texture_results.results.api import TextureAPIError
from texture_results.results.logger import logger
from texture_results.results.models import Contribution

if TYPE_CHECKING:
    from texture_results.results.api import TextureAPIClient


def dedupe_contributions(contributions: Iterable[Contribution]) -> list[Contribution]:
    """Keep only the last contribution for each texture.

    Prevents double credit when the same texture passes more than once in a
    day. Output keeps the order in which textures were first seen.
    """
    unique: dict[str, Contribution] = {}
    for contribution in contributions:
        unique[contribution.texture] = contribution
    return list(unique.values())


async def post_contributions(
    api: "TextureAPIClient", contributions: list[Contribution]
) -> bool:
    """Post all contributions in one request.

    Failures are only reported at debug level.

    Returns:
        True if the batch was accepted
    """
    if not contributions:
        return False

    payload = json.dumps([c.model_dump() for c in contributions], indent=4)
    try:
        await api.post_contributions(contributions)
    except (TextureAPIError, httpx.HTTPError) as e:
        logger.debug(
            f"Failed to add contribution(s) for pack: {contributions[0].pack} ({e})"
        )
        logger.debug(payload)
        return False

    logger.debug(f"Added contribution(s): {payload}")
    return True
