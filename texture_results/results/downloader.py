"""Download an accepted texture into every path it is used at.

Destination layout mirrors the pack repositories::

    <base_folder>/<pack repo>/<version>/<path name>
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from texture_results.config.settings import PackConfig
from texture_results.results.api import TextureAPIError
from texture_results.results.logger import logger
from texture_results.results.models import (
    DownloadableMessage,
    DownloadResult,
    DownloadStatus,
    Texture,
    TexturePath,
)

if TYPE_CHECKING:
    from texture_results.results.api import TextureAPIClient


def is_valid_texture_id(texture_id: str | None) -> bool:
    return bool(texture_id) and texture_id.isascii() and texture_id.isdigit()


def safe_destination(base: Path, *parts: str) -> Path | None:
    """Join ``parts`` under ``base``; None if the result would leave ``base``.

    Leading separators are stripped so absolute names stay relative.
    """
    destination = base.joinpath(*(part.lstrip("/\\") for part in parts))
    if not destination.resolve().is_relative_to(base.resolve()):
        return None
    return destination


def iter_destinations(
    texture: Texture, pack: PackConfig, base_folder: str | Path
) -> Iterator[tuple[TexturePath, list[Path]]]:
    """Yield each path of ``texture`` with its per-version destinations.

    Uses whose edition has no repository in ``pack`` are skipped.
    """
    base = Path(base_folder)
    for use in texture.uses:
        # java and bedrock live in different repositories
        repo = pack.repo_for(use.edition)
        if not repo:
            logger.debug(
                f"GitHub repository not found for pack and edition: "
                f"{pack.name} {use.edition}"
            )
            continue

        for path in texture.paths_for(use):
            destinations: list[Path] = []
            for version in path.versions:
                destination = safe_destination(base, repo, version, path.name)
                if destination is None:
                    logger.error(
                        f"Refusing to write outside {base}: {repo}/{version}/{path.name}"
                    )
                    continue
                destinations.append(destination)
            yield path, destinations


def _write_file(destination: Path, data: bytes) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(data)


async def write_texture_file(destination: Path, data: bytes) -> bool:
    """Write one file; failures are logged and reported as False."""
    try:
        await asyncio.to_thread(_write_file, destination, data)
    except OSError as e:
        logger.error(f"Failed to write texture to {destination}: {e}")
        return False
    logger.debug(f"Added texture to path {destination}")
    return True


async def download_texture(
    api: "TextureAPIClient",
    message: DownloadableMessage,
    pack: PackConfig,
    base_folder: str | Path,
) -> DownloadResult:
    """Download a single texture to all of its paths locally.

    Args:
        api: Texture API client
        message: Accepted submission to download
        pack: Pack the submission was accepted into
        base_folder: Root folder to write pack repositories under

    Returns:
        DownloadResult describing what happened; only ``DOWNLOADED`` results
        should be credited.

    Raises:
        TextureAPIError: if the image itself can't be fetched
    """
    if not is_valid_texture_id(message.id):
        logger.debug(f"Non-numerical texture ID found: {message.id}")
        return DownloadResult(status=DownloadStatus.INVALID_ID)

    image = await api.get_image(message.url)

    try:
        texture = await api.get_texture(message.id)
    except TextureAPIError as e:
        # texture was merged or deleted between submission and results
        if e.status_code == 404:
            logger.debug(f"Could not find texture for ID: {message.id}")
            return DownloadResult(status=DownloadStatus.NOT_FOUND)
        raise

    result = DownloadResult(status=DownloadStatus.DOWNLOADED, texture=texture)

    for _path, destinations in iter_destinations(texture, pack, base_folder):
        outcomes = await asyncio.gather(
            *(write_texture_file(destination, image) for destination in destinations)
        )
        for destination, ok in zip(destinations, outcomes):
            (result.written if ok else result.failed).append(destination)

    return result
