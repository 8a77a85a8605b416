"""Main orchestration for downloading submission results.

For one results channel: collect today's accepted submissions, download each
texture into the pack repository layout, give authors the contributor role,
then post one deduplicated batch of contributions.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from texture_results.config.settings import (
    AppSettings,
    BotSettings,
    PackConfig,
    get_pack_by_channel,
    get_settings,
    load_bot_settings,
    load_packs,
)
from texture_results.core import BaseOrchestrator
from texture_results.results.api import TextureAPIClient
from texture_results.results.client import DiscordClient
from texture_results.results.collector import collect_results
from texture_results.results.contributions import (
    dedupe_contributions,
    post_contributions,
)
from texture_results.results.downloader import download_texture
from texture_results.results.logger import logger
from texture_results.results.mappers import generate_contribution_data
from texture_results.results.models import Contribution, DownloadableMessage
from texture_results.results.roles import RoleGrantQueue


DEFAULT_BASE_FOLDER = "./downloadedTextures"


class ResultsOrchestrator(BaseOrchestrator):
    """Orchestrates a results download for one channel."""

    def __init__(
        self,
        settings: AppSettings,
        channel_id: int,
        base_folder: str | Path = DEFAULT_BASE_FOLDER,
        add_contributions: bool = True,
        packs: dict[str, PackConfig] | None = None,
        bot_settings: BotSettings | None = None,
        today: date | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.channel_id = channel_id
        self.base_folder = Path(base_folder)
        self.add_contributions = add_contributions
        self.today = today

        self.pack = get_pack_by_channel(
            packs if packs is not None else load_packs(), channel_id, "results"
        )
        self.upvote = (bot_settings or load_bot_settings()).emojis.upvote

        # Stats
        self.messages_found = 0
        self.downloaded = 0
        self.skipped = 0
        self.failed = 0
        self.files_written = 0
        self.contributions_posted = 0
        self.roles_granted = 0

    async def _run_pipeline(self) -> None:
        """Execute the results pipeline."""
        logger.pack_start(self.pack.name, self.channel_id)

        async with DiscordClient(
            token=self.settings.discord_token,
            user_agent=self.settings.discord_user_agent,
        ) as client, TextureAPIClient(
            base_url=self.settings.api_url,
            token=self.settings.api_token,
        ) as api:
            channel = await client.get_channel(self.channel_id)
            guild_id = int(channel["guild_id"]) if channel.get("guild_id") else None

            messages = await collect_results(
                client, self.channel_id, self.upvote, today=self.today
            )
            self.messages_found = len(messages)

            roles = RoleGrantQueue(client, self.pack, guild_id)
            contributions: list[Contribution] = []

            # queued grants must finish before the client closes
            try:
                # one at a time so a bad texture can't affect the others
                for message in messages:
                    if not await self._process_message(api, message):
                        continue

                    if self.add_contributions:
                        contributions.append(
                            generate_contribution_data(message, self.pack)
                        )
                    roles.submit(message.authors)

                unique = dedupe_contributions(contributions)
                if unique and self.add_contributions:
                    if await post_contributions(api, unique):
                        self.contributions_posted = len(unique)
            finally:
                self.roles_granted = await roles.drain()

    async def _process_message(
        self, api: TextureAPIClient, message: DownloadableMessage
    ) -> bool:
        """Download one texture.

        Returns:
            True if the texture was downloaded and should be credited
        """
        with logger.block(f"Texture #{message.id}") as block:
            block.field("authors", ", ".join(message.authors) or "none")

            try:
                result = await download_texture(
                    api, message, self.pack, self.base_folder
                )
            except Exception as e:
                logger.error(
                    f"Failed to download texture [#{message.id}] "
                    f"for pack {self.pack.name}: {e}"
                )
                block.result("download failed", success=False)
                self.failed += 1
                return False

            if not result.downloaded:
                block.skip(result.status.value.replace("_", " "))
                self.skipped += 1
                return False

            self.downloaded += 1
            self.files_written += len(result.written)
            if result.failed:
                block.result(
                    f"written to {len(result.written)} paths, "
                    f"{len(result.failed)} failed",
                    success=False,
                )
            else:
                block.result(f"written to {len(result.written)} paths")
            return True

    def _log_summary(self, elapsed: float) -> None:
        """Log the final run summary."""
        logger.summary(
            messages=self.messages_found,
            downloaded=self.downloaded,
            skipped=self.skipped,
            failed=self.failed,
            files_written=self.files_written,
            contributions=self.contributions_posted,
            roles_granted=self.roles_granted,
            elapsed=elapsed,
        )


async def run_download_results(
    channel_id: int,
    base_folder: str | Path = DEFAULT_BASE_FOLDER,
    add_contributions: bool = True,
    settings: AppSettings | None = None,
) -> ResultsOrchestrator:
    """Entry point for downloading one results channel."""
    orchestrator = ResultsOrchestrator(
        settings or get_settings(),
        channel_id,
        base_folder=base_folder,
        add_contributions=add_contributions,
    )
    await orchestrator.run()
    return orchestrator
