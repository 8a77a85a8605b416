"""Configuration management using pydantic-settings.

Two sources:
- Environment variables (or a ``.env`` file) for secrets and endpoints
- Static JSON resources shipped with the package for pack and emoji data
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"
PACKS_FILE = RESOURCES_DIR / "packs.json"
BOT_SETTINGS_FILE = RESOURCES_DIR / "settings.json"

DEFAULT_USER_AGENT = "DiscordBot (https://github.com/texture-results, 1.0)"


class PackNotFoundError(LookupError):
    """Raised when no pack is configured for a channel."""

    def __init__(self, channel_id: str, channel_type: str) -> None:
        self.channel_id = channel_id
        self.channel_type = channel_type
        super().__init__(f"No pack has {channel_type} channel {channel_id}")


# -----------------------------------------------------------------------------
# Static resources
# -----------------------------------------------------------------------------


class GithubRepo(BaseModel):
    """Repository backing one edition of a pack."""

    repo: str
    org: str | None = None


class SubmissionChannels(BaseModel):
    """Channel IDs used by the submission process of a pack."""

    model_config = ConfigDict(extra="allow")

    submit: str | None = None
    council: str | None = None
    results: str | None = None

    @field_validator("submit", "council", "results", mode="before")
    @classmethod
    def ensure_string(cls, v: Any) -> str | None:
        """Snowflakes may be written as numbers in JSON."""
        return None if v is None else str(v)


class SubmissionConfig(BaseModel):
    channels: SubmissionChannels = Field(default_factory=SubmissionChannels)
    contributor_role: str | None = None

    @field_validator("contributor_role", mode="before")
    @classmethod
    def ensure_role_string(cls, v: Any) -> str | None:
        return None if v in (None, "") else str(v)


class PackConfig(BaseModel):
    """A resource pack and its per-edition repository mapping."""

    id: str
    name: str
    github: dict[str, GithubRepo] = Field(default_factory=dict)
    submission: SubmissionConfig = Field(default_factory=SubmissionConfig)

    def repo_for(self, edition: str) -> str | None:
        """Return the repository folder for ``edition``, if the pack has one."""
        github = self.github.get(edition)
        return github.repo if github else None


class EmojiSettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    upvote: str
    downvote: str = ""


class BotSettings(BaseModel):
    """Static bot settings (emoji markers used in result embeds)."""

    emojis: EmojiSettings


def _read_json(path: str | Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_packs(path: str | Path | None = None) -> dict[str, PackConfig]:
    """Load pack definitions keyed by pack ID.

    Args:
        path: JSON file to read (default: bundled packs.json)
    """
    data = _read_json(path or PACKS_FILE)
    return {
        key: PackConfig(**{"id": key, **value}) for key, value in data.items()
    }


def load_bot_settings(path: str | Path | None = None) -> BotSettings:
    """Load emoji and other static bot settings."""
    return BotSettings(**_read_json(path or BOT_SETTINGS_FILE))


def get_pack_by_channel(
    packs: dict[str, PackConfig],
    channel_id: int | str,
    channel_type: str = "results",
) -> PackConfig:
    """Find the pack whose submission channel of ``channel_type`` is ``channel_id``.

    Raises:
        PackNotFoundError: if no pack uses that channel
    """
    wanted = str(channel_id)
    for pack in packs.values():
        if getattr(pack.submission.channels, channel_type, None) == wanted:
            return pack
    raise PackNotFoundError(wanted, channel_type)


# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------


class AppSettings(BaseSettings):
    """Runtime settings read from the environment.

    DEBUG, API_URL, API_TOKEN and DISCORD_TOKEN map onto the fields below
    (names are case-insensitive).
    """

    debug: bool = False
    api_url: str = ""
    api_token: str = ""
    discord_token: str = ""
    discord_user_agent: str = DEFAULT_USER_AGENT

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("api_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Endpoints are appended directly, so the base must end with '/'."""
        if v and not v.endswith("/"):
            return v + "/"
        return v


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
