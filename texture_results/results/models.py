"""Data types passed between the stages of the results pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


@dataclass
class DownloadableMessage:
    """An accepted submission, as read from a results channel embed."""

    url: str
    authors: list[str]
    date: int  # message creation time, ms since epoch
    id: str


# -----------------------------------------------------------------------------
# Texture API payloads
# -----------------------------------------------------------------------------


def _as_str(v: Any) -> Any:
    return str(v) if isinstance(v, int) else v


class TextureUse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    edition: str
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def ensure_string_id(cls, v: Any) -> Any:
        return _as_str(v)


class TexturePath(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    use: str
    name: str
    versions: list[str] = []

    @field_validator("id", "use", mode="before")
    @classmethod
    def ensure_string_ids(cls, v: Any) -> Any:
        return _as_str(v)


class Texture(BaseModel):
    """Texture record with all of its uses and paths."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    uses: list[TextureUse] = []
    paths: list[TexturePath] = []

    @field_validator("id", mode="before")
    @classmethod
    def ensure_string_id(cls, v: Any) -> Any:
        return _as_str(v)

    def paths_for(self, use: TextureUse) -> list[TexturePath]:
        """Paths belonging to ``use``."""
        return [path for path in self.paths if path.use == use.id]


class Contribution(BaseModel):
    """Credit for one texture in one pack."""

    date: int
    pack: str
    texture: str
    authors: list[str]


# -----------------------------------------------------------------------------
# Stage results
# -----------------------------------------------------------------------------


class DownloadStatus(str, Enum):
    DOWNLOADED = "downloaded"
    INVALID_ID = "invalid_id"
    NOT_FOUND = "not_found"


@dataclass
class DownloadResult:
    """Outcome of downloading one texture to all of its paths."""

    status: DownloadStatus
    texture: Texture | None = None
    written: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)

    @property
    def downloaded(self) -> bool:
        return self.status is DownloadStatus.DOWNLOADED
