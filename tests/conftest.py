"""Shared fixtures for texture-results tests."""

from __future__ import annotations

import pytest

from texture_results.config.settings import AppSettings, BotSettings, PackConfig


@pytest.fixture
def pack() -> PackConfig:
    """A pack with java and bedrock repositories and a contributor role."""
    return PackConfig(
        id="faithful_32x",
        name="Faithful 32x",
        github={
            "java": {"repo": "Faithful-Java-32x", "org": "Faithful-Resource-Pack"},
            "bedrock": {"repo": "Faithful-Bedrock-32x", "org": "Faithful-Resource-Pack"},
        },
        submission={
            "channels": {"submit": "111", "council": "222", "results": "555"},
            "contributor_role": "777",
        },
    )


@pytest.fixture
def java_only_pack() -> PackConfig:
    """A pack without a bedrock repository or contributor role."""
    return PackConfig(
        id="classic_faithful_32x",
        name="Classic Faithful 32x",
        github={"java": {"repo": "Classic-Faithful-Java-32x"}},
        submission={"channels": {"results": "666"}},
    )


@pytest.fixture
def bot_settings() -> BotSettings:
    return BotSettings(emojis={"upvote": "<:upvote:1>", "downvote": "<:downvote:2>"})


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings(
        debug=False,
        api_url="https://api.example.com/v2",
        api_token="api-token",
        discord_token="discord-token",
    )


@pytest.fixture
def texture_payload() -> dict:
    """Texture API response: two uses, three paths, five versions total."""
    return {
        "id": "1234",
        "name": "dirt",
        "uses": [
            {"id": "1234a", "edition": "java", "name": "block"},
            {"id": "1234b", "edition": "bedrock", "name": "block"},
        ],
        "paths": [
            {
                "id": 1,
                "use": "1234a",
                "name": "assets/minecraft/textures/block/dirt.png",
                "versions": ["1.20", "1.19.4"],
            },
            {
                "id": 2,
                "use": "1234a",
                "name": "assets/minecraft/textures/item/dirt.png",
                "versions": ["1.20"],
            },
            {
                "id": 3,
                "use": "1234b",
                "name": "textures/blocks/dirt.png",
                "versions": ["bedrock-latest", "bedrock-dev"],
            },
        ],
    }
