"""Tests for texture_results.results.contributions."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from texture_results.results.api import TextureAPIClient, TextureAPIError
from texture_results.results.contributions import (
    dedupe_contributions,
    post_contributions,
)
from texture_results.results.models import Contribution


def _contribution(texture: str, authors: list[str], date: int = 0) -> Contribution:
    return Contribution(date=date, pack="faithful_32x", texture=texture, authors=authors)


class TestDedupeContributions:
    def test_last_contribution_per_texture_wins(self) -> None:
        first = _contribution("12", ["1"], date=1)
        other = _contribution("34", ["2"], date=2)
        last = _contribution("12", ["3"], date=3)

        result = dedupe_contributions([first, other, last])

        assert result == [last, other]

    def test_unique_textures_unchanged(self) -> None:
        contributions = [_contribution("1", ["1"]), _contribution("2", ["1"])]

        assert dedupe_contributions(contributions) == contributions

    def test_empty(self) -> None:
        assert dedupe_contributions([]) == []


class TestPostContributions:
    @pytest.mark.asyncio
    async def test_posts_batch(self) -> None:
        api = AsyncMock()
        contributions = [_contribution("12", ["1"])]

        assert await post_contributions(api, contributions)
        api.post_contributions.assert_awaited_once_with(contributions)

    @pytest.mark.asyncio
    async def test_empty_batch_makes_no_request(self) -> None:
        api = AsyncMock()

        assert not await post_contributions(api, [])
        api.post_contributions.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_api_error_is_swallowed(self) -> None:
        api = AsyncMock()
        api.post_contributions.side_effect = TextureAPIError(401, "Unauthorized")

        assert not await post_contributions(api, [_contribution("12", ["1"])])

    @pytest.mark.asyncio
    async def test_network_error_is_swallowed(self) -> None:
        api = AsyncMock()
        api.post_contributions.side_effect = httpx.ConnectError("down")

        assert not await post_contributions(api, [_contribution("12", ["1"])])

    @pytest.mark.asyncio
    async def test_plain_text_created_response_counts_as_posted(self) -> None:
        api = TextureAPIClient(base_url="https://api.example.com/v2/", token="secret")
        api._client = AsyncMock(spec=httpx.AsyncClient)
        response = MagicMock(spec=httpx.Response)
        response.status_code = 201
        response.text = "Created"
        response.json.side_effect = ValueError("Expecting value")
        api._client.request.return_value = response

        assert await post_contributions(api, [_contribution("12", ["1"])])
