"""DownloadableMessage to Contribution mapper."""

from __future__ import annotations

from texture_results.config.settings import PackConfig
from texture_results.results.models import Contribution, DownloadableMessage


def generate_contribution_data(
    message: DownloadableMessage, pack: PackConfig
) -> Contribution:
    """Convert an accepted submission into a postable contribution."""
    return Contribution(
        date=message.date,
        pack=pack.id,
        texture=message.id,
        authors=list(message.authors),
    )
