"""Mappers from Discord message JSON to pipeline records."""

from texture_results.results.mappers.contribution import generate_contribution_data
from texture_results.results.mappers.message import (
    extract_author_ids,
    extract_texture_id,
    map_downloadable_message,
)

__all__ = [
    "extract_author_ids",
    "extract_texture_id",
    "generate_contribution_data",
    "map_downloadable_message",
]
