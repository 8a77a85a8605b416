"""Submission results pipeline.

Reads today's accepted submissions from a pack's results channel, writes
each texture into the pack repository layout, gives authors the contributor
role and posts their contributions.

Usage:
    python -m texture_results.results --channel-id X
    python -m texture_results.results --channel-id X --no-contributions
"""
