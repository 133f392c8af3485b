"""Recipient ("to") list encoding and decoding.

The service has sent recipients in two shapes over time:

    ["user:1", "flat:2 token"]            # flat strings
    [["user:1"], ["flat:2", "token"]]     # reference/token pairs

Both are normalized to the flat string form before classification.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

import structlog

from streamfeed.feeds import Feed, GeneralFeed

logger = structlog.get_logger()

_WITH_TOKEN_RE = re.compile(r"\w+:\w+ .*", re.ASCII)
_WITHOUT_TOKEN_RE = re.compile(r"\w+:\w+", re.ASCII)


def encode_recipient(feed: Feed) -> str:
    reference = feed.feed_id.value
    if feed.token:
        return f"{reference} {feed.token}"
    return reference


def encode_recipients(feeds: Iterable[Feed]) -> list[str]:
    """Encode feeds in order as ``"ref"`` or ``"ref token"`` strings."""
    return [encode_recipient(feed) for feed in feeds]


def _as_string_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    items = ["" if item is None else item for item in value]
    if not all(isinstance(item, str) for item in items):
        return None
    return items


def _null_to_empty_pair(item: Any) -> Any:
    if item is None:
        return []
    if isinstance(item, list):
        return ["" if part is None else part for part in item]
    return item


def _as_pair_list(value: Any) -> list[list[str]] | None:
    if not isinstance(value, list):
        return None
    pairs = [_null_to_empty_pair(item) for item in value]
    for pair in pairs:
        if not isinstance(pair, list) or not all(isinstance(part, str) for part in pair):
            return None
    return pairs


def normalize_recipients(value: Any) -> list[str] | None:
    """Flatten either wire shape to ``"ref[ token]"`` strings.

    Returns None when the value matches neither shape.
    """
    flat = _as_string_list(value)
    if flat is not None:
        return flat

    pairs = _as_pair_list(value)
    if pairs is None:
        return None

    normalized: list[str] = []
    for pair in pairs:
        if len(pair) == 2:
            normalized.append(f"{pair[0]} {pair[1]}")
        elif len(pair) == 1:
            normalized.append(pair[0])
    return normalized


def parse_recipient(entry: str) -> GeneralFeed | None:
    if _WITH_TOKEN_RE.fullmatch(entry):
        slug, _, rest = entry.partition(":")
        user_id, _, token = rest.partition(" ")
        return GeneralFeed(feed_slug=slug, user_id=user_id, token=token)

    if _WITHOUT_TOKEN_RE.fullmatch(entry):
        slug, _, user_id = entry.partition(":")
        return GeneralFeed(feed_slug=slug, user_id=user_id)

    return None


def decode_recipients(value: Any) -> list[GeneralFeed]:
    """Decode a wire ``to`` value into feeds, dropping unrecognized entries."""
    entries = normalize_recipients(value)
    if entries is None:
        logger.debug("Skipping recipients", reason="unrecognized shape", value_type=type(value).__name__)
        return []

    feeds: list[GeneralFeed] = []
    for entry in entries:
        feed = parse_recipient(entry)
        if feed is None:
            logger.debug("Dropping recipient", entry=entry)
            continue
        feeds.append(feed)
    return feeds
