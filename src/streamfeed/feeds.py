"""Feed references and the feed variants that carry them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

_FEED_PART_RE = re.compile(r"[\w-]+", re.ASCII)


class FeedIDError(ValueError):
    """Raised when a feed slug or user id is not usable in a reference."""


class FeedID(str):
    """Reference of shape ``slug:id`` naming a specific feed."""

    __slots__ = ()

    @classmethod
    def of(cls, slug: str, user_id: str) -> FeedID:
        return cls(f"{slug}:{user_id}")

    @property
    def value(self) -> str:
        return str(self)

    @property
    def slug(self) -> str:
        return self.partition(":")[0]

    @property
    def user_id(self) -> str:
        return self.partition(":")[2]


class Feed(Protocol):
    @property
    def feed_id(self) -> FeedID: ...

    @property
    def token(self) -> str: ...


@dataclass(frozen=True)
class _BaseFeed:
    feed_slug: str
    user_id: str
    token: str = ""

    @property
    def feed_id(self) -> FeedID:
        return FeedID.of(self.feed_slug, self.user_id)


@dataclass(frozen=True)
class FlatFeed(_BaseFeed):
    """Chronological feed of activities."""


@dataclass(frozen=True)
class NotificationFeed(_BaseFeed):
    """Feed that tracks seen/read state per activity group."""


@dataclass(frozen=True)
class AggregatedFeed(_BaseFeed):
    """Feed whose activities are grouped by an aggregation format."""


@dataclass(frozen=True)
class GeneralFeed(_BaseFeed):
    """Feed of unknown variant, e.g. one recovered from a recipient string."""


def _check_part(name: str, value: str) -> None:
    if not value or not _FEED_PART_RE.fullmatch(value):
        raise FeedIDError(f"invalid {name}: {value!r}")


def flat_feed(slug: str, user_id: str, token: str = "") -> FlatFeed:
    _check_part("feed slug", slug)
    _check_part("user id", user_id)
    return FlatFeed(feed_slug=slug, user_id=user_id, token=token)


def notification_feed(slug: str, user_id: str, token: str = "") -> NotificationFeed:
    _check_part("feed slug", slug)
    _check_part("user id", user_id)
    return NotificationFeed(feed_slug=slug, user_id=user_id, token=token)


def aggregated_feed(slug: str, user_id: str, token: str = "") -> AggregatedFeed:
    _check_part("feed slug", slug)
    _check_part("user id", user_id)
    return AggregatedFeed(feed_slug=slug, user_id=user_id, token=token)
