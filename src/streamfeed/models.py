"""Activity and grouped listing value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from streamfeed.feeds import Feed, FeedID


@dataclass
class Activity:
    """Atomic unit posted to or read from a feed.

    ``metadata`` holds wire fields outside the known schema, ``to`` the
    extra feeds the activity is copied to (each feed carries its own token).
    """

    actor: FeedID = FeedID()
    verb: str = ""
    object: FeedID = FeedID()
    origin: FeedID = FeedID()
    target: FeedID = FeedID()
    id: str = ""
    time: datetime | None = None
    foreign_id: str = ""
    data: Any = None
    metadata: dict[str, str] = field(default_factory=dict)
    to: list[Feed] = field(default_factory=list)


@dataclass
class ActivityGroup:
    activities: list[Activity] = field(default_factory=list)
    activity_count: int = 0
    actor_count: int = 0
    created_at: str = ""
    updated_at: str = ""
    group: str = ""
    id: str = ""
    verb: str = ""


@dataclass
class AggregatedFeedResult:
    """Page of activity groups returned by an aggregated feed listing."""

    duration: str = ""
    next: str = ""
    results: list[ActivityGroup] = field(default_factory=list)
