"""Request and response documents for the aggregated feed endpoints."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from streamfeed.codec.decode import activity_from_dict, load_document
from streamfeed.codec.encode import activity_to_dict
from streamfeed.codec.errors import StructuralParseError
from streamfeed.codec.results import WireModel
from streamfeed.codec.timefmt import Clock
from streamfeed.config import settings
from streamfeed.feeds import FeedID
from streamfeed.models import Activity


class AggregatedFeedQuery(BaseModel):
    """Paging and ranking parameters for reading an aggregated feed."""

    limit: int = Field(0, ge=0)
    offset: int = Field(0, ge=0)
    id_gte: str = ""
    id_gt: str = ""
    id_lte: str = ""
    id_lt: str = ""
    ranking: str = ""

    def to_params(self) -> dict[str, Any]:
        """Query parameters with zero and empty values left out."""
        return {key: value for key, value in self.model_dump().items() if value}


class FollowersQuery(BaseModel):
    limit: int = Field(default_factory=lambda: settings.followers_page_limit, ge=0)
    offset: int = Field(0, ge=0)

    def to_params(self) -> dict[str, Any]:
        return self.model_dump()


class Follower(WireModel):
    created_at: str = ""
    updated_at: str = ""
    feed_id: str = ""
    target_id: str = ""


class FollowersResponse(WireModel):
    duration: str = ""
    results: list[Follower] = Field(default_factory=list)


class FollowRequest(BaseModel):
    target: str
    activity_copy_limit: int = Field(default_factory=lambda: settings.activity_copy_limit, ge=0)


def _dumps(payload: Any) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def encode_follow_request(target: FeedID, activity_copy_limit: int | None = None) -> bytes:
    if activity_copy_limit is None:
        request = FollowRequest(target=str(target))
    else:
        request = FollowRequest(target=str(target), activity_copy_limit=activity_copy_limit)
    return _dumps(request.model_dump())


def decode_followers(document: bytes | str) -> FollowersResponse:
    try:
        return FollowersResponse.model_validate(load_document(document))
    except ValidationError as exc:
        raise StructuralParseError(f"Invalid followers response: {exc}") from exc


def encode_activities(activities: Iterable[Activity], clock: Clock | None = None) -> bytes:
    """Build the body for posting several activities at once."""
    return _dumps({"activities": [activity_to_dict(activity, clock) for activity in activities]})


def decode_posted_activities(document: bytes | str) -> list[Activity]:
    """Read back the activities echoed by the service after a post."""
    payload = load_document(document)
    activities = payload.get("activities")
    if activities is None:
        return []
    if not isinstance(activities, list):
        raise StructuralParseError("Expected 'activities' to be a list")

    decoded: list[Activity] = []
    for item in activities:
        if not isinstance(item, dict):
            raise StructuralParseError("Expected each activity to be a JSON object")
        decoded.append(activity_from_dict(item))
    return decoded
