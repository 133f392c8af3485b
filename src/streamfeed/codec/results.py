"""Grouped (aggregated) feed listing responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

from streamfeed.codec.decode import activity_from_dict, load_document
from streamfeed.codec.errors import StructuralParseError
from streamfeed.models import ActivityGroup, AggregatedFeedResult


class WireModel(BaseModel):
    """Base for service response documents; null fields fall back to defaults."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class AggregatedGroupPayload(WireModel):
    """One activity group as sent by the service."""

    activities: list[dict[str, Any] | None] = Field(default_factory=list)
    activity_count: int = 0
    actor_count: int = 0
    created_at: str = ""
    updated_at: str = ""
    group: str = ""
    id: str = ""
    verb: str = ""


class AggregatedFeedResponse(WireModel):
    duration: str = ""
    next: str = ""
    results: list[AggregatedGroupPayload] = Field(default_factory=list)


def _to_group(payload: AggregatedGroupPayload) -> ActivityGroup:
    return ActivityGroup(
        activities=[activity_from_dict(activity) for activity in payload.activities if activity is not None],
        activity_count=payload.activity_count,
        actor_count=payload.actor_count,
        created_at=payload.created_at,
        updated_at=payload.updated_at,
        group=payload.group,
        id=payload.id,
        verb=payload.verb,
    )


def reshape_aggregated_feed(payload: Mapping[str, Any]) -> AggregatedFeedResult:
    """Map a parsed grouped listing response onto the public result shape."""
    try:
        response = AggregatedFeedResponse.model_validate(payload)
    except ValidationError as exc:
        raise StructuralParseError(f"Invalid aggregated feed response: {exc}") from exc

    return AggregatedFeedResult(
        duration=response.duration,
        next=response.next,
        results=[_to_group(group) for group in response.results],
    )


def decode_aggregated_feed(document: bytes | str) -> AggregatedFeedResult:
    return reshape_aggregated_feed(load_document(document))
