"""Wire document -> Activity decoding.

Decoding is best effort per field: a value that cannot be read is skipped
(and logged at debug level) instead of failing the whole activity. Only a
document that is not a JSON object raises.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import structlog

from streamfeed.codec.errors import StructuralParseError
from streamfeed.codec.recipients import decode_recipients
from streamfeed.codec.timefmt import parse_time
from streamfeed.feeds import FeedID
from streamfeed.models import Activity

logger = structlog.get_logger()

KNOWN_FIELDS = frozenset(
    {"id", "actor", "verb", "foreign_id", "object", "origin", "target", "time", "data", "to"}
)

_STRING_FIELDS = frozenset({"id", "verb", "foreign_id"})
_FEED_ID_FIELDS = frozenset({"actor", "object", "origin", "target"})


def is_known_field(key: str) -> bool:
    return key.lower() in KNOWN_FIELDS


def load_document(document: bytes | str) -> dict[str, Any]:
    """Parse a JSON document that must be an object."""
    try:
        payload = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise StructuralParseError(f"Invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise StructuralParseError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def _string_or_empty(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    logger.debug("Ignoring non-string field", field=key, value_type=type(value).__name__)
    return ""


def activity_from_dict(payload: Mapping[str, Any]) -> Activity:
    """Populate an Activity from an already-parsed document."""
    activity = Activity()
    metadata: dict[str, str] = {}

    for key, value in payload.items():
        if value is None:
            continue

        lower_key = key.lower()
        if lower_key not in KNOWN_FIELDS:
            if isinstance(value, str):
                metadata[key] = value
            else:
                logger.debug("Skipping metadata value", field=key, value_type=type(value).__name__)
            continue

        if lower_key in _STRING_FIELDS:
            setattr(activity, lower_key, _string_or_empty(key, value))
        elif lower_key in _FEED_ID_FIELDS:
            setattr(activity, lower_key, FeedID(_string_or_empty(key, value)))
        elif lower_key == "time":
            timestamp = parse_time(value) if isinstance(value, str) else None
            if timestamp is None:
                logger.debug("Skipping unparseable time", field=key, value=value)
                continue
            activity.time = timestamp
        elif lower_key == "data":
            activity.data = value
        elif lower_key == "to":
            activity.to.extend(decode_recipients(value))

    activity.metadata = metadata
    return activity


def decode_activity(document: bytes | str) -> Activity:
    """Decode a single activity JSON document."""
    return activity_from_dict(load_document(document))
