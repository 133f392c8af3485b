"""Activity -> wire document encoding."""

from __future__ import annotations

import json
import re
from typing import Any

from streamfeed.codec.errors import ActivityValidationError
from streamfeed.codec.recipients import encode_recipients
from streamfeed.codec.timefmt import Clock, format_time, system_clock
from streamfeed.models import Activity

FOREIGN_ID_RE = re.compile(r"^[a-z0-9]{8}-[a-z0-9]{4}-[1-5][a-z0-9]{3}-[a-z0-9]{4}-[a-z0-9]{12}\Z")


def validate_foreign_id(foreign_id: str) -> str:
    if not FOREIGN_ID_RE.match(foreign_id):
        raise ActivityValidationError("invalid ForeignID")
    return foreign_id


def activity_to_dict(activity: Activity, clock: Clock | None = None) -> dict[str, Any]:
    """Build the outbound document for an activity.

    Metadata goes in first so the known fields always win. ``time`` falls
    back to ``clock()`` (the system clock by default) when the activity has
    none.
    """
    payload: dict[str, Any] = dict(activity.metadata)

    payload["actor"] = str(activity.actor)
    payload["verb"] = activity.verb
    payload["object"] = str(activity.object)
    payload["origin"] = str(activity.origin)

    if activity.id:
        payload["id"] = activity.id
    if activity.target:
        payload["target"] = str(activity.target)

    if activity.data is not None:
        payload["data"] = activity.data

    if activity.foreign_id:
        payload["foreign_id"] = validate_foreign_id(activity.foreign_id)

    timestamp = activity.time if activity.time is not None else (clock or system_clock)()
    payload["time"] = format_time(timestamp)

    recipients = encode_recipients(activity.to)
    if recipients:
        payload["to"] = recipients

    return payload


def encode_activity(activity: Activity, clock: Clock | None = None) -> bytes:
    """Serialize an activity to compact UTF-8 JSON."""
    return json.dumps(activity_to_dict(activity, clock), separators=(",", ":")).encode("utf-8")
