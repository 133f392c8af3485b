"""Pytest fixtures for streamfeed tests."""

import json
from datetime import datetime

import pytest

from streamfeed.feeds import FeedID, FlatFeed, NotificationFeed
from streamfeed.models import Activity

FIXED_TIME = datetime(2017, 3, 14, 9, 26, 53, 589793)


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_TIME."""
    return lambda: FIXED_TIME


@pytest.fixture
def sample_activity() -> Activity:
    """Activity with every field populated."""
    return Activity(
        id="6fa2d3d1-08c3-11e7-8080-800021e0b9a1",
        actor=FeedID("user:eric"),
        verb="pin",
        object=FeedID("place:42"),
        origin=FeedID("user:eric"),
        target=FeedID("board:travel"),
        time=FIXED_TIME,
        foreign_id="099978b6-3b72-4f5c-bc43-247ba6ae2dd9",
        data={"caption": "Lisbon", "likes": 3},
        metadata={"Location": "Lisbon", "mood": "happy"},
        to=[
            FlatFeed(feed_slug="timeline", user_id="jessica"),
            NotificationFeed(feed_slug="notify", user_id="jessica", token="s3cr3t"),
        ],
    )


@pytest.fixture
def aggregated_response() -> dict:
    """Grouped listing response as sent by the service."""
    return {
        "duration": "12.04ms",
        "next": "/api/v1.0/feed/aggregated/eric/?id_lt=3&limit=2",
        "results": [
            {
                "activities": [
                    {
                        "actor": "user:eric",
                        "verb": "pin",
                        "object": "place:42",
                        "origin": "user:eric",
                        "time": "2017-03-14T09:26:53.589793",
                        "id": "a1",
                    },
                    {
                        "actor": "user:jessica",
                        "verb": "pin",
                        "object": "place:43",
                        "origin": "user:jessica",
                        "time": "2017-03-14T10:00:00.000000",
                        "id": "a2",
                        "color": "blue",
                    },
                ],
                "activity_count": 2,
                "actor_count": 2,
                "created_at": "2017-03-14T09:26:53.589793",
                "updated_at": "2017-03-14T10:00:00.000000",
                "group": "pin_2017-03-14",
                "id": "g1",
                "verb": "pin",
            },
            {
                "activities": [
                    {
                        "actor": "user:eric",
                        "verb": "like",
                        "object": "place:1",
                        "origin": "user:eric",
                        "id": "a3",
                    }
                ],
                "activity_count": 1,
                "actor_count": 1,
                "created_at": "2017-03-13T08:00:00.000000",
                "updated_at": "2017-03-13T08:00:00.000000",
                "group": "like_2017-03-13",
                "id": "g2",
                "verb": "like",
            },
        ],
    }


@pytest.fixture
def write_document(tmp_path):
    """Write a JSON payload to a temp file and return its path."""

    def _write(payload, name: str = "document.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload)
        return path

    return _write
