"""
Unit tests for the in-memory event bus and event handlers.
"""

from datetime import datetime

import pytest
from prometheus_client import REGISTRY

from activation_keys.domain.events import ServerGroupsAddedToKey, ServerGroupsRemovedFromKey
from core.domain.events import EventHandler
from core.infrastructure.event_handlers import ServerGroupMetricsHandler
from core.infrastructure.events import InMemoryEventBus
from core.metrics import activation_key_server_groups_removed_total


class RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class FailingHandler(EventHandler):
    async def handle(self, event):
        raise RuntimeError("boom")


def removed_event(**kwargs):
    values = {
        "activation_key_id": 7,
        "org_id": 3,
        "user_id": 2,
        "server_group_ids": [5, 4],
        "changed_server_group_ids": [5],
    }
    values.update(kwargs)
    return ServerGroupsRemovedFromKey(**values)


class TestServerGroupEvents:
    """Tests for server group change events."""

    def test_event_fields(self):
        event = removed_event()

        assert event.event_type == "ServerGroupsRemovedFromKey"
        assert event.aggregate_id == "7"
        assert event.server_group_ids == (4, 5)

    def test_to_dict(self):
        data = removed_event().to_dict()

        assert data["event_type"] == "ServerGroupsRemovedFromKey"
        assert data["activation_key_id"] == 7
        assert data["org_id"] == 3
        assert data["server_group_ids"] == [4, 5]
        assert data["changed_server_group_ids"] == [5]
        assert "occurred_at" in data

    def test_metadata_defaults(self):
        first, second = removed_event(), removed_event()

        assert first.event_id != second.event_id
        assert first.occurred_at is not None

    def test_occurred_at_is_kept(self):
        when = datetime(2024, 5, 1, 12, 0)

        assert removed_event(occurred_at=when).occurred_at == when


@pytest.mark.asyncio
class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    async def test_publish_to_subscribers_of_event_type(self):
        bus = InMemoryEventBus()
        removed = RecordingHandler()
        added = RecordingHandler()
        bus.subscribe(ServerGroupsRemovedFromKey, removed)
        bus.subscribe(ServerGroupsAddedToKey, added)

        event = removed_event()
        await bus.publish(event)

        assert removed.events == [event]
        assert added.events == []

    async def test_subscribing_twice_delivers_once(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(ServerGroupsRemovedFromKey, handler)
        bus.subscribe(ServerGroupsRemovedFromKey, handler)

        await bus.publish(removed_event())

        assert len(handler.events) == 1

    async def test_failing_handler_does_not_stop_others(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(ServerGroupsRemovedFromKey, FailingHandler())
        bus.subscribe(ServerGroupsRemovedFromKey, handler)

        await bus.publish(removed_event())

        assert len(handler.events) == 1

    async def test_unsubscribe(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(ServerGroupsRemovedFromKey, handler)
        bus.unsubscribe(ServerGroupsRemovedFromKey, handler)

        await bus.publish(removed_event())

        assert handler.events == []
        assert bus.handlers_for(ServerGroupsRemovedFromKey) == []

    async def test_publish_without_subscribers(self):
        await InMemoryEventBus().publish(removed_event())

    async def test_metrics_handler_counts_changed_groups(self):
        """Test selected groups the key did not hold are not counted."""
        activation_key_server_groups_removed_total.labels(org_id="991")
        before = REGISTRY.get_sample_value(
            "activation_key_server_groups_removed_total", {"org_id": "991"}
        )

        await ServerGroupMetricsHandler().handle(
            removed_event(org_id=991, server_group_ids=[1, 2, 3], changed_server_group_ids=[1, 3])
        )

        after = REGISTRY.get_sample_value(
            "activation_key_server_groups_removed_total", {"org_id": "991"}
        )
        assert after == before + 2
