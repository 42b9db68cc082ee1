"""
Event handlers for domain events.

These handlers process domain events for side effects
like audit logging and business metrics.
"""

import logging

from activation_keys.domain.events import (
    ServerGroupsAddedToKey,
    ServerGroupsChanged,
    ServerGroupsRemovedFromKey,
)
from core.domain.events import DomainEvent, EventHandler
from core.metrics import (
    activation_key_server_groups_added_total,
    activation_key_server_groups_removed_total,
)

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes every activation key event to the structured audit log.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        extra = {
            "event_id": str(event.event_id),
            "event_type": event.event_type,
            "aggregate_id": event.aggregate_id,
            "occurred_at": event.occurred_at.isoformat(),
        }
        if isinstance(event, ServerGroupsChanged):
            extra.update(
                {
                    "org_id": event.org_id,
                    "user_id": event.user_id,
                    "server_group_ids": list(event.server_group_ids),
                    "changed_server_group_ids": list(event.changed_server_group_ids),
                }
            )
        logger.info("Audit log: %s - %s", event.event_type, event.aggregate_id, extra=extra)


class ServerGroupMetricsHandler(EventHandler):
    """
    Event handler counting server group changes in Prometheus.

    Only groups the key actually lost or gained are counted.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for business metrics.

        Args:
            event: Server group change event
        """
        if isinstance(event, ServerGroupsRemovedFromKey):
            counter = activation_key_server_groups_removed_total
        elif isinstance(event, ServerGroupsAddedToKey):
            counter = activation_key_server_groups_added_total
        else:
            return
        counter.labels(org_id=str(event.org_id)).inc(len(event.changed_server_group_ids))


_audit_handler = AuditLogEventHandler()
_metrics_handler = ServerGroupMetricsHandler()


def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    for event_type in (ServerGroupsRemovedFromKey, ServerGroupsAddedToKey):
        event_bus.subscribe(event_type, _audit_handler)
        event_bus.subscribe(event_type, _metrics_handler)

    logger.info("Event handlers registered")
