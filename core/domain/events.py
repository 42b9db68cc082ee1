"""
Domain event base classes.

Events announce changes to an aggregate (for the console, an
activation key) to handlers such as the audit log and metrics.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Type
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    event_id and occurred_at are filled in when not given, and
    event_type defaults to the concrete class name.
    """

    aggregate_id: str
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=datetime.utcnow)
    event_type: str = ""

    def __post_init__(self):
        if not self.event_type:
            object.__setattr__(self, "event_type", type(self).__name__)

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
            "aggregate_id": self.aggregate_id,
            "event_type": self.event_type,
        }


class EventHandler(ABC):
    """Reacts to published domain events."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        pass


class EventBus(ABC):
    """
    Routes published events to the handlers subscribed to their type.

    Routing is by exact type; a handler subscribed to a base event
    class does not receive its subclasses.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        pass

    @abstractmethod
    def unsubscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        pass

    @abstractmethod
    def handlers_for(self, event_type: Type[DomainEvent]) -> List[EventHandler]:
        pass
