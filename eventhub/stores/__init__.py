from eventhub.stores.event_store import EventSequence, EventStore
from eventhub.stores.interfaces import AuthenticationProvider, PersistenceProvider

__all__ = [
    "EventSequence",
    "EventStore",
    "AuthenticationProvider",
    "PersistenceProvider",
]
