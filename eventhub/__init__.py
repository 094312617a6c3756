"""Community events hub: session state machine and event store."""

__version__ = "0.1.0"
