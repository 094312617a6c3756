from eventhub.services.hub_service import EventHub, SubmitResult, create_hub
from eventhub.services.session_service import SessionManager
from eventhub.services.view_model import ViewModel, build_view_model

__all__ = [
    "EventHub",
    "SubmitResult",
    "create_hub",
    "SessionManager",
    "ViewModel",
    "build_view_model",
]
