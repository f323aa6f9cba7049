"""
API Routers - FastAPI endpoint definitions.
"""

from message_service.presentation.api.messages import router as messages_router

__all__ = [
    "messages_router",
]
