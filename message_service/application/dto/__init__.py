"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- message.py → MessageDTO, MessageStatsDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from message_service.application.dto.message import MessageDTO, MessageStatsDTO

__all__ = [
    "MessageDTO",
    "MessageStatsDTO",
]
