"""
Persistence Layer - Database implementations.

Contains repository implementations for domain ports. The Prisma adapter
only imports the generated client lazily, so this package can be imported
before `prisma generate` has run.
"""

from message_service.infrastructure.persistence.in_memory_message_repository import (
    InMemoryMessageRepository,
)
from message_service.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)

__all__ = [
    "InMemoryMessageRepository",
    "PrismaMessageRepository",
]
