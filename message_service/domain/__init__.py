"""
DOMAIN LAYER - Messages and their lifecycle

This layer contains:
- Entities: Message (the aggregate root)
- Value Objects: MessageId, MessageStatus (the lifecycle state machine)
- Ports: MessageRepository, the persistence contract infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
