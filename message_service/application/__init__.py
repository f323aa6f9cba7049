"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (create, update, publish, archive, delete)
- queries/   → Read operations (get, list, count)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Handlers add no business rules beyond what the entity enforces
"""
