"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- Domain says: "I need to save messages"
- Infrastructure implements: "I'll use PostgreSQL through Prisma"
  (or a plain dict for tests and local runs)

Subfolders:
- repositories/  → Data persistence interfaces
"""
