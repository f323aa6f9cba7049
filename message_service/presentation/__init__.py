"""
Presentation Layer - HTTP adapter.

Translates requests into commands/queries and domain errors into HTTP
status codes. Contains no business rules.
"""
