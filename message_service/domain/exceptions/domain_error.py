"""
DomainError - Common base for every business rule violation.
"""


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str = "Domain rule violated"):
        super().__init__(message)
        self.message = message
