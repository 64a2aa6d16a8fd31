# File: user_manager/core/exceptions.py

"""
Error types raised by the domain and service layers.

Only the API layer translates these into HTTP responses.
"""

from typing import List, Optional, Sequence


class ValidationError(Exception):
    """Field constraint violations collected by ``User.validate()``."""

    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors))


class DomainError(Exception):
    """
    Business rule violation (duplicate email, unknown id, invalid fields).

    ``errors`` carries the individual validation messages when the failure
    wraps a ``ValidationError``; otherwise it is ``None``.
    """

    def __init__(self, message: str, errors: Optional[Sequence[str]] = None):
        self.message = message
        self.errors: Optional[List[str]] = list(errors) if errors is not None else None
        super().__init__(message)
