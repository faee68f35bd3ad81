"""
Exception types raised by the review services.

Routers map these onto HTTP status codes; everything else is treated as
an unexpected bug.
"""

from __future__ import annotations


class ReviewError(Exception):
    """Base class for all review errors."""


class ChangeNotFoundError(ReviewError):
    """Raised when no pending change exists for an id or file path."""


class SessionClosedError(ReviewError):
    """Raised when a committed or discarded session is used again."""


class DiffTooLargeError(ReviewError):
    """Raised when a document pair exceeds the configured diff size."""
