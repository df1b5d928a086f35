"""Product domain exceptions.

Raised by the Service Layer when a lookup fails.  The API layer (Views)
catches these and translates them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist."""
