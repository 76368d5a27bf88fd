"""
betwixt utilities package.

Error types and the argument checks shared across the library.
"""

from betwixt.utils.errors import (
    ArgumentError,
    BetwixtError,
    OrderViolation,
)
from betwixt.utils.guards import (
    as_patterns,
    require_marker,
    require_not_none,
    require_text,
)

__all__ = [
    # Errors
    "BetwixtError",
    "ArgumentError",
    "OrderViolation",
    # Guards
    "as_patterns",
    "require_marker",
    "require_not_none",
    "require_text",
]
