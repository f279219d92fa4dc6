"""Domain layer: exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import (
    PortfolioException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    "PortfolioException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
]
