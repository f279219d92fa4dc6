"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    PortfolioModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.project import Project

__all__ = [
    "CuidMixin",
    "PortfolioModel",
    "Project",
    "TimestampMixin",
]
