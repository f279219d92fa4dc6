"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.project import (
        ProjectCreate,
        ProjectListItem,
        ProjectResult,
    )


class IProjectRepository(Protocol):
    """Protocol for project repository (DIP)."""

    async def create_project(self, data: ProjectCreate) -> ProjectResult:
        """Persist a new project and return it."""

    async def get_by_id(self, project_id: str) -> ProjectResult | None:
        """Return project by id, or None."""

    async def list_projects(self) -> list[ProjectListItem]:
        """Return gallery cards, newest first."""

    async def delete_by_id(self, project_id: str) -> bool:
        """Delete project; False when it does not exist."""
