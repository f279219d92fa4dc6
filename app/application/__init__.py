"""Application layer: DTOs, interfaces, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repository, storage dispatcher).
"""

from app.application.interfaces import IAssetUploader, IProjectRepository
from app.application.use_cases import ProjectCreateService, ProjectQueryService

__all__ = [
    "IAssetUploader",
    "IProjectRepository",
    "ProjectCreateService",
    "ProjectQueryService",
]
