"""Application interfaces (ports): repository and storage protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import IProjectRepository
from app.application.interfaces.storage import IAssetUploader

__all__ = [
    "IAssetUploader",
    "IProjectRepository",
]
