"""Project ORM model. Portfolio entry with inline thumbnail and asset URLs."""

from sqlalchemy import JSON, Float, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import PortfolioModel


class Project(PortfolioModel, Base):
    """Project entity. Table: project. Asset URLs come from the storage dispatcher."""

    __tablename__ = "project"

    title: Mapped[str] = mapped_column(String, nullable=False)
    architect_name: Mapped[str | None] = mapped_column(String, nullable=True)
    area_sq_ft: Mapped[float | None] = mapped_column(Float, nullable=True)
    location: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    thumbnail_blob: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    main_image_url: Mapped[str] = mapped_column(String, nullable=False, default="")
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    model_url: Mapped[str] = mapped_column(String, nullable=False, default="")
    youtube_url: Mapped[str | None] = mapped_column(String, nullable=True)
    simulation_video_url: Mapped[str] = mapped_column(
        String, nullable=False, default=""
    )
