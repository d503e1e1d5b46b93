from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from project_tracker.db.base import Base


class ProjectCategory(Base):
    __tablename__ = "project_category"

    project_id: Mapped[int] = mapped_column(
        ForeignKey("project.project_id", ondelete="CASCADE"), primary_key=True
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("category.category_id", ondelete="CASCADE"), primary_key=True
    )
