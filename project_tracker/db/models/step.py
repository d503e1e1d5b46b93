from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from project_tracker.db.base import Base

class Step(Base):
    __tablename__ = "step"

    step_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("project.project_id", ondelete="CASCADE"), index=True)
    step_text: Mapped[str] = mapped_column(Text)
    step_order: Mapped[int] = mapped_column(Integer)
