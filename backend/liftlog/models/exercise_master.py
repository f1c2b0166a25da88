from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Index, Integer, String, DateTime, func
from liftlog.db import Base

class ExerciseMaster(Base):
    __tablename__ = "exercise_master"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    muscle_group: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    deleted_at: Mapped[DateTime | None] = mapped_column(DateTime(timezone=True), nullable=True)

# case-insensitive unique per user among live entries
Index(
    "uq_exercise_master_user_name",
    ExerciseMaster.user_id,
    func.lower(ExerciseMaster.name),
    unique=True,
    postgresql_where=ExerciseMaster.deleted_at.is_(None),
    sqlite_where=ExerciseMaster.deleted_at.is_(None),
)
