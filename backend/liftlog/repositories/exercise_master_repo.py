from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from liftlog.errors import ConflictError
from liftlog.models import ExerciseMaster
from liftlog.repositories.base import BaseRepository

DUPLICATE_NAME = "An exercise with this name already exists"

class ExerciseMasterRepository(BaseRepository[ExerciseMaster]):
    """Name -> muscle group lookup over a user's live exercise master entries."""
    model = ExerciseMaster

    def _live(self, user_id: str):
        return select(ExerciseMaster).where(
            ExerciseMaster.user_id == user_id,
            ExerciseMaster.deleted_at.is_(None),
        )

    # READS
    def get_by_name(self, user_id: str, name: str) -> Optional[ExerciseMaster]:
        stmt = self._live(user_id).where(func.lower(ExerciseMaster.name) == name.strip().lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def lookup(self, user_id: str, name: str) -> Optional[str]:
        entry = self.get_by_name(user_id, name)
        return entry.muscle_group if entry else None

    def muscle_group_map(self, user_id: str) -> dict[str, str]:
        """Lower-cased name -> muscle group, fetched fresh for each request."""
        rows = self.db.execute(self._live(user_id)).scalars().all()
        return {row.name.lower(): row.muscle_group for row in rows}

    def known_names(self, user_id: str) -> list[str]:
        stmt = self._live(user_id).order_by(func.lower(ExerciseMaster.name))
        return [row.name for row in self.db.execute(stmt).scalars().all()]

    # WRITES
    def create(self, user_id: str, *, name: str, muscle_group: str) -> ExerciseMaster:
        if self.get_by_name(user_id, name):
            raise ConflictError(DUPLICATE_NAME)
        entry = ExerciseMaster(user_id=user_id, name=name.strip(), muscle_group=muscle_group)
        try:
            self.db.add(entry)
            self.db.commit()
            self.db.refresh(entry)
            return entry
        except IntegrityError:
            # lost a race against a concurrent insert of the same name
            self.db.rollback()
            raise ConflictError(DUPLICATE_NAME)
