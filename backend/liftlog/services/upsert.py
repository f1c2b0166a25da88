"""Write path: merge canonical workouts into the per-(user, date) session store.

Every save of a date replaces that date's exercise list wholesale inside one
transaction. The only partial mutation is removing a single exercise.
"""
from __future__ import annotations
import copy
import logging
import uuid
from datetime import date
from typing import Iterable

from sqlalchemy.orm import Session

from liftlog.domain import (
    DayOfWeek, Exercise, GROUP_TYPE_SUPERSET, ImportResult, UpsertResult, Workout,
)
from liftlog.errors import NotFoundError, SheetValidationError
from liftlog.isoweek import week_number
from liftlog.repositories.session_repo import WorkoutSessionRepository, to_workout

log = logging.getLogger(__name__)


def new_group_id() -> str:
    """Fresh superset id; random 122-bit uuid, never reused across saves."""
    return f"ss-{uuid.uuid4().hex}"


def tag_superset(exercises: Iterable[Exercise]) -> list[Exercise]:
    group_id = new_group_id()
    tagged = []
    for ex in exercises:
        ex = copy.copy(ex)
        ex.group_id = group_id
        ex.group_type = GROUP_TYPE_SUPERSET
        tagged.append(ex)
    return tagged


class SessionUpsertEngine:
    def __init__(self, db: Session):
        self.db = db
        self.sessions = WorkoutSessionRepository(db)

    def _upsert(
        self,
        user_id: str,
        day: date,
        day_of_week: DayOfWeek | str,
        exercises: list[Exercise],
        week: int | None = None,
    ) -> UpsertResult:
        dow = DayOfWeek(day_of_week).value
        # sheet week numbers are kept as given; otherwise the ISO week of the date
        if week is None:
            week = week_number(day)
        sess = self.sessions.get_for_date(user_id, day, for_update=True)
        created = sess is None
        if created:
            sess = self.sessions.create(user_id, day=day, day_of_week=dow, week_number=week)
        else:
            sess.day_of_week = dow
            sess.week_number = week
        self.sessions.replace_exercises(sess, exercises)
        return UpsertResult(created=created, session_id=sess.id)

    def upsert(
        self,
        user_id: str,
        day: date,
        day_of_week: DayOfWeek | str,
        exercises: list[Exercise],
        *,
        superset: bool = False,
    ) -> UpsertResult:
        if superset:
            exercises = tag_superset(exercises)
        try:
            result = self._upsert(user_id, day, day_of_week, exercises)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        log.info("upsert user=%s date=%s exercises=%d created=%s",
                 user_id, day.isoformat(), len(exercises), result.created)
        return result

    def import_workouts(self, user_id: str, workouts: list[Workout]) -> ImportResult:
        """Bulk upsert; all dates commit together or not at all."""
        imported = updated = 0
        try:
            for idx, workout in enumerate(workouts, start=1):
                if workout.date is None:
                    raise SheetValidationError(
                        f"Workout for week {workout.week_number} {workout.day_of_week.value} has no date",
                        row=idx,
                        column="Date",
                    )
                result = self._upsert(
                    user_id, workout.date, workout.day_of_week, workout.exercises, workout.week_number,
                )
                if result.created:
                    imported += 1
                else:
                    updated += 1
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        log.info("import user=%s imported=%d updated=%d", user_id, imported, updated)
        return ImportResult(imported=imported, updated=updated, total=len(workouts))

    def add_entries(
        self,
        user_id: str,
        day: date,
        day_of_week: DayOfWeek | str,
        exercises: list[Exercise],
        *,
        superset: bool = False,
    ) -> UpsertResult:
        """Log a batch after whatever the date already holds.

        Still a full replace underneath: existing exercises are re-read and
        written back ahead of the new batch.
        """
        if superset:
            exercises = tag_superset(exercises)
        try:
            existing = self.sessions.get_for_date(user_id, day, for_update=True)
            prior = to_workout(existing).exercises if existing is not None else []
            result = self._upsert(user_id, day, day_of_week, prior + list(exercises))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        log.info("add entries user=%s date=%s added=%d", user_id, day.isoformat(), len(exercises))
        return result

    def delete_exercise(self, user_id: str, day: date, exercise_id: int) -> None:
        try:
            sess = self.sessions.get_for_date(user_id, day, for_update=True)
            if sess is None:
                raise NotFoundError(f"No workout on {day.isoformat()}")
            target = self.sessions.get_exercise(sess.id, exercise_id)
            if target is None:
                raise NotFoundError(f"Exercise {exercise_id} not found on {day.isoformat()}")
            sess.exercises.remove(target)
            for idx, ex in enumerate(sess.exercises):
                ex.order_index = idx
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        log.info("deleted exercise %s from user=%s date=%s", exercise_id, user_id, day.isoformat())

    def delete_all_sessions(self, user_id: str) -> int:
        try:
            count = self.sessions.delete_all(user_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        log.info("deleted %d session(s) for user=%s", count, user_id)
        return count
