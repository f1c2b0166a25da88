from __future__ import annotations
from datetime import date
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from liftlog.domain import DayOfWeek, Exercise, Workout, WorkoutSet
from liftlog.models import ExerciseSet, SessionExercise, WorkoutSession
from liftlog.repositories.base import BaseRepository

_with_children = selectinload(WorkoutSession.exercises).selectinload(SessionExercise.sets)


def to_workout(sess: WorkoutSession) -> Workout:
    return Workout(
        date=sess.date,
        day_of_week=DayOfWeek(sess.day_of_week),
        week_number=sess.week_number,
        exercises=[
            Exercise(
                id=str(ex.id),
                name=ex.name,
                group_id=ex.group_id,
                group_type=ex.group_type,
                sets=[
                    WorkoutSet(
                        weight=float(s.weight),
                        reps=s.reps,
                        is_warmup=s.is_warmup,
                        set_number=s.set_number,
                    )
                    for s in ex.sets
                ],
            )
            for ex in sess.exercises
        ],
    )


def to_rows(exercises: list[Exercise]) -> list[SessionExercise]:
    return [
        SessionExercise(
            name=ex.name,
            order_index=idx,
            group_id=ex.group_id,
            group_type=ex.group_type,
            sets=[
                ExerciseSet(set_number=s.set_number, weight=s.weight, reps=s.reps, is_warmup=s.is_warmup)
                for s in ex.sets
            ],
        )
        for idx, ex in enumerate(exercises)
    ]


class WorkoutSessionRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession

    # READS
    def get_for_date(self, user_id: str, day: date, *, for_update: bool = False) -> Optional[WorkoutSession]:
        stmt = select(WorkoutSession).where(
            WorkoutSession.user_id == user_id,
            WorkoutSession.date == day,
        )
        if for_update:
            # serializes concurrent saves of the same date (no-op on SQLite)
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(self, user_id: str, *, since: date | None = None) -> list[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.user_id == user_id)
        if since is not None:
            stmt = stmt.where(WorkoutSession.date >= since)
        stmt = stmt.options(_with_children).order_by(WorkoutSession.date.asc())
        return list(self.db.execute(stmt).scalars().all())

    def workouts(self, user_id: str, *, since: date | None = None) -> list[Workout]:
        return [to_workout(s) for s in self.list_by_user(user_id, since=since)]

    def get_exercise(self, session_id: int, exercise_id: int) -> Optional[SessionExercise]:
        stmt = select(SessionExercise).where(
            SessionExercise.id == exercise_id,
            SessionExercise.session_id == session_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES (flush only)
    def create(self, user_id: str, *, day: date, day_of_week: str, week_number: int) -> WorkoutSession:
        sess = WorkoutSession(user_id=user_id, date=day, day_of_week=day_of_week, week_number=week_number)
        return self.add_and_refresh(sess)

    def replace_exercises(self, sess: WorkoutSession, exercises: list[Exercise]) -> None:
        # delete-orphan cascade removes the old exercises and their sets
        sess.exercises.clear()
        self.db.flush()
        sess.exercises.extend(to_rows(exercises))
        self.db.flush()

    def delete_all(self, user_id: str) -> int:
        sessions = self.db.execute(
            select(WorkoutSession).where(WorkoutSession.user_id == user_id)
        ).scalars().all()
        for sess in sessions:
            self.db.delete(sess)
        self.db.flush()
        return len(sessions)
