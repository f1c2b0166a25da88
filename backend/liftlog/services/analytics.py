"""Read path: personal records, trends and weekly volume from canonical workouts.

Everything here is a pure function of the workouts handed in and an optional
name -> muscle group mapping. Warmup sets never count toward anything.
"""
from __future__ import annotations
from datetime import date, timedelta
from typing import Iterable, Mapping, Optional

from liftlog.domain import (
    BestSet, Exercise, ExerciseStats, OTHER_MUSCLE_GROUP, Summary, TrendPoint,
    WeeklyVolume, Workout, WorkoutSet,
)
from liftlog.isoweek import iso_week_key


def set_volume(s: WorkoutSet) -> float:
    return 0.0 if s.is_warmup else s.weight * s.reps


def is_better(candidate: WorkoutSet, current: Optional[BestSet]) -> bool:
    """Heavier wins; on equal weight more reps wins; full ties keep ``current``."""
    if current is None:
        return True
    return (candidate.weight, candidate.reps) > (current.weight, current.reps)


class AnalyticsEngine:
    def __init__(self, workouts: Iterable[Workout], muscle_groups: Mapping[str, str] | None = None):
        # ascending by date so ties on best sets keep the earliest session
        self.workouts = sorted(workouts, key=lambda w: (w.date is None, w.date or date.min))
        self.muscle_groups = muscle_groups or {}

    def muscle_group(self, name: str) -> str:
        return self.muscle_groups.get(name.strip().lower(), OTHER_MUSCLE_GROUP)

    def _recent(self, window: timedelta | None, today: date | None) -> list[Workout]:
        if window is None:
            return self.workouts
        cutoff = (today or date.today()) - window
        return [w for w in self.workouts if w.date is not None and w.date >= cutoff]

    def _matching(self, workout: Workout, name: str) -> list[Exercise]:
        key = name.strip().lower()
        return [ex for ex in workout.exercises if ex.key == key]

    def _offer(self, best: Optional[BestSet], ex: Exercise, workout: Workout, muscle_group: str) -> Optional[BestSet]:
        for s in ex.working_sets:
            if is_better(s, best):
                best = BestSet(
                    exercise_name=ex.name,
                    weight=s.weight,
                    reps=s.reps,
                    volume=s.weight * s.reps,
                    date=workout.date,
                    muscle_group=muscle_group,
                )
        return best

    # --- best sets / PRs ---

    def best_sets(self, window: timedelta | None = None, today: date | None = None) -> list[BestSet]:
        """Best set per exercise among sessions inside ``window`` (all history if None)."""
        best: dict[str, Optional[BestSet]] = {}
        for workout in self._recent(window, today):
            for ex in workout.exercises:
                if not ex.working_sets:
                    continue
                best[ex.key] = self._offer(best.get(ex.key), ex, workout, self.muscle_group(ex.name))
        return [b for b in best.values() if b is not None]

    def personal_record(self, name: str, window: timedelta | None = None, today: date | None = None) -> Optional[BestSet]:
        best = None
        group = self.muscle_group(name)
        for workout in self._recent(window, today):
            for ex in self._matching(workout, name):
                best = self._offer(best, ex, workout, group)
        return best

    # --- trends ---

    def trend(self, name: str) -> list[TrendPoint]:
        points = []
        for workout in self.workouts:
            working = [s for ex in self._matching(workout, name) for s in ex.working_sets]
            if not working:
                continue
            total_volume = sum(s.weight * s.reps for s in working)
            total_reps = sum(s.reps for s in working)
            points.append(TrendPoint(
                date=workout.date,
                max_weight=max(s.weight for s in working),
                total_volume=total_volume,
                total_reps=total_reps,
                average_weight=total_volume / total_reps if total_reps else 0.0,
            ))
        return points

    def exercise_stats(self, name: str, window: timedelta = timedelta(days=30), today: date | None = None) -> ExerciseStats:
        group = self.muscle_group(name)
        pr = self.personal_record(name)
        if pr is None:
            pr = BestSet(exercise_name=name, weight=0.0, reps=0, volume=0.0, date=None, muscle_group=group)
        return ExerciseStats(
            exercise_name=name,
            current_pr=pr,
            recent_best=self.personal_record(name, window, today),
            trend=self.trend(name),
            total_sessions=sum(1 for w in self.workouts if self._matching(w, name)),
        )

    # --- weekly volume ---

    def volume_history(self) -> list[WeeklyVolume]:
        weeks: dict[str, WeeklyVolume] = {}
        for workout in self.workouts:
            if workout.date is None:
                continue
            key = iso_week_key(workout.date)
            bucket = weeks.setdefault(key, WeeklyVolume(week=key))
            for ex in workout.exercises:
                volume = sum(set_volume(s) for s in ex.sets)
                if not volume:
                    continue
                group = self.muscle_group(ex.name)
                bucket.total_volume += volume
                bucket.muscle_groups[group] = bucket.muscle_groups.get(group, 0.0) + volume
            bucket.exercise_count += len(workout.exercises)
        return [weeks[k] for k in sorted(weeks)]

    # --- summary ---

    def summary(self, window: timedelta | None = None, today: date | None = None) -> Summary:
        workouts = [w for w in self._recent(window, today) if w.exercises]
        names: dict[str, str] = {}
        total_sets = 0
        total_volume = 0.0
        for workout in workouts:
            for ex in workout.exercises:
                names.setdefault(ex.key, ex.name)
                working = ex.working_sets
                total_sets += len(working)
                total_volume += sum(s.weight * s.reps for s in working)
        exercise_list = sorted(names.values(), key=str.lower)
        return Summary(
            total_sessions=len(workouts),
            total_sets=total_sets,
            total_volume=total_volume,
            unique_exercises=len(exercise_list),
            exercise_list=exercise_list,
        )
