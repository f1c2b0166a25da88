from liftlog.models.session import WorkoutSession
from liftlog.models.exercise import SessionExercise
from liftlog.models.exercise_set import ExerciseSet
from liftlog.models.exercise_master import ExerciseMaster

__all__ = ["WorkoutSession", "SessionExercise", "ExerciseSet", "ExerciseMaster"]
