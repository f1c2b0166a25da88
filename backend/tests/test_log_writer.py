import unittest
from datetime import date

from liftlog.domain import DayOfWeek, Exercise, Workout, WorkoutSet
from liftlog.ingest.log_reader import LOG_HEADERS, NormalizedLogReader
from liftlog.ingest.log_writer import log_row, log_rows


def monday(*exercises):
    return Workout(date=date(2025, 1, 6), day_of_week=DayOfWeek.Monday, week_number=2, exercises=list(exercises))


class TestLogRow(unittest.TestCase):
    def test_columns_follow_header(self):
        bench = Exercise(name="Bench", sets=[
            WorkoutSet(40, 10, is_warmup=True, set_number=0),
            WorkoutSet(80, 5, set_number=1),
            WorkoutSet(85, 3, set_number=3),
        ])
        row = log_row(monday(bench), bench)
        self.assertEqual(len(row), len(LOG_HEADERS))
        self.assertEqual(row, ["2025-01-06", "Monday", "Bench", "", "40kg, 10", "80kg, 5", "", "85kg, 3", ""])

    def test_group_and_bodyweight(self):
        dips = Exercise(name="Dips", sets=[WorkoutSet(0, 12, set_number=1)], group_id="SS1", group_type="superset")
        self.assertEqual(log_row(monday(dips), dips)[3:6], ["SS1", "", "12"])

    def test_set_without_a_column(self):
        row = Exercise(name="Row", sets=[WorkoutSet(60, 8, set_number=5)])
        with self.assertRaises(ValueError):
            log_row(monday(row), row)

    def test_dateless_workout(self):
        squat = Exercise(name="Squat", sets=[WorkoutSet(100, 5)])
        with self.assertRaises(ValueError):
            log_row(Workout(date=None, day_of_week=DayOfWeek.Monday, week_number=1, exercises=[squat]), squat)

    def test_reader_reads_back_what_was_written(self):
        workouts = [
            monday(
                Exercise(name="Bench", sets=[WorkoutSet(40, 10, True, 0), WorkoutSet(82.5, 5, set_number=1)]),
                Exercise(name="Chin-up", sets=[WorkoutSet(0, 8, set_number=1)], group_id="A", group_type="superset"),
            ),
        ]
        back = NormalizedLogReader().read([list(LOG_HEADERS)] + log_rows(workouts))
        self.assertEqual(len(back), 1)
        self.assertEqual(back[0].date, date(2025, 1, 6))
        self.assertEqual(
            [(e.name, e.group_id, [(s.weight, s.reps, s.is_warmup, s.set_number) for s in e.sets]) for e in back[0].exercises],
            [("Bench", None, [(40.0, 10, True, 0), (82.5, 5, False, 1)]),
             ("Chin-up", "A", [(0.0, 8, False, 1)])],
        )
