from datetime import date
import uuid

import pytest

from liftlog.db import SessionLocal
from liftlog.domain import DayOfWeek, Exercise, Workout, WorkoutSet
from liftlog.errors import NotFoundError, SheetValidationError
from liftlog.repositories.session_repo import WorkoutSessionRepository
from liftlog.services.upsert import SessionUpsertEngine

MONDAY = date(2025, 1, 6)

def uid():
    return f"u_{uuid.uuid4().hex[:10]}"

def ex(name, *sets, warmup=None):
    out = []
    if warmup:
        out.append(WorkoutSet(weight=warmup[0], reps=warmup[1], is_warmup=True, set_number=0))
    out += [WorkoutSet(weight=w, reps=r, set_number=i) for i, (w, r) in enumerate(sets, start=1)]
    return Exercise(name=name, sets=out)

def content(workouts):
    """Everything but row ids."""
    return [
        (w.date, w.day_of_week, w.week_number,
         [(e.name, e.group_id, [(s.weight, s.reps, s.is_warmup, s.set_number) for s in e.sets]) for e in w.exercises])
        for w in workouts
    ]

@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()

def test_create_then_replace(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    first = engine.upsert(user, MONDAY, DayOfWeek.Monday, [ex("Bench", (80, 5)), ex("Row", (60, 8))])
    assert first.created is True

    second = engine.upsert(user, MONDAY, "Monday", [ex("Squat", (100, 5), warmup=(60, 5))])
    assert second.created is False
    assert second.session_id == first.session_id

    [w] = WorkoutSessionRepository(db).workouts(user)
    assert [e.name for e in w.exercises] == ["Squat"]
    assert [(s.set_number, s.is_warmup) for s in w.exercises[0].sets] == [(0, True), (1, False)]
    assert w.week_number == 2

def test_upsert_is_idempotent(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    entries = [ex("Bench", (80, 5), (80, 5), warmup=(40, 10)), ex("Chin-up", (0, 8))]
    engine.upsert(user, MONDAY, DayOfWeek.Monday, entries)
    once = content(WorkoutSessionRepository(db).workouts(user))
    engine.upsert(user, MONDAY, DayOfWeek.Monday, entries)
    twice = content(WorkoutSessionRepository(db).workouts(user))
    assert once == twice

def test_order_index_is_dense(db):
    user = uid()
    SessionUpsertEngine(db).upsert(user, MONDAY, DayOfWeek.Monday, [ex(n, (10, 10)) for n in "ABCD"])
    sess = WorkoutSessionRepository(db).get_for_date(user, MONDAY)
    assert [(e.order_index, e.name) for e in sess.exercises] == [(0, "A"), (1, "B"), (2, "C"), (3, "D")]

def test_superset_ids_are_fresh_per_save(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    engine.add_entries(user, MONDAY, DayOfWeek.Monday, [ex("Curl", (15, 10)), ex("Pushdown", (25, 12))], superset=True)
    engine.add_entries(user, MONDAY, DayOfWeek.Monday, [ex("Fly", (20, 12)), ex("Raise", (8, 15))], superset=True)
    engine.add_entries(user, MONDAY, DayOfWeek.Monday, [ex("Plank", (0, 60))])

    [w] = WorkoutSessionRepository(db).workouts(user)
    assert [e.name for e in w.exercises] == ["Curl", "Pushdown", "Fly", "Raise", "Plank"]
    a, b, c, d, plank = w.exercises
    assert a.group_id == b.group_id and a.group_id is not None
    assert c.group_id == d.group_id and c.group_id != a.group_id
    assert {e.group_type for e in (a, b, c, d)} == {"superset"}
    assert plank.group_id is None and plank.group_type is None

def test_delete_exercise_keeps_siblings(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    engine.upsert(user, MONDAY, DayOfWeek.Monday, [ex("A", (1, 1)), ex("B", (2, 2)), ex("C", (3, 3))])
    [w] = WorkoutSessionRepository(db).workouts(user)
    engine.delete_exercise(user, MONDAY, int(w.exercises[1].id))

    sess = WorkoutSessionRepository(db).get_for_date(user, MONDAY)
    assert [(e.order_index, e.name) for e in sess.exercises] == [(0, "A"), (1, "C")]
    assert [s.reps for s in sess.exercises[1].sets] == [3]

def test_delete_exercise_not_found(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    with pytest.raises(NotFoundError):
        engine.delete_exercise(user, MONDAY, 1)
    engine.upsert(user, MONDAY, DayOfWeek.Monday, [ex("A", (1, 1))])
    with pytest.raises(NotFoundError):
        engine.delete_exercise(user, MONDAY, 999999)

def test_delete_all_sessions_is_per_user(db):
    user, other = uid(), uid()
    engine = SessionUpsertEngine(db)
    engine.upsert(user, MONDAY, DayOfWeek.Monday, [ex("A", (1, 1))])
    engine.upsert(user, date(2025, 1, 8), DayOfWeek.Wednesday, [ex("B", (1, 1))])
    engine.upsert(other, MONDAY, DayOfWeek.Monday, [ex("A", (1, 1))])

    assert engine.delete_all_sessions(user) == 2
    repo = WorkoutSessionRepository(db)
    assert repo.workouts(user) == []
    assert len(repo.workouts(other)) == 1

def test_import_counts_created_and_updated(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    engine.upsert(user, MONDAY, DayOfWeek.Monday, [ex("Old", (1, 1))])
    result = engine.import_workouts(user, [
        Workout(date=MONDAY, day_of_week=DayOfWeek.Monday, week_number=2, exercises=[ex("Bench", (80, 5))]),
        Workout(date=date(2025, 1, 8), day_of_week=DayOfWeek.Wednesday, week_number=2, exercises=[ex("Squat", (100, 5))]),
    ])
    assert (result.imported, result.updated, result.total) == (1, 1, 2)
    names = [[e.name for e in w.exercises] for w in WorkoutSessionRepository(db).workouts(user)]
    assert names == [["Bench"], ["Squat"]]

def test_import_is_all_or_nothing(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    with pytest.raises(SheetValidationError):
        engine.import_workouts(user, [
            Workout(date=MONDAY, day_of_week=DayOfWeek.Monday, week_number=2, exercises=[ex("Bench", (80, 5))]),
            Workout(date=None, day_of_week=DayOfWeek.Tuesday, week_number=3, exercises=[ex("Row", (60, 8))]),
        ])
    assert WorkoutSessionRepository(db).workouts(user) == []

def test_import_keeps_sheet_week_numbers(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    engine.import_workouts(user, [
        Workout(date=date(2025, 9, 29), day_of_week=DayOfWeek.Monday, week_number=5, exercises=[ex("Squat", (100, 5))]),
    ])
    [w] = WorkoutSessionRepository(db).workouts(user)
    assert w.week_number == 5

    # a plain save derives the ISO week again
    engine.upsert(user, date(2025, 9, 29), DayOfWeek.Monday, [ex("Squat", (105, 5))])
    [w] = WorkoutSessionRepository(db).workouts(user)
    assert w.week_number == 40

def test_delete_exercise_not_found_releases_transaction(db):
    user = uid()
    engine = SessionUpsertEngine(db)
    engine.upsert(user, MONDAY, DayOfWeek.Monday, [ex("A", (1, 1))])
    with pytest.raises(NotFoundError):
        engine.delete_exercise(user, MONDAY, 999999)
    assert not db.in_transaction()
    with pytest.raises(NotFoundError):
        engine.delete_exercise(user, date(2025, 2, 3), 1)
    assert not db.in_transaction()
