import uuid

from fastapi.testclient import TestClient

from liftlog.main import app
from liftlog.security import create_access_token

client = TestClient(app)

def auth_headers():
    return {"Authorization": f"Bearer {create_access_token(sub=f'u_{uuid.uuid4().hex[:10]}')}"}

def test_create_and_list_names():
    h = auth_headers()
    for name, group in [("squat", "Legs"), ("Bench Press", "Chest"), ("  Arnold Press ", "Shoulders")]:
        r = client.post("/exercises", json={"name": name, "muscle_group": group}, headers=h)
        assert r.status_code == 201, r.text
    r = client.get("/exercises/names", headers=h)
    assert r.json() == ["Arnold Press", "Bench Press", "squat"]

def test_duplicate_name_any_case_conflicts():
    h = auth_headers()
    assert client.post("/exercises", json={"name": "Deadlift", "muscle_group": "Back"}, headers=h).status_code == 201
    r = client.post("/exercises", json={"name": "DEADLIFT", "muscle_group": "Back"}, headers=h)
    assert r.status_code == 409
    assert r.json()["detail"] == "An exercise with this name already exists"

def test_names_are_per_user():
    mine, theirs = auth_headers(), auth_headers()
    client.post("/exercises", json={"name": "Deadlift", "muscle_group": "Back"}, headers=mine)
    assert client.get("/exercises/names", headers=theirs).json() == []
    r = client.post("/exercises", json={"name": "Deadlift", "muscle_group": "Back"}, headers=theirs)
    assert r.status_code == 201

def test_muscle_group_feeds_best_sets():
    h = auth_headers()
    client.post("/exercises", json={"name": "Bench Press", "muscle_group": "Chest"}, headers=h)
    client.put("/workouts/2025-01-06", json={"exercises": [
        {"name": "bench press", "sets": [{"weight": 80, "reps": 5}]},
    ]}, headers=h)
    [best] = client.get("/analytics/best-sets", params={"days": 3650}, headers=h).json()
    assert best["muscle_group"] == "Chest"
