"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from fittrack.exceptions import StoreError
from fittrack.web import create_app

WORKOUT = {
    "date": "2024-01-01",
    "exercises": [{"name": "Squats", "sets": 3, "reps": 10, "weight": 60}],
    "notes": "Leg day",
}


class TestExercisesAPI:
    """Tests for /api/exercises."""

    def test_list_seeded_catalog(self, api):
        response = api.get("/api/exercises")

        assert response.status_code == 200
        names = [e["name"] for e in response.json()]
        assert len(names) == 10
        assert names[0] == "Push-ups"

    def test_list_is_idempotent(self, api):
        """Test two reads without a write return identical bytes."""
        assert api.get("/api/exercises").content == api.get("/api/exercises").content

    def test_create_with_defaults(self, api):
        response = api.post("/api/exercises", json={"name": "Burpees"})

        assert response.status_code == 201
        assert response.json() == {
            "id": 11,
            "name": "Burpees",
            "category": "other",
            "equipment": "unknown",
        }

    def test_create_requires_name(self, api):
        for body in ({}, {"name": ""}, {"category": "core"}):
            response = api.post("/api/exercises", json=body)
            assert response.status_code == 400
            assert "error" in response.json()

        assert len(api.get("/api/exercises").json()) == 10

    def test_blank_name_rejected(self, api):
        response = api.post("/api/exercises", json={"name": "   "})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request: Exercise name is required"}
        assert len(api.get("/api/exercises").json()) == 10


class TestWorkoutsAPI:
    """Tests for /api/workouts."""

    def test_create_and_get(self, api):
        """Test the id is assigned and the record reads back identically."""
        created = api.post("/api/workouts", json=WORKOUT)

        assert created.status_code == 201
        body = created.json()
        assert body["id"] == 1
        assert body["date"] == WORKOUT["date"]
        assert body["exercises"] == WORKOUT["exercises"]
        assert body["notes"] == "Leg day"
        assert "createdAt" in body
        assert "updatedAt" not in body

        fetched = api.get("/api/workouts/1")
        assert fetched.status_code == 200
        assert fetched.json() == body

    def test_ids_increase(self, api):
        ids = [
            api.post("/api/workouts", json={"date": "2024-01-0%d" % d, "exercises": []}).json()["id"]
            for d in range(1, 4)
        ]
        assert ids == [1, 2, 3]

    def test_optional_fields_persisted(self, api):
        body = {**WORKOUT, "name": "Legs", "duration": 45, "calories": 300}
        created = api.post("/api/workouts", json=body).json()

        assert (created["name"], created["duration"], created["calories"]) == ("Legs", 45, 300)

    def test_notes_default_empty(self, api):
        created = api.post("/api/workouts", json={"date": "2024-01-01", "exercises": []}).json()
        assert created["notes"] == ""

    def test_create_validation(self, api):
        """Test missing date, missing exercises and non-list exercises are rejected."""
        for body in (
            {"exercises": []},
            {"date": "2024-01-01"},
            {"date": "2024-01-01", "exercises": "Squats"},
            {"date": "", "exercises": []},
        ):
            response = api.post("/api/workouts", json=body)
            assert response.status_code == 400, body
            assert "error" in response.json()

        assert api.get("/api/workouts").json() == []

    def test_entries_stored_as_sent(self, api):
        """Test entry values are not type-checked and junk counts as zero volume."""
        body = {
            "date": "2024-01-01",
            "exercises": [
                {"name": "Plank", "sets": 3, "reps": 1, "weight": "bodyweight"},
                "Squats",
            ],
        }

        response = api.post("/api/workouts", json=body)

        assert response.status_code == 201
        assert response.json()["exercises"] == [
            {"name": "Plank", "sets": 3, "reps": 1, "weight": "bodyweight"},
        ]
        stats = api.get("/api/stats").json()
        assert stats["totalExercises"] == 1
        assert stats["totalWeight"] == 0

    def test_fractional_sets_accepted(self, api):
        body = {"date": "2024-01-01", "exercises": [{"name": "Squats", "sets": 3.5, "reps": 2, "weight": 10}]}

        assert api.post("/api/workouts", json=body).status_code == 201
        assert api.get("/api/stats").json()["totalWeight"] == 70

    def test_integer_weight_kept(self, api):
        created = api.post("/api/workouts", json=WORKOUT).json()

        weight = created["exercises"][0]["weight"]
        assert weight == 60
        assert isinstance(weight, int)

    def test_get_missing(self, api):
        response = api.get("/api/workouts/99")

        assert response.status_code == 404
        assert response.json() == {"error": "Workout not found"}

    def test_update_notes_only(self, api):
        api.post("/api/workouts", json=WORKOUT)

        response = api.put("/api/workouts/1", json={"notes": "x"})

        assert response.status_code == 200
        body = response.json()
        assert body["notes"] == "x"
        assert body["date"] == WORKOUT["date"]
        assert body["exercises"] == WORKOUT["exercises"]
        assert "updatedAt" in body

    def test_update_replaces_exercises(self, api):
        api.post("/api/workouts", json=WORKOUT)

        body = api.put("/api/workouts/1", json={"exercises": []}).json()

        assert body["exercises"] == []

    def test_non_integer_id_is_not_found(self, api):
        api.post("/api/workouts", json=WORKOUT)

        for response in (
            api.get("/api/workouts/abc"),
            api.put("/api/workouts/abc", json={"notes": "x"}),
            api.delete("/api/workouts/1.5"),
        ):
            assert response.status_code == 404
            assert response.json() == {"error": "Workout not found"}

        assert len(api.get("/api/workouts").json()) == 1

    def test_update_missing(self, api):
        assert api.put("/api/workouts/5", json={"notes": "x"}).status_code == 404

    def test_delete(self, api):
        api.post("/api/workouts", json=WORKOUT)

        response = api.delete("/api/workouts/1")

        assert response.status_code == 200
        assert response.json()["message"] == "Workout deleted successfully"
        assert response.json()["workout"]["id"] == 1
        assert api.get("/api/workouts/1").status_code == 404
        assert api.delete("/api/workouts/1").status_code == 404


class TestStatsAPI:
    """Tests for /api/stats and dashboard data."""

    def test_empty_stats(self, api):
        assert api.get("/api/stats").json() == {
            "totalWorkouts": 0,
            "totalExercises": 0,
            "totalWeight": 0,
            "averageWorkoutsPerWeek": 0,
            "mostFrequentExercise": None,
        }

    def test_stats(self, api):
        api.post("/api/workouts", json={
            "date": "2024-01-01",
            "exercises": [
                {"name": "Squats", "sets": 3, "reps": 10, "weight": 60},
                {"name": "Squats", "sets": 1, "reps": 5},
            ],
        })
        api.post("/api/workouts", json={
            "date": "2024-01-08",
            "exercises": [{"name": "Push-ups", "sets": 3, "reps": 15, "weight": 0}],
        })

        stats = api.get("/api/stats").json()

        assert stats["totalWorkouts"] == 2
        assert stats["totalExercises"] == 3
        assert stats["totalWeight"] == 1800
        assert stats["averageWorkoutsPerWeek"] == 2.0
        assert stats["mostFrequentExercise"] == {"name": "Squats", "count": 2}

    def test_weekly(self, api):
        for day, calories in (("2024-01-01", 100), ("2024-01-03", 200), ("2024-01-10", 50)):
            api.post("/api/workouts", json={"date": day, "exercises": [], "calories": calories})

        assert api.get("/api/stats/weekly").json() == {
            "labels": ["Week 01", "Week 02"],
            "workouts": [2, 1],
            "calories": [300, 50],
        }

    def test_weekly_empty(self, api):
        assert api.get("/api/stats/weekly").json()["labels"] == ["No data"]

    def test_dashboard_data(self, api):
        api.post("/api/workouts", json=WORKOUT)

        data = api.get("/api/dashboard").json()

        assert data["summary"]["totalWorkouts"] == 1
        assert [w["id"] for w in data["recentWorkouts"]] == [1]
        assert data["chart"]["workouts"] == [1]


class TestPagesAndErrors:
    """Tests for the page, health check and error mapping."""

    def test_dashboard_page(self, api):
        api.post("/api/workouts", json={**WORKOUT, "name": "Leg Day"})

        response = api.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Leg Day" in response.text

    def test_health(self, api):
        assert api.get("/health").json()["status"] == "healthy"

    def test_unknown_route(self, api):
        response = api.get("/api/goals")

        assert response.status_code == 404
        assert response.json() == {"error": "Route not found"}

    def test_store_error_is_500(self, data_dir, monkeypatch):
        def fail(*args, **kwargs):
            raise StoreError("disk full")

        with TestClient(create_app(data_dir)) as client:
            monkeypatch.setattr(client.app.state.store, "insert", fail)
            response = client.post("/api/workouts", json=WORKOUT)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save data"}

    def test_unexpected_error_is_generic_500(self, data_dir, monkeypatch):
        def fail(*args, **kwargs):
            raise RuntimeError("secret internals")

        with TestClient(create_app(data_dir), raise_server_exceptions=False) as client:
            monkeypatch.setattr(client.app.state.store, "list_all", fail)
            response = client.get("/api/workouts")

        assert response.status_code == 500
        assert response.json() == {"error": "Something went wrong!"}

    def test_first_run_creates_files(self, data_dir):
        with TestClient(create_app(data_dir)):
            pass

        assert (data_dir / "exercises.json").exists()
        assert (data_dir / "workouts.json").exists()
