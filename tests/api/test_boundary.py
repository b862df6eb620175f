"""API tests for the HTTP boundary: caller identity, error translation."""

import pytest
from sqlalchemy.exc import DataError, OperationalError

from app.db.repositories.favorite import FavoriteRepository
from app.db.repositories.review import ReviewRepository
from app.db.repositories.training_plan import TrainingPlanRepository
from app.db.repositories.user import UserRepository
from app.models.favorite import FavoriteTrainingPlan
from app.models.review import Review


class TestBlockedCaller:
    def test_blocked_caller_is_forbidden(self, client, users):
        for path in ("/api/trainings", f"/api/trainings/user_training/{users['athlete']}",
                     f"/api/trainings/goals/{users['athlete']}"):
            response = client.get(path, headers={"dev-email": "blocked@mail.com"})
            assert response.status_code == 403
            assert response.json() == {"message": "User is blocked"}

    def test_active_caller_passes(self, client, users):
        response = client.get("/api/trainings", headers={"dev-email": "test-athlete@mail.com"})
        assert response.status_code == 200

    def test_unknown_caller_passes(self, client, users):
        response = client.get("/api/trainings", headers={"dev-email": "nobody@mail.com"})
        assert response.status_code == 200

    def test_health_is_not_guarded(self, client, users):
        response = client.get("/health", headers={"dev-email": "blocked@mail.com"})
        assert response.status_code == 200


class TestErrorTranslation:
    def test_malformed_body_is_400(self, client, users, plan_payload):
        response = client.post("/api/trainings", json=plan_payload(users["trainer"], difficulty="hard"))
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid request")

    def test_non_numeric_path_id_is_400(self, client, users):
        assert client.get("/api/trainings/abc").status_code == 400

    def test_unknown_route_has_message_body(self, client):
        response = client.get("/api/nowhere")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_user_store_failure_is_not_reported_as_missing(self, client, users, create_plan, monkeypatch):
        plan = create_plan(users["trainer"])

        def boom(self, user_id):
            raise OperationalError("SELECT users", {}, Exception("statement timeout"))

        monkeypatch.setattr(UserRepository, "get_by_id", boom)
        response = client.post(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")
        assert response.status_code == 503
        assert response.json() == {"message": "User service unavailable"}


class TestStorageLimits:
    @pytest.mark.parametrize("steps", [2 ** 31, 10 ** 30])
    def test_steps_beyond_column_range(self, client, users, create_plan, session_payload, steps):
        plan = create_plan(users["trainer"])
        response = client.post(f"/api/trainings/{plan['id']}/user_training/{users['athlete']}",
                               json=session_payload(steps=steps))
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid request")

    def test_title_at_column_length(self, client, users, create_plan):
        plan = create_plan(users["trainer"], title="x" * 255)
        assert len(plan["title"]) == 255

    @pytest.mark.parametrize("field, length", [("title", 256), ("type", 101), ("description", 2001),
                                               ("location", 256), ("state", 21)])
    def test_plan_text_too_long(self, client, users, plan_payload, field, length):
        response = client.post("/api/trainings", json=plan_payload(users["trainer"], **{field: "x" * length}))
        assert response.status_code == 400

    def test_trainer_id_beyond_column_range(self, client, users, plan_payload):
        response = client.post("/api/trainings", json=plan_payload(10 ** 30))
        assert response.status_code == 400

    def test_review_comment_too_long(self, client, users, create_plan):
        plan = create_plan(users["trainer"])
        response = client.post(f"/api/trainings/{plan['id']}/review/{users['athlete']}",
                               json={"score": 4, "comment": "x" * 1001})
        assert response.status_code == 400

    @pytest.mark.parametrize("field, length", [("title", 256), ("description", 1001)])
    def test_goal_text_too_long(self, client, users, field, length):
        goal = {"title": "Run more", "description": "Weekly distance", "type": "Distancia", "metric": 20}
        goal[field] = "x" * length
        response = client.post(f"/api/trainings/goals/{users['athlete']}", json=goal)
        assert response.status_code == 400

    @pytest.mark.parametrize("path", ["/api/trainings/100000000000000000000", "/api/trainings/-100000000000000000000",
                                      "/api/trainings/user_training/2147483648",
                                      "/api/trainings/goals/100000000000000000000"])
    def test_id_beyond_column_range(self, client, users, path):
        response = client.get(path)
        assert response.status_code == 400
        assert "message" in response.json()

    def test_value_rejected_by_database(self, client, users, plan_payload, monkeypatch):
        def reject(self, plan):
            raise DataError("INSERT INTO training_plans", {}, Exception("value too long for type varchar(255)"))

        monkeypatch.setattr(TrainingPlanRepository, "create", reject)
        response = client.post("/api/trainings", json=plan_payload(users["trainer"]))
        assert response.status_code == 400
        assert response.json() == {"message": "Value out of range for the stored field"}

    def test_value_rejected_during_user_lookup(self, client, users, create_plan, monkeypatch):
        plan = create_plan(users["trainer"])

        def reject(self, user_id):
            raise DataError("SELECT users", {}, Exception("integer out of range"))

        monkeypatch.setattr(UserRepository, "get_by_id", reject)
        response = client.post(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")
        assert response.status_code == 400


class TestConcurrentInserts:
    """Another request inserts the same row between our lookup and our insert."""

    def test_favorite_inserted_meanwhile_is_returned(self, client, session, users, create_plan, monkeypatch):
        plan = create_plan(users["trainer"])
        session.add(FavoriteTrainingPlan(user_id=users["athlete"], training_plan_id=plan["id"]))
        session.commit()
        original_get = FavoriteRepository.get
        calls = []

        def get_after_race(self, user_id, plan_id):
            calls.append((user_id, plan_id))
            return None if len(calls) == 1 else original_get(self, user_id, plan_id)

        monkeypatch.setattr(FavoriteRepository, "get", get_after_race)
        response = client.post(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")

        assert response.status_code == 200
        assert response.json()["trainingPlanId"] == plan["id"]
        assert len(calls) == 2
        assert len(client.get(f"/api/trainings/favorites/{users['athlete']}").json()) == 1

    def test_review_inserted_meanwhile_conflicts(self, client, session, users, create_plan, monkeypatch):
        plan = create_plan(users["trainer"])
        session.add(Review(user_id=users["athlete"], training_plan_id=plan["id"], score=4))
        session.commit()
        monkeypatch.setattr(ReviewRepository, "get_by_user_and_plan", lambda self, user_id, plan_id: None)

        response = client.post(f"/api/trainings/{plan['id']}/review/{users['athlete']}", json={"score": 2})

        assert response.status_code == 409
        assert response.json() == {"message": "User already reviewed this training plan"}
        assert len(client.get(f"/api/trainings/{plan['id']}/reviews").json()) == 1
