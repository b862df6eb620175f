"""API tests for training plans, filters and favorites."""


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCreatePlan:
    def test_create_and_list(self, client, users, create_plan, plan_payload):
        response = client.post("/api/trainings", json=plan_payload(users["trainer"]))

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Test plan"
        assert body["type"] == "Running"
        assert body["trainerId"] == users["trainer"]
        assert body["days"] == "monday, tuesday"
        assert isinstance(body["id"], int)

        plans = client.get("/api/trainings").json()
        assert len(plans) == 1
        assert plans[0]["title"] == "Test plan"

    def test_optional_location_fields(self, client, users, create_plan, plan_payload):
        body = create_plan(users["trainer"], location=None, latitude=-34.6, longitude=-58.4)
        assert body["location"] is None
        assert body["latitude"] == -34.6

    def test_normalises_schedule(self, client, users, create_plan, plan_payload):
        body = create_plan(users["trainer"], days="Monday,WEDNESDAY", start="9:00", end="9:45")
        assert body["days"] == "monday, wednesday"
        assert body["start"] == "09:00"

    def test_missing_fields(self, client, users, create_plan, plan_payload):
        payload = plan_payload(users["trainer"])
        del payload["title"]
        response = client.post("/api/trainings", json=payload)
        assert response.status_code == 400
        assert response.json()["message"].startswith("Missing required fields")

    def test_trainer_not_found(self, client, users, create_plan, plan_payload):
        response = client.post("/api/trainings", json=plan_payload(40000))
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_invalid_schedule(self, client, users, create_plan, plan_payload):
        assert client.post("/api/trainings", json=plan_payload(users["trainer"], days="someday")).status_code == 400
        assert client.post("/api/trainings", json=plan_payload(users["trainer"], start="12:00",
                                                               end="11:00")).status_code == 400
        assert client.post("/api/trainings", json=plan_payload(users["trainer"], difficulty=9)).status_code == 400


class TestGetPlans:
    def test_get_by_id(self, client, users, create_plan, plan_payload):
        plan = create_plan(users["trainer"])
        response = client.get(f"/api/trainings/{plan['id']}")
        assert response.status_code == 200
        assert response.json()["title"] == "Test plan"
        assert response.json()["type"] == "Running"

    def test_not_found(self, client, users, create_plan, plan_payload):
        response = client.get("/api/trainings/1")
        assert response.status_code == 404
        assert response.json() == {"message": "Training plan not found"}

    def test_list_in_creation_order(self, client, users, create_plan, plan_payload):
        create_plan(users["trainer"])
        create_plan(users["trainer"], title="Test plan 2", type="Swimming", difficulty=2)

        plans = client.get("/api/trainings").json()
        assert [p["title"] for p in plans] == ["Test plan", "Test plan 2"]
        assert [p["type"] for p in plans] == ["Running", "Swimming"]


class TestFilters:
    def test_by_day(self, client, users, create_plan, plan_payload):
        create_plan(users["trainer"], title="Running", days="monday, wednesday")
        create_plan(users["trainer"], title="Swimming", type="Swimming", days="monday, wednesday")
        create_plan(users["trainer"], title="Yoga", type="Yoga", days="sunday")

        response = client.request("GET", "/api/trainings/between_dates", json={"days": "monday"})
        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Running", "Swimming"]

        response = client.post("/api/trainings/between_dates", json={"days": "sunday, friday"})
        assert [p["title"] for p in response.json()] == ["Yoga"]

    def test_by_day_missing(self, client, users, create_plan, plan_payload):
        response = client.request("GET", "/api/trainings/between_dates", json={})
        assert response.status_code == 400

    def test_by_hours_overlap(self, client, users, create_plan, plan_payload):
        create_plan(users["trainer"], title="Running")
        create_plan(users["trainer"], title="Swimming", type="Swimming")
        create_plan(users["trainer"], title="Evening", start="19:00", end="20:00")

        response = client.request("GET", "/api/trainings/between_hours", json={"start": "09:00", "end": "12:00"})
        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Running", "Swimming"]

        response = client.post("/api/trainings/between_hours", json={"start": "10:30", "end": "19:00"})
        assert [p["title"] for p in response.json()] == ["Running", "Swimming", "Evening"]

    def test_by_hours_invalid(self, client, users, create_plan, plan_payload):
        assert client.post("/api/trainings/between_hours", json={"start": "09:00"}).status_code == 400
        assert client.post("/api/trainings/between_hours",
                           json={"start": "12:00", "end": "09:00"}).status_code == 400


class TestFavorites:
    def test_mark_favorite(self, client, users, create_plan, plan_payload):
        plan = create_plan(users["trainer"])
        response = client.post(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")

        assert response.status_code == 200
        assert response.json()["userId"] == users["athlete"]
        assert response.json()["trainingPlanId"] == plan["id"]

    def test_list_favorites_in_marking_order(self, client, users, create_plan, plan_payload):
        first = create_plan(users["trainer"])
        second = create_plan(users["trainer"], title="Test plan 2", type="Swimming")
        client.post(f"/api/trainings/{second['id']}/favorite/{users['athlete']}")
        client.post(f"/api/trainings/{first['id']}/favorite/{users['athlete']}")

        favorites = client.get(f"/api/trainings/favorites/{users['athlete']}").json()
        assert [p["title"] for p in favorites] == ["Test plan 2", "Test plan"]

    def test_marking_twice_is_idempotent(self, client, users, create_plan, plan_payload):
        plan = create_plan(users["trainer"])
        first = client.post(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")
        second = client.post(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")

        assert second.status_code == 200
        assert first.json() == second.json()
        favorites = client.get(f"/api/trainings/favorites/{users['athlete']}").json()
        assert len(favorites) == 1

    def test_unknown_plan_or_user(self, client, users, create_plan, plan_payload):
        plan = create_plan(users["trainer"])
        response = client.post(f"/api/trainings/40000/favorite/{users['athlete']}")
        assert response.status_code == 404
        assert response.json()["message"] == "Training plan not found"

        response = client.post(f"/api/trainings/{plan['id']}/favorite/40000")
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_unmark_favorite(self, client, users, create_plan, plan_payload):
        plan = create_plan(users["trainer"])
        client.post(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")

        response = client.delete(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")
        assert response.status_code == 204
        assert client.get(f"/api/trainings/favorites/{users['athlete']}").json() == []

        response = client.delete(f"/api/trainings/{plan['id']}/favorite/{users['athlete']}")
        assert response.status_code == 404
