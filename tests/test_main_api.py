# tests/test_main_api.py
from fastapi.testclient import TestClient

# Import the FastAPI app instance from main
from main import app
from src.routers.quiz import get_storage
from src.services.storage import InMemoryResultStorage


def test_health_check():
    with TestClient(app) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_submit_and_fetch_through_app(scenario_answers):
    """Full flow through the mounted router: submit → fetch → dynamics"""
    storage = InMemoryResultStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    payload = {
        "answers": [
            {"questionId": a["question_id"], "selectedColor": a["color"], "rating": a["rating"]}
            for a in scenario_answers
        ],
        "userId": 42,
    }

    try:
        with TestClient(app) as client:
            submitted = client.post("/api/quiz/submit", json=payload)
            assert submitted.status_code == 200
            result_id = submitted.json()["id"]

            fetched = client.get(f"/api/quiz/results/{result_id}")
            assert fetched.status_code == 200
            assert fetched.json()["personalityType"] == "Director"

            history = client.get("/api/users/42/results")
            assert [r["id"] for r in history.json()] == [result_id]

            dynamics = client.get(f"/api/quiz/results/{result_id}/dynamics")
            assert dynamics.json()["preference_flow"]["top_color"] == "fiery-red"
    finally:
        app.dependency_overrides.clear()
