import pytest
from fastapi.testclient import TestClient

from api_server import app
from components.complaints.router import get_store

FLOODING = "URGENT water leak flooding the basement"
WIFI = "Wifi is not working in lab 3 since this morning"


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestComponentRoutes:
    def test_classification(self, client):
        response = client.post("/v2/classification/analyze", json={"description": FLOODING})
        assert response.status_code == 200
        body = response.json()
        assert body["category"] == "water_supply"
        assert body["confidence"] == 75
        assert body["priority"] == "high"
        assert body["department"]["code"] == "PLMB"

    def test_classification_rejects_empty_description(self, client):
        response = client.post("/v2/classification/analyze", json={"description": ""})
        assert response.status_code == 422

    def test_sentiment(self, client):
        response = client.post("/v2/sentiment/analyze", json={"description": FLOODING})
        assert response.status_code == 200
        assert response.json()["sentiment"] == "urgent"

    def test_similarity(self, client, wifi_pair):
        new, existing = wifi_pair
        response = client.post("/v2/similarity/find", json={"candidate": new, "corpus": [existing]})
        assert response.status_code == 200
        body = response.json()
        assert body["total_similar"] == 1
        assert body["similar"][0]["similarity"] == 43
        assert body["has_duplicates"] is False

    def test_compare(self, client):
        response = client.post(
            "/v2/similarity/compare",
            json={"text_a": "water pipe burst", "text_b": "the water pipe burst near hostel"},
        )
        assert response.status_code == 200
        assert response.json()["similarity"] == pytest.approx(80)

    def test_responses(self, client):
        response = client.post(
            "/v2/responses/suggest",
            json={"category": "sanitation", "sentiment": "negative", "priority": "medium"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["tone"] == "empathetic"
        assert len(body["suggestions"]) == 2

    def test_assistant(self, client):
        response = client.post("/v2/assistant/chat", json={"message": "hello"})
        assert response.status_code == 200
        assert response.json()["intent"] == "greeting"

    @pytest.mark.parametrize(
        "path",
        [
            "/v2/classification/health",
            "/v2/sentiment/health",
            "/v2/similarity/health",
            "/v2/responses/health",
            "/v2/assistant/health",
            "/api/health",
        ],
    )
    def test_health(self, client, path):
        response = client.get(path)
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAnalyzeRoute:
    def test_analyze(self, client):
        response = client.post("/api/analyze", json={"complaint": {"description": FLOODING}})
        assert response.status_code == 200
        body = response.json()
        assert body["category"] == "water_supply"
        assert body["priority"] == "high"
        assert body["ai_score"]["overall"] == 84
        assert body["recommendations"] == ["Flag as priority for faster response"]

    def test_null_category_is_predicted(self, client):
        response = client.post(
            "/api/analyze",
            json={"complaint": {"description": FLOODING, "category": None, "priority": None}},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["category"] == "water_supply"
        assert body["priority"] == "high"


class TestComplaintRoutes:
    def test_create_predicts_missing_fields(self, client):
        response = client.post("/api/complaints/", json={"description": WIFI, "location": "Lab 3"})
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["category"] == "internet_connectivity"
        assert body["priority"] == "medium"
        assert body["status"] == "submitted"
        assert body["location"] == "Lab 3"
        assert body["department"]["code"] == "NETW"

    def test_create_keeps_given_fields(self, client):
        response = client.post(
            "/api/complaints/",
            json={"description": WIFI, "category": "it_support", "priority": "high"},
        )
        body = response.json()
        assert body["category"] == "it_support"
        assert body["priority"] == "high"

    def test_get_update_delete(self, client):
        client.post("/api/complaints/", json={"description": WIFI})

        assert client.get("/api/complaints/1").json()["description"] == WIFI

        response = client.patch("/api/complaints/1", json={"status": "resolved"})
        assert response.status_code == 200
        assert response.json()["status"] == "resolved"

        assert client.delete("/api/complaints/1").status_code == 204
        assert client.get("/api/complaints/1").status_code == 404
        assert client.patch("/api/complaints/1", json={"status": "closed"}).status_code == 404
        assert client.delete("/api/complaints/1").status_code == 404

    def test_list_with_filter(self, client):
        client.post("/api/complaints/", json={"description": WIFI})
        client.post("/api/complaints/", json={"description": FLOODING})

        assert len(client.get("/api/complaints/").json()) == 2
        high = client.get("/api/complaints/", params={"priority": "high"}).json()
        assert [c["id"] for c in high] == [2]

    def test_similar_excludes_itself(self, client):
        client.post("/api/complaints/", json={"description": WIFI})
        client.post("/api/complaints/", json={"description": WIFI})

        response = client.get("/api/complaints/1/similar")

        assert response.status_code == 200
        body = response.json()
        assert body["total_similar"] == 1
        assert body["duplicates"][0]["id"] == 2

    def test_similar_unknown_complaint(self, client):
        assert client.get("/api/complaints/9/similar").status_code == 404

    def test_stored_analysis(self, client):
        client.post("/api/complaints/", json={"description": FLOODING})
        response = client.get("/api/complaints/1/analysis")
        assert response.status_code == 200
        body = response.json()
        assert body["complaint_id"] == "1"
        assert body["similar_complaints"]["total_similar"] == 0
