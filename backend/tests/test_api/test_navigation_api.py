"""
Tests for the Navigation and Home API endpoints.
"""
from wordwise.services.content_gateway import MOCK_WORD


class TestRootEndpoints:
    """Tests for / and /health"""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["services"]["api"] == "up"


class TestNavigationEndpoints:
    """Tests for /navigation"""

    def test_get_navigation(self, client):
        response = client.get("/api/v1/navigation")

        assert response.status_code == 200
        data = response.json()
        assert data["active_view"] == "home"
        assert data["dictionary_open"] is False
        assert [item["id"] for item in data["items"]] == ["home", "learn", "practice", "search", "profile"]

    def test_navigate(self, client):
        response = client.post("/api/v1/navigation/learn")

        assert response.status_code == 200
        assert response.json()["active_view"] == "learn"

    def test_unknown_view(self, client):
        response = client.post("/api/v1/navigation/settings")
        assert response.status_code == 422

    def test_open_dictionary_from_home(self, client):
        response = client.post("/api/v1/navigation/dictionary/open")
        assert response.status_code == 200
        assert response.json()["dictionary_open"] is True

    def test_open_dictionary_elsewhere(self, client):
        client.post("/api/v1/navigation/practice")
        response = client.post("/api/v1/navigation/dictionary/open")
        assert response.status_code == 409

    def test_navigation_closes_dictionary(self, client):
        client.post("/api/v1/navigation/dictionary/open")
        response = client.post("/api/v1/navigation/profile")
        assert response.json()["dictionary_open"] is False

    def test_close_dictionary(self, client):
        client.post("/api/v1/navigation/dictionary/open")
        response = client.post("/api/v1/navigation/dictionary/close")
        assert response.status_code == 200
        assert response.json()["dictionary_open"] is False


class TestHomeEndpoint:
    """Tests for GET /home"""

    def test_get_home(self, client):
        response = client.get("/api/v1/home")

        assert response.status_code == 200
        data = response.json()
        assert data["greeting"] == "Welcome back!"
        assert data["word_of_the_day"]["word"] == MOCK_WORD.word
        assert data["quote"]["author"] == "Ludwig Wittgenstein"
        assert data["stats"] == {
            "words_learned": 1,
            "accuracy": 83,
            "rank": {"name": "Bronze", "icon": "🥉", "min_words": 0}
        }
