"""
HTTP tests for the /users routes.
"""

import pytest
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.main import create_app


class TestListUsers:
    """Tests for GET /users/."""

    def test_list_seeded_users(self, client, service):
        response = client.get("/users/")
        assert response.status_code == 200
        users = response.json()
        assert len(users) == len(service.store) == 4
        assert {"ID": "1", "Name": "Mario", "Age": 35} in users

    def test_list_without_trailing_slash(self, client):
        response = client.get("/users")
        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_list_empty_store(self):
        app = create_app(Settings(api_prefix="", seed_users=False))
        with TestClient(app) as client:
            response = client.get("/users/")
        assert response.status_code == 200
        assert response.json() == []


class TestGetUser:
    """Tests for GET /users/{id}."""

    def test_get_user(self, client):
        response = client.get("/users/1")
        assert response.status_code == 200
        assert response.json() == {"ID": "1", "Name": "Mario", "Age": 35}

    def test_get_missing_user(self, client):
        response = client.get("/users/999")
        assert response.status_code == 404
        assert response.content == b""


class TestUpsertUser:
    """Tests for PUT /users/{id}."""

    def test_update_existing_user(self, client, service):
        response = client.put("/users/1", json={"Name": "Mario", "Age": 40})
        assert response.status_code == 200
        assert response.json() == {"ID": "1", "Name": "Mario", "Age": 40}
        assert service.store.get("1").age == 40
        assert len(service.store) == 4

    def test_insert_new_user(self, client, service):
        response = client.put("/users/6", json={"ID": "6", "Name": "Rosalina", "Age": 200})
        assert response.status_code == 200
        assert service.store.get("6").name == "Rosalina"

    def test_body_id_is_ignored(self, client):
        response = client.put("/users/2", json={"ID": "77", "Name": "Luigi", "Age": 33})
        assert response.json()["ID"] == "2"
        assert client.get("/users/77").status_code == 404

    def test_undecodable_body(self, client, service):
        before = service.store.all()
        response = client.put(
            "/users/1",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")
        assert "json_invalid" in response.text
        assert service.store.all() == before

    def test_null_fields_take_zero_values(self, client, service):
        response = client.put(
            "/users/1",
            content=b'{"Name": null, "Age": 40}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        assert response.json() == {"ID": "1", "Name": "", "Age": 40}
        assert service.store.get("1").name == ""

    def test_wrong_field_type(self, client, service):
        response = client.put("/users/1", json={"Name": "Mario", "Age": "forty"})
        assert response.status_code == 400
        assert "Age" in response.text
        assert service.store.get("1").age == 35


class TestCreateUser:
    """Tests for POST /users."""

    def test_create_user(self, client, service):
        response = client.post("/users", json={"Name": "Bowser", "Age": 13})
        assert response.status_code == 201
        body = response.json()
        assert body["ID"].isdigit()
        assert body["Name"] == "Bowser"
        assert len(service.store) == 5
        assert client.get(f"/users/{body['ID']}").json() == body

    def test_create_with_trailing_slash(self, client, service):
        response = client.post("/users/", json={"Name": "Bowser", "Age": 13})
        assert response.status_code == 201
        assert len(service.store) == 5

    def test_create_ignores_body_id(self, client, service):
        response = client.post("/users", json={"ID": "1", "Name": "Bowser", "Age": 13})
        assert response.json()["ID"] != "1"
        assert service.store.get("1").name == "Mario"

    def test_two_creates_get_distinct_ids(self, client, service):
        first = client.post("/users", json={"Name": "Bowser", "Age": 13}).json()
        second = client.post("/users", json={"Name": "Koopa", "Age": 9}).json()
        assert first["ID"] != second["ID"]
        assert len(service.store) == 6

    def test_undecodable_body(self, client, service):
        response = client.post("/users", content=b"", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.text
        assert len(service.store) == 4


class TestDeleteUser:
    """Tests for DELETE /users/{id}."""

    def test_delete_user(self, client):
        response = client.delete("/users/1")
        assert response.status_code == 204
        assert response.content == b""
        assert "content-type" not in response.headers
        assert client.get("/users/1").status_code == 404

    def test_delete_missing_user(self, client, service):
        response = client.delete("/users/999")
        assert response.status_code == 204
        assert len(service.store) == 4


class TestApplication:
    """Tests for create_app configuration."""

    def test_api_prefix(self):
        app = create_app(Settings(api_prefix="/api/v1/"))
        with TestClient(app) as client:
            assert client.get("/api/v1/users/1").status_code == 200
            assert client.get("/users/1").status_code == 404

    def test_state_carries_only_the_service(self, app, service):
        assert app.state.user_service is service
        assert not hasattr(app.state, "settings")

    def test_unknown_id_strategy(self):
        with pytest.raises(ValueError):
            create_app(Settings(id_strategy="uuid"))

    def test_apps_do_not_share_records(self, client):
        client.delete("/users/1")
        other = create_app(Settings(api_prefix=""))
        with TestClient(other) as other_client:
            assert other_client.get("/users/1").status_code == 200

    def test_openapi_documents_request_body(self, client):
        schema = client.get("/openapi.json").json()
        put = schema["paths"]["/users/{user_id}"]["put"]
        properties = put["requestBody"]["content"]["application/json"]["schema"]["properties"]
        assert {"ID", "Name", "Age"} <= set(properties)
