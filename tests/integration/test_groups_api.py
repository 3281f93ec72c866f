# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for group endpoints and group assignments."""


def _create(client, path, payload):
    response = client.post(path, json=payload)
    assert response.status_code == 201
    return response.json()


class TestGroupEndpoints:
    """Tests for /api/v1/groups."""

    def test_create_and_list(self, admin_client):
        created = _create(admin_client, "/api/v1/groups", {"name": "Finance"})
        assert created["users"] == []
        assert created["roles"] == []

        response = admin_client.get("/api/v1/groups")
        assert response.status_code == 200
        groups = {g["name"]: g for g in response.json()}
        assert groups["Administrators"]["user_count"] == 1
        assert groups["Administrators"]["role_count"] == 1
        assert groups["Finance"]["user_count"] == 0

    def test_duplicate_name(self, admin_client):
        response = admin_client.post("/api/v1/groups", json={"name": "Administrators"})
        assert response.status_code == 409
        assert response.json() == {"error": "Group name already exists"}

    def test_short_name_is_rejected(self, admin_client):
        response = admin_client.post("/api/v1/groups", json={"name": "ab"})
        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"

    def test_delete_group(self, admin_client):
        created = _create(admin_client, "/api/v1/groups", {"name": "Finance"})

        response = admin_client.delete(f"/api/v1/groups/{created['id']}")
        assert response.status_code == 200
        assert admin_client.get(f"/api/v1/groups/{created['id']}").status_code == 404


class TestGroupAssignments:
    """Tests for /api/v1/groups/{id}/users and /roles."""

    def test_assign_and_remove_users(self, admin_client, make_user):
        alice = make_user("alice")
        group = _create(admin_client, "/api/v1/groups", {"name": "Finance"})
        path = f"/api/v1/groups/{group['id']}/users"

        response = admin_client.post(path, json={"userIds": [alice.id]})
        assert response.status_code == 200
        assert response.json()["assignedCount"] == 1

        # Assigning again is harmless
        response = admin_client.post(path, json={"userIds": [alice.id]})
        assert response.status_code == 200

        detail = admin_client.get(f"/api/v1/groups/{group['id']}").json()
        assert [u["username"] for u in detail["users"]] == ["alice"]

        response = admin_client.request("DELETE", path, json={"userIds": [alice.id]})
        assert response.status_code == 200
        assert response.json()["removedCount"] == 1

        response = admin_client.request("DELETE", path, json={"userIds": [alice.id]})
        assert response.json()["removedCount"] == 0

    def test_assign_unknown_user_changes_nothing(self, admin_client, make_user):
        alice = make_user("alice")
        group = _create(admin_client, "/api/v1/groups", {"name": "Finance"})

        response = admin_client.post(
            f"/api/v1/groups/{group['id']}/users", json={"userIds": [alice.id, 999]}
        )
        assert response.status_code == 404
        assert response.json() == {"error": "One or more users not found"}

        detail = admin_client.get(f"/api/v1/groups/{group['id']}").json()
        assert detail["users"] == []

    def test_assign_to_missing_group(self, admin_client, admin_user):
        response = admin_client.post(
            "/api/v1/groups/999/users", json={"userIds": [admin_user.id]}
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Group not found"}

    def test_empty_id_list_is_rejected(self, admin_client):
        group = _create(admin_client, "/api/v1/groups", {"name": "Finance"})

        response = admin_client.post(
            f"/api/v1/groups/{group['id']}/users", json={"userIds": []}
        )
        assert response.status_code == 400

    def test_assign_roles(self, admin_client):
        group = _create(admin_client, "/api/v1/groups", {"name": "Finance"})
        role = _create(admin_client, "/api/v1/roles", {"name": "Biller"})

        response = admin_client.post(
            f"/api/v1/groups/{group['id']}/roles", json={"roleIds": [role["id"]]}
        )
        assert response.status_code == 200
        assert response.json()["assignedCount"] == 1

        detail = admin_client.get(f"/api/v1/roles/{role['id']}").json()
        assert [g["name"] for g in detail["groups"]] == ["Finance"]
