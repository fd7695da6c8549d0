"""Tests for admin user-management endpoints."""

from fastapi import status

from tests.conftest import auth_headers


def test_admin_changes_role(client, admin_auth_token, test_user) -> None:
    response = client.put(
        f"/api/users/{test_user.id}/role",
        json={"role": "guest"},
        headers=admin_auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "User role updated successfully"}

    # Demotion applies to the very next request carrying the old token.
    response = client.post(
        "/api/questions",
        json={"title": "Still here?", "content": "Body"},
        headers=auth_headers(test_user),
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_invalid_role(client, admin_auth_token, test_user) -> None:
    response = client.put(
        f"/api/users/{test_user.id}/role",
        json={"role": "overlord"},
        headers=admin_auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid role"


def test_non_admin_cannot_change_roles(client, auth_token, other_user) -> None:
    response = client.put(
        f"/api/users/{other_user.id}/role",
        json={"role": "admin"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_change_role_of_missing_user(client, admin_auth_token) -> None:
    response = client.put("/api/users/999/role", json={"role": "user"}, headers=admin_auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_admin_lists_users(client, admin_auth_token, test_user) -> None:
    response = client.get("/api/users", headers=admin_auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert {row["username"] for row in response.json()} == {"root", "alice"}


def test_user_cannot_list_users(client, auth_token) -> None:
    response = client.get("/api/users", headers=auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN
