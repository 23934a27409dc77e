"""
Tests for user endpoints.
"""
from conftest import user_payload


def test_create_user_success(client):
    """Test successful user creation."""
    response = client.post(
        "/api/v1/users",
        json=user_payload(),
        headers={"X-Caller-Principal": "principal-alice"}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Alice"
    assert data["email"] == "a@x.com"
    assert data["user_type"] == "Elderly"
    assert data["owner"] == "principal-alice"
    assert isinstance(data["id"], str)
    assert isinstance(data["created_at"], int)


def test_create_user_duplicate_email(client):
    """Test user creation with an existing email."""
    response1 = client.post("/api/v1/users", json=user_payload())
    assert response1.status_code == 201

    response2 = client.post("/api/v1/users", json=user_payload(name="Alicia"))
    assert response2.status_code == 400
    body = response2.json()
    assert body["kind"] == "InvalidPayload"
    assert body["detail"] == "Email already exists."


def test_create_user_invalid_email(client):
    """Test user creation with a malformed email."""
    response = client.post("/api/v1/users", json=user_payload(email="not-an-email"))
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid email format"


def test_create_user_missing_fields(client):
    """Test user creation with missing fields."""
    response = client.post("/api/v1/users", json={"name": "Alice"})
    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Required fields are missing."
    assert body["context"]["missing_fields"] == ["contact", "email", "user_type"]


def test_create_user_unknown_user_type(client):
    """Test user creation with an unknown user type."""
    response = client.post("/api/v1/users", json=user_payload(user_type="Astronaut"))
    assert response.status_code == 422


def test_create_user_without_principal_uses_anonymous(client):
    """Test that requests without a principal use the anonymous one."""
    response = client.post("/api/v1/users", json=user_payload())
    assert response.status_code == 201
    assert response.json()["owner"] == "2vxsx-fae"


def test_get_user_by_id(client, make_user):
    """Test user lookup by ID."""
    user = make_user()

    response = client.get(f"/api/v1/users/{user['id']}")
    assert response.status_code == 200
    assert response.json() == user


def test_get_user_by_id_not_found(client):
    """Test user lookup with an unknown ID."""
    response = client.get("/api/v1/users/does-not-exist")
    assert response.status_code == 404
    assert response.json()["kind"] == "NotFound"
    assert response.json()["detail"] == "User not found"


def test_get_users_empty_is_not_found(client):
    """Test listing users when there are none."""
    response = client.get("/api/v1/users")
    assert response.status_code == 404
    assert response.json()["detail"] == "No users found."


def test_get_users_in_registration_order(client, make_user):
    """Test that users are listed in registration order."""
    created = [make_user(name=name) for name in ("Zebra", "Alice", "Bob")]

    response = client.get("/api/v1/users")
    assert response.status_code == 200
    assert [u["id"] for u in response.json()] == [u["id"] for u in created]


def test_get_my_profile(client, make_user):
    """Test fetching the caller's own profile."""
    make_user(name="Someone Else")
    mine = client.post(
        "/api/v1/users",
        json=user_payload(email="me@x.com"),
        headers={"X-Caller-Principal": "principal-me"}
    ).json()

    response = client.get("/api/v1/users/me", headers={"X-Caller-Principal": "principal-me"})
    assert response.status_code == 200
    assert response.json()["id"] == mine["id"]


def test_get_my_profile_not_found(client):
    """Test fetching a profile for a principal that owns none."""
    response = client.get("/api/v1/users/me", headers={"X-Caller-Principal": "stranger"})
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found for principal stranger"
