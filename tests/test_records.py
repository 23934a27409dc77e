"""
Tests for health record and medication reminder endpoints.
"""


def _health_record(user_id, **overrides):
    record = {
        "user_id": user_id,
        "heart_rate": 72,
        "blood_pressure": "120/80",
        "activity_level": "Moderate",
        "status": "Stable",
    }
    record.update(overrides)
    return record


# =============================================================================
# HEALTH RECORDS
# =============================================================================

def test_create_health_record_success(client, make_user):
    """Test successful health record creation."""
    user = make_user()

    response = client.post("/api/v1/health-records", json=_health_record(user["id"]))
    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == user["id"]
    assert data["heart_rate"] == 72
    assert data["status"] == "Stable"
    assert data["recorded_at"] >= user["created_at"]


def test_create_health_record_user_not_found(client):
    """Test health record creation for an unknown user."""
    response = client.post("/api/v1/health-records", json=_health_record("nonexistent-id"))
    assert response.status_code == 400
    body = response.json()
    assert body["kind"] == "InvalidPayload"
    assert body["detail"] == "User not found."

    assert client.get("/api/v1/health-records").status_code == 404


def test_create_health_record_missing_fields(client, make_user):
    """Test health record creation with missing fields."""
    user = make_user()

    response = client.post(
        "/api/v1/health-records",
        json={"user_id": user["id"], "heart_rate": 72}
    )
    assert response.status_code == 400
    assert response.json()["context"]["missing_fields"] == ["blood_pressure", "status"]


def test_create_health_record_zero_heart_rate(client, make_user):
    """Test that a heart rate of 0 is reported as a missing field."""
    user = make_user()

    response = client.post("/api/v1/health-records", json=_health_record(user["id"], heart_rate=0))
    assert response.status_code == 400
    assert response.json()["detail"] == "Required fields are missing."
    assert response.json()["context"]["missing_fields"] == ["heart_rate"]


def test_create_health_record_negative_heart_rate(client, make_user):
    """Test that a negative heart rate fails validation."""
    user = make_user()

    response = client.post("/api/v1/health-records", json=_health_record(user["id"], heart_rate=-1))
    assert response.status_code == 422


def test_get_health_record_by_id(client, make_user):
    """Test health record lookup by ID."""
    user = make_user()
    created = client.post("/api/v1/health-records", json=_health_record(user["id"])).json()

    response = client.get(f"/api/v1/health-records/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    missing = client.get("/api/v1/health-records/nope")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Health record not found"


def test_get_all_health_records(client, make_user):
    """Test listing health records."""
    user = make_user()
    client.post("/api/v1/health-records", json=_health_record(user["id"]))
    client.post("/api/v1/health-records", json=_health_record(user["id"], status="Critical"))

    response = client.get("/api/v1/health-records")
    assert response.status_code == 200
    assert [r["status"] for r in response.json()] == ["Stable", "Critical"]


# =============================================================================
# MEDICATION REMINDERS
# =============================================================================

def _reminder(user_id, name):
    return {
        "user_id": user_id,
        "medication_name": name,
        "dosage": "10 mg",
        "schedule": "Every morning",
    }


def test_reminders_by_user_in_creation_order(client, make_user):
    """Test that a user's reminders come back in creation order."""
    alice = make_user()
    bob = make_user()

    first = client.post("/api/v1/medication-reminders", json=_reminder(alice["id"], "Metformin")).json()
    client.post("/api/v1/medication-reminders", json=_reminder(bob["id"], "Aspirin"))
    second = client.post("/api/v1/medication-reminders", json=_reminder(alice["id"], "Statin")).json()

    response = client.get(f"/api/v1/medication-reminders/by-user/{alice['id']}")
    assert response.status_code == 200
    assert response.json() == [first, second]


def test_reminders_by_user_none_found(client, make_user):
    """Test reminder lookup for a user with none."""
    user = make_user()

    response = client.get(f"/api/v1/medication-reminders/by-user/{user['id']}")
    assert response.status_code == 404
    assert response.json()["detail"] == "No medication reminders found."


def test_reminder_for_unknown_user(client):
    """Test reminder creation for an unknown user."""
    response = client.post("/api/v1/medication-reminders", json=_reminder("ghost", "Metformin"))
    assert response.status_code == 400
    assert response.json()["detail"] == "User not found."


def test_get_reminder_by_id_and_all(client, make_user):
    """Test reminder lookup by ID and listing."""
    user = make_user()
    created = client.post("/api/v1/medication-reminders", json=_reminder(user["id"], "Metformin")).json()

    assert client.get(f"/api/v1/medication-reminders/{created['id']}").json() == created
    assert client.get("/api/v1/medication-reminders").json() == [created]


def test_reminder_schedule_is_optional(client, make_user):
    """Test reminder creation without a schedule."""
    user = make_user()

    response = client.post(
        "/api/v1/medication-reminders",
        json={"user_id": user["id"], "medication_name": "Vitamin D", "dosage": "1000 IU"}
    )
    assert response.status_code == 201
    assert response.json()["schedule"] == ""
