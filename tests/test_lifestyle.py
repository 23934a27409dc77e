"""
Tests for diet, exercise and mental health endpoints.
"""
import pytest


# =============================================================================
# DIET RECORDS
# =============================================================================

def test_create_and_list_diet_records(client, make_user):
    """Test diet record creation and lookups."""
    user = make_user()

    response = client.post(
        "/api/v1/diet-records",
        json={"user_id": user["id"], "meal_type": "Breakfast", "food_items": "oats, banana", "calories": 350}
    )
    assert response.status_code == 201
    record = response.json()
    assert record["meal_type"] == "Breakfast"
    assert "recorded_at" in record

    assert client.get(f"/api/v1/diet-records/{record['id']}").json() == record
    assert client.get(f"/api/v1/diet-records/by-user/{user['id']}").json() == [record]
    assert client.get("/api/v1/diet-records").json() == [record]


def test_diet_record_calories_default_to_zero(client, make_user):
    """Test that calories default to 0."""
    user = make_user()

    response = client.post(
        "/api/v1/diet-records",
        json={"user_id": user["id"], "meal_type": "Dinner", "food_items": "soup"}
    )
    assert response.status_code == 201
    assert response.json()["calories"] == 0


def test_diet_record_blank_food_items(client, make_user):
    """Test that blank food items count as missing."""
    user = make_user()

    response = client.post(
        "/api/v1/diet-records",
        json={"user_id": user["id"], "meal_type": "Lunch", "food_items": ""}
    )
    assert response.status_code == 400
    assert response.json()["context"]["missing_fields"] == ["food_items"]


def test_diet_records_by_user_none_found(client, make_user):
    """Test diet lookup for a user with no records."""
    user = make_user()
    response = client.get(f"/api/v1/diet-records/by-user/{user['id']}")
    assert response.status_code == 404
    assert response.json()["detail"] == "No diet records found."


# =============================================================================
# EXERCISE RECOMMENDATIONS
# =============================================================================

def _exercise(user_id, exercise_type, intensity="Medium", duration=30):
    return {"user_id": user_id, "exercise_type": exercise_type, "duration": duration, "intensity": intensity}


def test_exercise_recommendations_by_type(client, make_user):
    """Test exercise lookup by type."""
    user = make_user()
    cardio = client.post("/api/v1/exercise-recommendations", json=_exercise(user["id"], "Cardio")).json()
    client.post("/api/v1/exercise-recommendations", json=_exercise(user["id"], "Strength"))
    cardio_again = client.post(
        "/api/v1/exercise-recommendations", json=_exercise(user["id"], "Cardio", intensity="High")
    ).json()

    response = client.get("/api/v1/exercise-recommendations/by-type/Cardio")
    assert response.status_code == 200
    assert response.json() == [cardio, cardio_again]

    none_found = client.get("/api/v1/exercise-recommendations/by-type/Flexibility")
    assert none_found.status_code == 404


def test_exercise_by_unknown_type_is_rejected(client):
    """Test exercise lookup with an unknown type."""
    response = client.get("/api/v1/exercise-recommendations/by-type/Juggling")
    assert response.status_code == 422


def test_exercise_recommendations_by_user_and_id(client, make_user):
    """Test exercise lookup by user and by ID."""
    user = make_user()
    other = make_user()
    mine = client.post("/api/v1/exercise-recommendations", json=_exercise(user["id"], "Flexibility")).json()
    client.post("/api/v1/exercise-recommendations", json=_exercise(other["id"], "Cardio"))

    assert client.get(f"/api/v1/exercise-recommendations/by-user/{user['id']}").json() == [mine]
    assert client.get(f"/api/v1/exercise-recommendations/{mine['id']}").json() == mine
    assert len(client.get("/api/v1/exercise-recommendations").json()) == 2


def test_exercise_recommendation_missing_intensity(client, make_user):
    """Test exercise creation without an intensity."""
    user = make_user()
    body = _exercise(user["id"], "Cardio")
    del body["intensity"]

    response = client.post("/api/v1/exercise-recommendations", json=body)
    assert response.status_code == 400
    assert response.json()["detail"] == "Required fields are missing."


# =============================================================================
# MENTAL HEALTH RECORDS
# =============================================================================

def test_create_and_list_mental_health_records(client, make_user):
    """Test mental health record creation and listing."""
    user = make_user()

    assert client.get("/api/v1/mental-health-records").status_code == 404

    response = client.post(
        "/api/v1/mental-health-records",
        json={"user_id": user["id"], "mood": "Anxious", "stress_level": "High", "notes": "Exams"}
    )
    assert response.status_code == 201
    record = response.json()
    assert record["mood"] == "Anxious"
    assert record["notes"] == "Exams"

    assert client.get("/api/v1/mental-health-records").json() == [record]


@pytest.mark.parametrize("field", ["mood", "stress_level"])
def test_mental_health_record_requires_mood_and_stress(client, make_user, field):
    """Test that mood and stress level are required."""
    user = make_user()
    body = {"user_id": user["id"], "mood": "Happy", "stress_level": "Low"}
    del body[field]

    response = client.post("/api/v1/mental-health-records", json=body)
    assert response.status_code == 400
    assert response.json()["context"]["missing_fields"] == [field]
