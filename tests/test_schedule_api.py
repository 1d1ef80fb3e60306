"""
Tests for the /staff/schedule endpoints.
"""

from staff_portal.models import Schedule, Weekday

from .conftest import add_opening_hours


def _count_schedules(db):
    db.expire_all()
    return db.query(Schedule).count()


def test_submit_schedule_returns_created_envelope(client, auth_headers, db, monday_hours):
    payload = {"schedules": [{"day": "Monday", "start_time": "09:00:00", "end_time": "17:00:00"}]}

    response = client.post("/staff/schedule", json=payload, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["message"]
    assert body["data"] == payload["schedules"]
    assert _count_schedules(db) == 1


def test_submit_outside_opening_hours_returns_reason(client, auth_headers, db, monday_hours):
    payload = {"schedules": [{"day": "Monday", "start_time": "08:00:00", "end_time": "17:00:00"}]}

    response = client.post("/staff/schedule", json=payload, headers=auth_headers)

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "outside_opening_hours"
    assert error["day"] == "Monday"
    assert error["opening_time"] == "09:00:00"
    assert error["closing_time"] == "18:00:00"
    assert _count_schedules(db) == 0


def test_submit_day_without_hours_rejects_batch(client, auth_headers, db, monday_hours):
    payload = {
        "schedules": [
            {"day": "Monday", "start_time": "09:00:00", "end_time": "17:00:00"},
            {"day": "Tuesday", "start_time": "09:00:00", "end_time": "17:00:00"},
        ]
    }

    response = client.post("/staff/schedule", json=payload, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"] == {"code": "opening_hours_not_found", "day": "Tuesday"}
    assert _count_schedules(db) == 0


def test_submit_with_malformed_time_is_a_validation_failure(client, auth_headers, monday_hours):
    payload = {"schedules": [{"day": "Monday", "start_time": "9am", "end_time": "17:00:00"}]}

    response = client.post("/staff/schedule", json=payload, headers=auth_headers)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "validation_failed"


def test_submit_with_end_before_start_is_rejected(client, auth_headers, monday_hours):
    payload = {"schedules": [{"day": "Monday", "start_time": "15:00:00", "end_time": "10:00:00"}]}

    response = client.post("/staff/schedule", json=payload, headers=auth_headers)

    assert response.status_code == 422


def test_submit_with_unknown_day_is_rejected(client, auth_headers, monday_hours):
    payload = {"schedules": [{"day": "Funday", "start_time": "09:00:00", "end_time": "10:00:00"}]}

    response = client.post("/staff/schedule", json=payload, headers=auth_headers)

    assert response.status_code == 422


def test_submit_empty_batch_is_rejected(client, auth_headers):
    response = client.post("/staff/schedule", json={"schedules": []}, headers=auth_headers)

    assert response.status_code == 422


def test_see_schedule_without_rows_is_not_found(client, auth_headers):
    response = client.get("/staff/schedule", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


def test_see_schedule_lists_rows_with_store_and_warning(client, auth_headers, db, staff, store):
    add_opening_hours(db, store.id, "Monday", "09:00:00", "18:00:00")
    add_opening_hours(db, store.id, "Saturday", "10:00:00", "16:00:00")
    client.post(
        "/staff/schedule",
        json={
            "schedules": [
                {"day": "Monday", "start_time": "09:00:00", "end_time": "17:00:00"},
                {"day": "Saturday", "start_time": "10:00:00", "end_time": "14:00:00"},
            ]
        },
        headers=auth_headers,
    )
    saturday = db.query(Schedule).filter(Schedule.day == Weekday.SATURDAY).one()
    saturday.is_valid = False
    db.commit()

    response = client.get("/staff/schedule", headers=auth_headers)

    assert response.status_code == 200
    items = response.json()["data"]
    assert [i["day"] for i in items] == ["Monday", "Saturday"]
    assert items[0]["error"] is None
    assert items[1]["error"]
    assert items[1]["is_valid"] is False
    assert items[0]["store_name"] == "Downtown Salon"
    assert items[0]["store_address"] == "12 Main Street"
    assert items[0]["user_id"] == staff.id
    assert items[1]["end_time"] == "14:00:00"


def test_schedule_requires_token(client):
    response = client.get("/staff/schedule")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "http_401"
