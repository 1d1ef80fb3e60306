"""
Tests for /staff/bookings and /staff/store-hours.
"""

from datetime import date, time

import pytest

from staff_portal.domain.stores.service import StoreService
from staff_portal.exceptions import NotFound, ValidationFailure
from staff_portal.models import Booking, BookingStatus, OpeningHour

from .conftest import add_opening_hours


def test_bookings_without_rows_is_not_found(client, auth_headers):
    response = client.get("/staff/bookings", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


def test_bookings_include_store_details(client, auth_headers, db, staff):
    db.add_all(
        [
            Booking(user_id=staff.id, day=date(2026, 3, 3), time=time(15, 30), status=BookingStatus.CONFIRMED),
            Booking(user_id=staff.id, day=date(2026, 3, 2), time=time(10, 0), status=BookingStatus.PENDING),
        ]
    )
    db.commit()

    response = client.get("/staff/bookings", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert [b["day"] for b in data] == ["2026-03-02", "2026-03-03"]
    assert data[1] == {
        "id": data[1]["id"],
        "day": "2026-03-03",
        "time": "15:30:00",
        "status": "confirmed",
        "store_name": "Downtown Salon",
        "store_address": "12 Main Street",
    }


def test_bookings_of_other_staff_are_not_listed(client, auth_headers, db, staff):
    from staff_portal.models import User
    from staff_portal.security_utils import hash_password

    other = User(store_id=staff.store_id, email="b@example.com", name="B", password=hash_password("pw-123456"))
    db.add(other)
    db.commit()
    db.add(Booking(user_id=other.id, day=date(2026, 3, 2), time=time(9, 0)))
    db.commit()

    response = client.get("/staff/bookings", headers=auth_headers)

    assert response.status_code == 404


def test_store_hours_are_listed_monday_first(client, auth_headers, db, store):
    add_opening_hours(db, store.id, "Sunday", "10:00:00", "14:00:00")
    add_opening_hours(db, store.id, "Monday", "09:00:00", "18:00:00")

    response = client.get("/staff/store-hours", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["store_id"] == store.id
    assert data["store_name"] == "Downtown Salon"
    assert data["opening_hours"] == [
        {"day": "Monday", "opening_time": "09:00:00", "closing_time": "18:00:00"},
        {"day": "Sunday", "opening_time": "10:00:00", "closing_time": "14:00:00"},
    ]


def test_store_without_hours_is_not_found(client, auth_headers):
    response = client.get("/staff/store-hours", headers=auth_headers)

    assert response.status_code == 404


def test_unknown_store_is_not_found(db):
    with pytest.raises(NotFound):
        StoreService(db).get_opening_hours(999)


def test_set_opening_hours_replaces_existing_window(db, store):
    service = StoreService(db)
    service.set_opening_hours(store.id, "Monday", "09:00:00", "18:00:00")
    service.set_opening_hours(store.id, "Monday", "08:00:00", "20:00:00")

    db.expire_all()
    hours = db.query(OpeningHour).filter(OpeningHour.store_id == store.id).all()
    assert len(hours) == 1
    assert (hours[0].opening_time, hours[0].closing_time) == (time(8, 0), time(20, 0))


@pytest.mark.parametrize(
    "opening,closing",
    [("18:00:00", "09:00:00"), ("09:00:00", "09:00:00"), ("9h", "18:00:00")],
)
def test_set_opening_hours_rejects_bad_window(db, store, opening, closing):
    with pytest.raises(ValidationFailure):
        StoreService(db).set_opening_hours(store.id, "Monday", opening, closing)
