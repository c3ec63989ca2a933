from datetime import date

import pytest

from hotel.entities import DEFAULT_ROOMS, DEMO_USER, Booking, Room, SearchCriteria, Session


def test_room_round_trips_through_dict():
    room = DEFAULT_ROOMS[0]
    assert Room.from_dict(room.to_dict()) == room


def test_room_from_dict_coerces_numbers_and_dedupes_amenities():
    room = Room.from_dict(
        {
            "id": "7",
            "name": "Garden Room",
            "price": "149.50",
            "capacity": "3",
            "size": "400",
            "amenities": ["WiFi", "TV", "WiFi"],
        }
    )
    assert room.id == 7
    assert room.price == pytest.approx(149.5)
    assert room.size == 400
    assert room.amenities == ("WiFi", "TV")
    assert room.description == ""


@pytest.mark.parametrize("overrides", [{"price": 0}, {"price": -10}, {"capacity": 0}])
def test_room_rejects_non_positive_price_or_capacity(overrides):
    raw = {**DEFAULT_ROOMS[1].to_dict(), **overrides}
    with pytest.raises(ValueError):
        Room.from_dict(raw)


def test_search_criteria_accepts_browser_field_names():
    criteria = SearchCriteria.from_dict({"checkin": "2025-03-01", "checkout": "2025-03-04", "guests": "2"})
    assert criteria == SearchCriteria(date(2025, 3, 1), date(2025, 3, 4), 2)
    assert SearchCriteria.from_dict(criteria.to_dict()) == criteria


def test_search_criteria_blank_dates_are_missing():
    criteria = SearchCriteria.from_dict({"checkin": "", "checkout": "2025-03-04", "guests": ""})
    assert criteria.check_in is None
    assert criteria.guests == 1
    assert not criteria.has_dates


def test_session_excludes_password():
    session = Session.for_user(DEMO_USER)
    assert "password" not in session.to_dict()
    assert session == Session(user_id=1, email="demo@hotel.com", name="Demo User", role="user")


def test_session_reads_legacy_id_field():
    raw = {"id": 1, "email": "demo@hotel.com", "name": "Demo User", "role": "user"}
    assert Session.from_dict(raw).user_id == 1


def test_booking_round_trip_and_nights():
    booking = Booking(id=3, room_id=2, check_in=date(2025, 5, 1), check_out=date(2025, 5, 4), guests=2, user_id=1)
    assert booking.nights == 3
    assert Booking.from_dict(booking.to_dict()) == booking


def test_booking_requires_both_dates():
    with pytest.raises(ValueError):
        Booking.from_dict({"id": 1, "roomId": 1, "checkin": "2025-05-01", "guests": 1})
