import json
from datetime import date

import pytest

from hotel.entities import DEFAULT_ROOMS, DEMO_USER, Booking, SearchCriteria, Session
from hotel.errors import StoreError
from hotel.store import (
    BOOKINGS_KEY,
    INSTALL_DISMISSED_KEY,
    ROOMS_KEY,
    SEARCH_CRITERIA_KEY,
    SELECTED_ROOM_KEY,
    PersistentStore,
)


@pytest.fixture
def store(tmp_path):
    return PersistentStore(tmp_path / "state" / "store.json")


def test_get_missing_key_returns_none(store):
    assert store.get("nothing") is None
    assert not store.has("nothing")
    assert store.keys() == []


def test_set_get_remove(store):
    store.set("answer", {"value": 42})
    assert store.get("answer") == {"value": 42}
    assert store.has("answer")

    store.set("answer", [1, 2])
    assert store.get("answer") == [1, 2]

    store.remove("answer")
    assert store.get("answer") is None
    store.remove("answer")  # removing twice is harmless


def test_writes_survive_a_new_store_handle(store):
    store.set_search_criteria(SearchCriteria(date(2025, 1, 10), date(2025, 1, 12), 2))

    reloaded = PersistentStore(store.path)
    assert reloaded.search_criteria() == SearchCriteria(date(2025, 1, 10), date(2025, 1, 12), 2)


def test_corrupt_file_reads_as_empty(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json", encoding="utf-8")

    assert store.get(ROOMS_KEY) is None
    store.set("key", "value")
    assert json.loads(store.path.read_text(encoding="utf-8")) == {"key": "value"}


def test_non_serialisable_value_is_rejected_without_writing(store):
    store.set("keep", True)
    with pytest.raises(StoreError):
        store.set("bad", {"when": date(2025, 1, 1)})
    assert store.keys() == ["keep"]


def test_typed_collections_round_trip(store):
    booking = Booking(id=1, room_id=2, check_in=date(2025, 6, 1), check_out=date(2025, 6, 3), guests=2)
    store.set_rooms(DEFAULT_ROOMS)
    store.set_users([DEMO_USER])
    store.add_booking(booking)

    assert store.rooms() == list(DEFAULT_ROOMS)
    assert store.users() == [DEMO_USER]
    assert store.bookings() == [booking]
    assert store.find_room(3).name == "Family Suite"
    assert store.find_room(99) is None


def test_malformed_records_are_skipped(store):
    store.set(ROOMS_KEY, [DEFAULT_ROOMS[0].to_dict(), {"id": 2}, "junk"])
    store.set(BOOKINGS_KEY, {"not": "a list"})

    assert store.rooms() == [DEFAULT_ROOMS[0]]
    assert store.bookings() == []


def test_overflowing_numbers_are_treated_as_malformed(store):
    store.set(ROOMS_KEY, [{"id": 1, "name": "X", "price": 100, "capacity": float("inf")}])
    store.set(SEARCH_CRITERIA_KEY, {"checkin": "2025-07-01", "checkout": "2025-07-03", "guests": float("inf")})
    store.set(SELECTED_ROOM_KEY, float("inf"))

    assert store.rooms() == []
    assert store.search_criteria() is None
    assert store.selected_room_id() is None


def test_selected_room_accepts_string_ids(store):
    assert store.selected_room_id() is None
    store.set(SELECTED_ROOM_KEY, "2")
    assert store.selected_room_id() == 2
    store.set(SELECTED_ROOM_KEY, "two")
    assert store.selected_room_id() is None


def test_session_set_and_clear(store):
    session = Session(user_id=1, email="demo@hotel.com", name="Demo User", role="user")
    store.set_session(session)
    assert store.session() == session

    store.clear_session()
    assert store.session() is None


def test_install_dismissed_flag(store):
    assert store.install_prompt_dismissed() is False
    store.set(INSTALL_DISMISSED_KEY, "true")
    assert store.install_prompt_dismissed() is True
    store.set(INSTALL_DISMISSED_KEY, "false")
    assert store.install_prompt_dismissed() is True
    store.set(INSTALL_DISMISSED_KEY, False)
    assert store.install_prompt_dismissed() is True
    store.remove(INSTALL_DISMISSED_KEY)
    store.set_install_prompt_dismissed()
    assert store.install_prompt_dismissed() is True


def test_clear_removes_everything(store):
    store.set("a", 1)
    store.clear()
    assert not store.path.exists()
    assert store.keys() == []
