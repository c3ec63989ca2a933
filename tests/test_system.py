from datetime import date

import pytest
import requests

from hotel.config import Settings
from hotel.entities import InstallStatus
from hotel.store import PersistentStore
from hotel.system import (
    BOOKING_VIEW,
    HOME_VIEW,
    INSTALL_HANDLERS,
    RESULTS_VIEW,
    HotelBookingSystem,
    build_system,
)


class Recorder:
    def __init__(self):
        self.navigations = []
        self.messages = []

    def navigate(self, target):
        self.navigations.append(target)

    def notify(self, message):
        self.messages.append(message)


class UnreachableSession:
    def get(self, url, headers=None, timeout=None):
        raise requests.ConnectionError("offline")


class PenthouseSession:
    def get(self, url, headers=None, timeout=None):
        return PenthouseResponse()


class PenthouseResponse:
    def raise_for_status(self):
        pass

    def json(self):
        return [{"id": 10, "name": "Penthouse", "description": "Top floor", "price": 899, "capacity": 4}]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def system(tmp_path, recorder):
    system = HotelBookingSystem(
        PersistentStore(tmp_path / "store.json"),
        navigate=recorder.navigate,
        notify=recorder.notify,
    )
    system.start()
    return system


def test_start_seeds_store_and_lists_featured_rooms(tmp_path, recorder):
    system = HotelBookingSystem(PersistentStore(tmp_path / "store.json"), notify=recorder.notify)
    landing = system.start()

    assert [room.name for room in landing["featured_rooms"]] == ["Deluxe Suite", "Executive Room", "Family Suite"]
    assert landing["catalog_source"] == "default"
    assert landing["session"] is None
    assert landing["install_status"] == "PWA: Not available"
    assert len(system.rooms()) == 3


def test_search_without_dates_prompts_and_stays(system, recorder):
    assert system.on_search_submitted(None, date(2025, 7, 2)) is False
    assert recorder.messages == ["Please select check-in and check-out dates"]
    assert recorder.navigations == []
    assert system.sessions.last_search() is None


def test_search_then_select_then_book(system, recorder):
    assert system.on_search_submitted(date(2025, 7, 1), date(2025, 7, 3), 2) is True
    system.on_room_selected(2)
    booking = system.on_booking_submitted()

    assert recorder.navigations == [RESULTS_VIEW, BOOKING_VIEW]
    assert booking.room_id == 2
    assert booking.nights == 2
    assert recorder.messages[-1] == "Booking #1 confirmed for 2 night(s)."


def test_booking_over_capacity_is_reported(system, recorder):
    system.on_room_selected(1)
    assert system.on_booking_submitted(date(2025, 7, 1), date(2025, 7, 3), 5) is None
    assert "at most 2" in recorder.messages[-1]
    assert system.store.bookings() == []


def test_login_and_logout(system, recorder):
    assert system.on_login_submitted("demo@hotel.com", "wrong") is None
    assert recorder.messages == ["Invalid credentials"]

    session = system.on_login_submitted("demo@hotel.com", "demo123")
    assert session.role == "user"
    assert system.current_session() == session
    assert recorder.navigations == [HOME_VIEW]

    system.on_logout()
    assert system.current_session() is None
    assert recorder.navigations == [HOME_VIEW, HOME_VIEW]


def test_install_handlers(system):
    assert system.on_install_accepted() is False
    assert system.on_install_available() is True
    assert system.on_install_declined() is True
    assert system.on_install_accepted() is True
    assert system.on_install_completed() is True
    assert system.install.status is InstallStatus.INSTALLED

    system.on_install_dismissed()
    assert system.store.install_prompt_dismissed()


def test_build_system_falls_back_when_catalog_unreachable(tmp_path, recorder):
    settings = Settings(store_path=tmp_path / "store.json", catalog_url="https://hotel.example", standalone=True)
    system = build_system(settings, session=UnreachableSession(), notify=recorder.notify)

    landing = system.start()
    assert landing["catalog_source"] == "default"
    assert landing["install_status"] == "PWA: Installed"
    assert system.loader.client.url == "https://hotel.example/api/rooms.json"


def test_remote_featured_room_can_be_booked(tmp_path, recorder):
    settings = Settings(store_path=tmp_path / "store.json", catalog_url="https://hotel.example")
    system = build_system(settings, session=PenthouseSession(), navigate=recorder.navigate, notify=recorder.notify)

    landing = system.start()
    assert landing["catalog_source"] == "remote"
    assert [room.name for room in landing["featured_rooms"]] == ["Penthouse"]

    system.on_room_selected(10)
    booking = system.on_booking_submitted(date(2025, 7, 1), date(2025, 7, 3), 2)

    assert booking is not None
    assert booking.room_id == 10
    assert system.store.bookings() == [booking]


def test_install_actions_drive_the_flow_to_installed(system):
    visited = []
    while system.install.available_actions():
        action = system.install.available_actions()[0]
        visited.append(action)
        getattr(system, INSTALL_HANDLERS[action])()

    assert visited == ["signal_installable", "accept", "confirm_installed"]
    assert system.install.status is InstallStatus.INSTALLED


def test_every_install_action_has_a_handler(system):
    for handler in INSTALL_HANDLERS.values():
        assert callable(getattr(system, handler))
