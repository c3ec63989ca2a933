"""Durable key-value store backing every entity collection and session flag."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TypeVar

from loguru import logger

from .entities import Booking, Room, SearchCriteria, Session, User
from .errors import StoreError

DEFAULT_STORE_PATH = Path(".hotel/store.json")

ROOMS_KEY = "hotelRooms"
BOOKINGS_KEY = "hotelBookings"
USERS_KEY = "hotelUsers"
SEARCH_CRITERIA_KEY = "searchCriteria"
SELECTED_ROOM_KEY = "selectedRoom"
SESSION_KEY = "hotelUser"
INSTALL_DISMISSED_KEY = "pwaPromptDismissed"

T = TypeVar("T")

MALFORMED_RECORD_ERRORS = (KeyError, TypeError, ValueError, OverflowError)


def _load_document(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable store file {}: {}", path, exc)
        return {}
    if not isinstance(data, Mapping):
        logger.warning("Ignoring store file {}: expected a JSON object", path)
        return {}
    return dict(data)


def _save_document(path: Path, document: Mapping[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dict(document), indent=2, ensure_ascii=False), encoding="utf-8")


def _parse_records(key: str, raw: Any, parse: Callable[[Mapping[str, Any]], T]) -> List[T]:
    """Parse a stored collection, skipping entries that do not form a valid record."""
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning("Store key {} does not hold a list; treating as empty", key)
        return []
    records: List[T] = []
    for i, item in enumerate(raw):
        if not isinstance(item, Mapping):
            logger.warning("{}[{}] is not an object; skipping", key, i)
            continue
        try:
            records.append(parse(item))
        except MALFORMED_RECORD_ERRORS as exc:
            logger.warning("{}[{}] is malformed ({}); skipping", key, i, exc)
    return records


class PersistentStore:
    """
    JSON-file key-value store.

    Every read goes back to disk so that a freshly loaded page sees whatever an
    earlier page wrote, and every mutation rewrites the whole document. Keys are
    read and written independently; there is no atomicity across keys.
    """

    def __init__(self, path: Path | str = DEFAULT_STORE_PATH) -> None:
        self.path = Path(path)

    # --- raw key-value contract ------------------------------------------
    def get(self, key: str) -> Optional[Any]:
        value = _load_document(self.path).get(key)
        logger.debug("store get {} -> {}", key, "hit" if value is not None else "miss")
        return value

    def set(self, key: str, value: Any) -> None:
        try:
            json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise StoreError(f"Value for {key!r} is not JSON serialisable: {exc}") from exc
        document = _load_document(self.path)
        document[key] = value
        _save_document(self.path, document)
        logger.debug("store set {}", key)

    def remove(self, key: str) -> None:
        document = _load_document(self.path)
        if key in document:
            del document[key]
            _save_document(self.path, document)
            logger.debug("store remove {}", key)

    def has(self, key: str) -> bool:
        return key in _load_document(self.path)

    def keys(self) -> List[str]:
        return sorted(_load_document(self.path))

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
        logger.info("Cleared store {}", self.path)

    # --- typed accessors ---------------------------------------------------
    def rooms(self) -> List[Room]:
        return _parse_records(ROOMS_KEY, self.get(ROOMS_KEY), Room.from_dict)

    def set_rooms(self, rooms: Iterable[Room]) -> None:
        self.set(ROOMS_KEY, [room.to_dict() for room in rooms])

    def find_room(self, room_id: int) -> Optional[Room]:
        for room in self.rooms():
            if room.id == room_id:
                return room
        return None

    def bookings(self) -> List[Booking]:
        return _parse_records(BOOKINGS_KEY, self.get(BOOKINGS_KEY), Booking.from_dict)

    def set_bookings(self, bookings: Iterable[Booking]) -> None:
        self.set(BOOKINGS_KEY, [booking.to_dict() for booking in bookings])

    def add_booking(self, booking: Booking) -> None:
        self.set_bookings([*self.bookings(), booking])

    def users(self) -> List[User]:
        return _parse_records(USERS_KEY, self.get(USERS_KEY), User.from_dict)

    def set_users(self, users: Iterable[User]) -> None:
        self.set(USERS_KEY, [user.to_dict() for user in users])

    def search_criteria(self) -> Optional[SearchCriteria]:
        raw = self.get(SEARCH_CRITERIA_KEY)
        if not isinstance(raw, Mapping):
            return None
        try:
            return SearchCriteria.from_dict(raw)
        except MALFORMED_RECORD_ERRORS as exc:
            logger.warning("Stored search criteria are malformed ({}); ignoring", exc)
            return None

    def set_search_criteria(self, criteria: SearchCriteria) -> None:
        self.set(SEARCH_CRITERIA_KEY, criteria.to_dict())

    def selected_room_id(self) -> Optional[int]:
        raw = self.get(SELECTED_ROOM_KEY)
        if raw is None or isinstance(raw, bool):
            return None
        try:
            return int(raw)
        except (TypeError, ValueError, OverflowError):
            logger.warning("Stored room selection {!r} is not a room id; ignoring", raw)
            return None

    def set_selected_room_id(self, room_id: int) -> None:
        self.set(SELECTED_ROOM_KEY, int(room_id))

    def session(self) -> Optional[Session]:
        raw = self.get(SESSION_KEY)
        if not isinstance(raw, Mapping):
            return None
        try:
            return Session.from_dict(raw)
        except MALFORMED_RECORD_ERRORS as exc:
            logger.warning("Stored session is malformed ({}); treating as anonymous", exc)
            return None

    def set_session(self, session: Session) -> None:
        self.set(SESSION_KEY, session.to_dict())

    def clear_session(self) -> None:
        self.remove(SESSION_KEY)

    def install_prompt_dismissed(self) -> bool:
        """Any stored value counts as dismissed, whatever it holds."""
        return self.get(INSTALL_DISMISSED_KEY) is not None

    def set_install_prompt_dismissed(self) -> None:
        self.set(INSTALL_DISMISSED_KEY, True)


__all__ = [
    "BOOKINGS_KEY",
    "DEFAULT_STORE_PATH",
    "INSTALL_DISMISSED_KEY",
    "MALFORMED_RECORD_ERRORS",
    "PersistentStore",
    "ROOMS_KEY",
    "SEARCH_CRITERIA_KEY",
    "SELECTED_ROOM_KEY",
    "SESSION_KEY",
    "USERS_KEY",
]
