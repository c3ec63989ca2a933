"""Search criteria, room selection and login session carried between page loads."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from loguru import logger

from .entities import Booking, Room, SearchCriteria, Session
from .errors import ValidationError, ValidationReason
from .store import PersistentStore


class SessionManager:
    def __init__(self, store: PersistentStore) -> None:
        self.store = store

    # --- search -------------------------------------------------------------
    def record_search(self, criteria: SearchCriteria) -> SearchCriteria:
        """
        Persist ``criteria`` as the latest search, replacing any earlier one.

        Raises ``ValidationError(MISSING_DATES)`` without touching the store when
        either date is absent.
        """
        if not criteria.has_dates:
            raise ValidationError(ValidationReason.MISSING_DATES)
        self.store.set_search_criteria(criteria)
        logger.info(
            "Recorded search {} -> {} for {} guest(s)",
            criteria.check_in,
            criteria.check_out,
            criteria.guests,
        )
        return criteria

    def last_search(self) -> Optional[SearchCriteria]:
        return self.store.search_criteria()

    # --- room selection -----------------------------------------------------
    def select_room(self, room_id: int) -> None:
        self.store.set_selected_room_id(room_id)
        logger.info("Selected room {}", room_id)

    def selected_room_id(self) -> Optional[int]:
        return self.store.selected_room_id()

    def selected_room(self) -> Optional[Room]:
        room_id = self.store.selected_room_id()
        if room_id is None:
            return None
        return self.store.find_room(room_id)

    # --- login session ------------------------------------------------------
    def current_session(self) -> Optional[Session]:
        return self.store.session()

    def logout(self) -> None:
        session = self.store.session()
        self.store.clear_session()
        if session is not None:
            logger.info("Logged out {}", session.email)

    # --- booking ------------------------------------------------------------
    def commit_booking(
        self,
        check_in: Optional[date] = None,
        check_out: Optional[date] = None,
        guests: Optional[int] = None,
    ) -> Booking:
        """
        Validate and store a booking for the selected room.

        Dates and guest count not given fall back to the last recorded search.
        All checks run before anything is written.
        """
        room_id = self.store.selected_room_id()
        if room_id is None:
            raise ValidationError(ValidationReason.NO_ROOM_SELECTED)
        room = self.store.find_room(room_id)
        if room is None:
            raise ValidationError(ValidationReason.UNKNOWN_ROOM)

        search = self.store.search_criteria() or SearchCriteria()
        check_in = check_in if check_in is not None else search.check_in
        check_out = check_out if check_out is not None else search.check_out
        guests = guests if guests is not None else search.guests

        if check_in is None or check_out is None:
            raise ValidationError(ValidationReason.MISSING_DATES)
        if check_out <= check_in:
            raise ValidationError(ValidationReason.INVALID_DATE_RANGE)
        if guests < 1:
            raise ValidationError(ValidationReason.INVALID_GUEST_COUNT)
        if guests > room.capacity:
            raise ValidationError(
                ValidationReason.OVER_CAPACITY,
                f"{room.name} sleeps at most {room.capacity} guest(s).",
            )

        existing = self.store.bookings()
        session = self.store.session()
        booking = Booking(
            id=max((b.id for b in existing), default=0) + 1,
            room_id=room.id,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            user_id=session.user_id if session is not None else None,
        )
        self.store.set_bookings([*existing, booking])
        logger.info("Booked {} ({} night(s)) as booking {}", room.name, booking.nights, booking.id)
        return booking

    def bookings_for(self, user_id: Optional[int] = None) -> List[Booking]:
        bookings = self.store.bookings()
        if user_id is None:
            return bookings
        return [booking for booking in bookings if booking.user_id == user_id]


__all__ = ["SessionManager"]
