"""Tabular views over rooms and bookings for the results and booking pages."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import pandas as pd

from .entities import Booking, Room, SearchCriteria

ROOM_COLUMNS = ["Room ID", "Room", "Description", "Guests", "Size (sq ft)", "Price / night ($)", "Amenities"]
BOOKING_COLUMNS = ["Booking ID", "Room", "Check-in", "Check-out", "Nights", "Guests"]


def rooms_for_search(rooms: Iterable[Room], criteria: Optional[SearchCriteria]) -> List[Room]:
    """Rooms that fit the searched party size, cheapest first."""
    guests = criteria.guests if criteria is not None else 1
    matches = [room for room in rooms if room.capacity >= guests]
    return sorted(matches, key=lambda room: (room.price, room.id))


def rooms_dataframe(rooms: Sequence[Room]) -> pd.DataFrame:
    """Build a display table of ``rooms``, keeping their order."""
    if not rooms:
        return pd.DataFrame(columns=ROOM_COLUMNS)

    df = pd.DataFrame(
        [
            {
                "Room ID": room.id,
                "Room": room.name,
                "Description": room.description,
                "Guests": room.capacity,
                "Size (sq ft)": room.size,
                "Price / night ($)": room.price,
                "Amenities": ", ".join(room.amenities),
            }
            for room in rooms
        ],
        columns=ROOM_COLUMNS,
    )
    df["Price / night ($)"] = pd.to_numeric(df["Price / night ($)"], errors="coerce")
    return df


def bookings_dataframe(bookings: Sequence[Booking], rooms: Iterable[Room]) -> pd.DataFrame:
    if not bookings:
        return pd.DataFrame(columns=BOOKING_COLUMNS)

    names = {room.id: room.name for room in rooms}
    df = pd.DataFrame(
        [
            {
                "Booking ID": booking.id,
                "Room": names.get(booking.room_id, f"Room {booking.room_id}"),
                "Check-in": booking.check_in,
                "Check-out": booking.check_out,
                "Nights": booking.nights,
                "Guests": booking.guests,
            }
            for booking in bookings
        ],
        columns=BOOKING_COLUMNS,
    )
    return df.sort_values(by="Check-in", kind="stable").reset_index(drop=True)


__all__ = ["bookings_dataframe", "rooms_dataframe", "rooms_for_search"]
