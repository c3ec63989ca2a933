"""Record types shared by the store, catalog, session and auth layers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


def _parse_date(value: Any) -> Optional[date]:
    """Convert a date/ISO string to a date object, treating blanks as missing."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        return datetime.strptime(stripped.split("T")[0], "%Y-%m-%d").date()
    raise TypeError(f"Expected a date or YYYY-MM-DD string, got {type(value).__name__}.")


def _format_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _number(value: Any) -> float | int:
    if isinstance(value, bool):
        raise TypeError("Booleans are not valid numbers.")
    if isinstance(value, (int, float)):
        return value
    number = float(value)
    return int(number) if number.is_integer() else number


@dataclass(frozen=True)
class Room:
    id: int
    name: str
    description: str
    price: float
    capacity: int
    size: float
    amenities: Tuple[str, ...] = ()
    image: Optional[str] = None

    def __post_init__(self) -> None:
        if self.price <= 0:
            raise ValueError(f"Room {self.id} price must be positive.")
        if self.capacity < 1:
            raise ValueError(f"Room {self.id} capacity must be a positive integer.")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Room":
        """Build a room from its stored/remote JSON form."""
        amenities = raw.get("amenities") or ()
        if isinstance(amenities, str):
            amenities = (amenities,)
        return cls(
            id=int(raw["id"]),
            name=str(raw["name"]),
            description=str(raw.get("description") or ""),
            price=_number(raw["price"]),
            capacity=int(raw["capacity"]),
            size=_number(raw.get("size") or 0),
            amenities=tuple(dict.fromkeys(str(item) for item in amenities)),
            image=raw.get("image"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "capacity": self.capacity,
            "size": self.size,
            "amenities": list(self.amenities),
            "image": self.image,
        }


@dataclass(frozen=True)
class User:
    id: int
    email: str
    password: str
    name: str
    role: str = "user"

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "User":
        return cls(
            id=int(raw["id"]),
            email=str(raw["email"]),
            password=str(raw["password"]),
            name=str(raw.get("name") or ""),
            role=str(raw.get("role") or "user"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "password": self.password,
            "name": self.name,
            "role": self.role,
        }


@dataclass(frozen=True)
class Session:
    """The authenticated user as remembered between page loads (never holds the password)."""

    user_id: int
    email: str
    name: str
    role: str

    @classmethod
    def for_user(cls, user: User) -> "Session":
        return cls(user_id=user.id, email=user.email, name=user.name, role=user.role)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Session":
        return cls(
            user_id=int(_first(raw, "user_id", "id")),
            email=str(raw["email"]),
            name=str(raw.get("name") or ""),
            role=str(raw.get("role") or "user"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
        }


@dataclass(frozen=True)
class SearchCriteria:
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    guests: int = 1

    @property
    def has_dates(self) -> bool:
        return self.check_in is not None and self.check_out is not None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SearchCriteria":
        guests = _first(raw, "guests")
        return cls(
            check_in=_parse_date(_first(raw, "check_in", "checkin")),
            check_out=_parse_date(_first(raw, "check_out", "checkout")),
            guests=int(guests) if guests not in (None, "") else 1,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "check_in": _format_date(self.check_in),
            "check_out": _format_date(self.check_out),
            "guests": self.guests,
        }


@dataclass(frozen=True)
class Booking:
    id: int
    room_id: int
    check_in: date
    check_out: date
    guests: int
    user_id: Optional[int] = None

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Booking":
        check_in = _parse_date(_first(raw, "check_in", "checkin"))
        check_out = _parse_date(_first(raw, "check_out", "checkout"))
        if check_in is None or check_out is None:
            raise ValueError("Booking records need both check-in and check-out dates.")
        user_id = _first(raw, "user_id", "userId")
        return cls(
            id=int(raw["id"]),
            room_id=int(_first(raw, "room_id", "roomId")),
            check_in=check_in,
            check_out=check_out,
            guests=int(raw.get("guests") or 1),
            user_id=int(user_id) if user_id is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "room_id": self.room_id,
            "check_in": _format_date(self.check_in),
            "check_out": _format_date(self.check_out),
            "guests": self.guests,
            "user_id": self.user_id,
        }


class InstallStatus(str, Enum):
    NOT_AVAILABLE = "not_available"
    INSTALLABLE = "installable"
    INSTALLING = "installing"
    INSTALLED = "installed"


@dataclass(frozen=True)
class InstallState:
    status: InstallStatus = InstallStatus.NOT_AVAILABLE
    dismissed: bool = False
    prompt_visible: bool = False


DEMO_USER = User(id=1, email="demo@hotel.com", password="demo123", name="Demo User", role="user")

DEFAULT_ROOMS: Tuple[Room, ...] = (
    Room(
        id=1,
        name="Deluxe Suite",
        description="Spacious suite with king bed and city view",
        price=299,
        capacity=2,
        size=450,
        amenities=("WiFi", "TV", "Minibar", "AC"),
        image="room1.jpg",
    ),
    Room(
        id=2,
        name="Executive Room",
        description="Modern room with workspace and premium amenities",
        price=199,
        capacity=2,
        size=350,
        amenities=("WiFi", "TV", "Work Desk", "Coffee Maker"),
        image="room2.jpg",
    ),
    Room(
        id=3,
        name="Family Suite",
        description="Perfect for families with separate bedrooms",
        price=399,
        capacity=4,
        size=600,
        amenities=("WiFi", "2 TVs", "Kitchenette", "Sofa Bed"),
        image="room3.jpg",
    ),
)


__all__ = [
    "Booking",
    "DEFAULT_ROOMS",
    "DEMO_USER",
    "InstallState",
    "InstallStatus",
    "Room",
    "SearchCriteria",
    "Session",
    "User",
]
