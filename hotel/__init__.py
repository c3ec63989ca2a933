from .catalog import CatalogClient, CatalogLoader, RoomCatalog
from .config import Settings
from .entities import Booking, InstallState, InstallStatus, Room, SearchCriteria, Session, User
from .errors import AuthError, CatalogAPIError, HotelBookingError, InstallStateError, StoreError, ValidationError
from .store import PersistentStore
from .system import HotelBookingSystem, build_system

__all__ = [
    "AuthError",
    "Booking",
    "CatalogAPIError",
    "CatalogClient",
    "CatalogLoader",
    "HotelBookingError",
    "HotelBookingSystem",
    "InstallState",
    "InstallStateError",
    "InstallStatus",
    "PersistentStore",
    "Room",
    "RoomCatalog",
    "SearchCriteria",
    "Session",
    "Settings",
    "StoreError",
    "User",
    "ValidationError",
    "build_system",
]
