"""Room catalog resolution (remote source with built-in fallback) and first-run seeding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import requests
from loguru import logger

from .entities import DEFAULT_ROOMS, DEMO_USER, Room
from .errors import CatalogAPIError
from .store import BOOKINGS_KEY, MALFORMED_RECORD_ERRORS, ROOMS_KEY, USERS_KEY, PersistentStore

FEATURED_ROOM_COUNT = 3


class CatalogClient:
    """
    Minimal client for the read-only room catalog endpoint.

    A single GET per call; there is no retry and no caching.
    """

    DEFAULT_TIMEOUT = 10
    DEFAULT_PATH = "api/rooms.json"

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        path: str = DEFAULT_PATH,
        timeout: Optional[float] = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required.")
        self.base_url = base_url.rstrip("/") + "/"
        self.path = path.lstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or self.DEFAULT_TIMEOUT

    @property
    def url(self) -> str:
        return self.base_url + self.path

    def _request(self) -> Any:
        """GET the catalog URL and return parsed JSON data."""
        url = self.url
        try:
            resp = self.session.get(url, headers={"Accept": "application/json"}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise CatalogAPIError(f"Request to {url} failed: {exc}") from exc

        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise CatalogAPIError(f"Catalog error ({resp.status_code}) for GET {url}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise CatalogAPIError(f"Non-JSON response for GET {url}") from exc

    def fetch_rooms(self) -> List[Room]:
        """Return the remote room list, de-duplicated by room id (first occurrence wins)."""
        data = self._request()
        if isinstance(data, Mapping):
            data = data.get("rooms")
        if not isinstance(data, list):
            raise CatalogAPIError("Unexpected room catalog payload format.")

        rooms: Dict[int, Room] = {}
        for i, item in enumerate(data):
            if not isinstance(item, Mapping):
                raise CatalogAPIError(f"Room entry {i} is not an object.")
            try:
                room = Room.from_dict(item)
            except MALFORMED_RECORD_ERRORS as exc:
                raise CatalogAPIError(f"Room entry {i} is malformed: {exc}") from exc
            if room.id in rooms:
                logger.warning("Duplicate room id={} at entry {}; discarding later occurrence", room.id, i)
                continue
            rooms[room.id] = room
        return list(rooms.values())


@dataclass(frozen=True)
class RoomCatalog:
    rooms: Tuple[Room, ...]
    source: str

    @property
    def is_fallback(self) -> bool:
        return self.source == "default"


class CatalogLoader:
    """Resolves the active room catalog and seeds the store on first run."""

    def __init__(
        self,
        store: PersistentStore,
        client: Optional[CatalogClient] = None,
        *,
        default_rooms: Sequence[Room] = DEFAULT_ROOMS,
    ) -> None:
        if not default_rooms:
            raise ValueError("default_rooms must not be empty.")
        self.store = store
        self.client = client
        self.default_rooms = tuple(default_rooms)

    def load_catalog(self) -> RoomCatalog:
        """Fetch rooms once from the remote source; any failure resolves to the default catalog."""
        if self.client is None:
            logger.info("No remote catalog configured; using default rooms")
            return RoomCatalog(self.default_rooms, "default")

        try:
            rooms = self.client.fetch_rooms()
        except CatalogAPIError as exc:
            logger.warning("Using default rooms: {}", exc)
            return RoomCatalog(self.default_rooms, "default")
        except Exception as exc:
            logger.warning("Using default rooms after unexpected catalog failure: {!r}", exc)
            return RoomCatalog(self.default_rooms, "default")

        if not rooms:
            logger.warning("Remote catalog at {} is empty; using default rooms", self.client.url)
            return RoomCatalog(self.default_rooms, "default")

        logger.info("Loaded {} rooms from {}", len(rooms), self.client.url)
        return RoomCatalog(tuple(rooms), "remote")

    def load_rooms(self) -> List[Room]:
        return list(self.load_catalog().rooms)

    def featured_rooms(self, limit: int = FEATURED_ROOM_COUNT) -> List[Room]:
        return self.load_rooms()[:limit]

    def seed_if_absent(self, rooms: Optional[Sequence[Room]] = None) -> List[str]:
        """
        Write default collections for any key not yet in the store; return the keys written.

        Rooms are seeded from ``rooms`` when given, otherwise from the resolved
        catalog, so whatever the landing page features can also be booked.
        """
        defaults = {
            ROOMS_KEY: lambda: self.store.set_rooms(rooms if rooms is not None else self.load_rooms()),
            BOOKINGS_KEY: lambda: self.store.set_bookings([]),
            USERS_KEY: lambda: self.store.set_users([DEMO_USER]),
        }
        seeded: List[str] = []
        for key, write in defaults.items():
            if self.store.has(key):
                continue
            write()
            seeded.append(key)
        if seeded:
            logger.info("Seeded store {} with defaults for {}", self.store.path, ", ".join(seeded))
        return seeded


__all__ = ["CatalogClient", "CatalogLoader", "FEATURED_ROOM_COUNT", "RoomCatalog"]
