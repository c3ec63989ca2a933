"""Controller exposing the booking core to a UI layer as explicit event handlers."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Dict, List, Optional

import requests
from loguru import logger

from .auth import AuthGate
from .catalog import FEATURED_ROOM_COUNT, CatalogClient, CatalogLoader
from .config import Settings
from .entities import Booking, Room, SearchCriteria, Session
from .errors import AuthError, InstallStateError, ValidationError
from .install import InstallTracker
from .session import SessionManager
from .store import PersistentStore

HOME_VIEW = "home"
RESULTS_VIEW = "results"
BOOKING_VIEW = "booking"

INSTALL_HANDLERS: Dict[str, str] = {
    "signal_installable": "on_install_available",
    "accept": "on_install_accepted",
    "decline": "on_install_declined",
    "dismiss": "on_install_dismissed",
    "confirm_installed": "on_install_completed",
}


def _ignore_navigation(target: str) -> None:
    logger.debug("No navigator attached; staying put instead of opening {}", target)


class HotelBookingSystem:
    """
    One controller per page load.

    The install tracker is process-wide; pass a shared one in via ``install``
    when several page loads live in the same process.

    Each ``on_*`` handler corresponds to a user or platform event. Handlers that
    can fail report the problem through ``notify`` and return ``False``/``None``
    instead of raising, leaving the store as it was.
    """

    def __init__(
        self,
        store: PersistentStore,
        loader: Optional[CatalogLoader] = None,
        *,
        navigate: Callable[[str], None] = _ignore_navigation,
        notify: Callable[[str], None] = print,
        standalone: bool = False,
        install: Optional[InstallTracker] = None,
    ) -> None:
        self.store = store
        self.loader = loader or CatalogLoader(store)
        self.sessions = SessionManager(store)
        self.auth = AuthGate(store)
        self.install = install or InstallTracker(store, standalone=standalone)
        self.navigate = navigate
        self.notify = notify

    def start(self) -> Dict[str, Any]:
        """Seed the store if needed and gather what the landing page shows."""
        catalog = self.loader.load_catalog()
        self.loader.seed_if_absent(catalog.rooms)
        return {
            "featured_rooms": self.store.rooms()[:FEATURED_ROOM_COUNT],
            "catalog_source": catalog.source,
            "session": self.sessions.current_session(),
            "install_status": self.install.status_label,
        }

    def rooms(self) -> List[Room]:
        return self.store.rooms()

    def current_session(self) -> Optional[Session]:
        return self.sessions.current_session()

    # --- search / selection / booking ----------------------------------------
    def on_search_submitted(
        self,
        check_in: Optional[date],
        check_out: Optional[date],
        guests: int = 1,
    ) -> bool:
        try:
            self.sessions.record_search(SearchCriteria(check_in=check_in, check_out=check_out, guests=guests))
        except ValidationError as exc:
            self.notify(str(exc))
            return False
        self.navigate(RESULTS_VIEW)
        return True

    def on_room_selected(self, room_id: int) -> None:
        self.sessions.select_room(room_id)
        self.navigate(BOOKING_VIEW)

    def on_booking_submitted(
        self,
        check_in: Optional[date] = None,
        check_out: Optional[date] = None,
        guests: Optional[int] = None,
    ) -> Optional[Booking]:
        try:
            booking = self.sessions.commit_booking(check_in, check_out, guests)
        except ValidationError as exc:
            self.notify(str(exc))
            return None
        self.notify(f"Booking #{booking.id} confirmed for {booking.nights} night(s).")
        return booking

    # --- login ---------------------------------------------------------------
    def on_login_submitted(self, email: str, password: str) -> Optional[Session]:
        try:
            session = self.auth.authenticate(email, password)
        except AuthError as exc:
            self.notify(str(exc))
            return None
        self.notify("Login successful!")
        self.navigate(HOME_VIEW)
        return session

    def on_logout(self) -> None:
        self.sessions.logout()
        self.navigate(HOME_VIEW)

    # --- install prompt --------------------------------------------------------
    def on_install_available(self) -> bool:
        return self.install.signal_installable()

    def _install_step(self, step: Callable[[], None]) -> bool:
        try:
            step()
        except InstallStateError as exc:
            logger.warning("{}", exc)
            return False
        return True

    def on_install_accepted(self) -> bool:
        return self._install_step(self.install.accept)

    def on_install_declined(self) -> bool:
        return self._install_step(self.install.decline)

    def on_install_completed(self) -> bool:
        return self._install_step(self.install.confirm_installed)

    def on_install_dismissed(self) -> None:
        self.install.dismiss()


def build_system(
    settings: Optional[Settings] = None,
    *,
    session: Optional[requests.Session] = None,
    navigate: Callable[[str], None] = _ignore_navigation,
    notify: Callable[[str], None] = print,
    install: Optional[InstallTracker] = None,
) -> HotelBookingSystem:
    """Wire store, catalog client and controller from ``settings`` (environment by default)."""
    settings = settings or Settings.from_env()
    store = PersistentStore(settings.store_path)
    client = None
    if settings.catalog_url:
        client = CatalogClient(settings.catalog_url, session=session, timeout=settings.catalog_timeout)
    return HotelBookingSystem(
        store,
        CatalogLoader(store, client),
        navigate=navigate,
        notify=notify,
        standalone=settings.standalone,
        install=install,
    )


__all__ = ["BOOKING_VIEW", "HOME_VIEW", "HotelBookingSystem", "INSTALL_HANDLERS", "RESULTS_VIEW", "build_system"]
