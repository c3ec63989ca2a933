"""Shared wiring between the Streamlit pages and the booking core."""

from typing import Any, Dict

import streamlit as st

from hotel.config import Settings
from hotel.install import InstallTracker
from hotel.store import PersistentStore
from hotel.system import INSTALL_HANDLERS, HotelBookingSystem, build_system

FLASH_KEY = "flash_message"

INSTALL_BUTTON_LABELS = {
    "signal_installable": "Offer app install",
    "accept": "Install",
    "decline": "Not now",
    "dismiss": "Don't ask again",
    "confirm_installed": "Finish install",
}

_PAGES: Dict[str, Any] = {}


def register_pages(pages: Dict[str, Any]) -> None:
    """Map navigation targets ("home", "results", "booking") to Streamlit pages."""
    _PAGES.update(pages)


@st.cache_resource(show_spinner=False)
def get_settings() -> Settings:
    return Settings.from_env()


@st.cache_resource(show_spinner=False)
def get_install_tracker() -> InstallTracker:
    """Install status is process-wide, so the tracker outlives individual page runs."""
    settings = get_settings()
    return InstallTracker(PersistentStore(settings.store_path), standalone=settings.standalone)


def _navigate(target: str) -> None:
    page = _PAGES.get(target)
    if page is not None:
        st.switch_page(page)


def _notify(message: str) -> None:
    st.session_state[FLASH_KEY] = message


def get_system() -> HotelBookingSystem:
    """A fresh controller for this page run, reading the shared store file."""
    return build_system(
        get_settings(),
        navigate=_navigate,
        notify=_notify,
        install=get_install_tracker(),
    )


def show_flash() -> None:
    message = st.session_state.pop(FLASH_KEY, None)
    if message:
        st.info(message)


def render_sidebar(system: HotelBookingSystem) -> None:
    """Login/logout controls and the install status badge."""
    with st.sidebar:
        session = system.current_session()
        if session is not None:
            st.markdown(f"**{session.name}** ({session.email})")
            if st.button("Logout", key="logout_button"):
                system.on_logout()
        else:
            with st.form("login_form"):
                email = st.text_input("Email", placeholder="demo@hotel.com")
                password = st.text_input("Password", type="password")
                if st.form_submit_button("Login"):
                    system.on_login_submitted(email, password)

        st.caption(system.install.status_label)
        actions = system.install.available_actions()
        if system.install.prompt_visible:
            st.write("Install this app for quick access.")
        for action in actions:
            if st.button(INSTALL_BUTTON_LABELS[action], key=f"install_{action}"):
                getattr(system, INSTALL_HANDLERS[action])()
                st.rerun()
