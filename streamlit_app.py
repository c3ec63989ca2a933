"""Main entry point for the hotel booking multi-page Streamlit app."""

import streamlit as st

from pages_hotel_app import booking, home, rooms
from pages_hotel_app.common import register_pages

st.set_page_config(page_title="Hotel Booking", page_icon="🏨", layout="wide")

PAGES = {
    "home": st.Page(home.render, title="Home", url_path="home", default=True),
    "results": st.Page(rooms.render, title="Rooms", url_path="rooms"),
    "booking": st.Page(booking.render, title="Booking", url_path="booking"),
}
register_pages(PAGES)

st.navigation(list(PAGES.values())).run()
