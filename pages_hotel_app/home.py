"""Landing page: featured rooms and the availability search form."""

from datetime import date, timedelta

import streamlit as st

from pages_hotel_app.common import get_system, render_sidebar, show_flash

MAX_GUESTS = 6


def render() -> None:
    """Render the home page."""
    system = get_system()
    landing = system.start()
    render_sidebar(system)

    st.title("Hotel Booking")
    show_flash()
    if landing["catalog_source"] == "default":
        st.caption("Showing our standard room selection.")

    st.subheader("Find a room")
    today = date.today()
    col1, col2, col3 = st.columns(3)
    with col1:
        checkin = st.date_input("Check-in", value=None, min_value=today, key="search_checkin")
    with col2:
        checkout = st.date_input(
            "Check-out",
            value=None,
            min_value=today + timedelta(days=1),
            key="search_checkout",
        )
    with col3:
        guests = st.number_input("Guests", min_value=1, max_value=MAX_GUESTS, value=1, step=1, key="search_guests")

    if st.button("Search rooms", type="primary"):
        if not system.on_search_submitted(checkin, checkout, int(guests)):
            show_flash()

    st.subheader("Featured rooms")
    columns = st.columns(max(len(landing["featured_rooms"]), 1))
    for column, room in zip(columns, landing["featured_rooms"]):
        with column:
            st.markdown(f"### {room.name}")
            st.write(room.description)
            st.caption(f"{room.capacity} guests • {room.size:g} sq ft")
            st.markdown(f"**${room.price:g}/night**")
            if st.button("Book now", key=f"book_featured_{room.id}"):
                system.on_room_selected(room.id)
