"""Booking page: confirm the selected room for the searched dates."""

import streamlit as st

from hotel.helpers import bookings_dataframe
from pages_hotel_app.common import get_system, render_sidebar, show_flash


def render() -> None:
    """Render the booking page."""
    system = get_system()
    render_sidebar(system)

    st.title("Complete your booking")
    show_flash()

    room = system.sessions.selected_room()
    if room is None:
        st.info("Pick a room from the home or rooms page first.")
        return

    st.markdown(f"### {room.name}")
    st.write(room.description)
    st.caption(f"Sleeps {room.capacity} • ${room.price:g}/night • {', '.join(room.amenities)}")

    criteria = system.sessions.last_search()
    col1, col2, col3 = st.columns(3)
    with col1:
        checkin = st.date_input("Check-in", value=criteria.check_in if criteria else None, key="booking_checkin")
    with col2:
        checkout = st.date_input("Check-out", value=criteria.check_out if criteria else None, key="booking_checkout")
    with col3:
        guests = st.number_input(
            "Guests",
            min_value=1,
            value=min(criteria.guests, room.capacity) if criteria else 1,
            step=1,
            key="booking_guests",
        )

    if st.button("Confirm booking", type="primary"):
        system.on_booking_submitted(checkin, checkout, int(guests))
        show_flash()

    session = system.current_session()
    if session is not None:
        mine = system.sessions.bookings_for(session.user_id)
        if mine:
            st.subheader("Your bookings")
            st.dataframe(bookings_dataframe(mine, system.rooms()), hide_index=True, use_container_width=True)
