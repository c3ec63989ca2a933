"""Results page: rooms matching the last recorded search."""

import streamlit as st

from hotel.helpers import rooms_dataframe, rooms_for_search
from pages_hotel_app.common import get_system, render_sidebar, show_flash


def render() -> None:
    """Render the rooms page."""
    system = get_system()
    render_sidebar(system)

    st.title("Available Rooms")
    show_flash()

    criteria = system.sessions.last_search()
    if criteria is not None and criteria.has_dates:
        st.caption(f"{criteria.check_in:%d %b %Y} → {criteria.check_out:%d %b %Y} • {criteria.guests} guest(s)")
    else:
        st.info("No search recorded yet; showing every room.")

    rooms = rooms_for_search(system.rooms(), criteria)
    if not rooms:
        st.warning("No rooms can host that many guests.")
        return

    st.dataframe(rooms_dataframe(rooms), hide_index=True, use_container_width=True)

    labels = {f"{room.name} (${room.price:g}/night)": room.id for room in rooms}
    choice = st.selectbox("Choose a room", list(labels), key="room_choice")
    if st.button("Book this room", type="primary"):
        system.on_room_selected(labels[choice])
