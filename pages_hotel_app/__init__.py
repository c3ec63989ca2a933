"""Streamlit pages for the hotel booking app."""
