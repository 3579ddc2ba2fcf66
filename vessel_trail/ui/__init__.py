"""
UI package for the vessel trail Streamlit application.
Contains all UI components organized by functionality.
"""
