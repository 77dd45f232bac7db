"""Streamlit interface adapter."""
