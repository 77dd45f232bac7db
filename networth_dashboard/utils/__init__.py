"""Utility helpers package."""
