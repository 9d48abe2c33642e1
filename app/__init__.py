"""Warehouse inventory API package."""
