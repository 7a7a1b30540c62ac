"""Persistence for charsheet."""
