"""HTTP interface for charsheet."""

from .app import CharSheetApp, create_app

__all__ = ["CharSheetApp", "create_app"]
