"""Catalogue presentation layer."""

from catalogue.presentation.routes import router

__all__ = ["router"]
