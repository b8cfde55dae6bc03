"""Ordering presentation layer."""

from ordering.presentation.routes import router

__all__ = ["router"]
