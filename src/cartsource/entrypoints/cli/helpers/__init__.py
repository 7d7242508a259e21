"""Helpers for the CARTSOURCE CLI."""

from .messages import error, success, warn

__all__ = ["error", "success", "warn"]
