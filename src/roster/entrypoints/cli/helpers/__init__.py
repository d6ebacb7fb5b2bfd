"""Helpers for the ROSTER CLI."""

from .messages import error, warn
from .render import render_response, render_table

__all__ = ["error", "render_response", "render_table", "warn"]
