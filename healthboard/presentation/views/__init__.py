"""HTML views package."""

from .status_page import render_status_page, render_ticks, render_unavailable_page

__all__ = ["render_status_page", "render_ticks", "render_unavailable_page"]
