"""Stylesheets and other resources."""

from ct_gui.resources.theme import apply_theme, build_stylesheet

__all__ = ["apply_theme", "build_stylesheet"]
