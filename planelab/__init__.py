"""Plane geometry helpers: rationals, equation text, fits, a board model and a settings panel model."""

__version__ = "0.1.0"
__all__ = ["rational", "formatter", "geometry", "settings", "viewer", "panel"]