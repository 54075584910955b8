"""Isometric wireframe viewer for height-map files, with image, XPM, colour and event helpers."""

__version__ = "0.1.0"
__all__ = ["app", "colors", "events", "image", "mapfile", "render", "visual", "xpm"]