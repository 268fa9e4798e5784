"""Wireframe software rasterizer with model, view and projection transforms."""

__version__ = "0.1.0"
__all__ = ["triangle", "rasterizer", "app", "basics"]