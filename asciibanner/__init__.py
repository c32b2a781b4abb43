"""Render text as ASCII-art banners from font files, with ANSI colour highlighting."""

__version__ = "0.1.0"
__all__ = ["banner", "cli", "colour", "render"]