"""Application wiring and the command-line entry point."""

from gallery.pipeline.app import GalleryApp, load_config

__all__ = ["GalleryApp", "load_config"]
