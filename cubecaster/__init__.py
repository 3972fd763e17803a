"""Textured raycasting engine that loads and plays .cub scene files."""

__version__ = "0.1.0"
__all__ = ["constants", "textutil", "scene", "player", "raycast", "render", "app"]