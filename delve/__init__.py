"""Procedural dungeon floors for tile-grid RPG maps."""
