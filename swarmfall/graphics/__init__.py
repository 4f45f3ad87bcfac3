"""Starfield background, particle effects and render snapshots."""
