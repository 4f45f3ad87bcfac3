"""
sprite_metrics.py
-----------------
Opacity lookups for enemy sprites, used by the narrow collision phase.

Responsibilities
----------------
- Report whether a sprite variant has finished loading (``loaded``).
- Expose its natural pixel size and an ``is_opaque_at(x, y)`` query.
- Build metrics from a pygame Surface via ``pygame.mask.from_surface``.
- Keep one metrics entry per sprite variant in a registry the
  simulation polls; unknown variants report "not loaded".
"""

import pygame

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import CollisionSettings, EnemyDefaults


class SpriteMetrics:
    """
    Natural-size opacity data for one sprite.

    ``opacity`` is any callable ``(x, y) -> bool`` in natural pixel space;
    the pygame adapter wraps a ``pygame.mask.Mask``.
    """

    __slots__ = ("loaded", "width", "height", "_opacity")

    def __init__(self, width=0, height=0, opacity=None, loaded=False):
        self.width = width
        self.height = height
        self._opacity = opacity
        self.loaded = loaded and opacity is not None

    def mark_loaded(self, width, height, opacity):
        """Install opacity data once the sprite is available."""
        self.width = width
        self.height = height
        self._opacity = opacity
        self.loaded = True

    def is_opaque_at(self, x: int, y: int) -> bool:
        if not self.loaded:
            raise RuntimeError("sprite metrics queried before load")
        return bool(self._opacity(x, y))

    def display_size(self, target=EnemyDefaults.DISPLAY_SIZE):
        """Size that fits the sprite in a ``target`` square keeping its aspect ratio."""
        scale = target / max(self.width, self.height)
        return self.width * scale, self.height * scale

    @classmethod
    def from_surface(cls, surface: pygame.Surface,
                     threshold: int = CollisionSettings.ALPHA_THRESHOLD):
        """Metrics where a pixel is opaque when its alpha exceeds ``threshold``."""
        # from_surface treats alpha > threshold as set, which matches "alpha > 50"
        mask = pygame.mask.from_surface(surface, threshold)
        width, height = surface.get_size()
        return cls(width, height, lambda x, y: mask.get_at((x, y)), loaded=True)


# ===========================================================
# Registry
# ===========================================================

class SpriteMetricsRegistry:
    """Sprite variant -> SpriteMetrics. Missing variants read as not loaded."""

    def __init__(self):
        self._metrics = {}

    def register(self, variant: str, metrics: SpriteMetrics):
        self._metrics[variant] = metrics
        DebugLogger.trace(f"Sprite metrics registered for '{variant}'", category="loading")

    def register_surface(self, variant: str, surface: pygame.Surface):
        metrics = SpriteMetrics.from_surface(surface)
        self.register(variant, metrics)
        return metrics

    def load_images(self, paths: dict):
        """
        Load sprite images from disk and register their masks.

        Args:
            paths: Variant name -> image path

        Returns:
            Number of variants that loaded. Failures are logged and the
            variant stays "not loaded", so collisions use the bounding box.
        """
        loaded = 0
        for variant, path in paths.items():
            try:
                surface = pygame.image.load(path)
            except (pygame.error, FileNotFoundError) as e:
                DebugLogger.warn(f"Sprite '{variant}' unavailable ({path}): {e}", category="loading")
                continue
            self.register_surface(variant, surface)
            loaded += 1
        return loaded

    def get(self, variant: str) -> SpriteMetrics:
        metrics = self._metrics.get(variant)
        if metrics is None:
            return SpriteMetrics()
        return metrics

    def is_loaded(self, variant: str) -> bool:
        return self.get(variant).loaded

    def __contains__(self, variant):
        return variant in self._metrics
