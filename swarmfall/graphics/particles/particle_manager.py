"""
particle_manager.py
-------------------
Bounded, tick-driven particle system for gameplay effects.

All particles share one ordered list regardless of kind. A particle is a
single tagged type; kind-specific motion (gravity, drift, spin, pulsing
scale) lives in a dispatch table and runs before the shared
position/decay step.

Usage:
    particles = ParticleSystem(rng)
    particles.spawn_explosion(x, y, "#4ADE80")
    particles.update()
    particles.enforce_limit()
"""

import math
import random
from enum import Enum

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import Display, ParticleLimits, Colors
from swarmfall.core.services.config_manager import load_config


class ParticleKind(Enum):
    TRAIL = "trail"
    EXPLOSION = "explosion"
    SPARKLE = "sparkle"
    CONFETTI = "confetti"


# ===========================================================
# Presets
# ===========================================================

DEFAULT_PRESETS = {
    "trail": {
        "decay": 0.03, "size_range": [2, 4], "jitter": 0.5,
        "colors": [Colors.PURPLE_300],
    },
    "explosion": {
        "decay": 0.025, "size_range": [3, 6], "speed_range": [3, 8], "gravity": 0.2,
    },
    "sparkle": {
        "decay": 0.02, "size": 3, "jitter": 1.0,
        "colors": [Colors.PURPLE_300, Colors.WHITE, Colors.GOLD],
        "rotation_speed": 0.2, "scale_range": [0.5, 1.5], "scale_speed": 0.05,
    },
    "confetti": {
        "decay": 0.01, "size_range": [4, 8], "aspect": 1.5,
        "colors": [Colors.PURPLE_500, Colors.PURPLE_300, Colors.WHITE],
        "gravity": 0.15, "rotation_speed": 0.3, "drift": 0.5, "drift_factor": 0.1,
        "launch_vx": 8, "launch_vy_range": [3, 13],
    },
}


def _load_presets():
    """Load particle presets from config, convert ranges to tuples."""
    data = load_config("particles.json", default_dict=DEFAULT_PRESETS)

    for preset in data.values():
        if not isinstance(preset, dict):
            continue
        for key in ("size_range", "speed_range", "scale_range", "launch_vy_range"):
            if key in preset:
                preset[key] = tuple(preset[key])
        if "colors" in preset:
            preset["colors"] = tuple(preset["colors"])

    return data


PARTICLE_PRESETS = _load_presets()


# ===========================================================
# Single Particle
# ===========================================================

class Particle:
    """Individual particle. ``life`` starts at 1.0 and the particle dies at <= 0."""

    __slots__ = (
        "kind", "x", "y", "vx", "vy", "life", "decay",
        "size", "width", "height", "color",
        "gravity", "drift", "rotation", "rotation_speed",
        "scale", "scale_speed", "min_scale", "max_scale",
    )

    def __init__(self, kind, x, y, vx, vy, decay, size, color):
        self.kind = kind
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = 1.0
        self.decay = decay
        self.size = size
        self.width = size
        self.height = size
        self.color = color

        self.gravity = 0.0
        self.drift = 0.0
        self.rotation = 0.0
        self.rotation_speed = 0.0
        self.scale = 1.0
        self.scale_speed = 0.0
        self.min_scale = 1.0
        self.max_scale = 1.0

    @property
    def alive(self):
        return self.life > 0


# ===========================================================
# Kind-specific Motion
# ===========================================================

def _step_explosion(p):
    p.vy += p.gravity


def _step_sparkle(p):
    p.rotation += p.rotation_speed
    p.scale += p.scale_speed
    if p.scale > p.max_scale or p.scale < p.min_scale:
        p.scale_speed = -p.scale_speed


def _step_confetti(p):
    p.vy += p.gravity
    p.vx += p.drift
    p.rotation += p.rotation_speed


_KIND_STEPS = {
    ParticleKind.EXPLOSION: _step_explosion,
    ParticleKind.SPARKLE: _step_sparkle,
    ParticleKind.CONFETTI: _step_confetti,
}


def step_particle(p):
    """Advance one particle by one tick. Returns True while it is alive."""
    kind_step = _KIND_STEPS.get(p.kind)
    if kind_step is not None:
        kind_step(p)
    p.x += p.vx
    p.y += p.vy
    p.life -= p.decay
    return p.life > 0


# ===========================================================
# Particle System
# ===========================================================

class ParticleSystem:
    """
    Owns every live particle.

    Spawners append to the back of the list; ``enforce_limit`` drops from
    the front, so the oldest particles are evicted first.
    """

    def __init__(self, rng: random.Random = None, presets: dict = None,
                 max_particles: int = ParticleLimits.MAX_PARTICLES):
        self.rng = rng or random.Random()
        self.presets = presets or PARTICLE_PRESETS
        self.max_particles = max_particles
        self.particles = []
        self.trail_counter = 0
        self.sparkle_counter = 0

    # ===========================================================
    # Spawners
    # ===========================================================

    def spawn_explosion(self, x, y, color, intensity=1.0, randomize=False):
        """
        Radial burst of ``floor(20 x intensity)`` explosion particles.

        Angles are spread evenly around the circle, or drawn at random when
        ``randomize`` is set. Each particle gets its own speed in the preset
        range.
        """
        preset = self.presets["explosion"]
        count = int(math.floor(ParticleLimits.EXPLOSION_BASE_COUNT * intensity))
        rng = self.rng
        speed_lo, speed_hi = preset["speed_range"]
        size_lo, size_hi = preset["size_range"]

        for i in range(count):
            if randomize:
                angle = rng.random() * math.tau
            else:
                angle = (i / count) * math.tau
            speed = speed_lo + rng.random() * (speed_hi - speed_lo)
            p = Particle(ParticleKind.EXPLOSION, x, y,
                         math.cos(angle) * speed, math.sin(angle) * speed,
                         preset["decay"], size_lo + rng.random() * (size_hi - size_lo), color)
            p.gravity = preset["gravity"]
            self.particles.append(p)

        DebugLogger.trace(f"Explosion x{count} at ({x:.0f}, {y:.0f})", category="particles")
        return count

    def spawn_trail(self, x, y):
        """Throttled trail emission; emits on every Nth call. Returns True when emitted."""
        self.trail_counter += 1
        if self.trail_counter < ParticleLimits.TRAIL_EVERY_N_TICKS:
            return False
        self.trail_counter = 0

        preset = self.presets["trail"]
        rng = self.rng
        jitter = preset["jitter"]
        size_lo, size_hi = preset["size_range"]
        self.particles.append(Particle(
            ParticleKind.TRAIL, x, y,
            (rng.random() - 0.5) * jitter, (rng.random() - 0.5) * jitter,
            preset["decay"], size_lo + rng.random() * (size_hi - size_lo),
            rng.choice(preset["colors"]),
        ))
        return True

    def spawn_sparkles(self, x, y):
        """Throttled sparkle batch; emits on every Nth call. Returns the number emitted."""
        self.sparkle_counter += 1
        if self.sparkle_counter < ParticleLimits.SPARKLE_EVERY_N_TICKS:
            return 0
        self.sparkle_counter = 0

        preset = self.presets["sparkle"]
        rng = self.rng
        jitter = preset["jitter"]
        scale_lo, scale_hi = preset["scale_range"]
        for _ in range(ParticleLimits.SPARKLE_BATCH):
            p = Particle(ParticleKind.SPARKLE, x, y,
                         (rng.random() - 0.5) * jitter, (rng.random() - 0.5) * jitter,
                         preset["decay"], preset["size"], rng.choice(preset["colors"]))
            p.rotation = rng.random() * math.tau
            p.rotation_speed = (rng.random() - 0.5) * preset["rotation_speed"]
            p.scale = scale_lo + rng.random() * (scale_hi - scale_lo)
            p.scale_speed = (rng.random() - 0.5) * preset["scale_speed"]
            p.min_scale = scale_lo
            p.max_scale = scale_hi
            self.particles.append(p)
        return ParticleLimits.SPARKLE_BATCH

    def spawn_confetti(self, width=Display.WIDTH, height=Display.HEIGHT):
        """One-shot celebration burst across the top of the field. Returns the count."""
        preset = self.presets["confetti"]
        rng = self.rng
        count_lo, count_hi = ParticleLimits.CONFETTI_COUNT
        count = rng.randint(count_lo, count_hi)
        size_lo, size_hi = preset["size_range"]
        vy_lo, vy_hi = preset["launch_vy_range"]

        for _ in range(count):
            x = rng.random() * width
            y = rng.random() * height * ParticleLimits.CONFETTI_SPAWN_HEIGHT
            size = size_lo + rng.random() * (size_hi - size_lo)
            p = Particle(ParticleKind.CONFETTI, x, y,
                         (rng.random() - 0.5) * preset["launch_vx"],
                         -(vy_lo + rng.random() * (vy_hi - vy_lo)),
                         preset["decay"], size, rng.choice(preset["colors"]))
            p.width = size
            p.height = size * preset["aspect"]
            p.gravity = preset["gravity"]
            p.drift = (rng.random() - 0.5) * preset["drift"] * preset["drift_factor"]
            p.rotation = rng.random() * math.tau
            p.rotation_speed = (rng.random() - 0.5) * preset["rotation_speed"]
            self.particles.append(p)

        DebugLogger.action(f"Confetti burst x{count}", category="particles")
        return count

    # ===========================================================
    # Update
    # ===========================================================

    def update(self):
        """Advance every particle one tick and drop the dead ones."""
        self.particles = [p for p in self.particles if step_particle(p)]

    def enforce_limit(self):
        """Drop the oldest particles until the pool fits the cap. Returns the number dropped."""
        excess = len(self.particles) - self.max_particles
        if excess <= 0:
            return 0
        del self.particles[:excess]
        DebugLogger.trace(f"Evicted {excess} particles", category="particles")
        return excess

    def reset_counters(self):
        self.trail_counter = 0
        self.sparkle_counter = 0

    def clear(self):
        self.particles.clear()
        self.reset_counters()

    @property
    def count(self):
        return len(self.particles)
