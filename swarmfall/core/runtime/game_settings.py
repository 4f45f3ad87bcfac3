"""
game_settings.py
----------------
Centralized constants for all simulation systems.

Distances are in field units (pixels), velocities in units per tick and
durations in milliseconds of the monotonic clock handed to each tick.
"""


# ===========================================================
# Play-field & Timing
# ===========================================================

class Display:
    """Play-field size and frame pacing."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Swarmfall"


class Physics:
    """Frame timing used by the headless runner."""
    FRAME_MS: float = 1000 / Display.FPS


# ===========================================================
# Bounds & Margins
# ===========================================================

class Bounds:
    """Inset and culling margins."""
    FIELD_INSET: int = 50          # Leader/scatter turnaround distance from each edge
    ENEMY_CLEANUP_X: int = -50     # Enemies left of this are removed
    ENEMY_SPAWN_OFFSET: int = 50   # Enemies spawn this far right of the field
    ENEMY_SPAWN_MARGIN_Y: int = 100


# ===========================================================
# Entities
# ===========================================================

class PlayerDefaults:
    """Player ship defaults."""
    START_X: float = 100
    START_Y: float = Display.HEIGHT / 2
    WIDTH: int = 50
    HEIGHT: int = 50
    SPEED: float = 5
    FIRE_INTERVAL_MS: int = 700


class ProjectileDefaults:
    """Laser projectile defaults."""
    WIDTH: int = 30
    HEIGHT: int = 4
    SPEED: float = 8


class EnemyDefaults:
    """Base enemy stats before per-wave scaling."""
    WIDTH: int = 40
    HEIGHT: int = 40
    DISPLAY_SIZE: int = 40
    BASE_SPEED: float = 1.5
    BASE_HEALTH: int = 2
    SPEED_GROWTH: float = 1.07
    HEALTH_GROWTH: float = 1.1
    SPRITE_VARIANTS = ("black", "ghost", "space")


# ===========================================================
# Swarm Behavior
# ===========================================================

class Swarm:
    """Formation and scatter tuning."""
    FORMATION_SPACING: int = 60
    VERTICAL_SPEED_MIN: float = 0.3   # x enemy speed
    VERTICAL_SPEED_SPAN: float = 0.6  # x enemy speed

    INITIAL_TURN_DELAY_MS = (800, 2000)
    TURN_DELAY_MS = (600, 1600)
    DODGE_WINDOW_X: float = 100
    DODGE_WINDOW_Y: float = 40
    HOMING_DEADZONE: float = 30

    SCATTER_DURATION_MS = (1000, 4000)
    SCATTER_SPEED = (3, 5)
    SCATTER_REPEL_RADIUS: float = 100
    SCATTER_REPEL_STRENGTH: float = 2
    RETURN_SPEED_MULT: float = 3
    RETURN_SNAP_DISTANCE: float = 10


# ===========================================================
# Encounter Flow
# ===========================================================

class Waves:
    """Wave sequencing and scoring."""
    ENEMIES_PER_WAVE: int = 5
    SPAWN_DELAY_MS: int = 200
    POST_WAVE_BUFFER_MS: int = 500
    SCORE_PER_KILL: int = 100


class Lightspeed:
    """Between-wave star acceleration curve."""
    DURATION_MS: int = 4000
    MAX_MULTIPLIER: float = 20
    ACCEL_END: float = 0.4
    CRUISE_END: float = 0.6


class Respawn:
    """Post-hit sequence."""
    DURATION_MS: int = 1500
    MIN_ENEMY_DISTANCE: float = 400
    TARGET_MIN_X: float = 400
    TARGET_RIGHT_MARGIN: float = 100
    TARGET_MARGIN_Y: float = 50
    MAX_PLACEMENT_ATTEMPTS: int = 200
    FLASH_PERIOD_MS: float = 100


class Session:
    """Per-run counters."""
    STARTING_LIVES: int = 3


# ===========================================================
# Effects
# ===========================================================

class ParticleLimits:
    """Particle pool bounds and spawn throttles."""
    MAX_PARTICLES: int = 500
    EXPLOSION_BASE_COUNT: int = 20
    TRAIL_EVERY_N_TICKS: int = 2
    SPARKLE_EVERY_N_TICKS: int = 5
    SPARKLE_BATCH: int = 5
    CONFETTI_COUNT = (80, 100)
    CONFETTI_SPAWN_HEIGHT: float = 0.3  # top fraction of the field


class Starfield:
    """Background stars."""
    COUNT: int = 100
    SIZE_RANGE = (0.5, 2.5)
    SPEED_RANGE = (0.1, 0.5)
    WRAP_MARGIN: float = 10
    TWINKLE_CUTOFF: float = 5  # no twinkle at or above this multiplier


# ===========================================================
# Collision
# ===========================================================

class CollisionSettings:
    """Hit test tuning."""
    ALPHA_THRESHOLD: int = 50       # of 255, roughly 20 % opacity
    PROXIMITY_RADIUS: float = 80


class Colors:
    """Effect colors shared by spawners and the renderer."""
    PURPLE_500 = "#790ECB"
    PURPLE_300 = "#A855F7"
    WHITE = "#FFFFFF"
    GOLD = "#FFD700"
    KILL_GREEN = "#4ADE80"
    HIT_RED = "#FF4444"


# ===========================================================
# Persistence
# ===========================================================

class Persistence:
    """High score storage."""
    STORAGE_KEY: str = "swarmfallHighScore"
    DEFAULT_PATH: str = "highscore.json"
