"""
render_snapshot.py
------------------
Read-only views of a SimulationState for renderers.

A renderer receives one RenderSnapshot per frame and never touches live
simulation objects, so drawing cannot mutate gameplay state.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: int
    height: int
    direction: int
    alpha: float


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    width: int
    height: int


@dataclass(frozen=True)
class EnemyView:
    x: float
    y: float
    width: float
    height: float
    sprite_variant: str
    health_ratio: float
    is_leader: bool
    behavior: str


@dataclass(frozen=True)
class ParticleView:
    kind: str
    x: float
    y: float
    width: float
    height: float
    color: str
    alpha: float
    rotation: float
    scale: float


@dataclass(frozen=True)
class StarView:
    x: float
    y: float
    size: float
    opacity: float
    speed: float


@dataclass(frozen=True)
class HudView:
    score: int
    lives: int
    group: int
    high_score: int
    total_shots: int
    total_hits: int
    accuracy: float


@dataclass(frozen=True)
class RenderSnapshot:
    phase: str
    lightspeed_multiplier: float
    player: PlayerView
    projectiles: Tuple[ProjectileView, ...]
    enemies: Tuple[EnemyView, ...]
    particles: Tuple[ParticleView, ...]
    stars: Tuple[StarView, ...]
    hud: HudView


def build_snapshot(state) -> RenderSnapshot:
    """Copy everything a frame needs out of ``state``."""
    session = state.session
    player = state.player

    return RenderSnapshot(
        phase=session.phase.value,
        lightspeed_multiplier=state.lightspeed.multiplier,
        player=PlayerView(player.pos.x, player.pos.y, player.width, player.height,
                          player.direction, state.respawn.flash_alpha),
        projectiles=tuple(
            ProjectileView(p.pos.x, p.pos.y, p.width, p.height)
            for p in state.projectiles
        ),
        enemies=tuple(
            EnemyView(e.pos.x, e.pos.y, e.width, e.height, e.sprite_variant,
                      e.health_ratio, e.is_leader, e.behavior.name)
            for e in state.enemies
        ),
        particles=tuple(
            ParticleView(p.kind.value, p.x, p.y, p.width, p.height, p.color,
                         max(0.0, min(1.0, p.life)), p.rotation, p.scale)
            for p in state.particles.particles
        ),
        stars=tuple(
            StarView(s.x, s.y, s.size, s.opacity, s.speed)
            for s in state.starfield.stars
        ),
        hud=HudView(
            score=session.score,
            lives=session.lives,
            group=session.group_index,
            high_score=session.high_score,
            total_shots=session.total_shots,
            total_hits=session.total_hits,
            accuracy=session.accuracy,
        ),
    )
