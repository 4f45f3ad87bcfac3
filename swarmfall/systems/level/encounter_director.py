"""
encounter_director.py
---------------------
Gameplay rules that tie the swarm, collisions, particles and the session
together.

Responsibilities
----------------
- Start and restart runs from the confirm input.
- Move the player, auto-fire and chain-fire projectiles.
- Resolve projectile hits: damage, kills, scoring, scatter, leader
  succession and wave completion.
- Resolve player contact: lives, respawn sequence and game over.
- Fire the one-per-run confetti burst when the high score is passed.
- Announce every outcome on the state's event channel.
"""

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import Colors, Waves
from swarmfall.core.runtime.session_stats import SessionPhase
from swarmfall.core.services.event_manager import (
    ShotFiredEvent,
    EnemyDamagedEvent,
    EnemyDestroyedEvent,
    WaveClearedEvent,
    PlayerHitEvent,
    HighScoreEvent,
    GameOverEvent,
)
from swarmfall.systems.collision.collision_manager import CollisionEngine
from swarmfall.systems.level.wave_scheduler import WaveScheduler
from swarmfall.systems.swarm.swarm_controller import SwarmController


class EncounterDirector:
    """Applies the encounter rules to a SimulationState, one step at a time."""

    def __init__(self, state, swarm: SwarmController = None,
                 collisions: CollisionEngine = None, scheduler: WaveScheduler = None):
        self.state = state
        self.swarm = swarm or SwarmController(state.rng)
        self.collisions = collisions or CollisionEngine(state.sprite_metrics)
        self.scheduler = scheduler or WaveScheduler(state)
        DebugLogger.init_entry("EncounterDirector")

    @property
    def session(self):
        return self.state.session

    # ===========================================================
    # Run Lifecycle
    # ===========================================================

    def handle_confirm(self, now) -> bool:
        """
        Apply a confirm press.

        START begins play with the fire timer set to ``now``; GAME_OVER
        resets the run and returns to START. Other phases ignore it.
        """
        phase = self.session.phase
        if phase is SessionPhase.START:
            self.state.player.last_fire_time = now
            self.session.set_phase(SessionPhase.PLAYING)
            return True
        if phase is SessionPhase.GAME_OVER:
            self.reset_run()
            return True
        return False

    def reset_run(self):
        state = self.state
        state.clear_field()
        state.player.reset_position()
        self.session.reset()
        self.session.set_phase(SessionPhase.START)
        DebugLogger.system(f"Run reset (high score {self.session.high_score})", category="session")

    # ===========================================================
    # Player
    # ===========================================================

    def update_player(self, now, intent):
        player = self.state.player
        if player.move(intent):
            self.state.particles.spawn_trail(player.pos.x, player.pos.y)
        if player.fire_due(now):
            self.fire(now)

    def fire(self, now, chained=False):
        projectile = self.state.player.fire(now)
        self.state.projectiles.append(projectile)
        self.session.record_shot()
        self.state.events.dispatch(ShotFiredEvent(
            position=(projectile.pos.x, projectile.pos.y),
            direction=projectile.direction,
            chained=chained,
        ))
        return projectile

    # ===========================================================
    # Field Updates
    # ===========================================================

    def spawn(self, now):
        return self.scheduler.update(now)

    def update_projectiles(self):
        for projectile in self.state.projectiles:
            projectile.update()
        self.state.projectiles = [
            p for p in self.state.projectiles
            if not p.has_hit and not p.is_offscreen()
        ]

    def update_enemies(self, now):
        """Move the swarm, then drop members that drifted off the left edge."""
        state = self.state
        self.swarm.update(state.enemies, state.player, state.projectiles, now)

        escaped = [e for e in state.enemies if e.is_offscreen()]
        for enemy in escaped:
            self.swarm.remove_enemy(state.enemies, enemy)
        if escaped:
            self.scheduler.requeue_escaped(len(escaped))
            DebugLogger.trace(f"{len(escaped)} enemies left the field", category="wave")

    # ===========================================================
    # Player Contact
    # ===========================================================

    def check_contact(self, now) -> bool:
        """
        Near-miss sparkles and contact damage. Stops at the first contact.

        Returns True when the player was hit this tick.
        """
        state = self.state
        player = state.player
        for enemy in reversed(state.enemies):
            if self.collisions.is_proximate(player, enemy):
                state.particles.spawn_sparkles(player.pos.x, player.pos.y)
            if self.collisions.is_contact(player, enemy):
                self.on_player_hit(now)
                return True
        return False

    def on_player_hit(self, now):
        state = self.state
        player = state.player
        x, y = player.pos.x, player.pos.y

        state.particles.spawn_explosion(x, y, Colors.HIT_RED, randomize=True)
        state.particles.spawn_explosion(x, y, Colors.PURPLE_500, randomize=True)

        lives = self.session.lose_life()
        state.events.dispatch(PlayerHitEvent(position=(x, y), lives_left=lives))
        DebugLogger.state(f"Player hit, {lives} lives left")

        if lives == 0:
            self.finish_game()
            return

        self.session.set_phase(SessionPhase.RESPAWNING)
        player.reset_position()
        state.respawn.start(now, player, state.enemies, state.rng)

    def finish_game(self):
        new_record = self._record_high_score()
        self.state.events.dispatch(GameOverEvent(score=self.session.score, new_high_score=new_record))
        DebugLogger.system(
            f"Game over: score {self.session.score}, accuracy {self.session.accuracy:.1f}%",
            category="session",
        )

    def _record_high_score(self) -> bool:
        score = self.session.score
        if self.state.score_manager.update_high_score(score):
            self.session.high_score = score
            return True
        return False

    def update_respawn(self, now):
        if self.state.respawn.update(now, self.state.enemies):
            self.session.set_phase(SessionPhase.PLAYING)

    # ===========================================================
    # Projectile Hits
    # ===========================================================

    def resolve_hits(self, now) -> int:
        """
        Test every projectile against the swarm.

        A projectile is consumed by its first hit and immediately replaced
        by a chain-fired one. Returns the number of hits.
        """
        state = self.state
        hits = 0
        for projectile in list(state.projectiles):
            for enemy in reversed(list(state.enemies)):
                if projectile.has_hit or not self.collisions.projectile_hits_enemy(projectile, enemy):
                    continue

                projectile.has_hit = True
                self.session.record_hit()
                hits += 1

                if enemy.take_damage():
                    self.on_enemy_killed(enemy, now)
                else:
                    state.particles.spawn_explosion(enemy.pos.x, enemy.pos.y, Colors.PURPLE_300)
                    state.events.dispatch(EnemyDamagedEvent(
                        position=(enemy.pos.x, enemy.pos.y), health=enemy.health))

                state.projectiles.remove(projectile)
                self.fire(now, chained=True)
                break
        return hits

    def on_enemy_killed(self, enemy, now):
        state = self.state
        session = self.session
        points = Waves.SCORE_PER_KILL * session.group_index
        session.add_score(points)
        state.particles.spawn_explosion(enemy.pos.x, enemy.pos.y, Colors.KILL_GREEN)
        self.check_confetti()

        if session.phase is SessionPhase.GAME_OVER:
            self._record_high_score()

        was_leader = enemy.is_leader
        self.swarm.scatter(state.enemies, enemy, now)
        self.swarm.remove_enemy(state.enemies, enemy)
        session.enemies_defeated_in_group += 1

        state.events.dispatch(EnemyDestroyedEvent(
            position=(enemy.pos.x, enemy.pos.y),
            group_number=enemy.group_number,
            points=points,
            was_leader=was_leader,
        ))

        if session.enemies_defeated_in_group >= Waves.ENEMIES_PER_WAVE:
            self.on_wave_cleared(now)

    def check_confetti(self) -> bool:
        """Celebrate the first time this run's score passes the high score."""
        session = self.session
        if session.confetti_spawned or session.score <= session.high_score:
            return False

        previous = session.high_score
        self.state.particles.spawn_confetti()
        session.confetti_spawned = True
        session.high_score = session.score
        self.state.events.dispatch(HighScoreEvent(score=session.score, previous=previous))
        DebugLogger.action(f"New high score {session.score} (was {previous})", category="session")
        return True

    def on_wave_cleared(self, now):
        cleared = self.session.group_index
        self.session.advance_group()
        self.state.lightspeed.start(now)
        self.scheduler.hold_for_lightspeed(now)
        self.state.events.dispatch(WaveClearedEvent(cleared_group=cleared, next_group=self.session.group_index))
        DebugLogger.system(f"Wave {cleared} cleared, next wave {self.session.group_index}", category="wave")
