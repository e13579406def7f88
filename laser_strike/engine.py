"""
Engine - the Laser Strike game loop
-----------------------------------
- Owns the player, bullets, enemies, particles and the starfield
- One tick = update (input -> spawn -> move -> collide -> cleanup -> difficulty)
  followed by render
- Notifies the host through optional callbacks (score, level, lives,
  game start, game over)
- Time for enemy spawning comes from an injected clock, randomness from an
  injected random.Random, so a test can drive it frame by frame

State machine: idle --start()--> running --lives exhausted--> over
               any --reset()--> idle
"""

from __future__ import annotations

import enum
import logging
import random
import re
from dataclasses import dataclass, fields
from typing import Callable, List, Mapping, Optional, Union

from .clock import MonotonicClock
from .collision import collides, first_hit
from .difficulty import DifficultyController
from .entities import Player, Enemy, Bullet, Particle, EXPLOSION_C, HIT_C
from .errors import ConfigurationError
from .input_state import InputState
from .starfield import Starfield
from .surface import Surface

log = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


@dataclass
class GameCallbacks:
    """Host hooks; any of them may be left out"""
    on_score_change: Optional[Callable[[int], None]] = None
    on_level_change: Optional[Callable[[int], None]] = None
    on_lives_change: Optional[Callable[[int], None]] = None
    on_game_over: Optional[Callable[[], None]] = None
    on_game_start: Optional[Callable[[], None]] = None

    @classmethod
    def from_mapping(cls, hooks: Mapping[str, Callable]) -> "GameCallbacks":
        """Build from a dict of hooks; camelCase names (onScoreChange) are accepted"""
        known = {f.name for f in fields(cls)}
        picked = {}
        for name, fn in hooks.items():
            key = re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
            if key in known:
                picked[key] = fn
            else:
                log.debug("Ignoring unknown callback hook %r", name)
        return cls(**picked)


class Engine:
    """Arcade shooter engine drawing onto a host-provided surface"""

    def __init__(
        self,
        surface: Surface,
        callbacks: Union[GameCallbacks, Mapping[str, Callable], None] = None,
        *,
        clock=None,
        rng: Optional[random.Random] = None,
        starting_lives: int = 3,
        star_count: int = 100,
        player_start_offset: float = 80,
        grab_margin: float = 20,
        spawn_margin: float = 40,
        spawn_height_fraction: float = 0.7,
    ):
        if surface is None:
            raise ConfigurationError("Engine needs a rendering surface")
        width = getattr(surface, "width", None)
        height = getattr(surface, "height", None)
        if width is None or height is None:
            raise ConfigurationError("Rendering surface must expose width and height")
        if starting_lives <= 0:
            raise ConfigurationError("starting_lives must be positive")
        if star_count < 0:
            raise ConfigurationError("star_count must not be negative")

        if callbacks is None:
            callbacks = GameCallbacks()
        elif not isinstance(callbacks, GameCallbacks):
            callbacks = GameCallbacks.from_mapping(callbacks)

        self.surface = surface
        self.callbacks = callbacks
        self.clock = clock or MonotonicClock()
        self.rng = rng or random.Random()

        # Playfield
        self.width = width
        self.height = height

        # Config
        self.starting_lives = starting_lives
        self.player_start_offset = player_start_offset
        self.grab_margin = grab_margin
        self.spawn_margin = spawn_margin
        self.spawn_height_fraction = spawn_height_fraction

        # World state
        self.player: Optional[Player] = None
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []
        self.particles: List[Particle] = []
        self.star_count = star_count
        self.starfield: Optional[Starfield] = None
        if self.has_area:
            self.starfield = Starfield(width, height, count=star_count, rng=self.rng)
        else:
            log.debug("Surface is %sx%s, waiting for a resize before play", width, height)

        # Session state
        self.score = 0
        self.lives = starting_lives
        self.difficulty = DifficultyController()
        self._last_spawn: Optional[float] = None

        self.input = InputState()
        self.state = GameState.IDLE
        self.destroyed = False

    # ----------------------------
    # Properties
    # ----------------------------

    @property
    def has_area(self) -> bool:
        return self.width > 0 and self.height > 0

    @property
    def level(self) -> int:
        return self.difficulty.level

    @property
    def spawn_cadence(self) -> float:
        return self.difficulty.spawn_cadence

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state is GameState.OVER

    # ----------------------------
    # Host controls
    # ----------------------------

    def start(self):
        """Begin a session. No-op while running, after game over or after destroy."""
        if self.destroyed or self.running:
            return
        if self.game_over:
            log.debug("start() ignored in terminal state, reset() first")
            return
        if not self.has_area:
            log.warning("start() ignored, playfield is %sx%s", self.width, self.height)
            return

        self.state = GameState.RUNNING
        self.player = Player(x=self.width / 2, y=self.height - self.player_start_offset)
        self.player.clamp_to(self.width, self.height)
        log.info("Game started (%dx%d, %d lives)", self.width, self.height, self.lives)

        self._emit("on_score_change", self.score)
        self._emit("on_level_change", self.level)
        self._emit("on_lives_change", self.lives)
        self._emit("on_game_start")

    def reset(self):
        """Drop every session entity and counter; the engine goes back to idle."""
        self.player = None
        self.bullets = []
        self.enemies = []
        self.particles = []
        self.score = 0
        self.lives = self.starting_lives
        self.difficulty.reset()
        self._last_spawn = None
        self.input.clear()
        self.state = GameState.IDLE
        log.info("Game reset")

    def destroy(self):
        """Stop ticking and release the host callbacks"""
        if self.destroyed:
            return
        self.reset()
        self.callbacks = GameCallbacks()
        self.destroyed = True
        log.info("Engine destroyed")

    def resize(self, width: float, height: float):
        if self.destroyed:
            return
        if width <= 0 or height <= 0:
            log.warning("Ignoring resize to %sx%s, keeping %sx%s", width, height, self.width, self.height)
            return
        self.width = width
        self.height = height
        if self.player is not None:
            self.player.clamp_to(width, height)
        if self.starfield is None:
            self.starfield = Starfield(width, height, count=self.star_count, rng=self.rng)

    # ----------------------------
    # Input forwarding
    # ----------------------------

    def key_down(self, key: str):
        if not self.destroyed:
            self.input.press(key)

    def key_up(self, key: str):
        if not self.destroyed:
            self.input.release(key)

    def pointer_move(self, x: float, y: float):
        if self.destroyed:
            return
        self.input.set_pointer(x, y)
        if self.input.dragging and self.running and self.player is not None:
            self.player.x = x
            self.player.y = y

    def pointer_down(self, x: float, y: float):
        """Grab the ship when pressing on it, fire otherwise"""
        if self.destroyed:
            return
        self.input.set_pointer(x, y)
        if not self.running or self.player is None:
            return
        if self.player.contains(x, y, self.grab_margin):
            self.input.dragging = True
        else:
            self.fire()

    def pointer_up(self):
        self.input.dragging = False

    def fire(self):
        """Shoot one bullet from the ship along its facing angle"""
        if self.running and self.player is not None:
            self.bullets.append(Bullet.fire(self.player.x, self.player.y, self.player.angle))

    # ----------------------------
    # Frame
    # ----------------------------

    def tick(self) -> bool:
        """Run one update + render. Returns False once the engine is destroyed."""
        if self.destroyed:
            return False
        self.update()
        self.render()
        return True

    def update(self):
        if not self.running:
            return

        inputs = self.input.snapshot()
        self.player.update(inputs, self.width, self.height)
        self.player.aim_at(*inputs.pointer)

        now = self.clock.now()
        if self._last_spawn is None or now - self._last_spawn > self.spawn_cadence:
            self.spawn_enemy()
            self._last_spawn = now

        for b in self.bullets:
            b.update()
        self.bullets = [b for b in self.bullets if b.alive_in(self.width, self.height)]

        # enemies never leave by going off-screen, only by dying or ramming the player
        for e in self.enemies:
            e.update()
        self.enemies = [e for e in self.enemies if e.alive]

        self.check_collisions()

        for p in self.particles:
            p.update()
        self.particles = [p for p in self.particles if p.alive]

        if self.difficulty.update(self.score):
            self._emit("on_level_change", self.level)

        if self.lives <= 0:
            self.state = GameState.OVER
            log.info("Game over: score %d, level %d", self.score, self.level)
            self._emit("on_game_over")

    def spawn_enemy(self) -> Enemy:
        """Spawn one enemy just outside the left or right edge"""
        if self.rng.random() > 0.5:
            x = -self.spawn_margin
        else:
            x = self.width + self.spawn_margin
        y = self.rng.random() * (self.height * self.spawn_height_fraction)

        enemy = Enemy.spawn(x, y, self.level, self.width, self.height)
        self.enemies.append(enemy)
        log.debug("Spawned level %d enemy at (%.0f, %.0f)", enemy.level, x, y)
        return enemy

    def check_collisions(self):
        # Bullets vs enemies: each bullet hits at most one enemy and is used up
        remaining_bullets = []
        for b in self.bullets:
            target = first_hit(b, (e for e in self.enemies if e.alive))
            if target is None:
                remaining_bullets.append(b)
                continue

            target.take_damage()
            if not target.alive:
                self.score += target.points
                self.create_explosion(target.x, target.y)
                log.debug("Enemy destroyed (+%d, score %d)", target.points, self.score)
                self._emit("on_score_change", self.score)
        self.bullets = remaining_bullets
        self.enemies = [e for e in self.enemies if e.alive]

        # Enemies vs player: a ramming enemy is consumed so it only costs one life
        if self.player is None:
            return
        remaining_enemies = []
        for e in self.enemies:
            if collides(self.player, e):
                self.create_explosion(self.player.x, self.player.y, HIT_C)
                if self.lives > 0:
                    self.lives -= 1
                    log.debug("Player hit, %d lives left", self.lives)
                    self._emit("on_lives_change", self.lives)
            else:
                remaining_enemies.append(e)
        self.enemies = remaining_enemies

    def create_explosion(self, x: float, y: float, color=EXPLOSION_C):
        for _ in range(self.rng.randint(15, 25)):
            self.particles.append(Particle.emit(x, y, color, rng=self.rng))

    def render(self):
        if self.starfield is None:
            return
        self.starfield.draw(self.surface, self.width, self.height)
        if not self.running:
            return

        self.player.draw(self.surface)
        for b in self.bullets:
            b.draw(self.surface)
        for e in self.enemies:
            e.draw(self.surface)
        for p in self.particles:
            p.draw(self.surface)

    # ----------------------------
    # Helpers
    # ----------------------------

    def _emit(self, hook: str, *args):
        fn = getattr(self.callbacks, hook)
        if fn is not None:
            fn(*args)
