"""
Game entity dataclasses

Every entity owns its kinematic state, advances itself one frame at a time
(units are pixels per frame) and knows how to draw itself onto a Surface.
"""

from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass
from typing import Tuple

from .utils import clamp, angle_to, from_angle, rotate_points, distance

# Colors
PLAYER_C = (0, 255, 136)
BULLET_C = (255, 255, 0)
EXPLOSION_C = (0, 255, 136)
HIT_C = (255, 0, 0)
HEALTH_BAR_BG_C = (255, 0, 85)
HEALTH_BAR_C = (0, 255, 136)

# Tuning
PLAYER_RADIUS = 20.0
PLAYER_SPEED = 5.0
BULLET_SPEED = 8.0
BULLET_RADIUS = 3.0
BULLET_LIFETIME = 100
PARTICLE_DAMPING = 0.98
PARTICLE_SPREAD = 8.0
PARTICLE_RADIUS = 2.0

SHIP_OUTLINE = ((15, 0), (-15, -10), (-8, 0), (-15, 10))


def enemy_stats_for_level(level: int) -> Tuple[float, int, float, int]:
    """(radius, health, speed, points) of an enemy spawned at `level`"""
    radius = 15 + level
    health = 1 + level // 2
    speed = 1.5 + 0.3 * level
    points = 10 * level
    return radius, health, speed, points


def health_color(health: int, max_health: int) -> Tuple[int, int, int]:
    """Hue from red (empty) to green (full)"""
    frac = clamp(health / max_health, 0.0, 1.0) if max_health > 0 else 0.0
    r, g, b = colorsys.hls_to_rgb(frac * 120.0 / 360.0, 0.5, 1.0)
    return round(r * 255), round(g * 255), round(b * 255)


@dataclass
class Player:
    """Player ship"""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = PLAYER_RADIUS
    speed: float = PLAYER_SPEED
    angle: float = 0.0

    def update(self, inputs, bounds_w: float, bounds_h: float):
        """Apply directional input, integrate and clamp into the playfield.

        `inputs` exposes boolean `up`, `down`, `left` and `right`; opposite
        directions held together cancel out.
        """
        self.vx = 0.0
        self.vy = 0.0
        if inputs.up:
            self.vy -= self.speed
        if inputs.down:
            self.vy += self.speed
        if inputs.left:
            self.vx -= self.speed
        if inputs.right:
            self.vx += self.speed

        self.x += self.vx
        self.y += self.vy
        self.clamp_to(bounds_w, bounds_h)

    def clamp_to(self, bounds_w: float, bounds_h: float):
        r = self.radius
        self.x = clamp(self.x, r, bounds_w - r)
        self.y = clamp(self.y, r, bounds_h - r)

    def aim_at(self, target_x: float, target_y: float):
        self.angle = angle_to(self.x, self.y, target_x, target_y)

    def contains(self, x: float, y: float, margin: float = 0.0) -> bool:
        """True when (x, y) lies within radius + margin of the ship"""
        return distance(self.x, self.y, x, y) < self.radius + margin

    def draw(self, surface):
        hull = rotate_points(SHIP_OUTLINE, self.angle, self.x, self.y)
        surface.fill_polygon(hull, PLAYER_C)
        surface.stroke_polygon(hull, PLAYER_C, line_width=2, alpha=0.5)
        # shield
        surface.stroke_circle(self.x, self.y, self.radius, PLAYER_C, line_width=2, alpha=0.3)


@dataclass
class Enemy:
    """Enemy that flies in a straight line towards the playfield center"""
    x: float
    y: float
    level: int
    angle: float
    radius: float
    health: int
    max_health: int
    speed: float
    points: int

    @classmethod
    def spawn(cls, x: float, y: float, level: int, bounds_w: float, bounds_h: float) -> "Enemy":
        """Build an enemy for `level`, aimed once at the playfield center"""
        radius, health, speed, points = enemy_stats_for_level(level)
        return cls(
            x=x,
            y=y,
            level=level,
            angle=angle_to(x, y, bounds_w / 2, bounds_h / 2),
            radius=radius,
            health=health,
            max_health=health,
            speed=speed,
            points=points,
        )

    @property
    def alive(self) -> bool:
        return self.health > 0

    def update(self):
        dx, dy = from_angle(self.angle, self.speed)
        self.x += dx
        self.y += dy

    def take_damage(self):
        self.health -= 1

    @property
    def color(self):
        return health_color(self.health, self.max_health)

    def draw(self, surface):
        color = self.color
        surface.fill_circle(self.x, self.y, self.radius, color)
        surface.stroke_circle(self.x, self.y, self.radius, color, line_width=2)

        if self.max_health > 1:
            left = self.x - self.radius
            top = self.y + self.radius + 5
            width = self.radius * 2
            surface.fill_rect(left, top, width, 3, HEALTH_BAR_BG_C)
            surface.fill_rect(left, top, width * max(self.health, 0) / self.max_health, 3, HEALTH_BAR_C)


@dataclass
class Bullet:
    """Bullet projectile entity"""
    x: float
    y: float
    vx: float
    vy: float
    radius: float = BULLET_RADIUS
    life: int = BULLET_LIFETIME

    @classmethod
    def fire(cls, x: float, y: float, angle: float, speed: float = BULLET_SPEED) -> "Bullet":
        vx, vy = from_angle(angle, speed)
        return cls(x=x, y=y, vx=vx, vy=vy)

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.life -= 1

    def expired(self) -> bool:
        return self.life <= 0

    def in_bounds(self, bounds_w: float, bounds_h: float) -> bool:
        return 0 <= self.x <= bounds_w and 0 <= self.y <= bounds_h

    def alive_in(self, bounds_w: float, bounds_h: float) -> bool:
        """Bullets die on expiry or on leaving the playfield, whichever comes first"""
        return not self.expired() and self.in_bounds(bounds_w, bounds_h)

    def draw(self, surface):
        surface.fill_circle(self.x, self.y, self.radius, BULLET_C)
        surface.stroke_circle(self.x, self.y, self.radius, BULLET_C, line_width=2, alpha=0.8)


@dataclass
class Particle:
    """Explosion debris"""
    x: float
    y: float
    vx: float
    vy: float
    decay: float
    color: Tuple[int, int, int] = EXPLOSION_C
    life: float = 1.0

    @classmethod
    def emit(cls, x: float, y: float, color=EXPLOSION_C, rng: random.Random = None) -> "Particle":
        rng = rng or random
        return cls(
            x=x,
            y=y,
            vx=(rng.random() - 0.5) * PARTICLE_SPREAD,
            vy=(rng.random() - 0.5) * PARTICLE_SPREAD,
            decay=rng.uniform(0.01, 0.03),
            color=color,
        )

    @property
    def alive(self) -> bool:
        return self.life > 0

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.vx *= PARTICLE_DAMPING
        self.vy *= PARTICLE_DAMPING
        self.life -= self.decay

    def draw(self, surface):
        surface.fill_circle(self.x, self.y, PARTICLE_RADIUS, self.color, alpha=clamp(self.life, 0.0, 1.0))
