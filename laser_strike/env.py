"""
LaserStrikeEnv - headless Gymnasium wrapper around the engine
-------------------------------------------------------------
- Same Engine the arcade window runs, on a NullSurface with a ManualClock
  advanced by `dt` every step, so episodes are reproducible from a seed
- Discrete MultiDiscrete action space: [move(5), shoot(2), aim(8)]
- Vector observation: player state + top-K nearest enemies

Quick test:
    python -m laser_strike.env
"""

from __future__ import annotations

import math
import random
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .clock import ManualClock
from .config import ENGINE_CONFIG, ENV_CONFIG, KEY_BINDINGS, REWARD_CONFIG
from .engine import Engine
from .surface import NullSurface
from .utils import clamp, seed_everything

# move: 0 stay, 1 up, 2 down, 3 left, 4 right
MOVES = (None, "up", "down", "left", "right")


class LaserStrikeEnv(gym.Env):
    """Headless Laser Strike for agents and batch simulation"""

    metadata = {"render_modes": [], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 800,
        height: int = 600,
        dt: float = 1 / 60,
        max_steps: int = 3600,
        k_enemies: int = 5,
        aim_distance: float = 100.0,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None, "LaserStrikeEnv is headless; use laser_strike.window to watch a game."
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.aim_distance = aim_distance
        self.rewards = dict(REWARD_CONFIG, **(reward_config or {}))

        self.action_space = spaces.MultiDiscrete([5, 2, 8])

        # Player: pos(2) facing(2) lives(1) level(1)
        # Each enemy: rel pos(2) heading(2)
        obs_dim = 2 + 2 + 1 + 1 + (self.k_enemies * 4)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._clock = ManualClock()
        self.engine = Engine(
            NullSurface(width, height),
            clock=self._clock,
            rng=random.Random(),
            **ENGINE_CONFIG,
        )

        self._step_count = 0
        self._shots = 0

        # Precompute aim directions (8-way)
        self._aim_dirs = []
        for i in range(8):
            ang = (math.pi * 2) * (i / 8.0)
            self._aim_dirs.append((math.cos(ang), math.sin(ang)))

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self.engine.rng.seed(seed)

        self._step_count = 0
        self._shots = 0
        self.engine.reset()
        self.engine.start()

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, shoot, aim = int(action[0]), int(action[1]), int(action[2])
        engine = self.engine
        score_before, lives_before = engine.score, engine.lives

        self._apply_move(move)
        dx, dy = self._aim_dirs[aim % 8]
        engine.pointer_move(engine.player.x + dx * self.aim_distance,
                            engine.player.y + dy * self.aim_distance)
        shots = 0
        if shoot:
            engine.player.aim_at(*engine.input.pointer)
            engine.fire()
            shots = 1
        self._shots += shots

        self._clock.advance(self.dt)
        engine.update()

        terminated = engine.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        reward = self._compute_reward(
            engine.score - score_before, lives_before - engine.lives, shots, terminated
        )
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def close(self):
        self.engine.destroy()

    # ----------------------------
    # Helpers
    # ----------------------------

    def _apply_move(self, move: int):
        wanted = MOVES[move % len(MOVES)]
        for direction, keys in KEY_BINDINGS.items():
            if direction == wanted:
                self.engine.key_down(keys[0])
            else:
                self.engine.key_up(keys[0])

    def _get_obs(self) -> np.ndarray:
        engine = self.engine
        p = engine.player

        obs_parts = [
            (p.x / self.width) * 2 - 1,
            (p.y / self.height) * 2 - 1,
            math.cos(p.angle),
            math.sin(p.angle),
            (engine.lives / engine.starting_lives) * 2 - 1,
            clamp(engine.level / 10.0, 0, 1) * 2 - 1,
        ]

        enemies_sorted = sorted(
            engine.enemies,
            key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - p.x) / self.width, -1, 1),
                    clamp((e.y - p.y) / self.height, -1, 1),
                    math.cos(e.angle),
                    math.sin(e.angle),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, points: int, lives_lost: int, shots: int, dead: bool) -> float:
        r = self.rewards
        reward = r["R_SCORE"] * points
        reward -= r["R_LIFE"] * lives_lost
        reward -= r["R_SHOT"] * shots
        reward -= r["R_TIME"]
        if dead:
            reward -= r["R_DEATH"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        engine = self.engine
        return {
            "score": engine.score,
            "level": engine.level,
            "lives": engine.lives,
            "num_enemies": len(engine.enemies),
            "num_bullets": len(engine.bullets),
            "num_particles": len(engine.particles),
            "shots": self._shots,
            "step": self._step_count,
        }


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(seed: int = 42, max_steps: int = 3600) -> float:
    """Play one episode with random actions and return the total reward"""
    env = LaserStrikeEnv(**dict(ENV_CONFIG, max_steps=max_steps))
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.3f} "
          f"(score {info['score']}, level {info['level']}, steps {info['step']})")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode()
