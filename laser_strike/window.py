"""
Arcade host window for Laser Strike

Forwards keyboard, mouse and resize events into the Engine, drives it from
arcade's update/draw callbacks and renders the HUD plus the start and
game-over screens from the engine's callbacks.

Run:
    python -m laser_strike
"""

from __future__ import annotations

import argparse
import logging
import random

import arcade

from .config import ENGINE_CONFIG, WINDOW_CONFIG
from .engine import Engine, GameCallbacks
from .utils import seed_everything

log = logging.getLogger(__name__)

HUD_C = (220, 220, 220)
TITLE_C = (0, 255, 136)
GAME_OVER_C = (255, 0, 85)

KEY_NAMES = {
    arcade.key.UP: "arrowup",
    arcade.key.DOWN: "arrowdown",
    arcade.key.LEFT: "arrowleft",
    arcade.key.RIGHT: "arrowright",
    arcade.key.W: "w",
    arcade.key.A: "a",
    arcade.key.S: "s",
    arcade.key.D: "d",
}


def _rgba(color, alpha: float):
    return (color[0], color[1], color[2], int(round(alpha * 255)))


class ArcadeSurface:
    """Surface adapter over arcade's draw calls.

    The engine draws with y pointing down; arcade's origin is the bottom-left
    corner, so every y coordinate is flipped against the window height.
    """

    def __init__(self, window: arcade.Window):
        self.window = window

    @property
    def width(self) -> int:
        return self.window.width

    @property
    def height(self) -> int:
        return self.window.height

    def _flip(self, y: float) -> float:
        return self.window.height - y

    def fill_rect(self, x, y, w, h, color, alpha=1.0):
        arcade.draw_lrbt_rectangle_filled(
            x, x + w, self._flip(y + h), self._flip(y), _rgba(color, alpha)
        )

    def fill_circle(self, x, y, radius, color, alpha=1.0):
        if radius <= 0:
            return
        arcade.draw_circle_filled(x, self._flip(y), radius, _rgba(color, alpha))

    def stroke_circle(self, x, y, radius, color, line_width=1.0, alpha=1.0):
        arcade.draw_circle_outline(x, self._flip(y), radius, _rgba(color, alpha), line_width)

    def fill_polygon(self, points, color, alpha=1.0):
        arcade.draw_polygon_filled([(px, self._flip(py)) for px, py in points], _rgba(color, alpha))

    def stroke_polygon(self, points, color, line_width=1.0, alpha=1.0):
        arcade.draw_polygon_outline(
            [(px, self._flip(py)) for px, py in points], _rgba(color, alpha), line_width
        )


class LaserStrikeWindow(arcade.Window):
    """Arcade window hosting one Engine"""

    def __init__(self, width: int, height: int, title: str, fps: int = 60,
                 rng: random.Random = None):
        super().__init__(width, height, title, resizable=True, update_rate=1 / fps)
        self.background_color = (10, 14, 39)

        # HUD state, fed by the engine callbacks
        self.screen = "start"
        self.score = 0
        self.level = 1
        self.lives = ENGINE_CONFIG["starting_lives"]

        self.engine = Engine(
            ArcadeSurface(self),
            GameCallbacks(
                on_score_change=self._set_score,
                on_level_change=self._set_level,
                on_lives_change=self._set_lives,
                on_game_over=self._on_game_over,
                on_game_start=self._on_game_start,
            ),
            rng=rng,
            **ENGINE_CONFIG,
        )

    # ----------------------------
    # Engine callbacks
    # ----------------------------

    def _set_score(self, score: int):
        self.score = score

    def _set_level(self, level: int):
        self.level = level

    def _set_lives(self, lives: int):
        self.lives = lives

    def _on_game_start(self):
        self.screen = "playing"

    def _on_game_over(self):
        self.screen = "game_over"

    # ----------------------------
    # Screens
    # ----------------------------

    def start_or_restart(self):
        if self.screen == "start":
            self.engine.start()
        elif self.screen == "game_over":
            self.engine.reset()
            self.engine.start()

    def on_update(self, delta_time: float):
        self.engine.update()

    def on_draw(self):
        self.engine.render()

        if self.screen == "playing":
            self._draw_hud()
        elif self.screen == "start":
            self._draw_centered([
                ("LASER STRIKE", TITLE_C, 40),
                ("Destroy enemies and survive as long as you can!", HUD_C, 16),
                ("Arrow keys or WASD to move, drag the ship to reposition", HUD_C, 14),
                ("Click to shoot", HUD_C, 14),
                ("Press ENTER or click to start", TITLE_C, 18),
            ])
        else:
            self._draw_centered([
                ("GAME OVER", GAME_OVER_C, 40),
                (f"Final Score: {self.score}", HUD_C, 18),
                (f"Level Reached: {self.level}", HUD_C, 18),
                ("Press ENTER or click to play again", TITLE_C, 18),
            ])

    def _draw_hud(self):
        top = self.height - 30
        arcade.draw_text(f"Score: {self.score}", 12, top, HUD_C, 16)
        arcade.draw_text(f"Level: {self.level}", self.width / 2, top, HUD_C, 16, anchor_x="center")
        arcade.draw_text(f"Lives: {self.lives}", self.width - 12, top, HUD_C, 16, anchor_x="right")

    def _draw_centered(self, lines):
        y = self.height / 2 + 24 * len(lines) / 2
        for text, color, size in lines:
            arcade.draw_text(text, self.width / 2, y, color, size, anchor_x="center")
            y -= size + 18

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        if symbol == arcade.key.ENTER and self.screen != "playing":
            self.start_or_restart()
            return
        name = KEY_NAMES.get(symbol)
        if name:
            self.engine.key_down(name)

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name:
            self.engine.key_up(name)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self.engine.pointer_move(x, self.height - y)

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int):
        self.engine.pointer_move(x, self.height - y)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if self.screen != "playing":
            self.start_or_restart()
            return
        self.engine.pointer_down(x, self.height - y)

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        self.engine.pointer_up()

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.engine.resize(width, height)

    def on_close(self):
        self.engine.destroy()
        super().on_close()


def main():
    parser = argparse.ArgumentParser(description="Play Laser Strike")
    parser.add_argument(
        "--width",
        type=int,
        default=WINDOW_CONFIG["width"],
        help=f"Window width (default: {WINDOW_CONFIG['width']})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=WINDOW_CONFIG["height"],
        help=f"Window height (default: {WINDOW_CONFIG['height']})",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=WINDOW_CONFIG["fps"],
        help=f"Update rate (default: {WINDOW_CONFIG['fps']})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible starfield and spawns",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    seed_everything(args.seed)

    LaserStrikeWindow(
        args.width,
        args.height,
        WINDOW_CONFIG["title"],
        fps=args.fps,
        rng=random.Random(args.seed),
    )
    arcade.run()


if __name__ == "__main__":
    main()
