"""
Configuration for the engine, the arcade host window and the headless env
"""

# Keys (lowercased names) that drive each direction
KEY_BINDINGS = {
    "up": ("arrowup", "w"),
    "down": ("arrowdown", "s"),
    "left": ("arrowleft", "a"),
    "right": ("arrowright", "d"),
}

# Engine parameters
ENGINE_CONFIG = {
    "starting_lives": 3,
    "star_count": 100,
    "player_start_offset": 80,    # distance of the spawn point above the bottom edge
    "grab_margin": 20,            # pointer-down within radius + margin grabs the ship
    "spawn_margin": 40,           # enemies appear this far outside the side edges
    "spawn_height_fraction": 0.7, # enemies spawn in the top 70% of the playfield
}

# Arcade host window
WINDOW_CONFIG = {
    "width": 1024,
    "height": 768,
    "title": "Laser Strike",
    "fps": 60,
}

# Headless environment parameters
ENV_CONFIG = {
    "width": 800,
    "height": 600,
    "dt": 1 / 60,
    "max_steps": 3600,  # 60s at 60 FPS
    "k_enemies": 5,
    "aim_distance": 100.0,
}

# Reward shaping for the headless environment
REWARD_CONFIG = {
    "R_SCORE": 0.01,   # per point scored
    "R_LIFE": 1.0,     # penalty per life lost
    "R_SHOT": 0.005,   # penalty per shot fired
    "R_TIME": 0.001,   # small time penalty
    "R_DEATH": 5.0,    # game over penalty
}
