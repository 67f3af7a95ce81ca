import random

from . import config as cfg
from .entities import Asteroid, Controls, make_explosion

def silent(sound_name):
    pass

class MissionState:
    def __init__(self, bounds=(cfg.SCREEN_WIDTH, cfg.SCREEN_HEIGHT), is_tutorial=False,
                 asteroid_pool=cfg.INITIAL_ASTEROIDS, firepower_active=False, sound=None, rng=None):
        self.bounds = bounds
        self.rng = rng or random
        self.sound = sound or silent
        self.systems = []
        self.on_mission_end = None  # Called once with the end reason
        self.controls = Controls()  # Replaced by the front end before each tick

        self.ship = None
        self.asteroids = []
        self.projectiles = []
        self.particles = []

        self.score = 0
        self.mission_timer = 0.0
        self.mission_duration = cfg.MISSION_DURATION
        self.asteroids_remaining = asteroid_pool
        self.current_streak = 0
        self.streak_active = True
        self.damage_taken = 0
        self.firepower_active = firepower_active

        self.is_tutorial = is_tutorial
        self.started = True
        self.mission_active = False
        self.game_over = False
        self.paused = False
        self.end_reason = None

    def add_system(self, system):
        self.systems.append(system)

    def is_running(self):
        return self.started and self.mission_active and not self.game_over and not self.paused

    def update(self, dt):
        if not self.is_running():
            return
        for system in self.systems:
            system.process(dt)
            # A mission that ended mid-tick must not be resolved any further
            if not self.mission_active:
                break

    def time_left(self):
        return max(0.0, self.mission_duration - self.mission_timer)

    # --- Spawning ---
    def spawn_asteroid(self):
        """ Takes one asteroid from the pool and places it just outside a random edge. """
        if self.asteroids_remaining <= 0:
            return None
        width, height = self.bounds
        margin = cfg.ASTEROID_SPAWN_MARGIN
        edge = self.rng.randint(0, 3)
        if edge == 0:
            x, y = self.rng.random() * width, -margin
        elif edge == 1:
            x, y = width + margin, self.rng.random() * height
        elif edge == 2:
            x, y = self.rng.random() * width, height + margin
        else:
            x, y = -margin, self.rng.random() * height

        asteroid = Asteroid(x, y, rng=self.rng)
        self.asteroids.append(asteroid)
        self.asteroids_remaining -= 1
        return asteroid

    def spawn_explosion(self, x, y, color, is_collection=False):
        self.particles.extend(make_explosion(x, y, color, is_collection, rng=self.rng))

    def play_sound(self, sound_name):
        self.sound(sound_name)

    # --- Lifecycle ---
    def activate(self):
        self.mission_active = True

    def end_mission(self, reason):
        if self.game_over:
            return
        self.game_over = True
        self.mission_active = False
        self.end_reason = reason
        print(f"Mission ended ({reason}): score={self.score}, streak={self.current_streak}, damage={self.damage_taken}")
        if self.on_mission_end:
            self.on_mission_end(reason)
