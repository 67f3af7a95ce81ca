from . import config as cfg
from . import collision_utils

class MissionTimerSystem:
    def __init__(self, world):
        self.world = world

    def process(self, dt):
        # Training has no clock
        if self.world.is_tutorial:
            return
        self.world.mission_timer += dt
        if self.world.mission_timer >= self.world.mission_duration:
            self.world.end_mission('time')

class ShipControlSystem:
    def __init__(self, world):
        self.world = world

    def process(self, dt):
        ship = self.world.ship
        if ship is None:
            return
        ship.update(self.world.controls, dt, self.world.particles, self.world.bounds)

        # Combat mode fires on its own whenever the cooldown allows
        if ship.combat_mode and ship.fire(self.world.projectiles, self.world.firepower_active):
            self.world.play_sound('shoot')

class MovementSystem:
    def __init__(self, world):
        self.world = world

    def process(self, dt):
        for asteroid in self.world.asteroids:
            asteroid.update(self.world.bounds, dt)
        for projectile in self.world.projectiles:
            projectile.update(dt)
        for particle in self.world.particles:
            particle.update(dt)

class CleanupSystem:
    def __init__(self, world):
        self.world = world

    def process(self, dt):
        bounds = self.world.bounds
        self.world.projectiles = [p for p in self.world.projectiles if not p.is_expired(bounds)]
        self.world.particles = [p for p in self.world.particles if p.alive]

class ProjectileCollisionSystem:
    def __init__(self, world):
        self.world = world

    def process(self, dt):
        world = self.world
        for projectile in list(world.projectiles):
            for asteroid in list(world.asteroids):
                if not collision_utils.check_circle_circle_collision(
                    projectile.x, projectile.y, projectile.radius,
                    asteroid.x, asteroid.y, asteroid.radius
                ):
                    continue

                world.projectiles.remove(projectile)
                result = asteroid.hit(world.firepower_active, rng=world.rng)

                if result.destroyed:
                    world.asteroids.remove(asteroid)
                    if asteroid.is_prime:
                        # Shooting a prime wastes it
                        world.streak_active = False
                        world.spawn_explosion(asteroid.x, asteroid.y, cfg.PRIME_COLOR)
                    elif result.factored:
                        world.asteroids.extend(asteroid.factor(rng=world.rng))
                        world.play_sound('factorize')
                        world.spawn_explosion(asteroid.x, asteroid.y, cfg.COMPOSITE_COLOR)
                    else:
                        world.spawn_explosion(asteroid.x, asteroid.y, cfg.COMPOSITE_COLOR)
                else:
                    world.play_sound('shoot')
                break  # One asteroid per projectile

class ShipCollisionSystem:
    def __init__(self, world):
        self.world = world

    def process(self, dt):
        world = self.world
        ship = world.ship
        if ship is None:
            return
        width, height = ship.hitbox()

        for asteroid in list(world.asteroids):
            if not collision_utils.check_ellipse_circle_collision(
                ship.x, ship.y, ship.rotation, width, height,
                asteroid.x, asteroid.y, asteroid.radius
            ):
                continue

            world.asteroids.remove(asteroid)
            color = cfg.PRIME_COLOR if asteroid.is_prime else cfg.COMPOSITE_COLOR

            if ship.combat_mode:
                damage = cfg.PRIME_COMBAT_DAMAGE if asteroid.is_prime else cfg.COMPOSITE_COMBAT_DAMAGE
                world.streak_active = False
                self._damage_ship(damage, asteroid.x, asteroid.y, color)
            elif asteroid.is_prime:
                world.score += asteroid.number
                world.current_streak = world.current_streak + 1 if world.streak_active else 1
                world.streak_active = True
                world.play_sound('collect')
                world.spawn_explosion(asteroid.x, asteroid.y, cfg.COLLECTION_COLOR, is_collection=True)
            else:
                world.streak_active = False
                world.current_streak = 0
                self._damage_ship(asteroid.number, asteroid.x, asteroid.y, color)

            if not world.mission_active:
                return

    def _damage_ship(self, damage, x, y, color):
        world = self.world
        destroyed = world.ship.take_damage(damage)
        world.damage_taken += damage
        world.play_sound('damage')
        world.spawn_explosion(x, y, color)
        if destroyed:
            world.end_mission('destroyed')

class SpawnSystem:
    def __init__(self, world):
        self.world = world

    def process(self, dt):
        world = self.world
        if not world.is_tutorial and len(world.asteroids) < cfg.MIN_ACTIVE_ASTEROIDS and world.asteroids_remaining > 0:
            world.spawn_asteroid()

        if world.asteroids_remaining == 0 and not world.asteroids:
            world.end_mission('cleared')

def build_systems(world):
    """ Registers the per-tick pipeline. Order matters: movement before collisions, spawning last. """
    world.add_system(MissionTimerSystem(world))
    world.add_system(ShipControlSystem(world))
    world.add_system(MovementSystem(world))
    world.add_system(CleanupSystem(world))
    world.add_system(ProjectileCollisionSystem(world))
    world.add_system(ShipCollisionSystem(world))
    world.add_system(SpawnSystem(world))
    return world
