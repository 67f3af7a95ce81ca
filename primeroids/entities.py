import math
import random
from collections import namedtuple

from . import config as cfg
from .number_theory import is_prime, factorize

HitResult = namedtuple('HitResult', ['destroyed', 'factored'])

class Controls:
    """ Snapshot of the held movement inputs for one tick. """
    def __init__(self, turn_left=False, turn_right=False, thrust=False):
        self.turn_left = turn_left
        self.turn_right = turn_right
        self.thrust = thrust

class Particle:
    def __init__(self, x, y, vx, vy, life, color):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life  # Milliseconds
        self.max_life = life
        self.color = color

    def update(self, dt):
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.life -= dt * 1000

    @property
    def alive(self):
        return self.life > 0

class Projectile:
    def __init__(self, x, y, vx, vy, life=cfg.PROJECTILE_LIFE):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life  # Milliseconds
        self.radius = cfg.PROJECTILE_RADIUS

    def update(self, dt):
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.life -= dt * 1000

    def is_expired(self, bounds):
        width, height = bounds
        margin = cfg.PROJECTILE_MARGIN
        if self.life <= 0:
            return True
        return not (-margin < self.x < width + margin and -margin < self.y < height + margin)

def asteroid_radius(number):
    return cfg.ASTEROID_BASE_RADIUS + math.log(number) * cfg.ASTEROID_RADIUS_LOG_MULTIPLIER

def roll_asteroid_number(rng=random):
    """ Draws an asteroid number, aiming for a prime with probability PRIME_CHANCE.

    Resampling is capped at NUMBER_RETRY_LIMIT draws, after which a fixed prime or
    composite is used so generation always terminates.
    """
    want_prime = rng.random() < cfg.PRIME_CHANCE
    for _ in range(cfg.NUMBER_RETRY_LIMIT):
        number = rng.randint(cfg.MIN_NUMBER, cfg.MAX_NUMBER)
        if is_prime(number) == want_prime:
            return number
    return cfg.FALLBACK_PRIME if want_prime else cfg.FALLBACK_COMPOSITE

class Asteroid:
    def __init__(self, x, y, number=None, rng=None):
        self.rng = rng or random
        self.x = x
        self.y = y

        self.number = number if number is not None else roll_asteroid_number(self.rng)
        self.is_prime = is_prime(self.number)
        self.radius = asteroid_radius(self.number)

        self.hits = 0
        self.flash_timer = 0.0  # Milliseconds

        angle = self.rng.random() * math.tau
        speed = self.rng.uniform(cfg.ASTEROID_MIN_SPEED, cfg.ASTEROID_MAX_SPEED)
        self.vx = math.cos(angle) * speed
        self.vy = math.sin(angle) * speed

        # Outline used for drawing only, collisions use self.radius
        self.points = []
        num_points = cfg.ASTEROID_MIN_POINTS + self.rng.randint(0, cfg.ASTEROID_MAX_EXTRA_POINTS - 1)
        for i in range(num_points):
            point_angle = (i / num_points) * math.tau
            variation = self.rng.uniform(cfg.ASTEROID_RADIUS_VARIATION_MIN, cfg.ASTEROID_RADIUS_VARIATION_MAX)
            self.points.append((math.cos(point_angle) * self.radius * variation,
                                math.sin(point_angle) * self.radius * variation))

    @property
    def is_flashing(self):
        return self.flash_timer > 0

    def update(self, bounds, dt):
        width, height = bounds
        self.x += self.vx * dt
        self.y += self.vy * dt

        if self.flash_timer > 0:
            self.flash_timer -= dt * 1000

        if self.x < -self.radius: self.x = width + self.radius
        elif self.x > width + self.radius: self.x = -self.radius
        if self.y < -self.radius: self.y = height + self.radius
        elif self.y > height + self.radius: self.y = -self.radius

    def hit(self, firepower_active, rng=None):
        """ Applies one projectile hit.

        Args:
            firepower_active (bool): Firepower upgrade breaks composites in one shot.
            rng: Random source for the factoring roll. Defaults to the asteroid's own.

        Returns:
            HitResult: (destroyed, factored). Primes never factor.
        """
        if self.is_prime:
            return HitResult(True, False)

        self.hits += 1

        if firepower_active:
            return HitResult(True, True)

        if self.hits >= cfg.HITS_TO_BREAK:
            roll = (rng or self.rng).random()
            if roll < cfg.FACTORIZATION_RELIABILITY:
                return HitResult(True, True)
            # Bounced: the rock is gone but leaves no factors
            return HitResult(True, False)

        self.flash_timer = cfg.HIT_FLASH_DURATION
        return HitResult(False, False)

    def factor(self, rng=None):
        """ Splits into one child asteroid per prime factor at this position. """
        rng = rng or self.rng
        children = []
        for factor in factorize(self.number):
            child = Asteroid(self.x, self.y, factor, rng=rng)
            kick_angle = rng.random() * math.tau
            child.vx += math.cos(kick_angle) * cfg.FACTOR_KICK_SPEED
            child.vy += math.sin(kick_angle) * cfg.FACTOR_KICK_SPEED
            children.append(child)
        return children

class Ship:
    def __init__(self, x, y, hull_upgrade=False, rng=None):
        self.rng = rng or random
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self.rotation = 0.0  # Radians, 0 faces right

        self.max_health = cfg.SHIP_BASE_HEALTH * (cfg.HULL_UPGRADE_MULTIPLIER if hull_upgrade else 1)
        self.health = self.max_health
        self.combat_mode = False
        self.fire_cooldown = 0.0  # Milliseconds until the next shot is allowed

        # Accrued operating costs in cents
        self.action_costs = {
            'thrust': 0.0,
            'turn': 0.0,
            'bullets': 0.0,
        }

    @property
    def can_fire(self):
        return self.fire_cooldown <= 0

    def hitbox(self):
        return cfg.HITBOX_COMBAT if self.combat_mode else cfg.HITBOX_COLLECTION

    def toggle_mode(self):
        self.combat_mode = not self.combat_mode
        return self.combat_mode

    def speed(self):
        return math.hypot(self.vx, self.vy)

    def update(self, controls, dt, particles, bounds):
        if controls.turn_left:
            self.rotation -= cfg.SHIP_TURN_SPEED * dt
            self.action_costs['turn'] += cfg.TURN_COST_PER_SECOND * dt
        if controls.turn_right:
            self.rotation += cfg.SHIP_TURN_SPEED * dt
            self.action_costs['turn'] += cfg.TURN_COST_PER_SECOND * dt

        if controls.thrust:
            heading_x = math.cos(self.rotation)
            heading_y = math.sin(self.rotation)
            self.vx += heading_x * cfg.SHIP_ACCELERATION * dt
            self.vy += heading_y * cfg.SHIP_ACCELERATION * dt
            self.action_costs['thrust'] += cfg.THRUST_COST_PER_SECOND * dt

            # Emission chance is per tick on purpose
            if self.rng.random() < cfg.THRUST_CHANCE:
                particles.append(self._thrust_particle(heading_x, heading_y))

        # Per-frame friction turned into a continuous decay rate
        damping_rate = -math.log(cfg.SHIP_FRICTION) * cfg.FRAME_RATE
        friction_factor = math.exp(-damping_rate * dt)
        self.vx *= friction_factor
        self.vy *= friction_factor

        current_speed_sq = self.vx**2 + self.vy**2
        if current_speed_sq > cfg.SHIP_MAX_SPEED**2:
            scale_factor = cfg.SHIP_MAX_SPEED / current_speed_sq**0.5
            self.vx *= scale_factor
            self.vy *= scale_factor

        self.x += self.vx * dt
        self.y += self.vy * dt

        width, height = bounds
        margin = cfg.SHIP_WRAP_MARGIN
        if self.x < -margin: self.x = width + margin
        elif self.x > width + margin: self.x = -margin
        if self.y < -margin: self.y = height + margin
        elif self.y > height + margin: self.y = -margin

        if self.fire_cooldown > 0:
            self.fire_cooldown -= dt * 1000

    def _thrust_particle(self, heading_x, heading_y):
        spread = cfg.THRUST_SPREAD
        return Particle(
            self.x - heading_x * cfg.SHIP_EXHAUST_OFFSET,
            self.y - heading_y * cfg.SHIP_EXHAUST_OFFSET,
            -heading_x * cfg.THRUST_SPEED + (self.rng.random() - 0.5) * spread,
            -heading_y * cfg.THRUST_SPEED + (self.rng.random() - 0.5) * spread,
            cfg.THRUST_LIFE,
            cfg.THRUST_COLOR,
        )

    def fire(self, projectiles, firepower_active):
        """ Fires one shot if in combat mode and off cooldown. Returns True if a shot was fired. """
        if not self.combat_mode or not self.can_fire:
            return False

        bullet_cost = cfg.BULLET_COST_BASE + (cfg.BULLET_COST_FIREPOWER if firepower_active else 0)
        self.action_costs['bullets'] += bullet_cost

        heading_x = math.cos(self.rotation)
        heading_y = math.sin(self.rotation)
        projectiles.append(Projectile(
            self.x + heading_x * cfg.SHIP_NOSE_OFFSET,
            self.y + heading_y * cfg.SHIP_NOSE_OFFSET,
            heading_x * cfg.PROJECTILE_SPEED + self.vx,
            heading_y * cfg.PROJECTILE_SPEED + self.vy,
        ))

        self.fire_cooldown = cfg.FIRE_DELAY
        return True

    def take_damage(self, amount):
        """ Returns True when this leaves the hull at zero. """
        self.health = max(0, self.health - amount)
        return self.health <= 0

    def total_action_costs(self):
        return self.action_costs['thrust'] + self.action_costs['turn'] + self.action_costs['bullets']

    def health_status(self):
        if self.health < cfg.HEALTH_DANGER_THRESHOLD:
            return 'danger'
        if self.health < cfg.HEALTH_WARNING_THRESHOLD:
            return 'warning'
        return 'ok'

def make_explosion(x, y, color, is_collection=False, rng=random):
    count = cfg.COLLECTION_COUNT if is_collection else cfg.EXPLOSION_COUNT
    particles = []
    for i in range(count):
        angle = (i / count) * math.tau
        speed = rng.uniform(cfg.EXPLOSION_MIN_SPEED, cfg.EXPLOSION_MAX_SPEED)
        particles.append(Particle(x, y, math.cos(angle) * speed, math.sin(angle) * speed,
                                  cfg.EXPLOSION_LIFE, color))
    return particles
