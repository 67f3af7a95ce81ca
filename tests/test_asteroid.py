import math
import random

import pytest

from primeroids import config as cfg
from primeroids.entities import Asteroid, HitResult, asteroid_radius, roll_asteroid_number
from primeroids.number_theory import is_prime

class ScriptedRandom(random.Random):
    """ random.Random whose random() replays a fixed sequence. """
    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def random(self):
        return self.values.pop(0)

def test_generated_number_in_range_and_consistent(rng):
    for _ in range(500):
        asteroid = Asteroid(0, 0, rng=rng)
        assert cfg.MIN_NUMBER <= asteroid.number <= cfg.MAX_NUMBER
        assert asteroid.is_prime == is_prime(asteroid.number)
        assert asteroid.radius == asteroid_radius(asteroid.number)

def test_prime_share_follows_prime_chance():
    rng = random.Random(99)
    trials = 5000
    primes = sum(is_prime(roll_asteroid_number(rng)) for _ in range(trials))
    assert abs(primes / trials - cfg.PRIME_CHANCE) < 0.03

def test_number_generation_falls_back_after_retry_cap(monkeypatch):
    class AlwaysFour(random.Random):
        def randint(self, a, b):
            return 4

    monkeypatch.setattr(cfg, 'PRIME_CHANCE', 1.0)
    assert roll_asteroid_number(AlwaysFour(0)) == cfg.FALLBACK_PRIME
    monkeypatch.setattr(cfg, 'PRIME_CHANCE', 0.0)

    class AlwaysFive(random.Random):
        def randint(self, a, b):
            return 5

    assert roll_asteroid_number(AlwaysFive(0)) == cfg.FALLBACK_COMPOSITE

def test_radius_strictly_increasing():
    radii = [asteroid_radius(n) for n in range(2, 500)]
    assert all(a < b for a, b in zip(radii, radii[1:]))
    assert asteroid_radius(12) == asteroid_radius(12)

def test_velocity_and_outline_within_configured_bands(rng):
    asteroid = Asteroid(0, 0, 15, rng=rng)
    speed = math.hypot(asteroid.vx, asteroid.vy)
    assert cfg.ASTEROID_MIN_SPEED - 1e-9 <= speed <= cfg.ASTEROID_MAX_SPEED + 1e-9
    assert cfg.ASTEROID_MIN_POINTS <= len(asteroid.points) < cfg.ASTEROID_MIN_POINTS + cfg.ASTEROID_MAX_EXTRA_POINTS
    for px, py in asteroid.points:
        distance = math.hypot(px, py)
        assert asteroid.radius * cfg.ASTEROID_RADIUS_VARIATION_MIN - 1e-9 <= distance
        assert distance <= asteroid.radius * cfg.ASTEROID_RADIUS_VARIATION_MAX + 1e-9

def test_update_moves_and_wraps(rng):
    asteroid = Asteroid(100, 100, 7, rng=rng)
    asteroid.vx, asteroid.vy = 50, -20
    asteroid.update((800, 600), 0.5)
    assert asteroid.x == pytest.approx(125)
    assert asteroid.y == pytest.approx(90)

    asteroid.x = 800 + asteroid.radius + 1
    asteroid.vx = asteroid.vy = 0
    asteroid.update((800, 600), 0.016)
    assert asteroid.x == -asteroid.radius

    asteroid.y = -asteroid.radius - 1
    asteroid.update((800, 600), 0.016)
    assert asteroid.y == 600 + asteroid.radius

def test_flash_timer_counts_down_in_milliseconds(rng):
    asteroid = Asteroid(0, 0, 6, rng=rng)
    asteroid.hit(False)
    assert asteroid.flash_timer == cfg.HIT_FLASH_DURATION
    assert asteroid.is_flashing
    asteroid.update((800, 600), 0.1)
    assert asteroid.flash_timer == pytest.approx(cfg.HIT_FLASH_DURATION - 100)
    asteroid.update((800, 600), 0.1)
    assert not asteroid.is_flashing

@pytest.mark.parametrize("firepower", [False, True])
def test_prime_is_destroyed_without_factoring(rng, firepower):
    asteroid = Asteroid(0, 0, 13, rng=rng)
    assert asteroid.hit(firepower) == HitResult(True, False)

def test_firepower_breaks_composite_on_first_hit(rng):
    asteroid = Asteroid(0, 0, 20, rng=rng)
    assert asteroid.hit(True) == HitResult(True, True)

def test_composite_needs_two_hits(rng):
    asteroid = Asteroid(0, 0, 20, rng=rng)
    first = asteroid.hit(False)
    assert first == HitResult(False, False)
    assert asteroid.hits == 1
    second = asteroid.hit(False, rng=ScriptedRandom([0.1]))
    assert second == HitResult(True, True)

def test_second_hit_can_bounce(rng):
    asteroid = Asteroid(0, 0, 20, rng=rng)
    asteroid.hit(False)
    assert asteroid.hit(False, rng=ScriptedRandom([0.95])) == HitResult(True, False)

def test_factoring_reliability_is_about_eighty_percent():
    rng = random.Random(2024)
    trials = 10000
    factored = 0
    for _ in range(trials):
        asteroid = Asteroid(0, 0, 12, rng=rng)
        assert not asteroid.hit(False, rng=rng).destroyed
        result = asteroid.hit(False, rng=rng)
        assert result.destroyed
        factored += result.factored
    assert abs(factored / trials - cfg.FACTORIZATION_RELIABILITY) < 0.05

@pytest.mark.parametrize("number", [4, 12, 30, 49, 48])
def test_factor_children_multiply_to_parent(rng, number):
    parent = Asteroid(300, 200, number, rng=rng)
    children = parent.factor()
    assert math.prod(child.number for child in children) == number
    for child in children:
        assert child.is_prime
        assert (child.x, child.y) == (300, 200)
        assert child.radius == asteroid_radius(child.number)

def test_factor_kick_bounds_child_speed(rng):
    parent = Asteroid(0, 0, 8, rng=rng)
    for child in parent.factor():
        speed = math.hypot(child.vx, child.vy)
        assert speed <= cfg.ASTEROID_MAX_SPEED + cfg.FACTOR_KICK_SPEED + 1e-9
