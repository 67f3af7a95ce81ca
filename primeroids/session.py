import random
from enum import Enum

from . import config as cfg
from .economy import EconomyLedger, MissionResult, SubscriptionKind
from .entities import Asteroid, Ship
from .systems import build_systems
from .world import MissionState

class Phase(Enum):
    NOT_STARTED = 'not_started'
    TUTORIAL_BRIEFING = 'tutorial_briefing'
    TUTORIAL_ACTIVE = 'tutorial_active'
    TUTORIAL_COMPLETE = 'tutorial_complete'
    MISSION_ACTIVE = 'mission_active'
    PAUSED = 'paused'
    MISSION_COMPLETE = 'mission_complete'
    BANKRUPT = 'bankrupt'
    ACQUIRED = 'acquired'

class GameSession:
    """ Top-level owner of the economy ledger and the current mission.

    Every method is safe to call from any phase: operations that do not apply to the
    current phase are ignored and return False.
    """
    def __init__(self, bounds=(cfg.SCREEN_WIDTH, cfg.SCREEN_HEIGHT), sound=None, rng=None):
        self.bounds = bounds
        self.sound = sound
        self.rng = rng or random
        self.ledger = EconomyLedger()
        self.phase = Phase.NOT_STARTED
        self.world = None
        self.last_settlement = None
        self.tutorial_score = 0
        self.final_stats = None

    # --- Mission setup ---
    def _new_world(self, is_tutorial, asteroid_pool, firepower_active):
        world = MissionState(self.bounds, is_tutorial=is_tutorial, asteroid_pool=asteroid_pool,
                             firepower_active=firepower_active, sound=self.sound, rng=self.rng)
        world.on_mission_end = self._handle_mission_end
        return build_systems(world)

    def start_tutorial(self):
        if self.phase not in (Phase.NOT_STARTED, Phase.BANKRUPT, Phase.ACQUIRED):
            return False
        width, height = self.bounds
        world = self._new_world(is_tutorial=True, asteroid_pool=0, firepower_active=False)

        prime = Asteroid(width * 0.3, height * 0.3, self.rng.choice(cfg.TUTORIAL_PRIMES), rng=self.rng)
        composite = Asteroid(width * 0.7, height * 0.7, self.rng.choice(cfg.TUTORIAL_COMPOSITES), rng=self.rng)
        for asteroid in (prime, composite):
            asteroid.vx *= cfg.TUTORIAL_SPEED_SCALE
            asteroid.vy *= cfg.TUTORIAL_SPEED_SCALE
        world.asteroids.extend([prime, composite])

        self.world = world
        self.tutorial_score = 0
        self.final_stats = None
        self.phase = Phase.TUTORIAL_BRIEFING
        print("Training mission ready")
        return True

    def dismiss_tutorial(self):
        if self.phase != Phase.TUTORIAL_BRIEFING:
            return False
        width, height = self.bounds
        # Training always flies the stock hull
        self.world.ship = Ship(width / 2, height / 2, hull_upgrade=False, rng=self.rng)
        self.world.activate()
        self.phase = Phase.TUTORIAL_ACTIVE
        return True

    def start_mission(self):
        if self.phase not in (Phase.TUTORIAL_COMPLETE, Phase.MISSION_COMPLETE):
            return False
        width, height = self.bounds
        world = self._new_world(is_tutorial=False, asteroid_pool=cfg.INITIAL_ASTEROIDS,
                                firepower_active=self.ledger.is_active(SubscriptionKind.FIREPOWER))
        world.ship = Ship(width / 2, height / 2,
                          hull_upgrade=self.ledger.is_active(SubscriptionKind.HULL), rng=self.rng)
        for _ in range(min(cfg.INITIAL_SPAWN, world.asteroids_remaining)):
            world.spawn_asteroid()
        world.activate()

        self.world = world
        self.last_settlement = None
        self.phase = Phase.MISSION_ACTIVE
        print(f"Mission {len(self.ledger.mission_history) + 1} started, wallet={self.ledger.wallet}")
        return True

    # --- Frame ---
    def tick(self, dt, controls=None):
        """ Advances the simulation by dt seconds, clamped to MAX_FRAME_DT. """
        if self.world is None or self.phase not in (Phase.TUTORIAL_ACTIVE, Phase.MISSION_ACTIVE):
            return
        dt = max(0.0, min(dt, cfg.MAX_FRAME_DT))
        if controls is not None:
            self.world.controls = controls
        self.world.update(dt)

    # --- Player commands ---
    def toggle_mode(self):
        if self.phase not in (Phase.TUTORIAL_ACTIVE, Phase.MISSION_ACTIVE) or self.world.ship is None:
            return False
        self.world.ship.toggle_mode()
        return True

    def toggle_pause(self):
        if self.phase == Phase.MISSION_ACTIVE:
            self.world.paused = True
            self.phase = Phase.PAUSED
            return True
        if self.phase == Phase.PAUSED:
            self.world.paused = False
            self.phase = Phase.MISSION_ACTIVE
            return True
        return False

    def quit_mission(self):
        """ Abandons a paused mission; it is still settled like any other. """
        if self.phase != Phase.PAUSED:
            return False
        self.world.paused = False
        self.phase = Phase.MISSION_ACTIVE
        self.world.end_mission('quit')
        return True

    def toggle_subscription(self, kind):
        if self.phase not in (Phase.TUTORIAL_COMPLETE, Phase.MISSION_COMPLETE):
            return False
        self.ledger.toggle(kind)
        return True

    def sell_company(self):
        if self.phase != Phase.MISSION_COMPLETE or not self.ledger.can_sell_company():
            return False
        sale_price = self.ledger.acquisition_value()
        self.final_stats = self.ledger.final_stats(sale_price)
        self.phase = Phase.ACQUIRED
        print(f"Company acquired for {sale_price}c after {self.final_stats.missions} missions")
        return True

    def play_again(self):
        if self.phase not in (Phase.BANKRUPT, Phase.ACQUIRED):
            return False
        self.ledger.reset()
        self.last_settlement = None
        return self.start_tutorial()

    # --- Mission end ---
    def _handle_mission_end(self, reason):
        world = self.world
        if world.is_tutorial:
            self.tutorial_score = world.score
            self.phase = Phase.TUTORIAL_COMPLETE
            print(f"Training complete, score={world.score}")
            return

        ship = world.ship
        result = MissionResult(
            score=world.score,
            streak=world.current_streak,
            action_costs=ship.total_action_costs(),
            damage_taken=world.damage_taken,
            ship_destroyed=ship.health <= 0,
        )
        report = self.ledger.settle(result)
        self.last_settlement = report
        print(f"Settlement: earnings={report.total_earnings}c costs={report.total_costs}c "
              f"net={report.net_profit}c wallet={report.wallet}c")

        if report.bankrupt:
            self.final_stats = self.ledger.final_stats(self.ledger.bankruptcy_score())
            self.phase = Phase.BANKRUPT
            print(f"Bankrupt, final score={self.final_stats.headline_value}c")
        else:
            self.phase = Phase.MISSION_COMPLETE
