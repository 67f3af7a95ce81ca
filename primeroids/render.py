import math

import pygame

from . import config as cfg
from .economy import SubscriptionKind
from .session import Phase

SUBSCRIPTION_KEYS = [
    ('1', SubscriptionKind.SCANNER),
    ('2', SubscriptionKind.YIELD),
    ('3', SubscriptionKind.FIREPOWER),
    ('4', SubscriptionKind.HULL),
]

def format_timer(seconds):
    seconds = max(0, seconds)
    return f"{int(seconds // 60)}:{int(seconds % 60):02d}"

def asteroid_colors(asteroid, scanner_active):
    """ Returns (fill, stroke) for an asteroid. Without the scanner every rock looks the same. """
    if asteroid.is_flashing:
        return cfg.HIT_FLASH_COLOR, cfg.HIT_FLASH_COLOR
    if not scanner_active:
        return cfg.NEUTRAL_COLOR, cfg.NEUTRAL_STROKE
    if asteroid.is_prime:
        return cfg.PRIME_COLOR, cfg.PRIME_STROKE
    return cfg.COMPOSITE_COLOR, cfg.COMPOSITE_STROKE

def health_color(ship):
    status = ship.health_status()
    if status == 'danger':
        return cfg.DANGER_COLOR
    if status == 'warning':
        return cfg.WARNING_COLOR
    return cfg.HUD_COLOR

def hud_lines(session):
    """ Text shown in the top-left corner while a mission is on screen. """
    world = session.world
    if world is None or world.ship is None:
        return []
    ship = world.ship
    lines = [
        (f"HULL {max(0, round(ship.health))}", health_color(ship)),
        (f"SCORE {world.score}", cfg.HUD_COLOR),
    ]
    if world.current_streak >= cfg.STREAK_SMALL_THRESHOLD:
        lines.append((f"STREAK {world.current_streak}x", cfg.COLLECTION_COLOR))
    if not world.is_tutorial:
        lines.append((f"TIME {format_timer(world.time_left())}", cfg.HUD_COLOR))
    mode = "COMBAT" if ship.combat_mode else "COLLECT"
    lines.append((f"MODE {mode}", cfg.PROJECTILE_COLOR if ship.combat_mode else cfg.COLLECTION_COLOR))
    lines.append((f"WALLET {session.ledger.wallet}c", cfg.HUD_COLOR))
    return lines

def settlement_lines(session):
    report = session.last_settlement
    ledger = session.ledger
    lines = [
        "MISSION COMPLETE",
        f"Primes collected: {report.base_earnings}",
        f"Base earnings: {report.base_earnings}c",
    ]
    if report.streak_bonus > 0:
        lines.append(f"Streak bonus: +{report.streak_bonus}c ({session.world.current_streak}x)")
    lines += [
        f"Yield bonus: {report.yield_bonus}c",
        f"Tax + subscriptions: -{report.space_tax + report.subscription_costs}c",
        f"Action costs: -{report.action_costs}c",
        f"Maintenance: -{report.maintenance}c",
    ]
    if report.tow_fee > 0:
        lines.append(f"Tow fee: -{report.tow_fee}c")
    lines += [f"Net profit: {report.net_profit}c", f"Wallet: {ledger.wallet}c", ""]
    lines += loadout_lines(session)
    if report.can_sell:
        lines.append(f"[S] Sell company for {ledger.acquisition_value()}c")
    lines.append("[ENTER] Next mission")
    return lines

def loadout_lines(session):
    ledger = session.ledger
    costs = ledger.loadout_costs()
    lines = ["NEXT MISSION LOADOUT"]
    for key, kind in SUBSCRIPTION_KEYS:
        sub = ledger.subscriptions[kind]
        mark = "x" if sub.active else " "
        lines.append(f"[{key}] [{mark}] {sub.name} {costs[kind]}c")
    return lines

def overlay_lines(session):
    phase = session.phase
    if phase == Phase.TUTORIAL_BRIEFING:
        return [
            "TRAINING MISSION",
            "BLUE asteroids are PRIME numbers - collect them in COLLECT mode",
            "RED asteroids are COMPOSITE numbers - destroy them in COMBAT mode",
            "Toggle modes with SPACE",
            "No time limit. Clear both asteroids to begin!",
            "[ENTER] Okay, got it",
        ]
    if phase == Phase.TUTORIAL_COMPLETE:
        return [
            "TRAINING COMPLETE!",
            f"You scored {session.tutorial_score}.",
            f"Real missions last {format_timer(cfg.MISSION_DURATION)} with {cfg.INITIAL_ASTEROIDS} asteroids,",
            "operating costs, and upgrades you can toggle.",
            "",
        ] + loadout_lines(session) + ["[ENTER] Begin first mission"]
    if phase == Phase.PAUSED:
        ledger = session.ledger
        return [
            "PAUSED",
            f"Missions: {len(ledger.mission_history)}",
            f"Wallet: {ledger.wallet}c",
            f"Acquisition value: {ledger.acquisition_value()}c",
            "[ESC] Resume   [Q] Quit mission",
        ]
    if phase == Phase.MISSION_COMPLETE:
        return settlement_lines(session)
    if phase in (Phase.BANKRUPT, Phase.ACQUIRED):
        stats = session.final_stats
        if phase == Phase.BANKRUPT:
            title, label = "BANKRUPTCY!", "FINAL SCORE"
        else:
            title, label = "ACQUISITION COMPLETE!", "SALE PRICE"
        return [
            title,
            f"{label}: {stats.headline_value}c",
            f"Missions: {stats.missions}",
            f"Primes collected: {stats.primes_collected}",
            f"Average income: {stats.average_income}c",
            f"Best streak: {stats.best_streak}x",
            "[R] Play again",
        ]
    return []

class Renderer:
    def __init__(self, screen):
        self.screen = screen
        self.font = pygame.font.SysFont("consolas", 18)
        self.big_font = pygame.font.SysFont("consolas", 28, bold=True)

    def _draw_centered(self, surface, center_pos):
        """Helper to draw a surface centered at a given position."""
        rect = surface.get_rect(center=center_pos)
        self.screen.blit(surface, rect.topleft)

    def draw(self, session):
        self.screen.fill(cfg.BACKGROUND_COLOR)
        self._draw_starfield()

        world = session.world
        if world is not None:
            scanner_active = session.ledger.is_active(SubscriptionKind.SCANNER)
            for particle in world.particles:
                self._draw_particle(particle)
            for asteroid in world.asteroids:
                self._draw_asteroid(asteroid, scanner_active)
            for projectile in world.projectiles:
                pygame.draw.circle(self.screen, cfg.PROJECTILE_COLOR, (int(projectile.x), int(projectile.y)), projectile.radius)
            if world.ship is not None and world.mission_active:
                self._draw_ship(world.ship)

        for i, (text, color) in enumerate(hud_lines(session)):
            self.screen.blit(self.font.render(text, True, color), (16, 16 + i * 22))

        self._draw_overlay(overlay_lines(session))
        pygame.display.flip()

    def _draw_starfield(self):
        width, height = self.screen.get_size()
        for i in range(cfg.STARFIELD_COUNT):
            x = int((i * 137.5) % width)
            y = int((i * 237.5) % height)
            self.screen.set_at((x, y), (150, 150, 150))

    def _draw_particle(self, particle):
        fade = max(0.0, min(1.0, particle.life / particle.max_life))
        color = tuple(int(c * fade) for c in particle.color)
        pygame.draw.circle(self.screen, color, (int(particle.x), int(particle.y)), 2)

    def _draw_asteroid(self, asteroid, scanner_active):
        fill, stroke = asteroid_colors(asteroid, scanner_active)
        points = [(asteroid.x + px, asteroid.y + py) for px, py in asteroid.points]
        pygame.draw.polygon(self.screen, fill, points)
        pygame.draw.polygon(self.screen, stroke, points, 2)
        label = self.big_font.render(str(asteroid.number), True, (255, 255, 255))
        self._draw_centered(label, (asteroid.x, asteroid.y))

    def _draw_ship(self, ship):
        width, height = ship.hitbox()
        surface = pygame.Surface((width + 20, height + 20), pygame.SRCALPHA)
        body = pygame.Rect(10, 10, width, height)
        spine = cfg.PROJECTILE_COLOR if ship.combat_mode else cfg.COLLECTION_COLOR
        pygame.draw.ellipse(surface, (255, 255, 255), body)
        pygame.draw.ellipse(surface, (180, 83, 9), body, 2)
        pygame.draw.line(surface, spine, (10 + width * 0.2, 10 + height / 2), (10 + width, 10 + height / 2), 3)
        rotated = pygame.transform.rotate(surface, -math.degrees(ship.rotation))
        self._draw_centered(rotated, (ship.x, ship.y))

    def _draw_overlay(self, lines):
        if not lines:
            return
        width, height = self.screen.get_size()
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        self.screen.blit(shade, (0, 0))
        top = height / 2 - len(lines) * 14
        for i, text in enumerate(lines):
            font = self.big_font if i == 0 else self.font
            self._draw_centered(font.render(text, True, cfg.HUD_COLOR), (width / 2, top + i * 28))
