import math
from collections import namedtuple
from enum import Enum

from . import config as cfg

class SubscriptionKind(Enum):
    SCANNER = 'scanner'
    YIELD = 'yield'
    FIREPOWER = 'firepower'
    HULL = 'hull'

class Subscription:
    def __init__(self, kind, name, cost, effect, active=False):
        """ A between-missions upgrade the player pays for every mission it is active.

        Args:
            kind (SubscriptionKind): Which upgrade this is.
            name (str): Display name.
            cost (int): Base cost in cents before inflation.
            effect (str): Short description of what it does during a mission.
            active (bool): Whether it applies to the next mission.
        """
        self.kind = kind
        self.name = name
        self.cost = cost
        self.effect = effect
        self.active = active

def default_subscriptions():
    return {
        SubscriptionKind.SCANNER: Subscription(SubscriptionKind.SCANNER, 'Auto-Scanner Premium', cfg.SCANNER_COST,
                                               'Colours asteroids by prime status', active=True),
        SubscriptionKind.YIELD: Subscription(SubscriptionKind.YIELD, 'Yield Booster', cfg.YIELD_COST,
                                             f'+{int(cfg.YIELD_BONUS * 100)}% base earnings'),
        SubscriptionKind.FIREPOWER: Subscription(SubscriptionKind.FIREPOWER, 'Firepower Enhancement', cfg.FIREPOWER_COST,
                                                 'One-shot composites, pricier bullets'),
        SubscriptionKind.HULL: Subscription(SubscriptionKind.HULL, 'Hull Reinforcement', cfg.HULL_COST,
                                            f'x{cfg.HULL_UPGRADE_MULTIPLIER} hull'),
    }

MissionResult = namedtuple('MissionResult', ['score', 'streak', 'action_costs', 'damage_taken', 'ship_destroyed'])

SettlementReport = namedtuple('SettlementReport', [
    'base_earnings', 'streak_bonus', 'yield_bonus', 'total_earnings',
    'space_tax', 'subscription_costs', 'action_costs', 'maintenance', 'tow_fee', 'total_costs',
    'net_profit', 'wallet', 'bankrupt', 'acquisition_value', 'can_sell',
])

FinalStats = namedtuple('FinalStats', ['headline_value', 'missions', 'primes_collected', 'average_income', 'best_streak'])

def streak_bonus(base_earnings, streak):
    if streak >= cfg.STREAK_LARGE_THRESHOLD:
        return math.floor(base_earnings * cfg.STREAK_LARGE_BONUS)
    if streak >= cfg.STREAK_SMALL_THRESHOLD:
        return math.floor(base_earnings * cfg.STREAK_SMALL_BONUS)
    return 0

class EconomyLedger:
    def __init__(self):
        self.reset()

    def reset(self):
        """ Restores the starting wallet, loadout and statistics. """
        self.wallet = cfg.STARTING_WALLET
        self.subscriptions = default_subscriptions()
        self.inflation_multiplier = 1.0
        self.mission_history = []  # Net profit of each settled mission
        self.total_primes_collected = 0
        self.best_streak = 0

    # --- Loadout ---
    def is_active(self, kind):
        return self.subscriptions[kind].active

    def set_active(self, kind, active):
        self.subscriptions[kind].active = bool(active)

    def toggle(self, kind):
        subscription = self.subscriptions[kind]
        subscription.active = not subscription.active
        return subscription.active

    def inflated_cost(self, base_cost):
        return math.ceil(base_cost * self.inflation_multiplier)

    def loadout_costs(self):
        """ Inflated price of every subscription for the next mission. """
        return {kind: self.inflated_cost(sub.cost) for kind, sub in self.subscriptions.items()}

    def subscription_costs(self):
        # Rounded per subscription, never on the sum
        return sum(self.inflated_cost(sub.cost) for sub in self.subscriptions.values() if sub.active)

    # --- Settlement ---
    def settle(self, result):
        """ Books one finished mission into the ledger.

        Earnings are the score plus streak and yield bonuses. Every cost line is inflated
        and rounded up on its own. Inflation compounds afterwards whatever the outcome.

        Args:
            result (MissionResult): What happened during the mission.

        Returns:
            SettlementReport: Every line item plus the resulting wallet and outcome.
        """
        base_earnings = result.score
        bonus = streak_bonus(base_earnings, result.streak)
        yield_bonus = 0
        if self.is_active(SubscriptionKind.YIELD):
            yield_bonus = math.floor(base_earnings * cfg.YIELD_BONUS)
        total_earnings = base_earnings + bonus + yield_bonus

        space_tax = self.inflated_cost(cfg.SPACE_TAX)
        subscription_costs = self.subscription_costs()
        action_costs = self.inflated_cost(result.action_costs)
        maintenance = self.inflated_cost(cfg.BASE_MAINTENANCE + math.ceil(result.damage_taken * cfg.MAINTENANCE_PER_DAMAGE))
        tow_fee = self.inflated_cost(cfg.TOW_FEE) if result.ship_destroyed else 0
        total_costs = space_tax + subscription_costs + action_costs + maintenance + tow_fee

        net_profit = total_earnings - total_costs
        self.wallet += net_profit

        self.mission_history.append(net_profit)
        self.total_primes_collected += result.score
        self.best_streak = max(self.best_streak, result.streak)

        self.inflation_multiplier *= cfg.INFLATION_RATE

        return SettlementReport(
            base_earnings=base_earnings,
            streak_bonus=bonus,
            yield_bonus=yield_bonus,
            total_earnings=total_earnings,
            space_tax=space_tax,
            subscription_costs=subscription_costs,
            action_costs=action_costs,
            maintenance=maintenance,
            tow_fee=tow_fee,
            total_costs=total_costs,
            net_profit=net_profit,
            wallet=self.wallet,
            bankrupt=self.is_bankrupt(),
            acquisition_value=self.acquisition_value(),
            can_sell=self.can_sell_company(),
        )

    def is_bankrupt(self):
        return self.wallet < 0

    # --- Company value ---
    def can_sell_company(self):
        return len(self.mission_history) >= cfg.ACQUISITION_MIN_MISSIONS

    def acquisition_value(self):
        if not self.can_sell_company():
            return 0
        recent = self.mission_history[-cfg.ACQUISITION_WINDOW:]
        average = sum(recent) / len(recent)
        return math.ceil(average * cfg.ACQUISITION_MULTIPLIER)

    def average_income(self):
        if not self.mission_history:
            return 0
        return math.ceil(sum(self.mission_history) / len(self.mission_history))

    def bankruptcy_score(self):
        return self.wallet + self.acquisition_value()

    def final_stats(self, headline_value):
        return FinalStats(
            headline_value=headline_value,
            missions=len(self.mission_history),
            primes_collected=self.total_primes_collected,
            average_income=self.average_income(),
            best_streak=self.best_streak,
        )
