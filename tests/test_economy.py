import pytest

from primeroids import config as cfg
from primeroids.economy import EconomyLedger, MissionResult, SubscriptionKind, streak_bonus

def quiet_ledger():
    ledger = EconomyLedger()
    for kind in SubscriptionKind:
        ledger.set_active(kind, False)
    return ledger

def result(score=0, streak=0, action_costs=0.0, damage_taken=0, ship_destroyed=False):
    return MissionResult(score, streak, action_costs, damage_taken, ship_destroyed)

def test_default_loadout_has_only_scanner():
    ledger = EconomyLedger()
    assert ledger.wallet == cfg.STARTING_WALLET
    assert ledger.is_active(SubscriptionKind.SCANNER)
    assert not ledger.is_active(SubscriptionKind.YIELD)
    assert not ledger.is_active(SubscriptionKind.FIREPOWER)
    assert not ledger.is_active(SubscriptionKind.HULL)
    assert ledger.inflation_multiplier == 1.0

def test_small_streak_settlement_scenario():
    ledger = quiet_ledger()
    report = ledger.settle(result(score=10, streak=3))
    assert report.streak_bonus == 1
    assert report.yield_bonus == 0
    assert report.total_earnings == 11
    assert report.space_tax == 50
    assert report.maintenance == 10
    assert report.total_costs == 60
    assert report.net_profit == -49
    assert ledger.wallet == cfg.STARTING_WALLET - 49
    assert not report.bankrupt

@pytest.mark.parametrize("streak,expected", [(0, 0), (2, 0), (3, 10), (6, 10), (7, 30), (12, 30)])
def test_streak_tiers_are_exclusive(streak, expected):
    assert streak_bonus(100, streak) == expected

def test_yield_bonus_and_subscription_costs():
    ledger = quiet_ledger()
    ledger.set_active(SubscriptionKind.YIELD, True)
    ledger.set_active(SubscriptionKind.SCANNER, True)
    report = ledger.settle(result(score=41))
    assert report.yield_bonus == 20
    assert report.total_earnings == 61
    assert report.subscription_costs == cfg.YIELD_COST + cfg.SCANNER_COST
    assert report.net_profit == 61 - (50 + 50 + 10)

def test_action_costs_maintenance_and_tow_fee():
    ledger = quiet_ledger()
    report = ledger.settle(result(score=0, action_costs=3.2, damage_taken=25, ship_destroyed=True))
    assert report.action_costs == 4
    assert report.maintenance == cfg.BASE_MAINTENANCE + 13
    assert report.tow_fee == cfg.TOW_FEE
    assert report.total_costs == 50 + 4 + 23 + 200

def test_inflation_compounds_and_rounds_each_line_up():
    ledger = quiet_ledger()
    ledger.set_active(SubscriptionKind.SCANNER, True)
    ledger.set_active(SubscriptionKind.YIELD, True)
    ledger.settle(result())
    assert ledger.inflation_multiplier == pytest.approx(1.05)
    ledger.settle(result())
    assert ledger.inflation_multiplier == pytest.approx(1.1025)

    report = ledger.settle(result(action_costs=1.0))
    # 50 * 1.1025 = 55.125 -> 56, 30 -> 34, 20 -> 23, 1 -> 2, 10 -> 12
    assert report.space_tax == 56
    assert report.subscription_costs == 34 + 23
    assert report.action_costs == 2
    assert report.maintenance == 12

def test_loadout_costs_preview_next_mission():
    ledger = quiet_ledger()
    ledger.settle(result())
    costs = ledger.loadout_costs()
    assert costs[SubscriptionKind.HULL] == 37
    assert costs[SubscriptionKind.FIREPOWER] == 27

def test_history_and_cumulative_stats():
    ledger = quiet_ledger()
    ledger.settle(result(score=30, streak=4))
    ledger.settle(result(score=12, streak=2))
    assert len(ledger.mission_history) == 2
    assert ledger.total_primes_collected == 42
    assert ledger.best_streak == 4

def test_bankruptcy_when_wallet_goes_negative():
    ledger = quiet_ledger()
    ledger.wallet = 100
    report = ledger.settle(result(damage_taken=100, ship_destroyed=True))
    assert report.wallet < 0
    assert report.bankrupt
    assert ledger.bankruptcy_score() == ledger.wallet

def test_zero_wallet_is_not_bankrupt():
    ledger = quiet_ledger()
    ledger.wallet = 60
    report = ledger.settle(result())
    assert report.wallet == 0
    assert not report.bankrupt

def test_acquisition_value_uses_last_four_missions():
    ledger = quiet_ledger()
    assert ledger.acquisition_value() == 0
    ledger.mission_history = [10, 20, 30]
    assert not ledger.can_sell_company()
    assert ledger.acquisition_value() == 0
    ledger.mission_history = [1000, 10, 20, 30, 41]
    assert ledger.can_sell_company()
    # mean(10, 20, 30, 41) = 25.25 -> * 5 = 126.25 -> 127
    assert ledger.acquisition_value() == 127

def test_sale_becomes_available_after_enough_missions():
    ledger = quiet_ledger()
    reports = [ledger.settle(result(score=100, streak=7)) for _ in range(cfg.ACQUISITION_MIN_MISSIONS)]
    assert not any(r.can_sell for r in reports[:-1])
    assert reports[-1].can_sell
    assert reports[-1].acquisition_value == ledger.acquisition_value()

def test_average_income_and_final_stats():
    ledger = quiet_ledger()
    assert ledger.average_income() == 0
    ledger.mission_history = [10, -3]
    ledger.total_primes_collected = 55
    ledger.best_streak = 6
    assert ledger.average_income() == 4
    stats = ledger.final_stats(321)
    assert stats.headline_value == 321
    assert stats.missions == 2
    assert stats.primes_collected == 55
    assert stats.best_streak == 6

def test_reset_restores_starting_state():
    ledger = EconomyLedger()
    ledger.toggle(SubscriptionKind.HULL)
    ledger.toggle(SubscriptionKind.SCANNER)
    ledger.settle(result(score=5, streak=9))
    ledger.reset()
    assert ledger.wallet == cfg.STARTING_WALLET
    assert ledger.mission_history == []
    assert ledger.inflation_multiplier == 1.0
    assert ledger.best_streak == 0
    assert ledger.total_primes_collected == 0
    assert ledger.is_active(SubscriptionKind.SCANNER)
    assert not ledger.is_active(SubscriptionKind.HULL)
