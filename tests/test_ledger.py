"""
tests/test_ledger.py - ProBet Tracker
=====================================
Unit tests for bankroll/ledger.py: book balances and bankroll metrics.

Run: pytest tests/test_ledger.py -v
"""

import pytest
import sys
import os
import random

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bankroll.bets import (
    LOST,
    PENDING,
    PUSH,
    SPORTSBOOKS,
    WON,
    BookDeposit,
    create_bet,
    update_status,
)
from bankroll.ledger import (
    book_balance_for,
    compute_bankroll_stats,
    compute_book_balances,
    deposits_by_book,
    settlement_effect,
)


def _bet(book="FanDuel", status=PENDING, odds=-110, wager=110.0, bet_id=None):
    bet = create_bet(
        "2024-01-15", "Lakers vs Celtics", "Lakers -5.5", odds, wager,
        sportsbook=book, bet_id=bet_id, created_at=1,
    )
    return update_status(bet, status)


@pytest.fixture
def snapshot():
    deposits = [BookDeposit("FanDuel", 500.0), BookDeposit("DraftKings", 300.0)]
    bets = [
        _bet("FanDuel", WON, -110, 110.0),      # +100
        _bet("FanDuel", LOST, -110, 55.0),      # -55
        _bet("DraftKings", PUSH, 150, 40.0),    # 0
        _bet("DraftKings", PENDING, 200, 25.0), # -25 at risk
        _bet("Bovada", WON, 100, 20.0),         # +20 on Other
    ]
    return deposits, bets


# ---------------------------------------------------------------------------
# Settlement effects
# ---------------------------------------------------------------------------

class TestSettlementEffect:
    def test_won(self):
        assert settlement_effect(_bet(status=WON)) == 100.0

    def test_lost(self):
        assert settlement_effect(_bet(status=LOST)) == -110.0

    def test_pending_is_at_risk(self):
        assert settlement_effect(_bet(status=PENDING)) == -110.0

    def test_push_no_effect(self):
        assert settlement_effect(_bet(status=PUSH)) == 0.0


# ---------------------------------------------------------------------------
# Book balances
# ---------------------------------------------------------------------------

class TestBookBalances:
    def test_one_row_per_registry_book(self, snapshot):
        deposits, bets = snapshot
        rows = compute_book_balances(bets, deposits)
        assert [r.sportsbook for r in rows] == list(SPORTSBOOKS)

    def test_per_book_balances(self, snapshot):
        deposits, bets = snapshot
        rows = {r.sportsbook: r for r in compute_book_balances(bets, deposits)}
        assert rows["FanDuel"].current_balance == pytest.approx(545.0)
        assert rows["DraftKings"].current_balance == pytest.approx(275.0)
        assert rows["Other"].current_balance == pytest.approx(20.0)
        assert rows["BetMGM"].current_balance == 0.0
        assert rows["FanDuel"].net == pytest.approx(45.0)

    def test_order_independent(self, snapshot):
        deposits, bets = snapshot
        shuffled = list(bets)
        random.Random(7).shuffle(shuffled)
        a = compute_book_balances(bets, deposits)
        b = compute_book_balances(shuffled, deposits)
        assert [r.current_balance for r in a] == pytest.approx([r.current_balance for r in b])

    def test_deposits_normalized_and_summed(self):
        totals = deposits_by_book([
            BookDeposit("fanduel", 100.0),
            BookDeposit("FanDuel", 50.0),
            BookDeposit("ESPN Bet", 25.0),
        ])
        assert totals == {"FanDuel": 150.0, "theScore Bet": 25.0}

    def test_single_book_lookup(self, snapshot):
        deposits, bets = snapshot
        row = book_balance_for("draftkings", bets, deposits)
        assert row.sportsbook == "DraftKings"
        assert row.deposited == 300.0


# ---------------------------------------------------------------------------
# Bankroll metrics
# ---------------------------------------------------------------------------

class TestBankrollStats:
    def test_totals(self, snapshot):
        deposits, bets = snapshot
        state = compute_bankroll_stats(deposits, bets)
        assert state.starting_balance == 800.0
        assert state.total_won == pytest.approx(120.0)
        assert state.total_lost == pytest.approx(55.0)
        # pushes count as wagered, pending does not
        assert state.total_wagered == pytest.approx(110.0 + 55.0 + 40.0 + 20.0)
        assert (state.wins, state.losses, state.pushes, state.pending) == (2, 1, 1, 1)
        assert state.total_bets == 5

    def test_current_balance_matches_ledger(self, snapshot):
        deposits, bets = snapshot
        state = compute_bankroll_stats(deposits, bets)
        rows = compute_book_balances(bets, deposits)
        assert state.current_balance == pytest.approx(sum(r.current_balance for r in rows))

    def test_roi(self, snapshot):
        deposits, bets = snapshot
        state = compute_bankroll_stats(deposits, bets)
        assert state.roi == pytest.approx(65.0 / 225.0 * 100)
        assert state.net_profit == pytest.approx(65.0)

    def test_flat_roi(self):
        bets = [
            _bet(status=WON, odds=200, wager=10.0),
            _bet(status=LOST, odds=-110, wager=500.0),
            _bet(status=PUSH, odds=-110, wager=50.0),
        ]
        state = compute_bankroll_stats([], bets)
        # (+2.0 - 1.0) / 2 decided bets
        assert state.flat_roi == pytest.approx(50.0)

    def test_flat_roi_ignores_stake_size(self):
        small = compute_bankroll_stats([], [_bet(status=WON, odds=100, wager=1.0),
                                            _bet(status=LOST, odds=100, wager=1000.0)])
        assert small.flat_roi == 0.0
        assert small.roi < 0

    def test_win_rate(self, snapshot):
        deposits, bets = snapshot
        assert compute_bankroll_stats(deposits, bets).win_rate == pytest.approx(200 / 3)

    def test_empty_boundary(self):
        state = compute_bankroll_stats([BookDeposit("FanDuel", 250.0)], [])
        assert state.current_balance == state.starting_balance == 250.0
        assert state.roi == 0.0
        assert state.flat_roi == 0.0
        assert state.win_rate == 0.0
        assert state.total_bets == 0

    def test_only_pending_has_zero_ratios(self):
        state = compute_bankroll_stats([], [_bet()])
        assert state.roi == 0.0
        assert state.flat_roi == 0.0
        assert state.current_balance == -110.0

    def test_idempotent(self, snapshot):
        deposits, bets = snapshot
        assert compute_bankroll_stats(deposits, bets) == compute_bankroll_stats(deposits, bets)
