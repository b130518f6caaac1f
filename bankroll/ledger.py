"""
bankroll/ledger.py - ProBet Tracker
===================================
Balance Ledger and Bankroll Metrics. Pure folds over a bet snapshot.

Per-bet effect on its book's balance:
    WON     += potential_profit
    LOST    -= wager
    PENDING -= wager   (at risk: reduces spendable balance, excluded from stats)
    PUSH       no effect (stake returned)

book current_balance = deposited + sum(effects). The fold is commutative:
bet order never changes a balance.

Bankroll metrics:
    starting_balance = sum of deposits
    current_balance  = sum of book balances (same ledger, same order)
    roi              = (total_won - total_lost) / settled wagered * 100
    flat_roi         = sum(unit results) / (wins + losses) * 100
                       WON -> +unit_profit(odds), LOST -> -1, PUSH ignored
Every ratio over an empty population is 0.0.

Architecture rule: imports bets and math_engine only. No storage.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from bankroll.bets import (
    LOST,
    PENDING,
    PUSH,
    SPORTSBOOKS,
    WON,
    Bet,
    BookDeposit,
    normalize_sportsbook,
)
from bankroll.math_engine import unit_profit


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------

@dataclass
class BookBalance:
    """Derived per-book view. Not stored."""
    sportsbook: str
    deposited: float
    current_balance: float

    @property
    def net(self) -> float:
        return self.current_balance - self.deposited


@dataclass
class BankrollState:
    """Aggregate snapshot across all books."""
    starting_balance: float
    current_balance: float
    total_wagered: float    # settled bets only (pushes included)
    total_won: float        # profit from WON bets
    total_lost: float       # stakes of LOST bets
    total_bets: int         # every bet, pending included
    wins: int
    losses: int
    pushes: int
    pending: int
    roi: float              # money weighted, percent
    flat_roi: float         # unit weighted, percent

    @property
    def net_profit(self) -> float:
        return self.total_won - self.total_lost

    @property
    def win_rate(self) -> float:
        decided = self.wins + self.losses
        return self.wins / decided * 100 if decided else 0.0


# ---------------------------------------------------------------------------
# Balance ledger
# ---------------------------------------------------------------------------

def settlement_effect(bet: Bet) -> float:
    """
    Signed effect of one bet on its book's available balance.

    >>> b = Bet("1", "2024-01-01", "A vs B", "NBA", "FanDuel", "A -3", -110, 110.0, 100.0, status="LOST")
    >>> settlement_effect(b)
    -110.0
    """
    if bet.status == WON:
        return bet.potential_profit
    if bet.status in (LOST, PENDING):
        return -bet.wager
    return 0.0


def deposits_by_book(deposits: Iterable[BookDeposit]) -> dict[str, float]:
    """
    Deposited amount per registry book. Unknown books fold into "Other";
    repeated entries for the same book are summed.
    """
    totals: dict[str, float] = {}
    for dep in deposits:
        book = normalize_sportsbook(dep.sportsbook)
        totals[book] = totals.get(book, 0.0) + float(dep.deposited)
    return totals


def compute_book_balances(
    bets: Iterable[Bet],
    deposits: Iterable[BookDeposit],
) -> list[BookBalance]:
    """
    One BookBalance per registry sportsbook, in registry order, including
    books with no deposits and no bets.
    """
    deposited = deposits_by_book(deposits)
    effects: dict[str, float] = {book: 0.0 for book in SPORTSBOOKS}
    for bet in bets:
        book = normalize_sportsbook(bet.sportsbook)
        effects[book] += settlement_effect(bet)

    return [
        BookBalance(
            sportsbook=book,
            deposited=deposited.get(book, 0.0),
            current_balance=deposited.get(book, 0.0) + effects[book],
        )
        for book in SPORTSBOOKS
    ]


def book_balance_for(
    sportsbook: str,
    bets: Iterable[Bet],
    deposits: Iterable[BookDeposit],
) -> Optional[BookBalance]:
    """Balance of a single book (registry-normalized name)."""
    target = normalize_sportsbook(sportsbook)
    for row in compute_book_balances(bets, deposits):
        if row.sportsbook == target:
            return row
    return None


# ---------------------------------------------------------------------------
# Bankroll metrics
# ---------------------------------------------------------------------------

def compute_bankroll_stats(
    deposits: Iterable[BookDeposit],
    bets: Iterable[Bet],
) -> BankrollState:
    """
    Aggregate bankroll snapshot for a {bets, deposits} snapshot.

    Empty inputs give zero ratios and current_balance == starting_balance.
    """
    deposits = list(deposits)
    bets = list(bets)

    balances = compute_book_balances(bets, deposits)
    starting_balance = sum(row.deposited for row in balances)
    current_balance = sum(row.current_balance for row in balances)

    total_wagered = 0.0
    total_won = 0.0
    total_lost = 0.0
    wins = losses = pushes = pending = 0
    unit_total = 0.0

    for bet in bets:
        if bet.status == WON:
            total_won += bet.potential_profit
            total_wagered += bet.wager
            unit_total += unit_profit(bet.odds)
            wins += 1
        elif bet.status == LOST:
            total_lost += bet.wager
            total_wagered += bet.wager
            unit_total -= 1.0
            losses += 1
        elif bet.status == PUSH:
            total_wagered += bet.wager
            pushes += 1
        elif bet.status == PENDING:
            pending += 1

    net_profit = total_won - total_lost
    roi = (net_profit / total_wagered * 100) if total_wagered > 0 else 0.0
    decided = wins + losses
    flat_roi = (unit_total / decided * 100) if decided > 0 else 0.0

    return BankrollState(
        starting_balance=starting_balance,
        current_balance=current_balance,
        total_wagered=total_wagered,
        total_won=total_won,
        total_lost=total_lost,
        total_bets=len(bets),
        wins=wins,
        losses=losses,
        pushes=pushes,
        pending=pending,
        roi=roi,
        flat_roi=flat_roi,
    )
