"""
bankroll/history.py - ProBet Tracker
====================================
History Reconstructor plus the two date-bucketed views built on the same
per-date fold: the daily profit calendar and the date-grouped bet list.

Bucketing is by the exact event-date string (YYYY-MM-DD, local calendar).
Only settled bets move a balance:
    WON  +potential_profit
    LOST -wager
    PUSH  0

compute_bankroll_history() emits one point per distinct settled date after
a synthetic "Start" point seeded with the starting balance. Same-date bets
merge into one point.

Architecture rule: imports bets and math_engine only.
"""

from dataclasses import dataclass, field
from typing import Iterable

from bankroll.bets import LOST, SETTLED_STATUSES, WON, Bet
from bankroll.math_engine import format_event_date, round_cents

START_LABEL = "Start"


@dataclass
class BankrollHistoryPoint:
    date: str               # YYYY-MM-DD, or "Start"
    balance: float
    formatted_date: str     # "Nov 2", or "Start"


@dataclass
class DailyPnl:
    date: str
    profit: float = 0.0
    wins: int = 0
    losses: int = 0
    settled: int = 0


@dataclass
class BetGroup:
    date: str
    formatted_date: str
    total_profit: float = 0.0
    bets: list = field(default_factory=list)


def settled_effect(bet: Bet) -> float:
    if bet.status == WON:
        return bet.potential_profit
    if bet.status == LOST:
        return -bet.wager
    return 0.0


# ---------------------------------------------------------------------------
# Daily fold
# ---------------------------------------------------------------------------

def daily_pnl(bets: Iterable[Bet]) -> list[DailyPnl]:
    """
    Settled P&L per event date, oldest date first.

    PENDING bets are ignored. Pushes count toward `settled` only.
    """
    days: dict[str, DailyPnl] = {}
    for bet in bets:
        if bet.status not in SETTLED_STATUSES:
            continue
        day = days.get(bet.date)
        if day is None:
            day = days[bet.date] = DailyPnl(date=bet.date)
        day.profit += settled_effect(bet)
        day.settled += 1
        if bet.status == WON:
            day.wins += 1
        elif bet.status == LOST:
            day.losses += 1
    return [days[d] for d in sorted(days)]


def compute_bankroll_history(
    starting_balance: float,
    bets: Iterable[Bet],
) -> list[BankrollHistoryPoint]:
    """
    Cumulative balance after each settled date.

    >>> compute_bankroll_history(500.0, [])
    [BankrollHistoryPoint(date='Start', balance=500.0, formatted_date='Start')]
    """
    points = [BankrollHistoryPoint(START_LABEL, round_cents(starting_balance), START_LABEL)]
    running = float(starting_balance)
    for day in daily_pnl(bets):
        running += day.profit
        points.append(
            BankrollHistoryPoint(
                date=day.date,
                balance=round_cents(running),
                formatted_date=format_event_date(day.date, with_year=False),
            )
        )
    return points


# ---------------------------------------------------------------------------
# Bet list view
# ---------------------------------------------------------------------------

def group_bets_by_date(bets: Iterable[Bet]) -> list[BetGroup]:
    """
    Bets grouped by event date, newest date first. Bets inside a group keep
    their input order; total_profit sums the group's settled effects.
    """
    groups: dict[str, BetGroup] = {}
    for bet in bets:
        group = groups.get(bet.date)
        if group is None:
            group = groups[bet.date] = BetGroup(
                date=bet.date,
                formatted_date=format_event_date(bet.date),
            )
        group.bets.append(bet)
        group.total_profit += settled_effect(bet)
    return [groups[d] for d in sorted(groups, reverse=True)]
