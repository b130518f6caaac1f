"""
bankroll/analytics.py - ProBet Tracker
======================================
Streaks, last-N results, hot/cold sports, book performance and the pick
leaderboard. Pure functions over a bet snapshot.

Recency order: settled bets sorted by created_at descending (stable, so
bets sharing a timestamp keep their input order). Every recency-based
figure below uses that one ordering.

Streak policy: pushes neither break nor extend a streak. Leading pushes are
skipped and the streak starts at the most recent WON/LOST bet; later pushes
are skipped; the first opposite result ends the scan.

Grouping: aggregate_by_key() is the single fold used for sport, sportsbook
and pick groupings. Sportsbooks group under their registry name, the same
key the balance ledger uses ("ESPN Bet" -> "theScore Bet", unknown ->
"Other"). WON adds potential_profit, LOST subtracts wager, PUSH only counts.

Architecture rule: imports bets only.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from bankroll.bets import LOST, PUSH, SETTLED_STATUSES, WON, Bet, normalize_sportsbook

LAST_N: int = 10
TOP_PICKS: int = 5
MIN_PICK_KEY_LEN: int = 3

_PICK_NUMERIC_RE = re.compile(r"[0-9.+\-]")


# ---------------------------------------------------------------------------
# Result records
# ---------------------------------------------------------------------------

@dataclass
class GroupStats:
    name: str
    profit: float = 0.0
    wins: int = 0
    losses: int = 0
    pushes: int = 0

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}-{self.pushes}"

    @property
    def decided(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        return self.wins / self.decided * 100 if self.decided else 0.0


@dataclass
class SportSummary:
    name: str
    profit: float
    record: str             # "W-L-P"


@dataclass
class BookPerformance:
    name: str
    profit: float
    wins: int
    losses: int
    win_rate: float         # percent, 0.0 with no decided bets


@dataclass
class TeamPerformance:
    name: str
    profit: float
    wins: int
    losses: int


@dataclass
class AdvancedStats:
    current_streak: int                     # +N win streak, -N loss streak
    last_10: list = field(default_factory=list)    # statuses, most recent first
    hottest_sport: Optional[SportSummary] = None
    coldest_sport: Optional[SportSummary] = None
    book_performance: list = field(default_factory=list)
    team_performance: list = field(default_factory=list)


# ---------------------------------------------------------------------------
# Ordering + streaks
# ---------------------------------------------------------------------------

def settled_by_recency(bets: Iterable[Bet]) -> list[Bet]:
    """Settled bets, most recently created first."""
    settled = [b for b in bets if b.status in SETTLED_STATUSES]
    return sorted(settled, key=lambda b: b.created_at, reverse=True)


def last_results(recent: list[Bet], n: int = LAST_N) -> list[str]:
    return [b.status for b in recent[:n]]


def current_streak(statuses: Iterable[str]) -> int:
    """
    Signed streak from statuses ordered most recent first.

    >>> current_streak(["WON", "WON", "LOST", "WON"])
    2
    >>> current_streak(["LOST", "PUSH", "LOST", "WON"])
    -2
    >>> current_streak(["PUSH", "WON", "LOST"])
    1
    >>> current_streak([])
    0
    """
    lead = None
    count = 0
    for status in statuses:
        if status == PUSH:
            continue
        if lead is None:
            lead = status
        if status != lead:
            break
        count += 1

    if lead == WON:
        return count
    if lead == LOST:
        return -count
    return 0


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

def pick_key(pick: str) -> str:
    """
    Grouping key for a pick: first two words with digits, signs and
    decimal points removed. Keys shorter than 3 characters fall back to
    the raw pick.

    >>> pick_key("Lakers -5.5")
    'Lakers'
    >>> pick_key("Kansas City Chiefs -3")
    'Kansas City'
    >>> pick_key("KC -3")
    'KC -3'
    """
    raw = pick or ""
    key = _PICK_NUMERIC_RE.sub("", " ".join(raw.split()[:2])).strip()
    return key if len(key) >= MIN_PICK_KEY_LEN else raw


def aggregate_by_key(
    bets: Iterable[Bet],
    key_fn: Callable[[Bet], str],
) -> dict[str, GroupStats]:
    """
    Fold settled bets into per-key profit and W-L-P tallies.

    Keys keep first-seen order. PENDING bets are ignored.
    """
    groups: dict[str, GroupStats] = {}
    for bet in bets:
        if bet.status not in SETTLED_STATUSES:
            continue
        key = key_fn(bet)
        group = groups.get(key)
        if group is None:
            group = groups[key] = GroupStats(name=key)
        if bet.status == WON:
            group.profit += bet.potential_profit
            group.wins += 1
        elif bet.status == LOST:
            group.profit -= bet.wager
            group.losses += 1
        else:
            group.pushes += 1
    return groups


def by_profit(groups: dict[str, GroupStats]) -> list[GroupStats]:
    """Groups sorted by profit, highest first. Ties keep first-seen order."""
    return sorted(groups.values(), key=lambda g: g.profit, reverse=True)


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------

def hot_and_cold(ranked: list[GroupStats]) -> tuple[Optional[SportSummary], Optional[SportSummary]]:
    """(hottest, coldest): top group if in profit, bottom group if in loss."""
    if not ranked:
        return None, None
    top, bottom = ranked[0], ranked[-1]
    hottest = SportSummary(top.name, top.profit, top.record) if top.profit > 0 else None
    coldest = SportSummary(bottom.name, bottom.profit, bottom.record) if bottom.profit < 0 else None
    return hottest, coldest


def book_performance_table(ranked: list[GroupStats]) -> list[BookPerformance]:
    return [
        BookPerformance(
            name=g.name,
            profit=g.profit,
            wins=g.wins,
            losses=g.losses,
            win_rate=g.win_rate,
        )
        for g in ranked
    ]


def pick_leaderboard(ranked: list[GroupStats], top_n: int = TOP_PICKS) -> list[TeamPerformance]:
    decided = [g for g in ranked if g.decided > 0]
    return [
        TeamPerformance(name=g.name, profit=g.profit, wins=g.wins, losses=g.losses)
        for g in decided[:top_n]
    ]


def compute_advanced_stats(bets: Iterable[Bet]) -> AdvancedStats:
    """Recency, streak and grouping analytics for a bet snapshot."""
    recent = settled_by_recency(bets)
    statuses = [b.status for b in recent]

    sports = by_profit(aggregate_by_key(recent, lambda b: b.sport))
    books = by_profit(aggregate_by_key(recent, lambda b: normalize_sportsbook(b.sportsbook)))
    picks = by_profit(aggregate_by_key(recent, lambda b: pick_key(b.pick)))

    hottest, coldest = hot_and_cold(sports)

    return AdvancedStats(
        current_streak=current_streak(statuses),
        last_10=last_results(recent),
        hottest_sport=hottest,
        coldest_sport=coldest,
        book_performance=book_performance_table(books),
        team_performance=pick_leaderboard(picks),
    )
