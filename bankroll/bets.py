"""
bankroll/bets.py - ProBet Tracker
=================================
Bet and deposit records plus the bet lifecycle. No storage, no charts.

Responsibilities:
- Bet / BookDeposit dataclasses with camelCase JSON round-trip
- Status constants and the per-bet status state machine
- Sportsbook registry, legacy aliases, display theme fallback
- Bet creation and field edits (potential profit recomputed on edit)
- List helpers that return new lists (add / replace / remove)

Status state machine:
    PENDING is initial. PENDING -> WON | LOST | PUSH on user action.
    Any settled status -> PENDING ("Undo"). Settled -> other settled status
    only through an explicit update_status() call. Nothing re-settles
    automatically.

Architecture rule: imports math_engine and sport_classifier only.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field, replace
from typing import Optional

from bankroll.math_engine import calculate_potential_profit
from bankroll.sport_classifier import OTHER_SPORT, SPORTS, infer_sport

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Statuses
# ---------------------------------------------------------------------------

PENDING = "PENDING"
WON = "WON"
LOST = "LOST"
PUSH = "PUSH"

BET_STATUSES: tuple = (PENDING, WON, LOST, PUSH)
SETTLED_STATUSES: frozenset = frozenset({WON, LOST, PUSH})


# ---------------------------------------------------------------------------
# Sportsbooks
# ---------------------------------------------------------------------------

OTHER_BOOK = "Other"

SPORTSBOOKS: tuple = (
    "DraftKings",
    "FanDuel",
    "BetMGM",
    "Caesars",
    "Bet365",
    "PointsBet",
    "theScore Bet",
    "Fliff",
    "Fanatics",
    "PrizePicks",
    "Underdog Fantasy",
    "Drafters",
    "Betr",
    OTHER_BOOK,
)

# ESPN Bet rebranded to theScore Bet; old exports still carry the old name.
_BOOK_ALIASES: dict[str, str] = {
    "ESPN Bet": "theScore Bet",
    "ESPNBet": "theScore Bet",
}

_BOOK_LOOKUP: dict[str, str] = {b.lower(): b for b in SPORTSBOOKS}

SPORTSBOOK_THEME: dict[str, dict] = {
    "DraftKings":   {"bg": "#53D337", "text": "#000000", "border": "#45b02d"},
    "FanDuel":      {"bg": "#004DA3", "text": "#ffffff", "border": "#003d82"},
    "BetMGM":       {"bg": "#D4B962", "text": "#000000", "border": "#b89f4d"},
    "Caesars":      {"bg": "#C5A459", "text": "#000000", "border": "#a88b45"},
    "Bet365":       {"bg": "#005440", "text": "#ffffff", "border": "#003d2e"},
    "theScore Bet": {"bg": "#20F4CA", "text": "#000000", "border": "#17c4a1"},
    "PointsBet":    {"bg": "#F53B3B", "text": "#ffffff", "border": "#d42b2b"},
    OTHER_BOOK:     {"bg": "#1e293b", "text": "#94a3b8", "border": "#334155"},
}


def normalize_sportsbook(name: Optional[str]) -> str:
    """
    Map a sportsbook name onto the registry. Unknown names map to "Other".

    >>> normalize_sportsbook("fanduel")
    'FanDuel'
    >>> normalize_sportsbook("ESPN Bet")
    'theScore Bet'
    >>> normalize_sportsbook("Bovada")
    'Other'
    """
    if not name or not isinstance(name, str):
        return OTHER_BOOK
    cleaned = name.strip()
    if cleaned in _BOOK_ALIASES:
        return _BOOK_ALIASES[cleaned]
    return _BOOK_LOOKUP.get(cleaned.lower(), OTHER_BOOK)


def sportsbook_theme(name: Optional[str]) -> dict:
    """Display colours for a book. Books without a theme get the Other theme."""
    return dict(SPORTSBOOK_THEME.get(normalize_sportsbook(name), SPORTSBOOK_THEME[OTHER_BOOK]))


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass
class Bet:
    """A single logged wager. JSON keys follow the export format (camelCase)."""
    id: str
    date: str               # YYYY-MM-DD event date (local calendar)
    matchup: str            # e.g. "Lakers vs Celtics"
    sport: str              # league tag, see sport_classifier.SPORTS
    sportsbook: str
    pick: str               # e.g. "Lakers -5.5"
    odds: int               # American odds
    wager: float
    potential_profit: float # profit if won, excluding returned stake
    status: str = PENDING
    created_at: int = 0     # insertion time, ms since epoch; recency order only
    tags: list = field(default_factory=list)

    @property
    def is_settled(self) -> bool:
        return self.status in SETTLED_STATUSES

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "matchup": self.matchup,
            "sport": self.sport,
            "sportsbook": self.sportsbook,
            "pick": self.pick,
            "odds": self.odds,
            "wager": self.wager,
            "potentialProfit": self.potential_profit,
            "status": self.status,
            "createdAt": self.created_at,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Bet":
        """Build a Bet from an already-validated export record."""
        return cls(
            id=str(data["id"]),
            date=data["date"],
            matchup=data.get("matchup", ""),
            sport=data.get("sport", OTHER_SPORT),
            sportsbook=data.get("sportsbook", OTHER_BOOK),
            pick=data.get("pick", ""),
            odds=int(data["odds"]),
            wager=float(data["wager"]),
            potential_profit=float(data["potentialProfit"]),
            status=data.get("status", PENDING),
            created_at=int(data.get("createdAt", 0)),
            tags=list(data.get("tags") or []),
        )


@dataclass
class BookDeposit:
    """Net amount the user has deposited into one sportsbook (wager results excluded)."""
    sportsbook: str
    deposited: float

    def to_dict(self) -> dict:
        return {"sportsbook": self.sportsbook, "deposited": self.deposited}


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def now_ms() -> int:
    return int(time.time() * 1000)


def create_bet(
    date: str,
    matchup: str,
    pick: str,
    odds: int,
    wager: float,
    sportsbook: str = OTHER_BOOK,
    sport: Optional[str] = None,
    tags: Optional[list] = None,
    bet_id: Optional[str] = None,
    created_at: Optional[int] = None,
) -> Bet:
    """
    Build a new PENDING bet.

    potential_profit is computed here and trusted afterwards. A missing or
    generic ("Other") sport is inferred from the matchup and pick text.
    """
    if sport not in SPORTS or sport == OTHER_SPORT:
        sport = infer_sport(matchup, pick, date)
    return Bet(
        id=bet_id or str(uuid.uuid4()),
        date=date,
        matchup=matchup,
        sport=sport,
        sportsbook=normalize_sportsbook(sportsbook),
        pick=pick,
        odds=int(odds),
        wager=float(wager),
        potential_profit=calculate_potential_profit(float(wager), int(odds)),
        status=PENDING,
        created_at=now_ms() if created_at is None else int(created_at),
        tags=list(tags or []),
    )


def update_status(bet: Bet, status: str) -> Bet:
    """
    Return a copy of the bet with a new status.

    Raises ValueError for anything outside BET_STATUSES.
    """
    if status not in BET_STATUSES:
        raise ValueError(f"Unknown bet status: {status!r}")
    if status == bet.status:
        return bet
    logger.debug("Bet %s: %s -> %s", bet.id, bet.status, status)
    return replace(bet, status=status)


def undo_settlement(bet: Bet) -> Bet:
    """Return a settled bet to PENDING. PENDING bets come back unchanged."""
    return update_status(bet, PENDING)


_LOCKED_FIELDS = frozenset({"id", "created_at"})
_PRICE_FIELDS = frozenset({"odds", "wager"})


def edit_bet(bet: Bet, **changes) -> Bet:
    """
    Return a copy of the bet with edited fields.

    potential_profit is recomputed whenever odds or wager change. id and
    created_at are fixed for the lifetime of the record.
    """
    locked = _LOCKED_FIELDS & changes.keys()
    if locked:
        raise ValueError(f"Cannot edit {', '.join(sorted(locked))}")
    if "status" in changes and changes["status"] not in BET_STATUSES:
        raise ValueError(f"Unknown bet status: {changes['status']!r}")
    if "sportsbook" in changes:
        changes["sportsbook"] = normalize_sportsbook(changes["sportsbook"])
    if "odds" in changes:
        changes["odds"] = int(changes["odds"])
    if "wager" in changes:
        changes["wager"] = float(changes["wager"])

    edited = replace(bet, **changes)
    if _PRICE_FIELDS & changes.keys():
        edited = replace(
            edited,
            potential_profit=calculate_potential_profit(edited.wager, edited.odds),
        )
    return edited


# ---------------------------------------------------------------------------
# Collection helpers
# ---------------------------------------------------------------------------

def add_bet(bets: list[Bet], bet: Bet) -> list[Bet]:
    """New list with the bet first (newest first)."""
    return [bet] + list(bets)


def replace_bet(bets: list[Bet], updated: Bet) -> list[Bet]:
    """New list with the bet sharing updated.id swapped for updated."""
    return [updated if b.id == updated.id else b for b in bets]


def remove_bet(bets: list[Bet], bet_id: str) -> list[Bet]:
    return [b for b in bets if b.id != bet_id]


def find_bet(bets: list[Bet], bet_id: str) -> Optional[Bet]:
    for b in bets:
        if b.id == bet_id:
            return b
    return None
