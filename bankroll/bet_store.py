"""
bankroll/bet_store.py - ProBet Tracker
======================================
SQLite snapshot store for bets and per-book deposits. No math, no charts.
The pure core never calls this module; callers load a snapshot, compute,
and write changes back.

Responsibilities:
- Initialize the schema (WAL mode for safe concurrent readers)
- Upsert single bets, bulk-save bets in one all-or-nothing transaction
- Status updates and deletes by bet id
- One deposit row per sportsbook (upsert on conflict)
- Load bets newest-first, deposits, or the full {bets, deposits} snapshot

Schema: bets table
  id              TEXT PRIMARY KEY   -- uuid4 string
  date            TEXT NOT NULL      -- YYYY-MM-DD event date
  matchup         TEXT NOT NULL
  sport           TEXT NOT NULL
  sportsbook      TEXT NOT NULL
  pick            TEXT NOT NULL
  odds            INTEGER NOT NULL   -- American odds
  wager           REAL NOT NULL
  potential_profit REAL NOT NULL
  status          TEXT NOT NULL      -- PENDING / WON / LOST / PUSH
  created_at      INTEGER NOT NULL   -- ms since epoch
  tags            TEXT DEFAULT '[]'  -- JSON list

Schema: book_balances table
  sportsbook      TEXT PRIMARY KEY
  deposited       REAL NOT NULL      -- net deposits, wager results excluded
  updated_at      TEXT NOT NULL      -- ISO 8601 UTC

DB location: BANKROLL_DB_PATH env var, default data/bankroll.db.
"""

import json
import logging
import os
import sqlite3
from datetime import datetime, timezone
from typing import Optional

from bankroll.bets import BET_STATUSES, Bet, BookDeposit, normalize_sportsbook

logger = logging.getLogger(__name__)

_DEFAULT_DB_PATH = os.path.join(
    os.path.dirname(__file__), "..", "data", "bankroll.db"
)

MEMORY_DB = ":memory:"


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

_SCHEMA_SQL = """
PRAGMA journal_mode = WAL;
PRAGMA synchronous = NORMAL;

CREATE TABLE IF NOT EXISTS bets (
    id               TEXT PRIMARY KEY,
    date             TEXT NOT NULL,
    matchup          TEXT NOT NULL,
    sport            TEXT NOT NULL,
    sportsbook       TEXT NOT NULL,
    pick             TEXT NOT NULL,
    odds             INTEGER NOT NULL,
    wager            REAL NOT NULL,
    potential_profit REAL NOT NULL,
    status           TEXT NOT NULL DEFAULT 'PENDING',
    created_at       INTEGER NOT NULL,
    tags             TEXT DEFAULT '[]'
);

CREATE INDEX IF NOT EXISTS idx_bets_created
    ON bets(created_at);

CREATE INDEX IF NOT EXISTS idx_bets_status
    ON bets(status);

CREATE TABLE IF NOT EXISTS book_balances (
    sportsbook       TEXT PRIMARY KEY,
    deposited        REAL NOT NULL DEFAULT 0.0,
    updated_at       TEXT NOT NULL
);
"""

_BET_COLUMNS = (
    "id, date, matchup, sport, sportsbook, pick, odds, wager, "
    "potential_profit, status, created_at, tags"
)

_UPSERT_BET_SQL = f"""
INSERT OR REPLACE INTO bets ({_BET_COLUMNS})
VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""


# ---------------------------------------------------------------------------
# Connection management
# ---------------------------------------------------------------------------

def _db_path() -> str:
    return os.environ.get("BANKROLL_DB_PATH", _DEFAULT_DB_PATH)


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Open a SQLite connection with WAL mode and sqlite3.Row rows.

    Creates the parent directory for file databases.
    """
    path = db_path or _db_path()
    if path != MEMORY_DB:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL")
    conn.execute("PRAGMA synchronous = NORMAL")
    return conn


def init_db(db_path: Optional[str] = None) -> None:
    """Create tables. Safe to call multiple times."""
    conn = get_connection(db_path)
    try:
        conn.executescript(_SCHEMA_SQL)
        conn.commit()
        logger.info("Database initialized: %s", db_path or _db_path())
    except sqlite3.Error as exc:
        logger.error("Schema init failed: %s", exc)
        raise
    finally:
        conn.close()


# ---------------------------------------------------------------------------
# Row mapping
# ---------------------------------------------------------------------------

def _bet_params(bet: Bet) -> tuple:
    return (
        bet.id,
        bet.date,
        bet.matchup,
        bet.sport,
        bet.sportsbook,
        bet.pick,
        int(bet.odds),
        float(bet.wager),
        float(bet.potential_profit),
        bet.status,
        int(bet.created_at),
        json.dumps(list(bet.tags)),
    )


def _row_to_bet(row: sqlite3.Row) -> Bet:
    return Bet(
        id=row["id"],
        date=row["date"],
        matchup=row["matchup"],
        sport=row["sport"],
        sportsbook=row["sportsbook"],
        pick=row["pick"],
        odds=row["odds"],
        wager=row["wager"],
        potential_profit=row["potential_profit"],
        status=row["status"],
        created_at=row["created_at"],
        tags=json.loads(row["tags"] or "[]"),
    )


# ---------------------------------------------------------------------------
# Bets - write
# ---------------------------------------------------------------------------

def save_bet(bet: Bet, db_path: Optional[str] = None) -> None:
    """Insert or replace one bet by id."""
    conn = get_connection(db_path)
    try:
        conn.execute(_UPSERT_BET_SQL, _bet_params(bet))
        conn.commit()
    except sqlite3.Error as exc:
        logger.error("save_bet failed for %s: %s", bet.id, exc)
        raise
    finally:
        conn.close()


def save_bets(bets: list[Bet], db_path: Optional[str] = None) -> int:
    """
    Insert or replace many bets in a single transaction.

    All-or-nothing: any failure rolls the whole batch back. Returns the
    number of bets written.
    """
    params = [_bet_params(b) for b in bets]
    conn = get_connection(db_path)
    try:
        with conn:
            conn.executemany(_UPSERT_BET_SQL, params)
        logger.info("Saved %d bets", len(params))
        return len(params)
    except sqlite3.Error as exc:
        logger.error("save_bets failed, batch of %d rolled back: %s", len(params), exc)
        raise
    finally:
        conn.close()


def update_bet_status(bet_id: str, status: str, db_path: Optional[str] = None) -> bool:
    """
    Set a bet's status. Returns False when no bet has that id.

    Raises ValueError for statuses outside BET_STATUSES.
    """
    if status not in BET_STATUSES:
        raise ValueError(f"Unknown bet status: {status!r}")
    conn = get_connection(db_path)
    try:
        cursor = conn.execute(
            "UPDATE bets SET status = ? WHERE id = ?",
            (status, bet_id),
        )
        conn.commit()
        if cursor.rowcount == 0:
            logger.warning("update_bet_status: bet %s not found", bet_id)
            return False
        return True
    except sqlite3.Error as exc:
        logger.error("update_bet_status failed for %s: %s", bet_id, exc)
        raise
    finally:
        conn.close()


def delete_bet(bet_id: str, db_path: Optional[str] = None) -> bool:
    """Delete a bet by id. Returns False when nothing was deleted."""
    conn = get_connection(db_path)
    try:
        cursor = conn.execute("DELETE FROM bets WHERE id = ?", (bet_id,))
        conn.commit()
        return cursor.rowcount > 0
    except sqlite3.Error as exc:
        logger.error("delete_bet failed for %s: %s", bet_id, exc)
        raise
    finally:
        conn.close()


# ---------------------------------------------------------------------------
# Deposits
# ---------------------------------------------------------------------------

def upsert_book_deposit(
    sportsbook: str,
    deposited: float,
    db_path: Optional[str] = None,
) -> BookDeposit:
    """Set the deposited amount for one book (registry-normalized name)."""
    book = normalize_sportsbook(sportsbook)
    now = datetime.now(timezone.utc).isoformat()
    conn = get_connection(db_path)
    try:
        conn.execute(
            """
            INSERT INTO book_balances (sportsbook, deposited, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(sportsbook) DO UPDATE SET
                deposited  = excluded.deposited,
                updated_at = excluded.updated_at
            """,
            (book, float(deposited), now),
        )
        conn.commit()
        return BookDeposit(book, float(deposited))
    except sqlite3.Error as exc:
        logger.error("upsert_book_deposit failed for %s: %s", book, exc)
        raise
    finally:
        conn.close()


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------

def load_bets(db_path: Optional[str] = None) -> list[Bet]:
    """All bets, newest created_at first."""
    conn = get_connection(db_path)
    try:
        rows = conn.execute(
            f"SELECT {_BET_COLUMNS} FROM bets ORDER BY created_at DESC, rowid DESC"
        ).fetchall()
        return [_row_to_bet(r) for r in rows]
    finally:
        conn.close()


def load_deposits(db_path: Optional[str] = None) -> list[BookDeposit]:
    conn = get_connection(db_path)
    try:
        rows = conn.execute(
            "SELECT sportsbook, deposited FROM book_balances ORDER BY sportsbook"
        ).fetchall()
        return [BookDeposit(r["sportsbook"], r["deposited"]) for r in rows]
    finally:
        conn.close()


def load_snapshot(db_path: Optional[str] = None) -> tuple[list[Bet], list[BookDeposit]]:
    """(bets, deposits) as stored."""
    return load_bets(db_path), load_deposits(db_path)
