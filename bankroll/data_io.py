"""
bankroll/data_io.py - ProBet Tracker
====================================
Import/export normalization and AI slip-draft normalization. No storage,
no network: callers hand in parsed JSON and get back validated records.

Responsibilities:
- Export a {bets, deposits} snapshot as a JSON-serializable dict
- Parse loosely-typed import payloads: a bare list of bet records, or an
  object with a `bets` list plus optional `deposits` / legacy
  `startingBankroll`
- Validate the WHOLE payload before building anything; a rejected payload
  raises ImportValidationError and produces nothing
- Normalize imported records: legacy "ESPN Bet" -> "theScore Bet", unknown
  books -> "Other", missing/"Other" sport -> Sport Classifier, missing id /
  potentialProfit / createdAt filled in
- Merge an import into an existing snapshot without mutating it
- Normalize a best-effort bet draft from the slip-extraction service

Export format:
    {
      "bets": [ {id, date, matchup, sport, sportsbook, pick, odds, wager,
                 potentialProfit, status, createdAt, tags}, ... ],
      "deposits": [ {sportsbook, deposited}, ... ],
      "startingBankroll": <sum of deposits>
    }

Architecture rule: imports bets, sport_classifier and math_engine only.
"""

import json
import logging
import math
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional, Union

from bankroll.bets import (
    BET_STATUSES,
    OTHER_BOOK,
    PENDING,
    Bet,
    BookDeposit,
    normalize_sportsbook,
    now_ms,
)
from bankroll.math_engine import calculate_potential_profit, parse_event_date, round_cents
from bankroll.sport_classifier import OTHER_SPORT, SPORTS, infer_sport

logger = logging.getLogger(__name__)


class ImportValidationError(ValueError):
    """Import payload rejected. Nothing was built from it."""


@dataclass
class ImportedSnapshot:
    bets: list = field(default_factory=list)
    deposits: list = field(default_factory=list)   # empty -> keep current deposits
    starting_bankroll: Optional[float] = None      # legacy single-bankroll field


@dataclass
class SlipDraft:
    """Form pre-fill built from an extraction result. Fields may be unusable."""
    date: str
    matchup: str = ""
    sport: str = OTHER_SPORT
    sportsbook: str = OTHER_BOOK
    pick: str = ""
    odds: Optional[int] = None
    wager: Optional[float] = None
    potential_profit: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.matchup and self.pick) and self.odds is not None and self.wager is not None


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

def export_snapshot(bets: list[Bet], deposits: list[BookDeposit]) -> dict:
    """JSON-serializable snapshot. startingBankroll is kept for older readers."""
    return {
        "bets": [b.to_dict() for b in bets],
        "deposits": [d.to_dict() for d in deposits],
        "startingBankroll": round_cents(sum(float(d.deposited) for d in deposits)),
    }


def dumps_snapshot(bets: list[Bet], deposits: list[BookDeposit], indent: int = 2) -> str:
    return json.dumps(export_snapshot(bets, deposits), indent=indent)


def loads_snapshot(text: str) -> ImportedSnapshot:
    """Parse exported JSON text. Invalid JSON raises ImportValidationError."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Import rejected: invalid JSON (%s)", exc)
        raise ImportValidationError(f"Not valid JSON: {exc}") from exc
    return parse_import_payload(payload)


# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------

def _as_number(value: Any) -> Optional[float]:
    """
    Finite float from a number or numeric string, else None.

    >>> _as_number("-110")
    -110.0
    >>> _as_number("abc") is None
    True
    >>> _as_number(True) is None
    True
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _as_timestamp_ms(value: Any) -> Optional[int]:
    """createdAt as epoch ms. Accepts epoch numbers and ISO 8601 strings."""
    number = _as_number(value)
    if number is not None:
        return int(number)
    if isinstance(value, str) and value.strip():
        try:
            return int(datetime.fromisoformat(value.strip().replace("Z", "+00:00")).timestamp() * 1000)
        except ValueError:
            return None
    return None


def _is_event_date(value: Any) -> bool:
    try:
        parse_event_date(value)
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Import validation
# ---------------------------------------------------------------------------

def _record_errors(index: int, record: Any) -> list[str]:
    if not isinstance(record, dict):
        return [f"bets[{index}]: not an object"]
    errors = []
    if not _is_event_date(record.get("date")):
        errors.append(f"bets[{index}]: date must be YYYY-MM-DD")
    if _as_number(record.get("odds")) is None:
        errors.append(f"bets[{index}]: odds must be numeric")
    wager = _as_number(record.get("wager"))
    if wager is None or wager < 0:
        errors.append(f"bets[{index}]: wager must be a non-negative number")
    if "potentialProfit" in record and record["potentialProfit"] is not None:
        if _as_number(record["potentialProfit"]) is None:
            errors.append(f"bets[{index}]: potentialProfit must be numeric")
    status = record.get("status", PENDING)
    if not isinstance(status, str) or status.upper() not in BET_STATUSES:
        errors.append(f"bets[{index}]: unknown status {status!r}")
    tags = record.get("tags")
    if tags is not None and not isinstance(tags, list):
        errors.append(f"bets[{index}]: tags must be a list")
    return errors


def _deposit_pairs(raw: Any) -> Optional[list[tuple]]:
    """Deposits as (book, amount) pairs. Accepts a list of records or a mapping."""
    if isinstance(raw, dict):
        return list(raw.items())
    if isinstance(raw, list):
        pairs = []
        for item in raw:
            if not isinstance(item, dict) or "sportsbook" not in item:
                return None
            pairs.append((item["sportsbook"], item.get("deposited")))
        return pairs
    return None


def _reject(message: str) -> None:
    logger.warning("Import rejected: %s", message)
    raise ImportValidationError(message)


def parse_import_payload(payload: Any) -> ImportedSnapshot:
    """
    Validate and normalize a parsed import payload.

    Every check runs before any record is built. The first failing payload
    raises ImportValidationError listing every problem found.
    """
    records: Any
    raw_deposits: Any = None
    raw_bankroll: Any = None

    if isinstance(payload, list):
        records = payload
    elif isinstance(payload, dict):
        records = payload.get("bets")
        if not isinstance(records, list):
            _reject("Import object has no 'bets' list")
        raw_deposits = payload.get("deposits")
        raw_bankroll = payload.get("startingBankroll")
    else:
        _reject(f"Import payload must be a list or an object, got {type(payload).__name__}")

    errors: list[str] = []
    for i, record in enumerate(records):
        errors.extend(_record_errors(i, record))

    starting_bankroll = None
    if raw_bankroll is not None:
        starting_bankroll = _as_number(raw_bankroll)
        if starting_bankroll is None:
            errors.append(f"startingBankroll must be numeric, got {raw_bankroll!r}")

    pairs: list[tuple] = []
    if raw_deposits is not None:
        parsed = _deposit_pairs(raw_deposits)
        if parsed is None:
            errors.append("deposits must be a list of {sportsbook, deposited} or a mapping")
        else:
            for book, amount in parsed:
                if _as_number(amount) is None:
                    errors.append(f"deposits[{book!r}]: deposited must be numeric")
            pairs = parsed

    if errors:
        _reject("; ".join(errors))

    if not records and starting_bankroll is None and not pairs:
        _reject("No betting data found in import")

    bets = [_build_bet(record) for record in records]
    deposits = _merge_deposit_pairs(pairs)
    if not deposits and starting_bankroll is not None:
        deposits = [BookDeposit(OTHER_BOOK, starting_bankroll)]

    logger.info("Import parsed: %d bets, %d deposits", len(bets), len(deposits))
    return ImportedSnapshot(bets=bets, deposits=deposits, starting_bankroll=starting_bankroll)


def _merge_deposit_pairs(pairs: list[tuple]) -> list[BookDeposit]:
    """One deposit per normalized book; repeated books are summed."""
    totals: dict[str, float] = {}
    for book, amount in pairs:
        name = normalize_sportsbook(book)
        totals[name] = totals.get(name, 0.0) + _as_number(amount)
    return [BookDeposit(book, amount) for book, amount in totals.items()]


def _build_bet(record: dict) -> Bet:
    """Bet from a record that already passed _record_errors()."""
    event_date = parse_event_date(record["date"]).isoformat()
    matchup = str(record.get("matchup") or "")
    pick = str(record.get("pick") or "")
    odds = int(round(_as_number(record["odds"])))
    wager = _as_number(record["wager"])

    sport = record.get("sport")
    if sport not in SPORTS or sport == OTHER_SPORT:
        sport = infer_sport(matchup, pick, event_date)

    profit = _as_number(record.get("potentialProfit"))
    if profit is None:
        profit = calculate_potential_profit(wager, odds)

    created_at = _as_timestamp_ms(record.get("createdAt"))

    return Bet(
        id=str(record.get("id") or uuid.uuid4()),
        date=event_date,
        matchup=matchup,
        sport=sport,
        sportsbook=normalize_sportsbook(record.get("sportsbook")),
        pick=pick,
        odds=odds,
        wager=wager,
        potential_profit=profit,
        status=str(record.get("status", PENDING)).upper(),
        created_at=now_ms() if created_at is None else created_at,
        tags=[str(t) for t in (record.get("tags") or [])],
    )


def merge_import(
    bets: list[Bet],
    deposits: list[BookDeposit],
    imported: ImportedSnapshot,
) -> tuple[list[Bet], list[BookDeposit]]:
    """
    New (bets, deposits) after an import. Imported bets go first; deposits
    are replaced only when the import carried some.
    """
    new_bets = list(imported.bets) + list(bets)
    new_deposits = list(imported.deposits) if imported.deposits else list(deposits)
    return new_bets, new_deposits


# ---------------------------------------------------------------------------
# Slip drafts
# ---------------------------------------------------------------------------

def normalize_slip_draft(draft: Any, today: Union[date, str, None] = None) -> SlipDraft:
    """
    Turn a best-effort extraction result into a form pre-fill.

    Never raises on content: unusable fields fall back (date -> today,
    sport -> classifier, sportsbook -> "Other", odds/wager -> None).
    """
    if not isinstance(draft, dict):
        logger.warning("Slip draft ignored: expected an object, got %s", type(draft).__name__)
        draft = {}

    fallback = today if today is not None else date.today()
    fallback_date = parse_event_date(fallback).isoformat()
    raw_date = draft.get("date")
    event_date = parse_event_date(raw_date).isoformat() if _is_event_date(raw_date) else fallback_date

    matchup = str(draft.get("matchup") or "").strip()
    pick = str(draft.get("pick") or "").strip()

    sport = draft.get("sport")
    if sport not in SPORTS or sport == OTHER_SPORT:
        sport = infer_sport(matchup, pick, event_date)

    odds_value = _as_number(draft.get("odds"))
    odds = int(round(odds_value)) if odds_value is not None and odds_value != 0 else None
    wager = _as_number(draft.get("wager"))
    if wager is not None and wager <= 0:
        wager = None

    profit = calculate_potential_profit(wager, odds) if odds is not None and wager is not None else None

    return SlipDraft(
        date=event_date,
        matchup=matchup,
        sport=sport,
        sportsbook=normalize_sportsbook(draft.get("sportsbook")),
        pick=pick,
        odds=odds,
        wager=wager,
        potential_profit=profit,
    )
