"""
tests/test_bets.py - ProBet Tracker
===================================
Unit tests for bankroll/bets.py: records, sportsbook registry, lifecycle.

Run: pytest tests/test_bets.py -v
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bankroll.bets import (
    BET_STATUSES,
    LOST,
    OTHER_BOOK,
    PENDING,
    PUSH,
    SPORTSBOOK_THEME,
    SPORTSBOOKS,
    WON,
    Bet,
    BookDeposit,
    add_bet,
    create_bet,
    edit_bet,
    find_bet,
    normalize_sportsbook,
    remove_bet,
    replace_bet,
    sportsbook_theme,
    undo_settlement,
    update_status,
)


def _bet(**overrides) -> Bet:
    fields = dict(
        date="2024-01-15",
        matchup="Lakers vs Celtics",
        pick="Lakers -5.5",
        odds=-110,
        wager=100.0,
        sportsbook="FanDuel",
        bet_id="b1",
        created_at=1_700_000_000_000,
    )
    fields.update(overrides)
    return create_bet(**fields)


# ---------------------------------------------------------------------------
# Sportsbook registry
# ---------------------------------------------------------------------------

class TestNormalizeSportsbook:
    def test_exact_name(self):
        assert normalize_sportsbook("DraftKings") == "DraftKings"

    def test_case_insensitive(self):
        assert normalize_sportsbook("  draftkings ") == "DraftKings"

    def test_legacy_espn_bet(self):
        assert normalize_sportsbook("ESPN Bet") == "theScore Bet"

    def test_unknown_maps_to_other(self):
        assert normalize_sportsbook("Bovada") == OTHER_BOOK

    def test_missing_maps_to_other(self):
        assert normalize_sportsbook(None) == OTHER_BOOK
        assert normalize_sportsbook("") == OTHER_BOOK

    def test_registry_ends_with_other(self):
        assert SPORTSBOOKS[-1] == OTHER_BOOK
        assert len(set(SPORTSBOOKS)) == len(SPORTSBOOKS)


class TestSportsbookTheme:
    def test_known_theme(self):
        assert sportsbook_theme("FanDuel") == SPORTSBOOK_THEME["FanDuel"]

    def test_book_without_theme_gets_other(self):
        assert sportsbook_theme("Fliff") == SPORTSBOOK_THEME[OTHER_BOOK]

    def test_returns_copy(self):
        theme = sportsbook_theme("FanDuel")
        theme["bg"] = "#000000"
        assert SPORTSBOOK_THEME["FanDuel"]["bg"] != "#000000"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class TestBetRecord:
    def test_to_dict_uses_export_keys(self):
        d = _bet().to_dict()
        assert d["potentialProfit"] == 90.91
        assert d["createdAt"] == 1_700_000_000_000
        assert "potential_profit" not in d

    def test_from_dict_round_trip(self):
        bet = _bet(tags=["parlay leg"])
        assert Bet.from_dict(bet.to_dict()) == bet

    def test_is_settled(self):
        bet = _bet()
        assert bet.is_settled is False
        assert update_status(bet, PUSH).is_settled is True

    def test_deposit_to_dict(self):
        assert BookDeposit("FanDuel", 500.0).to_dict() == {"sportsbook": "FanDuel", "deposited": 500.0}


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

class TestCreateBet:
    def test_starts_pending(self):
        assert _bet().status == PENDING

    def test_profit_computed(self):
        assert _bet(odds=200, wager=50).potential_profit == 100.0

    def test_sport_inferred_when_missing(self):
        assert _bet().sport == "NBA"

    def test_generic_sport_is_inferred(self):
        assert _bet(sport="Other").sport == "NBA"

    def test_explicit_sport_kept(self):
        assert _bet(sport="NCAAB").sport == "NCAAB"

    def test_sportsbook_normalized(self):
        assert _bet(sportsbook="ESPN Bet").sportsbook == "theScore Bet"

    def test_ids_generated_unique(self):
        a = create_bet("2024-01-01", "A vs B", "A", -110, 10)
        b = create_bet("2024-01-01", "A vs B", "A", -110, 10)
        assert a.id != b.id
        assert a.created_at > 0


class TestStatusTransitions:
    def test_settle(self):
        for status in (WON, LOST, PUSH):
            assert update_status(_bet(), status).status == status

    def test_original_untouched(self):
        bet = _bet()
        update_status(bet, WON)
        assert bet.status == PENDING

    def test_undo(self):
        settled = update_status(_bet(), LOST)
        assert undo_settlement(settled).status == PENDING

    def test_settled_to_settled_explicit(self):
        assert update_status(update_status(_bet(), WON), LOST).status == LOST

    def test_same_status_returns_same_object(self):
        bet = _bet()
        assert update_status(bet, PENDING) is bet

    def test_unknown_status_raises(self):
        with pytest.raises(ValueError):
            update_status(_bet(), "CANCELLED")

    def test_status_constants(self):
        assert BET_STATUSES == ("PENDING", "WON", "LOST", "PUSH")


class TestEditBet:
    def test_wager_edit_recomputes_profit(self):
        assert edit_bet(_bet(), wager=220).potential_profit == 200.0

    def test_odds_edit_recomputes_profit(self):
        assert edit_bet(_bet(), odds=150).potential_profit == 150.0

    def test_text_edit_keeps_profit(self):
        edited = edit_bet(_bet(), pick="Lakers -6")
        assert edited.pick == "Lakers -6"
        assert edited.potential_profit == 90.91

    def test_id_locked(self):
        with pytest.raises(ValueError):
            edit_bet(_bet(), id="other")

    def test_created_at_locked(self):
        with pytest.raises(ValueError):
            edit_bet(_bet(), created_at=1)

    def test_bad_status_rejected(self):
        with pytest.raises(ValueError):
            edit_bet(_bet(), status="VOID")

    def test_sportsbook_normalized(self):
        assert edit_bet(_bet(), sportsbook="nowhere").sportsbook == OTHER_BOOK


class TestCollectionHelpers:
    def test_add_prepends(self):
        first = _bet(bet_id="a")
        second = _bet(bet_id="b")
        assert [b.id for b in add_bet([first], second)] == ["b", "a"]

    def test_replace_by_id(self):
        bets = [_bet(bet_id="a"), _bet(bet_id="b")]
        updated = update_status(bets[1], WON)
        out = replace_bet(bets, updated)
        assert out[1].status == WON
        assert bets[1].status == PENDING

    def test_remove(self):
        bets = [_bet(bet_id="a"), _bet(bet_id="b")]
        assert [b.id for b in remove_bet(bets, "a")] == ["b"]
        assert len(bets) == 2

    def test_find(self):
        bets = [_bet(bet_id="a")]
        assert find_bet(bets, "a") is bets[0]
        assert find_bet(bets, "zzz") is None
