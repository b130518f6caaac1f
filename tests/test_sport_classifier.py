"""
tests/test_sport_classifier.py - ProBet Tracker
===============================================
Unit tests for bankroll/sport_classifier.py.

Pure string/date logic: no fixtures, no I/O.
Run: pytest tests/test_sport_classifier.py -v
"""

import pytest
import sys
import os
from datetime import date

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bankroll.sport_classifier import (
    BASKETBALL_TOTAL_MIN,
    FOOTBALL_TOTAL_MAX,
    NCAAB,
    NCAAF,
    OTHER_SPORT,
    SPORTS,
    break_dual_sport_tie,
    classify_college,
    infer_sport,
    infer_sport_from_bet,
    match_pro_league,
    normalize_text,
    parse_posted_total,
    _find_names,
)


# ---------------------------------------------------------------------------
# Professional leagues
# ---------------------------------------------------------------------------

class TestProLeagues:
    @pytest.mark.parametrize("matchup,pick,expected", [
        ("Lakers vs Celtics", "Lakers -5.5", "NBA"),
        ("Chiefs vs Bills", "Chiefs -3", "NFL"),
        ("Yankees vs Red Sox", "Yankees ML", "MLB"),
        ("Oilers vs Canucks", "Oilers -1.5", "NHL"),
        ("Kansas City Chiefs @ Baltimore Ravens", "Over 46.5", "NFL"),
        ("Sixers vs Knicks", "Sixers +4", "NBA"),
    ])
    def test_team_names(self, matchup, pick, expected):
        assert infer_sport(matchup, pick) == expected

    def test_full_name_with_period_free_city(self):
        assert infer_sport("St Louis Blues vs Stars", "Blues ML") == "NHL"

    def test_full_name_beats_college_school(self):
        # TEXAS is also a college roster entry
        assert infer_sport("Texas Rangers vs Houston Astros", "Rangers ML") == "MLB"

    def test_nicknames_are_whole_words(self):
        # "HEATWAVE" must not match HEAT
        assert match_pro_league("HEATWAVE SPECIAL") is None


class TestAmbiguousNicknames:
    def test_city_cue_picks_league(self):
        assert infer_sport("SF Giants vs Padres", "Giants ML") == "MLB"
        assert infer_sport("NY Giants vs Cowboys", "Giants +7") == "NFL"

    def test_co_occurring_team_decides(self):
        assert infer_sport("Rangers vs Astros", "Rangers -1.5") == "MLB"
        assert infer_sport("Rangers vs Devils", "Rangers ML") == "NHL"
        assert infer_sport("Cardinals vs Cubs", "Cardinals ML") == "MLB"
        assert infer_sport("Panthers vs Bruins", "Panthers -1.5") == "NHL"

    def test_two_ambiguous_nicknames_intersect(self):
        # KINGS (NBA/NHL) and RANGERS (NHL/MLB) share only NHL
        assert match_pro_league("KINGS VS RANGERS") == "NHL"

    def test_default_when_nothing_decides(self):
        assert infer_sport("Giants", "Giants +3") == "NFL"
        assert infer_sport("Kings", "Kings ML") == "NBA"

    def test_winnipeg_jets(self):
        assert infer_sport("Winnipeg vs Jets", "Jets ML") == "NHL"


# ---------------------------------------------------------------------------
# College
# ---------------------------------------------------------------------------

class TestCollege:
    def test_basketball_only_school(self):
        assert infer_sport("Gonzaga vs Baylor", "Gonzaga -3") == NCAAB

    def test_football_only_school(self):
        assert infer_sport("North Dakota State vs Montana", "NDSU -10") == NCAAF

    def test_pro_nickname_yields_to_school(self):
        assert infer_sport("LSU Tigers vs Alabama", "LSU +3", "2024-10-05") == NCAAF

    def test_school_prefixed_nickname_yields(self):
        assert match_pro_league("LSU TIGERS -7", [(0, "LSU")]) is None

    def test_school_elsewhere_keeps_pro_nickname(self):
        assert match_pro_league("BEARS VS MINNESOTA", [(9, "MINNESOTA")]) == "NFL"

    @pytest.mark.parametrize("matchup,pick,expected", [
        ("Eagles vs Washington", "Eagles -6.5", "NFL"),
        ("Bears vs Minnesota", "Bears +3", "NFL"),
        ("Titans vs Houston", "Titans ML", "NFL"),
        ("Rams vs Arizona", "Rams -3", "NFL"),
        ("Bruins vs Florida", "Bruins ML", "NHL"),
        ("Rockets vs Memphis", "Rockets -4", "NBA"),
        ("Bulls vs Miami", "Bulls +2.5", "NBA"),
    ])
    def test_pro_nickname_against_school_city(self, matchup, pick, expected):
        assert infer_sport(matchup, pick, "2024-10-20") == expected

    def test_pro_nickname_against_school_city_no_date(self):
        assert infer_sport("Seahawks vs Washington", "Seahawks -2") == "NFL"

    def test_longest_name_claims_text(self):
        hits = [name for _pos, name in _find_names("OHIO STATE VS OHIO", {"OHIO", "OHIO STATE"})]
        assert hits == ["OHIO STATE", "OHIO"]

    def test_classify_college_mixed_rosters(self):
        assert classify_college("GONZAGA VS BAYLOR", {"GONZAGA", "BAYLOR"}) == NCAAB
        assert classify_college("MONTANA VS IDAHO", {"MONTANA", "IDAHO"}) == NCAAF

    def test_basketball_keyword(self):
        assert infer_sport("Duke vs UNC", "Duke -2 Final Four") == NCAAB

    def test_football_keyword(self):
        assert infer_sport("Alabama vs Michigan", "Alabama -1.5 Rose Bowl", "2024-01-01") == NCAAF

    def test_low_total_is_football(self):
        assert infer_sport("Alabama vs Georgia", "Under 52.5") == NCAAF

    def test_high_total_is_basketball(self):
        assert infer_sport("Kentucky vs Florida", "Over 145.5", "2024-10-01") == NCAAB

    def test_month_football(self):
        assert infer_sport("Alabama vs Auburn", "Alabama -7", "2024-09-14") == NCAAF

    def test_month_basketball(self):
        assert infer_sport("Duke vs UNC", "Duke -4", date(2024, 3, 9)) == NCAAB

    def test_november_falls_through_to_basketball(self):
        assert infer_sport("Ohio State vs Michigan", "Ohio State -7", "2024-11-30") == NCAAB

    def test_no_date_defaults_basketball(self):
        assert infer_sport("Duke vs UNC", "Duke -4") == NCAAB


class TestTieBreak:
    def test_total_dead_zone_falls_to_month(self):
        assert break_dual_sport_tie("ALABAMA VS AUBURN OVER 95", "2024-09-14") == NCAAF

    def test_thresholds(self):
        assert FOOTBALL_TOTAL_MAX == 80.0
        assert BASKETBALL_TOTAL_MIN == 110.0

    def test_bad_date_ignored(self):
        assert break_dual_sport_tie("DUKE VS UNC", "next tuesday") == NCAAB


class TestParsePostedTotal:
    def test_over(self):
        assert parse_posted_total("DUKE VS UNC OVER 148.5") == 148.5

    def test_shorthand(self):
        assert parse_posted_total("ALABAMA VS AUBURN O 48") == 48.0

    def test_spread_is_not_a_total(self):
        assert parse_posted_total("OHIO STATE -7.5") is None


# ---------------------------------------------------------------------------
# Keyword sports + fallback
# ---------------------------------------------------------------------------

class TestKeywordSports:
    @pytest.mark.parametrize("matchup,pick,expected", [
        ("Djokovic vs Alcaraz", "Djokovic ML", "Tennis"),
        ("UFC 300: Pereira vs Hill", "Pereira by KO", "UFC"),
        ("The Masters", "Scheffler Top 5 Finish", "Golf"),
        ("Arsenal vs Chelsea", "BTTS Yes", "Soccer"),
        ("Monaco Grand Prix", "Verstappen to win", "F1"),
        ("Valorant Champions", "Map 1 winner", "Esports"),
    ])
    def test_keywords(self, matchup, pick, expected):
        assert infer_sport(matchup, pick) == expected

    def test_mls_club_beats_school_city(self):
        # MIAMI is a college roster entry
        assert infer_sport("Inter Miami vs Orlando City", "Inter Miami ML") == "Soccer"

    def test_mls_club_without_keyword(self):
        assert infer_sport("Seattle Sounders vs LAFC", "Over 2.5") == "Soccer"

    def test_unknown_is_other(self):
        assert infer_sport("Team A vs Team B", "Team A") == OTHER_SPORT

    def test_empty_is_other(self):
        assert infer_sport("", "") == OTHER_SPORT
        assert infer_sport(None, None) == OTHER_SPORT


# ---------------------------------------------------------------------------
# Determinism + helpers
# ---------------------------------------------------------------------------

class TestDeterminism:
    def test_repeatable_regardless_of_prior_calls(self):
        first = infer_sport("Lakers vs Celtics", "Lakers -5.5")
        infer_sport("Gonzaga vs Baylor", "Gonzaga -3")
        infer_sport("Giants", "Giants +3")
        assert infer_sport("Lakers vs Celtics", "Lakers -5.5") == first == "NBA"

    def test_always_a_known_tag(self):
        for text in ["", "???", "Lakers", "Duke", "Djokovic", "42"]:
            assert infer_sport(text, text) in SPORTS

    def test_from_bet_dict(self):
        bet = {"matchup": "Alabama vs Auburn", "pick": "Alabama -7", "date": "2024-09-14"}
        assert infer_sport_from_bet(bet) == NCAAF

    def test_from_bet_object(self):
        class _Slip:
            matchup = "Lakers vs Celtics"
            pick = "Lakers -5.5"
            date = "2024-01-01"
        assert infer_sport_from_bet(_Slip()) == "NBA"

    def test_normalize_text(self):
        assert normalize_text(" lakers ", None) == "LAKERS"
