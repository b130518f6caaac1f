"""
bankroll/sport_classifier.py - ProBet Tracker
=============================================
Infers a league tag from a bet's free-text matchup/pick and its event date.
Pure string/date logic over the static gazetteers. No lookups, no state.

Pipeline (first stage that decides wins):
    1. Upper-case and whitespace-collapse "matchup pick".
    2. Pro gazetteers (NFL, NBA, MLB, NHL): full team name, then nickname.
       Nicknames shared by two leagues (GIANTS, RANGERS, KINGS, CARDINALS,
       PANTHERS, JETS) resolve through city/state cues, then a co-occurring
       unambiguous team, then the other ambiguous hits, then a default.
       Nickname-only hits that college programs also use (TIGERS, BRUINS,
       CAVALIERS, ...) yield to stage 3 only when a school name directly
       precedes them ("LSU TIGERS"); "BEARS VS MINNESOTA" stays NFL.
    2b. MLS club names ("INTER MIAMI", "ORLANDO CITY") -> Soccer, so a
       club city never reaches the college rosters.
    3. College rosters. Basketball-only match -> NCAAB, football-only -> NCAAF.
       Dual-sport schools: (a) tournament/bowl keywords, (b) posted total
       (<= 80 football, >= 110 basketball, dead zone between),
       (c) event month (Aug-Oct football, Jan-Apr basketball; Nov/Dec and
       summer undecided), (d) NCAAB.
    4. Keyword lists: combat, tennis, golf, soccer, motorsport, esports.
    5. "Other".

Name matching is whole-word and longest-first: "OHIO STATE" consumes the
text it covers, so "OHIO" inside it is not a second hit.

Never raises. Deterministic for identical (matchup, pick, date).

Architecture rule: imports team_gazetteer and math_engine only.
"""

import re
from datetime import date
from functools import lru_cache
from typing import Optional, Union

from bankroll.math_engine import parse_event_date
from bankroll.team_gazetteer import (
    AMBIGUOUS_NICKNAMES,
    COLLEGE_BASKETBALL_KEYWORDS,
    COLLEGE_BASKETBALL_TEAMS,
    COLLEGE_FOOTBALL_KEYWORDS,
    COLLEGE_FOOTBALL_TEAMS,
    COLLEGE_SHARED_NICKNAMES,
    COMBAT_KEYWORDS,
    ESPORTS_KEYWORDS,
    GOLF_KEYWORDS,
    LEAGUE_ORDER,
    MLS_CLUBS,
    MOTORSPORT_KEYWORDS,
    NICKNAME_ALIASES,
    PRO_TEAMS,
    SOCCER_KEYWORDS,
    TENNIS_KEYWORDS,
)


# ---------------------------------------------------------------------------
# League tags
# ---------------------------------------------------------------------------

OTHER_SPORT = "Other"
NCAAF = "NCAAF"
NCAAB = "NCAAB"

SPORTS: tuple = (
    "NFL", "NBA", "MLB", "NHL", NCAAF, NCAAB, "UFC", "Tennis", "Soccer",
    "Golf", "F1", "Esports", OTHER_SPORT,
)

# Dual-sport college tie-break thresholds on a posted game total.
FOOTBALL_TOTAL_MAX: float = 80.0
BASKETBALL_TOTAL_MIN: float = 110.0

FOOTBALL_MONTHS: frozenset = frozenset({8, 9, 10})
BASKETBALL_MONTHS: frozenset = frozenset({1, 2, 3, 4})

# Checked in this order once no team matched.
_KEYWORD_SPORTS: tuple = (
    ("UFC", COMBAT_KEYWORDS),
    ("Tennis", TENNIS_KEYWORDS),
    ("Golf", GOLF_KEYWORDS),
    ("Soccer", SOCCER_KEYWORDS),
    ("F1", MOTORSPORT_KEYWORDS),
    ("Esports", ESPORTS_KEYWORDS),
)

_TOTAL_RE = re.compile(r"(?<![A-Z0-9])(?:OVER|UNDER|O/U|TOTAL|O|U)\s*(\d+(?:\.\d+)?)")


# ---------------------------------------------------------------------------
# Gazetteer indexes (built once at import)
# ---------------------------------------------------------------------------

def _full_name_index() -> dict[str, str]:
    index: dict[str, str] = {}
    for league in LEAGUE_ORDER:
        for city, nickname in PRO_TEAMS[league]:
            index[f"{city} {nickname}"] = league
            # "ST LOUIS BLUES" as well as "ST. LOUIS BLUES"
            index[f"{city.replace('.', '')} {nickname}"] = league
    return index


def _nickname_index() -> dict[str, tuple]:
    index: dict[str, list] = {}
    for league in LEAGUE_ORDER:
        for _city, nickname in PRO_TEAMS[league]:
            index.setdefault(nickname, []).append(league)
    for alias, (league, _nickname) in NICKNAME_ALIASES.items():
        index.setdefault(alias, []).append(league)
    return {nick: tuple(leagues) for nick, leagues in index.items()}


_FULL_NAMES: dict[str, str] = _full_name_index()
_NICKNAMES: dict[str, tuple] = _nickname_index()
_ALIAS_TARGETS: dict[str, str] = {alias: nick for alias, (_l, nick) in NICKNAME_ALIASES.items()}
_COLLEGE_NAMES: frozenset = COLLEGE_FOOTBALL_TEAMS | COLLEGE_BASKETBALL_TEAMS


# ---------------------------------------------------------------------------
# Text matching
# ---------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _word_pattern(name: str) -> "re.Pattern":
    return re.compile(r"(?<![A-Z0-9])" + re.escape(name) + r"(?![A-Z0-9])")


def _contains(text: str, name: str) -> bool:
    return _word_pattern(name).search(text) is not None


def _contains_any(text: str, names) -> bool:
    return any(_contains(text, n) for n in names)


def _find_names(text: str, names) -> list[tuple[int, str]]:
    """
    Whole-word hits of names in text, longest name first, skipping any hit
    that overlaps text already claimed by a longer one.

    Returns [(start, name), ...] ordered by position in text.
    """
    claimed: list[tuple[int, int]] = []
    hits: list[tuple[int, str]] = []
    for name in sorted(names, key=lambda n: (-len(n), n)):
        for m in _word_pattern(name).finditer(text):
            start, end = m.span()
            if any(start < c_end and c_start < end for c_start, c_end in claimed):
                continue
            claimed.append((start, end))
            hits.append((start, name))
    hits.sort()
    return hits


def normalize_text(matchup: Optional[str], pick: Optional[str]) -> str:
    """
    >>> normalize_text("Lakers  vs Celtics", "Lakers -5.5")
    'LAKERS VS CELTICS LAKERS -5.5'
    """
    combined = f"{matchup or ''} {pick or ''}".upper()
    return " ".join(combined.split())


# ---------------------------------------------------------------------------
# Stage 2: professional leagues
# ---------------------------------------------------------------------------

def _resolve_ambiguous(
    text: str,
    nickname: str,
    anchored: set,
    other_candidates: list[set],
) -> str:
    entry = AMBIGUOUS_NICKNAMES[nickname]
    candidates = entry["leagues"]

    cued = [lg for lg, cues in candidates.items() if _contains_any(text, cues)]
    if len(cued) == 1:
        return cued[0]

    co_occurring = [lg for lg in candidates if lg in anchored]
    if len(co_occurring) == 1:
        return co_occurring[0]

    shared = set(candidates)
    for other in other_candidates:
        shared &= other
    if len(shared) == 1:
        return shared.pop()

    return entry["default"]


def _school_prefixed(pos: int, school_hits) -> bool:
    """True when a school name ends one space before pos ("LSU TIGERS")."""
    return any(start + len(name) + 1 == pos for start, name in school_hits)


def match_pro_league(text: str, school_hits=()) -> Optional[str]:
    """
    Return the pro league named in upper-cased text, or None.

    school_hits are (position, name) college matches in the same text. A
    nickname college programs also use ("TIGERS") is dropped only when a
    school name sits directly in front of it; elsewhere the pro hit stands.

    >>> match_pro_league("LAKERS VS CELTICS LAKERS -5.5")
    'NBA'
    >>> match_pro_league("SF GIANTS ML")
    'MLB'
    >>> match_pro_league("LSU TIGERS -7", [(0, "LSU")]) is None
    True
    >>> match_pro_league("BEARS VS MINNESOTA", [(9, "MINNESOTA")])
    'NFL'
    """
    full_hits = _find_names(text, _FULL_NAMES)
    if full_hits:
        return _FULL_NAMES[full_hits[0][1]]

    hits = [
        name for pos, name in _find_names(text, _NICKNAMES)
        if not (
            _ALIAS_TARGETS.get(name, name) in COLLEGE_SHARED_NICKNAMES
            and _school_prefixed(pos, school_hits)
        )
    ]
    if not hits:
        return None

    anchored = {
        _NICKNAMES[n][0] for n in hits
        if len(_NICKNAMES[n]) == 1
    }
    ambiguous = [n for n in hits if n in AMBIGUOUS_NICKNAMES]

    first = hits[0]
    if first not in AMBIGUOUS_NICKNAMES:
        return _NICKNAMES[first][0]

    others = [set(AMBIGUOUS_NICKNAMES[n]["leagues"]) for n in ambiguous if n != first]
    return _resolve_ambiguous(text, first, anchored, others)


# ---------------------------------------------------------------------------
# Stage 3: college
# ---------------------------------------------------------------------------

def parse_posted_total(text: str) -> Optional[float]:
    """
    First "Over/Under NN" style total in upper-cased text, or None.

    >>> parse_posted_total("DUKE VS UNC OVER 148.5")
    148.5
    >>> parse_posted_total("OHIO STATE -7.5") is None
    True
    """
    m = _TOTAL_RE.search(text)
    if m is None:
        return None
    return float(m.group(1))


def _event_month(event_date: Optional[Union[str, date]]) -> Optional[int]:
    if not event_date:
        return None
    try:
        return parse_event_date(event_date).month
    except ValueError:
        return None


def break_dual_sport_tie(text: str, event_date: Optional[Union[str, date]] = None) -> str:
    """
    NCAAF or NCAAB for text naming only schools that field both sports.

    >>> break_dual_sport_tie("DUKE VS UNC", "2024-03-10")
    'NCAAB'
    >>> break_dual_sport_tie("ALABAMA VS GEORGIA UNDER 52.5")
    'NCAAF'
    """
    basketball_cue = _contains_any(text, COLLEGE_BASKETBALL_KEYWORDS)
    football_cue = _contains_any(text, COLLEGE_FOOTBALL_KEYWORDS)
    if basketball_cue and not football_cue:
        return NCAAB
    if football_cue and not basketball_cue:
        return NCAAF

    total = parse_posted_total(text)
    if total is not None:
        if total <= FOOTBALL_TOTAL_MAX:
            return NCAAF
        if total >= BASKETBALL_TOTAL_MIN:
            return NCAAB

    month = _event_month(event_date)
    if month in FOOTBALL_MONTHS:
        return NCAAF
    if month in BASKETBALL_MONTHS:
        return NCAAB

    # Nov/Dec overlap both seasons; early-season football lands here too.
    return NCAAB


def classify_college(
    text: str,
    schools: set,
    event_date: Optional[Union[str, date]] = None,
) -> str:
    football = schools & COLLEGE_FOOTBALL_TEAMS
    basketball = schools & COLLEGE_BASKETBALL_TEAMS
    if not football:
        return NCAAB
    if not basketball:
        return NCAAF
    # A school with no football program can't be in a football game.
    if schools - COLLEGE_FOOTBALL_TEAMS:
        return NCAAB
    if schools - COLLEGE_BASKETBALL_TEAMS:
        return NCAAF
    return break_dual_sport_tie(text, event_date)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def infer_sport(
    matchup: Optional[str],
    pick: Optional[str],
    event_date: Optional[Union[str, date]] = None,
) -> str:
    """
    Best-effort league tag for a bet. Falls back to "Other"; never raises.

    >>> infer_sport("Lakers vs Celtics", "Lakers -5.5")
    'NBA'
    >>> infer_sport("Gonzaga vs Baylor", "Gonzaga -3")
    'NCAAB'
    >>> infer_sport("Alabama vs Auburn", "Alabama -7", "2024-09-14")
    'NCAAF'
    >>> infer_sport("Djokovic vs Alcaraz", "Djokovic ML")
    'Tennis'
    >>> infer_sport("", "")
    'Other'
    """
    text = normalize_text(matchup, pick)
    if not text:
        return OTHER_SPORT

    school_hits = _find_names(text, _COLLEGE_NAMES)
    schools = {name for _pos, name in school_hits}

    league = match_pro_league(text, school_hits)
    if league is not None:
        return league

    if _contains_any(text, MLS_CLUBS):
        return "Soccer"

    if schools:
        return classify_college(text, schools, event_date)

    for sport, keywords in _KEYWORD_SPORTS:
        if _contains_any(text, keywords):
            return sport

    return OTHER_SPORT


def infer_sport_from_bet(bet) -> str:
    """infer_sport() for a Bet, a bet dict, or anything with matchup/pick/date."""
    if isinstance(bet, dict):
        return infer_sport(bet.get("matchup"), bet.get("pick"), bet.get("date"))
    return infer_sport(
        getattr(bet, "matchup", None),
        getattr(bet, "pick", None),
        getattr(bet, "date", None),
    )
