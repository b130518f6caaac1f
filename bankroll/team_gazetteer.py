"""
bankroll/team_gazetteer.py - ProBet Tracker
===========================================
Static team-name gazetteers for sport inference. No logic beyond lookups.

Contents:
    PRO_TEAMS            league -> ((city, nickname), ...) for NFL/NBA/MLB/NHL
    NICKNAME_ALIASES     shorthand nicknames ("NINERS", "SIXERS") -> (league, nickname)
    AMBIGUOUS_NICKNAMES  nicknames shared by two pro leagues, with the city/state
                         cues that pick one of them, and a default
    COLLEGE_SHARED_NICKNAMES  pro nicknames that college programs also use
    COLLEGE_FOOTBALL_TEAMS / COLLEGE_BASKETBALL_TEAMS  school rosters (most schools
                         field both, so the two overlap)
    *_KEYWORDS           keyword cues for the two college sports and for the
                         non-team sports (combat, tennis, golf, soccer,
                         motorsport, esports)

All names are stored upper-case; callers upper-case their text first.
Snapshot of the 2024-25 rosters. Relocations/renames need a manual update.

Architecture rule: NO imports from other bankroll modules.
"""


# ---------------------------------------------------------------------------
# Professional leagues
# ---------------------------------------------------------------------------

LEAGUE_ORDER: tuple = ("NFL", "NBA", "MLB", "NHL")

PRO_TEAMS: dict[str, tuple] = {
    "NFL": (
        ("ARIZONA", "CARDINALS"),
        ("ATLANTA", "FALCONS"),
        ("BALTIMORE", "RAVENS"),
        ("BUFFALO", "BILLS"),
        ("CAROLINA", "PANTHERS"),
        ("CHICAGO", "BEARS"),
        ("CINCINNATI", "BENGALS"),
        ("CLEVELAND", "BROWNS"),
        ("DALLAS", "COWBOYS"),
        ("DENVER", "BRONCOS"),
        ("DETROIT", "LIONS"),
        ("GREEN BAY", "PACKERS"),
        ("HOUSTON", "TEXANS"),
        ("INDIANAPOLIS", "COLTS"),
        ("JACKSONVILLE", "JAGUARS"),
        ("KANSAS CITY", "CHIEFS"),
        ("LAS VEGAS", "RAIDERS"),
        ("LOS ANGELES", "CHARGERS"),
        ("LOS ANGELES", "RAMS"),
        ("MIAMI", "DOLPHINS"),
        ("MINNESOTA", "VIKINGS"),
        ("NEW ENGLAND", "PATRIOTS"),
        ("NEW ORLEANS", "SAINTS"),
        ("NEW YORK", "GIANTS"),
        ("NEW YORK", "JETS"),
        ("PHILADELPHIA", "EAGLES"),
        ("PITTSBURGH", "STEELERS"),
        ("SAN FRANCISCO", "49ERS"),
        ("SEATTLE", "SEAHAWKS"),
        ("TAMPA BAY", "BUCCANEERS"),
        ("TENNESSEE", "TITANS"),
        ("WASHINGTON", "COMMANDERS"),
    ),
    "NBA": (
        ("ATLANTA", "HAWKS"),
        ("BOSTON", "CELTICS"),
        ("BROOKLYN", "NETS"),
        ("CHARLOTTE", "HORNETS"),
        ("CHICAGO", "BULLS"),
        ("CLEVELAND", "CAVALIERS"),
        ("DALLAS", "MAVERICKS"),
        ("DENVER", "NUGGETS"),
        ("DETROIT", "PISTONS"),
        ("GOLDEN STATE", "WARRIORS"),
        ("HOUSTON", "ROCKETS"),
        ("INDIANA", "PACERS"),
        ("LOS ANGELES", "CLIPPERS"),
        ("LOS ANGELES", "LAKERS"),
        ("MEMPHIS", "GRIZZLIES"),
        ("MIAMI", "HEAT"),
        ("MILWAUKEE", "BUCKS"),
        ("MINNESOTA", "TIMBERWOLVES"),
        ("NEW ORLEANS", "PELICANS"),
        ("NEW YORK", "KNICKS"),
        ("OKLAHOMA CITY", "THUNDER"),
        ("ORLANDO", "MAGIC"),
        ("PHILADELPHIA", "76ERS"),
        ("PHOENIX", "SUNS"),
        ("PORTLAND", "TRAIL BLAZERS"),
        ("SACRAMENTO", "KINGS"),
        ("SAN ANTONIO", "SPURS"),
        ("TORONTO", "RAPTORS"),
        ("UTAH", "JAZZ"),
        ("WASHINGTON", "WIZARDS"),
    ),
    "MLB": (
        ("ARIZONA", "DIAMONDBACKS"),
        ("ATLANTA", "BRAVES"),
        ("BALTIMORE", "ORIOLES"),
        ("BOSTON", "RED SOX"),
        ("CHICAGO", "CUBS"),
        ("CHICAGO", "WHITE SOX"),
        ("CINCINNATI", "REDS"),
        ("CLEVELAND", "GUARDIANS"),
        ("COLORADO", "ROCKIES"),
        ("DETROIT", "TIGERS"),
        ("HOUSTON", "ASTROS"),
        ("KANSAS CITY", "ROYALS"),
        ("LOS ANGELES", "ANGELS"),
        ("LOS ANGELES", "DODGERS"),
        ("MIAMI", "MARLINS"),
        ("MILWAUKEE", "BREWERS"),
        ("MINNESOTA", "TWINS"),
        ("NEW YORK", "METS"),
        ("NEW YORK", "YANKEES"),
        ("OAKLAND", "ATHLETICS"),
        ("PHILADELPHIA", "PHILLIES"),
        ("PITTSBURGH", "PIRATES"),
        ("SAN DIEGO", "PADRES"),
        ("SAN FRANCISCO", "GIANTS"),
        ("SEATTLE", "MARINERS"),
        ("ST. LOUIS", "CARDINALS"),
        ("TAMPA BAY", "RAYS"),
        ("TEXAS", "RANGERS"),
        ("TORONTO", "BLUE JAYS"),
        ("WASHINGTON", "NATIONALS"),
    ),
    "NHL": (
        ("ANAHEIM", "DUCKS"),
        ("BOSTON", "BRUINS"),
        ("BUFFALO", "SABRES"),
        ("CALGARY", "FLAMES"),
        ("CAROLINA", "HURRICANES"),
        ("CHICAGO", "BLACKHAWKS"),
        ("COLORADO", "AVALANCHE"),
        ("COLUMBUS", "BLUE JACKETS"),
        ("DALLAS", "STARS"),
        ("DETROIT", "RED WINGS"),
        ("EDMONTON", "OILERS"),
        ("FLORIDA", "PANTHERS"),
        ("LOS ANGELES", "KINGS"),
        ("MINNESOTA", "WILD"),
        ("MONTREAL", "CANADIENS"),
        ("NASHVILLE", "PREDATORS"),
        ("NEW JERSEY", "DEVILS"),
        ("NEW YORK", "ISLANDERS"),
        ("NEW YORK", "RANGERS"),
        ("OTTAWA", "SENATORS"),
        ("PHILADELPHIA", "FLYERS"),
        ("PITTSBURGH", "PENGUINS"),
        ("SAN JOSE", "SHARKS"),
        ("SEATTLE", "KRAKEN"),
        ("ST. LOUIS", "BLUES"),
        ("TAMPA BAY", "LIGHTNING"),
        ("TORONTO", "MAPLE LEAFS"),
        ("UTAH", "HOCKEY CLUB"),
        ("VANCOUVER", "CANUCKS"),
        ("VEGAS", "GOLDEN KNIGHTS"),
        ("WASHINGTON", "CAPITALS"),
        ("WINNIPEG", "JETS"),
    ),
}

# Shorthand that bettors and slips use in place of the official nickname.
NICKNAME_ALIASES: dict[str, tuple] = {
    "NINERS":     ("NFL", "49ERS"),
    "BUCS":       ("NFL", "BUCCANEERS"),
    "PATS":       ("NFL", "PATRIOTS"),
    "SIXERS":     ("NBA", "76ERS"),
    "BLAZERS":    ("NBA", "TRAIL BLAZERS"),
    "CAVS":       ("NBA", "CAVALIERS"),
    "MAVS":       ("NBA", "MAVERICKS"),
    "T-WOLVES":   ("NBA", "TIMBERWOLVES"),
    "D-BACKS":    ("MLB", "DIAMONDBACKS"),
    "DBACKS":     ("MLB", "DIAMONDBACKS"),
    "A'S":        ("MLB", "ATHLETICS"),
    "HABS":       ("NHL", "CANADIENS"),
    "LEAFS":      ("NHL", "MAPLE LEAFS"),
    "CANES":      ("NHL", "HURRICANES"),
    "PENS":       ("NHL", "PENGUINS"),
    "AVS":        ("NHL", "AVALANCHE"),
    "BOLTS":      ("NHL", "LIGHTNING"),
    "SENS":       ("NHL", "SENATORS"),
}

# Nicknames used by two pro leagues at once. Each league lists the cues
# (cities, states, abbreviations) that pin the text to it. "default" applies
# when no cue, no co-occurring team and no other ambiguous hit decides.
AMBIGUOUS_NICKNAMES: dict[str, dict] = {
    "GIANTS": {
        "leagues": {
            "NFL": ("NEW YORK", "NY", "NYG", "BIG BLUE"),
            "MLB": ("SAN FRANCISCO", "SF", "SFG"),
        },
        "default": "NFL",
    },
    "RANGERS": {
        "leagues": {
            "NHL": ("NEW YORK", "NY", "NYR", "BROADWAY"),
            "MLB": ("TEXAS", "TEX", "ARLINGTON"),
        },
        "default": "NHL",
    },
    "KINGS": {
        "leagues": {
            "NBA": ("SACRAMENTO", "SAC"),
            "NHL": ("LOS ANGELES", "LA", "LAK"),
        },
        "default": "NBA",
    },
    "CARDINALS": {
        "leagues": {
            "NFL": ("ARIZONA", "ARI", "AZ"),
            "MLB": ("ST. LOUIS", "ST LOUIS", "STL"),
        },
        "default": "NFL",
    },
    "PANTHERS": {
        "leagues": {
            "NFL": ("CAROLINA", "CAR"),
            "NHL": ("FLORIDA", "FLA"),
        },
        "default": "NFL",
    },
    "JETS": {
        "leagues": {
            "NFL": ("NEW YORK", "NY", "NYJ", "GANG GREEN"),
            "NHL": ("WINNIPEG", "WPG"),
        },
        "default": "NFL",
    },
}

# Pro nicknames that college programs also carry ("LSU TIGERS", "UCLA BRUINS",
# "VIRGINIA CAVALIERS", "DUKE BLUE DEVILS"). A nickname-only hit on one of
# these defers to the college stage only when a school name directly precedes
# it; "BRUINS VS FLORIDA" is still an NHL game.
COLLEGE_SHARED_NICKNAMES: frozenset = frozenset({
    "TIGERS", "CARDINALS", "PANTHERS", "EAGLES", "BEARS", "RAMS", "LIONS",
    "COWBOYS", "HURRICANES", "JAGUARS", "BRONCOS", "WARRIORS", "HAWKS",
    "HORNETS", "TITANS", "SEAHAWKS", "FALCONS", "BENGALS", "BUCCANEERS",
    "SAINTS", "RAIDERS", "VIKINGS", "PIRATES", "BRAVES", "BRUINS", "DUCKS",
    "FLAMES", "PENGUINS", "ISLANDERS", "DEVILS", "FLYERS", "BULLS",
    "CAVALIERS", "MAVERICKS", "ROCKETS", "GRIZZLIES", "SUNS", "KNIGHTS",
    "GOLDEN KNIGHTS", "WILD", "STARS", "THUNDER",
})


# ---------------------------------------------------------------------------
# College rosters
# ---------------------------------------------------------------------------

# Programs in both the football and the basketball roster.
_DUAL_SPORT_SCHOOLS: frozenset = frozenset({
    # ACC
    "BOSTON COLLEGE", "CAL", "CALIFORNIA", "CLEMSON", "DUKE", "FLORIDA STATE",
    "FSU", "GEORGIA TECH", "GA TECH", "LOUISVILLE", "MIAMI", "NC STATE",
    "NORTH CAROLINA", "UNC", "PITTSBURGH", "PITT", "SMU", "STANFORD",
    "SYRACUSE", "VIRGINIA", "UVA", "VIRGINIA TECH", "VA TECH", "WAKE FOREST",
    # Big Ten
    "ILLINOIS", "INDIANA", "IOWA", "MARYLAND", "MICHIGAN", "MICHIGAN STATE",
    "MINNESOTA", "NEBRASKA", "NORTHWESTERN", "OHIO STATE", "OREGON",
    "PENN STATE", "PURDUE", "RUTGERS", "UCLA", "USC", "WASHINGTON",
    "WISCONSIN",
    # Big 12
    "ARIZONA", "ARIZONA STATE", "BAYLOR", "BYU", "CINCINNATI", "COLORADO",
    "HOUSTON", "IOWA STATE", "KANSAS", "KANSAS STATE", "OKLAHOMA STATE",
    "TCU", "TEXAS TECH", "UCF", "UTAH", "WEST VIRGINIA",
    # SEC
    "ALABAMA", "ARKANSAS", "AUBURN", "FLORIDA", "GEORGIA", "KENTUCKY", "LSU",
    "MISSISSIPPI STATE", "MISSOURI", "MIZZOU", "OKLAHOMA", "OLE MISS",
    "SOUTH CAROLINA", "TENNESSEE", "TEXAS", "TEXAS A&M", "VANDERBILT",
    # Independents + Pac-12 remainder
    "NOTRE DAME", "OREGON STATE", "WASHINGTON STATE", "UCONN", "CONNECTICUT",
    # American
    "MEMPHIS", "TULANE", "TULSA", "SOUTH FLORIDA", "USF", "TEMPLE", "EAST CAROLINA",
    "ECU", "UAB", "UTSA", "NORTH TEXAS", "RICE", "FAU",
    "FLORIDA ATLANTIC", "ARMY", "NAVY",
    # Mountain West
    "SAN DIEGO STATE", "BOISE STATE", "COLORADO STATE", "FRESNO STATE", "UNLV",
    "NEVADA", "NEW MEXICO", "WYOMING", "UTAH STATE", "AIR FORCE",
    "SAN JOSE STATE", "HAWAII",
    # MAC
    "AKRON", "BALL STATE", "BOWLING GREEN", "CENTRAL MICHIGAN",
    "EASTERN MICHIGAN", "KENT STATE", "MIAMI (OH)", "MIAMI OHIO", "NIU",
    "NORTHERN ILLINOIS", "OHIO", "TOLEDO", "WESTERN MICHIGAN",
    # Sun Belt
    "APPALACHIAN STATE", "APP STATE", "ARKANSAS STATE", "COASTAL CAROLINA",
    "GEORGIA SOUTHERN", "GEORGIA STATE", "JAMES MADISON", "LOUISIANA",
    "MARSHALL", "OLD DOMINION", "SOUTH ALABAMA", "SOUTHERN MISS",
    "TEXAS STATE", "TROY", "ULM",
    # Conference USA
    "FIU", "JACKSONVILLE STATE", "LIBERTY", "LOUISIANA TECH",
    "MIDDLE TENNESSEE", "NEW MEXICO STATE", "SAM HOUSTON", "UTEP",
    "WESTERN KENTUCKY", "WKU", "KENNESAW STATE",
})

# Football roster entries absent from the basketball roster (mostly FCS).
_FOOTBALL_ONLY_SCHOOLS: frozenset = frozenset({
    "NORTH DAKOTA STATE", "NDSU", "SOUTH DAKOTA STATE", "MONTANA",
    "MONTANA STATE", "SACRAMENTO STATE", "UC DAVIS", "INCARNATE WORD",
    "EASTERN WASHINGTON", "IDAHO", "WEBER STATE", "SOUTHERN ILLINOIS",
    "NORTHERN IOWA", "YOUNGSTOWN STATE", "ILLINOIS STATE", "DELAWARE",
    "WILLIAM & MARY", "HOLY CROSS", "LAFAYETTE", "LEHIGH", "HARVARD", "YALE",
    "PRINCETON", "DARTMOUTH", "CORNELL", "JACKSON STATE", "FLORIDA A&M", "GRAMBLING",
    "ALCORN STATE", "TENNESSEE STATE", "SOUTH CAROLINA STATE",
    "NORTH CAROLINA A&T", "NORTH CAROLINA CENTRAL", "CHATTANOOGA",
    "FURMAN", "MERCER", "WOFFORD", "SAMFORD", "THE CITADEL", "ABILENE CHRISTIAN",
    "TARLETON STATE", "STEPHEN F. AUSTIN", "NICHOLLS", "MCNEESE",
    "SOUTHEASTERN LOUISIANA", "LAMAR", "AUSTIN PEAY", "EASTERN KENTUCKY",
    "CENTRAL ARKANSAS", "DELAWARE STATE", "HOWARD", "MORGAN STATE",
    "NORFOLK STATE", "BETHUNE-COOKMAN", "ALABAMA STATE", "ALABAMA A&M",
    "PRAIRIE VIEW", "TEXAS SOUTHERN", "ARKANSAS-PINE BLUFF", "NEW HAMPSHIRE",
    "MAINE", "ALBANY", "STONY BROOK",
    "ELON", "CAMPBELL", "HAMPTON", "TOWSON", "MONMOUTH", "BRYANT",
    "CENTRAL CONNECTICUT", "ROBERT MORRIS",
    "SACRED HEART", "WAGNER", "STONEHILL", "MERRIMACK", "LONG ISLAND",
    "SOUTHERN UTAH", "UTAH TECH", "NORTHERN ARIZONA", "CAL POLY",
    "PORTLAND STATE", "IDAHO STATE", "NORTHERN COLORADO",
    "SOUTH DAKOTA", "NORTH DAKOTA", "WESTERN ILLINOIS",
    "INDIANA STATE", "MISSOURI STATE", "SOUTHEAST MISSOURI", "UT MARTIN",
    "EASTERN ILLINOIS", "LINDENWOOD", "TENNESSEE TECH", "GARDNER-WEBB",
    "CHARLESTON SOUTHERN", "EAST TENNESSEE STATE", "ETSU", "VMI",
    "WESTERN CAROLINA", "UAPB", "MISSISSIPPI VALLEY STATE",
})

# Basketball roster entries absent from the football roster: schools with
# no FBS/FCS program, or only an insignificant one.
_BASKETBALL_ONLY_SCHOOLS: frozenset = frozenset({
    # Big East
    "GONZAGA", "VILLANOVA", "CREIGHTON", "XAVIER", "MARQUETTE", "ST. JOHN'S",
    "ST JOHN'S", "ST. JOHNS", "SETON HALL", "PROVIDENCE", "BUTLER", "DEPAUL",
    "GEORGETOWN",
    # West Coast
    "SAINT MARY'S", "ST. MARY'S", "SANTA CLARA", "SAN FRANCISCO DONS",
    "PEPPERDINE", "LOYOLA MARYMOUNT", "PORTLAND PILOTS",
    "SAN DIEGO TOREROS",
    # Atlantic 10
    "DAYTON", "VCU", "SAINT LOUIS", "SAINT JOSEPH'S", "ST. JOSEPH'S",
    "LA SALLE", "GEORGE MASON", "GEORGE WASHINGTON", "ST. BONAVENTURE",
    "LOYOLA CHICAGO", "RICHMOND", "DUQUESNE", "FORDHAM", "RHODE ISLAND",
    "DAVIDSON", "UMASS",
    # Missouri Valley / Horizon / others
    "DRAKE", "BRADLEY", "BELMONT", "WICHITA STATE", "VALPARAISO", "EVANSVILLE",
    "MURRAY STATE", "OAKLAND", "WRIGHT STATE", "NORTHERN KENTUCKY",
    "CLEVELAND STATE", "DETROIT MERCY",
    "IUPUI", "PURDUE FORT WAYNE", "UIC", "LOYOLA",
    # Mid-majors with tournament pedigree
    "SAINT PETER'S", "IONA", "SIENA", "MANHATTAN", "FAIRFIELD", "CANISIUS",
    "NIAGARA", "QUINNIPIAC", "MARIST", "RIDER", "VERMONT", "UMBC",
    "HOFSTRA", "NORTHEASTERN", "DREXEL", "COLLEGE OF CHARLESTON",
    "UNC WILMINGTON", "UNCW", "UNC GREENSBORO", "UNC ASHEVILLE", "WINTHROP",
    "HIGH POINT", "LONGWOOD", "RADFORD", "PRESBYTERIAN", "GRAND CANYON",
    "SEATTLE U", "UTAH VALLEY", "CAL BAPTIST", "UC IRVINE", "UC SANTA BARBARA",
    "UCSB", "UC RIVERSIDE", "UC SAN DIEGO", "LONG BEACH STATE",
    "CAL STATE FULLERTON", "CSUN", "ORAL ROBERTS", "OMAHA", "KANSAS CITY ROOS", "ST. THOMAS",
    "TEXAS A&M-CORPUS CHRISTI", "UT ARLINGTON", "UTRGV",
    "LITTLE ROCK", "SIU EDWARDSVILLE", "CHICAGO STATE", "FLORIDA GULF COAST",
    "FGCU", "LIPSCOMB", "NORTH FLORIDA", "STETSON", "QUEENS", "BELLARMINE",
    "BOSTON UNIVERSITY", "COLGATE", "BUCKNELL",
    "LOYOLA MARYLAND", "SOUTHERN INDIANA", "TEXAS A&M-COMMERCE",
})

COLLEGE_FOOTBALL_TEAMS: frozenset = _DUAL_SPORT_SCHOOLS | _FOOTBALL_ONLY_SCHOOLS
COLLEGE_BASKETBALL_TEAMS: frozenset = _DUAL_SPORT_SCHOOLS | _BASKETBALL_ONLY_SCHOOLS


# ---------------------------------------------------------------------------
# Keyword cues
# ---------------------------------------------------------------------------

# College dual-sport tie-breakers: tournament/bowl terms and stat-prop names.
COLLEGE_BASKETBALL_KEYWORDS: tuple = (
    "MARCH MADNESS", "FINAL FOUR", "SWEET 16", "SWEET SIXTEEN", "ELITE EIGHT",
    "ELITE 8", "NCAA TOURNAMENT", "BIG DANCE", "FIRST FOUR", "NIT",
    "REBOUNDS", "ASSISTS", "THREES", "3-POINTERS", "3PT",
)

COLLEGE_FOOTBALL_KEYWORDS: tuple = (
    "BOWL", "CFP", "COLLEGE FOOTBALL PLAYOFF", "HEISMAN", "TOUCHDOWN",
    "TOUCHDOWNS", "ANYTIME TD", "PASSING YARDS", "RUSHING YARDS",
    "RECEIVING YARDS", "FIELD GOAL", "INTERCEPTION",
)

COMBAT_KEYWORDS: tuple = (
    "UFC", "MMA", "BELLATOR", "PFL", "BOXING", "KO", "TKO", "KO/TKO",
    "SUBMISSION", "BY DECISION", "GO THE DISTANCE", "GOES THE DISTANCE",
    "FIGHT NIGHT", "ROUNDS", "MCGREGOR", "ADESANYA", "PEREIRA", "MAKHACHEV",
    "VOLKANOVSKI", "TOPURIA", "O'MALLEY", "ASPINALL", "CANELO", "FURY", "USYK",
    "INOUE",
)

TENNIS_KEYWORDS: tuple = (
    "ATP", "WTA", "WIMBLEDON", "ROLAND GARROS", "FRENCH OPEN", "AUSTRALIAN OPEN",
    "DAVIS CUP", "SETS", "SET 1", "1ST SET", "TIEBREAK", "TIE BREAK",
    "GAMES HANDICAP", "TOTAL GAMES", "DJOKOVIC", "ALCARAZ", "SINNER",
    "MEDVEDEV", "ZVEREV", "RUNE", "RUUD", "TSITSIPAS", "FRITZ", "NADAL",
    "FEDERER", "SWIATEK", "SABALENKA", "GAUFF", "RYBAKINA", "PEGULA",
    "OSAKA",
)

GOLF_KEYWORDS: tuple = (
    "PGA", "LPGA", "LIV", "DP WORLD TOUR", "MASTERS", "OPEN CHAMPIONSHIP",
    "RYDER CUP", "PRESIDENTS CUP", "TOP 5 FINISH", "TOP 10 FINISH",
    "TOP 20 FINISH", "MAKE THE CUT", "MAKE CUT", "MISSED CUT", "ROUND LEADER",
    "HOLE IN ONE", "BIRDIES", "SCHEFFLER", "MCILROY", "RAHM", "KOEPKA",
    "DECHAMBEAU", "SPIETH", "MORIKAWA", "SCHAUFFELE", "HOVLAND", "CANTLAY",
    "FLEETWOOD", "TIGER WOODS",
)

# MLS clubs whose city is also a college roster entry (or close to one).
# Checked before the college stage.
MLS_CLUBS: tuple = (
    "INTER MIAMI", "ORLANDO CITY", "NEW YORK CITY FC", "NYCFC", "NEW YORK RED BULLS",
    "ATLANTA UNITED", "MINNESOTA UNITED", "SPORTING KANSAS CITY", "SPORTING KC",
    "HOUSTON DYNAMO", "FC CINCINNATI", "NASHVILLE SC", "CHARLOTTE FC",
    "COLUMBUS CREW", "SEATTLE SOUNDERS", "PORTLAND TIMBERS", "COLORADO RAPIDS",
    "REAL SALT LAKE", "SAN JOSE EARTHQUAKES", "NEW ENGLAND REVOLUTION",
    "TORONTO FC", "CF MONTREAL", "VANCOUVER WHITECAPS", "ST. LOUIS CITY",
    "ST LOUIS CITY", "SAN DIEGO FC", "PHILADELPHIA UNION", "D.C. UNITED",
    "DC UNITED", "CHICAGO FIRE", "FC DALLAS", "AUSTIN FC", "LA GALAXY", "LAFC",
)

SOCCER_KEYWORDS: tuple = (
    "EPL", "PREMIER LEAGUE", "CHAMPIONS LEAGUE", "EUROPA LEAGUE", "LA LIGA",
    "BUNDESLIGA", "SERIE A", "LIGUE 1", "MLS", "UEFA", "FIFA", "WORLD CUP",
    "FA CUP", "BOTH TEAMS TO SCORE", "BTTS", "DRAW", "DRAW NO BET",
    "GOALSCORER", "CLEAN SHEET", "ARSENAL", "CHELSEA", "LIVERPOOL",
    "MAN UTD", "MAN UNITED", "MANCHESTER UNITED", "MAN CITY",
    "MANCHESTER CITY", "TOTTENHAM", "SPURS FC", "NEWCASTLE", "ASTON VILLA",
    "EVERTON", "WEST HAM", "REAL MADRID", "BARCELONA", "ATLETICO",
    "BAYERN", "DORTMUND", "JUVENTUS", "INTER MILAN", "AC MILAN", "NAPOLI",
    "PSG", "PARIS SAINT-GERMAIN", "INTER MIAMI", "LA GALAXY", "LAFC",
    "MESSI", "RONALDO", "HAALAND", "MBAPPE", "SALAH",
)

MOTORSPORT_KEYWORDS: tuple = (
    "F1", "FORMULA 1", "FORMULA ONE", "GRAND PRIX", "NASCAR", "INDYCAR",
    "INDY 500", "DAYTONA 500", "POLE POSITION", "PODIUM FINISH", "FASTEST LAP",
    "VERSTAPPEN", "HAMILTON", "LECLERC", "NORRIS", "PIASTRI", "SAINZ",
    "ALONSO",
)

ESPORTS_KEYWORDS: tuple = (
    "ESPORTS", "E-SPORTS", "CS2", "CSGO", "CS:GO", "COUNTER-STRIKE",
    "LEAGUE OF LEGENDS", "VALORANT", "DOTA", "DOTA 2", "OVERWATCH",
    "CALL OF DUTY LEAGUE", "ROCKET LEAGUE", "MAP 1", "MAPS HANDICAP",
)
