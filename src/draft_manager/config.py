# Default league settings
DEFAULT_LEAGUE_SIZE = 12
DEFAULT_ROUNDS = 15
DEFAULT_ROSTER_SIZE = 15
DEFAULT_SCORING_FORMAT = "PPR"
DEFAULT_USER_POSITION = 1  # 1-based draft slot

# Roster targets for computer drafting and pick legality
DEFAULT_ROSTER_TARGETS = {
    "QB": {"min": 1, "max": 2},
    "RB": {"min": 4, "max": 6},
    "WR": {"min": 4, "max": 6},
    "TE": {"min": 1, "max": 2},
}

# Starting lineup: 1 QB, 2 RB, 2 WR, 1 TE, plus one FLEX
STARTER_SLOTS = {
    "QB": 1,
    "RB": 2,
    "WR": 2,
    "TE": 1,
}
FLEX_ELIGIBLE_POSITIONS = ("RB", "WR", "TE")
FLEX_SLOTS = 1

# Seconds to wait before each automated pick
DRAFT_SPEED_DELAYS = {
    "slow": 1.0,
    "medium": 0.5,
    "fast": 0.2,
}
DEFAULT_DRAFT_SPEED = "medium"

USER_TEAM_NAME = "Your Team"
CPU_TEAM_NAME = "CPU Team {number}"

# Picks shown in the "on deck" queue
UPCOMING_PICKS_COUNT = 8
