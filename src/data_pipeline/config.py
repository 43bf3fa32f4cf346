from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
PROJECTIONS_DIR = DATA_DIR / "fantasy predictions"

POSITIONS = ("QB", "RB", "WR", "TE")

# Projection CSV file per position
POSITION_FILES = {
    "QB": "2025_qb_predictions.csv",
    "RB": "2025_rb_predictions.csv",
    "WR": "2025_wr_predictions.csv",
    "TE": "2025_te_predictions.csv",
}

# Scoring formats -> points per reception
SCORING_FORMATS = {
    "STANDARD": 0.0,
    "HALF_PPR": 0.5,
    "PPR": 1.0,
}

SCORING_LABELS = {
    "STANDARD": "Standard",
    "HALF_PPR": "Half PPR",
    "PPR": "PPR",
}

# Points per stat unit (receptions handled by SCORING_FORMATS)
PASS_YD_POINTS = 0.04
PASS_TD_POINTS = 4.0
INT_POINTS = -2.0
RUSH_REC_YD_POINTS = 0.1
RUSH_REC_TD_POINTS = 6.0

# Projection CSV stat columns
PASS_YDS_COL = "PassingYDS_pred"
PASS_TD_COL = "PassingTD_pred"
PASS_INT_COL = "PassingInt_pred"
RUSH_YDS_COL = "RushingYDS_pred"
RUSH_TD_COL = "RushingTD_pred"
REC_COL = "ReceivingRec_pred"
REC_YDS_COL = "ReceivingYDS_pred"
REC_TD_COL = "ReceivingTD_pred"
TARGETS_COL = "Targets_pred"

# Exact header names tried (in order) when looking for the player name
NAME_COLUMN_CANDIDATES = [
    "PlayerName",
    "player",
    "player_name",
    "name",
    "playername",
    "full_name",
]

# Rank of the replacement-level player at each position (1-based)
REPLACEMENT_RANK = {
    "QB": 12,
    "RB": 24,
    "WR": 24,
    "TE": 12,
}

# Players per tier within a position
TIER_SIZE = 4
