# Position scarcity weights (higher = prioritize drafting earlier)
POSITION_SCARCITY_WEIGHTS = {
    "RB": 1.15,
    "WR": 1.10,
    "TE": 1.00,
    "QB": 0.95,
}

# Computer drafter multipliers
NEED_MULTIPLIER = 1.3  # Position below its roster minimum
TOP_TIER_MULTIPLIER = 1.1
TOP_TIER_CUTOFF = 2  # Tiers <= this get TOP_TIER_MULTIPLIER
LATE_ROUND_THRESHOLD = 8  # Round (1-based) where the QB/TE scramble starts
LATE_ROUND_MULTIPLIER = 1.25
LATE_ROUND_POSITIONS = ("QB", "TE")

# Extra picks of slack before needed positions become mandatory
URGENCY_BUFFER = 2

COMPUTER_PERSONALITY_VARIANCE = 0.05  # +/- 5% randomness
