"""Draft initialization - creates new draft instances from projection data."""

import copy
import logging
from pathlib import Path
from typing import Dict, List, Optional

from src.data_pipeline.build_pool import run_pipeline
from src.data_pipeline.config import POSITIONS, SCORING_FORMATS
from src.data_pipeline.models import Player
from src.draft_manager.config import (
    DEFAULT_DRAFT_SPEED,
    DEFAULT_LEAGUE_SIZE,
    DEFAULT_ROSTER_SIZE,
    DEFAULT_ROSTER_TARGETS,
    DEFAULT_ROUNDS,
    DEFAULT_SCORING_FORMAT,
    DEFAULT_USER_POSITION,
    DRAFT_SPEED_DELAYS,
)
from src.draft_manager.draft_state import DraftState, LeagueConfig

logger = logging.getLogger(__name__)


class DraftInitializer:
    """Handles creation of new draft instances."""

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = data_dir

    def create_draft(
        self,
        scoring_format: str = DEFAULT_SCORING_FORMAT,
        league_size: int = DEFAULT_LEAGUE_SIZE,
        rounds: int = DEFAULT_ROUNDS,
        roster_size: int = DEFAULT_ROSTER_SIZE,
        roster_targets: Optional[Dict[str, Dict[str, int]]] = None,
        user_position: int = DEFAULT_USER_POSITION,
        draft_speed: str = DEFAULT_DRAFT_SPEED,
        autopick: bool = False,
        player_pool: Optional[List[Player]] = None,
    ) -> DraftState:
        """
        Create a new draft instance in the setup phase.

        Args:
            scoring_format: "STANDARD", "HALF_PPR", or "PPR"
            league_size: Number of teams (at least 2)
            rounds: Number of draft rounds
            roster_size: Roster cap per team (at least ``rounds``)
            roster_targets: Position targets {"QB": {"min": 1, "max": 2}, ...}
            user_position: User's 1-based draft slot
            draft_speed: "slow", "medium", or "fast"
            autopick: Whether the computer also picks for the user
            player_pool: Pre-built valuated pool; built from the projection
                CSVs when omitted

        Returns:
            DraftState ready to be started
        """
        league_config = LeagueConfig(
            scoring_format=scoring_format,
            league_size=league_size,
            rounds=rounds,
            roster_size=roster_size,
            roster_targets=copy.deepcopy(roster_targets or DEFAULT_ROSTER_TARGETS),
            user_position=user_position,
            draft_speed=draft_speed,
            autopick=autopick,
        )
        self.validate_config(league_config)

        if player_pool is None:
            player_pool = run_pipeline(
                scoring_format,
                self.data_dir,
                replacement_rank=league_config.replacement_rank,
                scarcity_weights=league_config.scarcity_weights,
            )

        if len(player_pool) < league_config.total_picks():
            logger.warning(
                "Only %d players for %d picks; the draft will end early "
                "when the pool runs out",
                len(player_pool), league_config.total_picks(),
            )

        draft_state = DraftState.create_new(league_config, player_pool)

        logger.info(
            "Created draft: %d teams, %d rounds, %s scoring, %d players available",
            league_size, rounds, scoring_format, len(draft_state.available_players),
        )

        return draft_state

    @staticmethod
    def validate_config(config: LeagueConfig):
        """Validate draft configuration."""
        if config.scoring_format not in SCORING_FORMATS:
            raise ValueError(
                f"Invalid scoring format '{config.scoring_format}'. "
                f"Must be one of: {sorted(SCORING_FORMATS)}"
            )

        if config.league_size < 2:
            raise ValueError("League size must be at least 2")

        if config.rounds < 1:
            raise ValueError("Rounds must be at least 1")

        if not 1 <= config.user_position <= config.league_size:
            raise ValueError(
                f"User draft position ({config.user_position}) "
                f"must be between 1 and {config.league_size}"
            )

        if config.draft_speed not in DRAFT_SPEED_DELAYS:
            raise ValueError(
                f"Invalid draft speed '{config.draft_speed}'. "
                f"Must be one of: {sorted(DRAFT_SPEED_DELAYS)}"
            )

        if config.roster_size < config.rounds:
            raise ValueError(
                f"Roster size ({config.roster_size}) must be at least "
                f"the number of rounds ({config.rounds})"
            )

        missing = set(POSITIONS) - set(config.roster_targets)
        if missing:
            raise ValueError(f"Roster targets missing positions: {sorted(missing)}")

        for position in POSITIONS:
            minimum = config.get_position_min(position)
            maximum = config.get_position_max(position)
            if minimum < 0 or maximum < minimum:
                raise ValueError(
                    f"Invalid {position} targets: min={minimum}, max={maximum}"
                )

        max_total = sum(config.get_position_max(pos) for pos in POSITIONS)
        if max_total < config.rounds:
            raise ValueError(
                f"Position maximums allow only {max_total} players "
                f"but the draft has {config.rounds} rounds"
            )
