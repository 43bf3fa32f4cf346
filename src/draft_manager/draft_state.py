"""Draft state data models - single source of truth for all draft information."""

import copy
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.data_pipeline.config import POSITIONS, REPLACEMENT_RANK
from src.data_pipeline.models import Player
from src.draft_manager.config import (
    CPU_TEAM_NAME,
    DEFAULT_DRAFT_SPEED,
    DEFAULT_LEAGUE_SIZE,
    DEFAULT_ROSTER_SIZE,
    DEFAULT_ROSTER_TARGETS,
    DEFAULT_ROUNDS,
    DEFAULT_SCORING_FORMAT,
    DEFAULT_USER_POSITION,
    DRAFT_SPEED_DELAYS,
    FLEX_ELIGIBLE_POSITIONS,
    FLEX_SLOTS,
    STARTER_SLOTS,
    USER_TEAM_NAME,
)
from src.draft_manager.snake_order import get_snake_team_index
from src.simulation_engine.config import POSITION_SCARCITY_WEIGHTS


class DraftPhase:
    """Draft lifecycle: setup -> drafting -> complete (-> setup on reset)."""

    SETUP = "setup"
    DRAFTING = "drafting"
    COMPLETE = "complete"


def _empty_roster() -> Dict[str, List[Player]]:
    return {pos: [] for pos in POSITIONS}


@dataclass
class TeamRoster:
    """A single team's drafted players, one list per position.

    Each position list is kept sorted by points (descending) on insert, so
    the first N entries are always the team's best N at that position.
    """

    team_index: int
    team_name: str
    is_user: bool
    roster: Dict[str, List[Player]] = field(default_factory=_empty_roster)

    def add(self, player: Player):
        """Add player to the bucket for their position.

        Position limits are checked by DraftRules before this is called.
        """
        bucket = self.roster.setdefault(player.position, [])
        bucket.append(player)
        # list.sort is stable, so ties keep draft order
        bucket.sort(key=lambda p: p.points, reverse=True)

    def get_roster_count(self, position: str) -> int:
        """Get number of players at position."""
        return len(self.roster.get(position, []))

    def position_counts(self) -> Dict[str, int]:
        return {pos: self.get_roster_count(pos) for pos in POSITIONS}

    def all_players(self) -> List[Player]:
        return [p for pos in POSITIONS for p in self.roster.get(pos, [])]

    def total_players(self) -> int:
        return sum(len(players) for players in self.roster.values())

    def has_player(self, player_id: str) -> bool:
        return any(p.player_id == player_id for p in self.all_players())

    def total_points(self) -> float:
        """Projected points across every rostered player."""
        return sum(p.points for p in self.all_players())

    def starter_players(self) -> List[Player]:
        """Starting lineup: 1 QB, 2 RB, 2 WR, 1 TE and one FLEX.

        The FLEX is the best remaining RB/WR/TE after the position starters.
        Short positions simply contribute fewer starters.
        """
        starters: List[Player] = []
        flex_candidates: List[Player] = []
        for pos in POSITIONS:
            bucket = self.roster.get(pos, [])
            slots = STARTER_SLOTS.get(pos, 0)
            starters.extend(bucket[:slots])
            if pos in FLEX_ELIGIBLE_POSITIONS:
                flex_candidates.extend(bucket[slots:])

        flex_candidates.sort(key=lambda p: p.points, reverse=True)
        return starters + flex_candidates[:FLEX_SLOTS]

    def starter_points(self) -> float:
        """Projected points of the starting lineup."""
        return sum(p.points for p in self.starter_players())

    @staticmethod
    def is_starter_slot(position: str, index: int) -> bool:
        """Whether the player at *index* in a position list is a starter.

        Display approximation only: it ignores the FLEX slot.
        """
        return 0 <= index < STARTER_SLOTS.get(position, 0)


@dataclass(frozen=True)
class DraftPick:
    """A single draft pick. Immutable once recorded in the ledger."""

    round: int  # 1-based
    pick: int  # 1-based pick within the round
    overall: int  # 1-based
    team_index: int  # 0-based
    player: Player


@dataclass(frozen=True)
class UpcomingPick:
    """An upcoming pick in the draft queue."""

    pick: int  # 1-based overall pick
    team: int  # 1-based team number
    is_user: bool


@dataclass
class TeamRanking:
    """Team result row, ranked by starter points."""

    team_index: int
    name: str
    roster: TeamRoster
    total_points: float
    starter_points: float
    is_user: bool


@dataclass
class LeagueConfig:
    """League and draft configuration settings."""

    scoring_format: str = DEFAULT_SCORING_FORMAT  # "STANDARD", "HALF_PPR", "PPR"
    league_size: int = DEFAULT_LEAGUE_SIZE
    rounds: int = DEFAULT_ROUNDS
    roster_size: int = DEFAULT_ROSTER_SIZE
    roster_targets: Dict[str, Dict[str, int]] = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_ROSTER_TARGETS)
    )
    scarcity_weights: Dict[str, float] = field(
        default_factory=lambda: dict(POSITION_SCARCITY_WEIGHTS)
    )
    replacement_rank: Dict[str, int] = field(
        default_factory=lambda: dict(REPLACEMENT_RANK)
    )
    user_position: int = DEFAULT_USER_POSITION  # 1-based draft slot
    draft_speed: str = DEFAULT_DRAFT_SPEED  # "slow", "medium", "fast"
    autopick: bool = False

    def total_picks(self) -> int:
        return self.rounds * self.league_size

    @property
    def user_team_index(self) -> int:
        return self.user_position - 1

    def pick_delay(self) -> float:
        """Seconds to wait before an automated pick."""
        return DRAFT_SPEED_DELAYS[self.draft_speed]

    def get_position_min(self, position: str) -> int:
        return self.roster_targets.get(position, {}).get("min", 0)

    def get_position_max(self, position: str) -> int:
        return self.roster_targets.get(position, {}).get("max", 0)

    def team_name(self, team_index: int) -> str:
        if team_index == self.user_team_index:
            return USER_TEAM_NAME
        return CPU_TEAM_NAME.format(number=team_index + 1)


@dataclass
class DraftState:
    """Complete draft state - single source of truth.

    Only DraftController mutates a DraftState.
    """

    league_config: LeagueConfig
    player_pool: List[Player]  # full valuated pool, best-available first
    phase: str = DraftPhase.SETUP
    picks: List[DraftPick] = field(default_factory=list)
    available_players: List[Player] = field(default_factory=list)
    teams: List[TeamRoster] = field(default_factory=list)
    autopick: bool = False
    pool_exhausted: bool = False
    generation: int = 0  # bumped on start/reset to invalidate pending auto picks

    @classmethod
    def create_new(
        cls, league_config: LeagueConfig, player_pool: List[Player]
    ) -> "DraftState":
        """Factory method to create a draft in the setup phase."""
        state = cls(
            league_config=league_config,
            player_pool=list(player_pool),
            autopick=league_config.autopick,
        )
        state.reset_board()
        return state

    def reset_board(self):
        """Empty the ledger and rosters and restore the full player pool."""
        self.picks = []
        self.available_players = list(self.player_pool)
        self.teams = [
            TeamRoster(
                team_index=i,
                team_name=self.league_config.team_name(i),
                is_user=(i == self.league_config.user_team_index),
            )
            for i in range(self.league_config.league_size)
        ]
        self.pool_exhausted = False
        self.generation += 1

    # ------------------------------------------------------------------
    # Derived values (all computed from the ledger length)
    # ------------------------------------------------------------------

    @property
    def current_pick_index(self) -> int:
        """0-based index of the pick on the clock."""
        return len(self.picks)

    @property
    def current_round(self) -> int:
        """1-based round of the pick on the clock."""
        return self.current_pick_index // self.league_config.league_size + 1

    @property
    def current_team_index(self) -> int:
        return get_snake_team_index(
            self.current_pick_index, self.league_config.league_size
        )

    @property
    def is_user_turn(self) -> bool:
        return self.current_team_index == self.league_config.user_team_index

    @property
    def is_complete(self) -> bool:
        return self.phase == DraftPhase.COMPLETE

    def get_team(self, team_index: int) -> TeamRoster:
        return self.teams[team_index]

    def get_current_team(self) -> TeamRoster:
        """Get the team currently on the clock."""
        return self.teams[self.current_team_index]

    def get_user_team(self) -> TeamRoster:
        return self.teams[self.league_config.user_team_index]

    def is_player_available(self, player: Player) -> bool:
        return any(p.player_id == player.player_id for p in self.available_players)

    def remove_available(self, player: Player):
        self.available_players = [
            p for p in self.available_players if p.player_id != player.player_id
        ]
