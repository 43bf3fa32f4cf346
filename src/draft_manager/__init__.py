from src.draft_manager.draft_controller import DraftController, PendingAutoPick
from src.draft_manager.draft_initializer import DraftInitializer
from src.draft_manager.draft_rules import DraftRules
from src.draft_manager.draft_state import (
    DraftPhase,
    DraftPick,
    DraftState,
    LeagueConfig,
    TeamRanking,
    TeamRoster,
    UpcomingPick,
)
from src.draft_manager.roster_validator import RosterValidator
from src.draft_manager.snake_order import get_pick_slot, get_snake_team_index

__all__ = [
    "DraftController",
    "DraftInitializer",
    "DraftPhase",
    "DraftPick",
    "DraftRules",
    "DraftState",
    "LeagueConfig",
    "PendingAutoPick",
    "RosterValidator",
    "TeamRanking",
    "TeamRoster",
    "UpcomingPick",
    "get_pick_slot",
    "get_snake_team_index",
]
