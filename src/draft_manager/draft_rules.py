"""Draft rule enforcement and pick validation."""

from typing import List, Optional, Tuple

from src.data_pipeline.models import Player
from src.draft_manager.draft_state import DraftPhase, DraftState, TeamRoster
from src.draft_manager.roster_validator import RosterValidator


class DraftRules:
    """Enforces all draft rules and validation logic."""

    def __init__(self, draft_state: DraftState, validator: RosterValidator):
        self.draft_state = draft_state
        self.validator = validator

    def validate_pick(self, player: Player) -> Tuple[bool, Optional[str]]:
        """
        Validate if a pick by the team on the clock is legal.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        # Check 1: Is the draft running?
        if self.draft_state.phase != DraftPhase.DRAFTING:
            return False, f"Draft is not in progress (phase: {self.draft_state.phase})"

        # Check 2: Is player available?
        if not self.draft_state.is_player_available(player):
            return False, f"{player.name} is not in the available pool"

        # Check 3: Roster size and position limits
        team = self.draft_state.get_current_team()
        is_valid, error = self.validator.can_add(team, player.position)
        if not is_valid:
            return False, error

        return True, None

    def legal_players(self, team: TeamRoster) -> List[Player]:
        """Available players *team* could legally draft, in pool order."""
        return [
            p for p in self.draft_state.available_players
            if self.validator.can_add(team, p.position)[0]
        ]

    def has_legal_pick(self, team: TeamRoster) -> bool:
        """Whether any available player can legally join *team*."""
        return any(
            self.validator.can_add(team, p.position)[0]
            for p in self.draft_state.available_players
        )

    def is_draft_complete(self) -> bool:
        """Check if all rounds are complete."""
        return (
            len(self.draft_state.picks)
            >= self.draft_state.league_config.total_picks()
        )
