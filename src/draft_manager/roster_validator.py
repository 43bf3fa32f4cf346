"""Roster target checks - position minimums, maximums and roster size."""

from typing import Dict, List, Tuple

from src.data_pipeline.config import POSITIONS
from src.draft_manager.draft_state import LeagueConfig, TeamRoster


class RosterValidator:
    """Validates roster construction against the league's roster targets."""

    def __init__(self, league_config: LeagueConfig):
        self.league_config = league_config

    def position_counts(self, team: TeamRoster) -> Dict[str, int]:
        return team.position_counts()

    def picks_remaining(self, team: TeamRoster) -> int:
        """Open roster spots left for *team*."""
        return self.league_config.roster_size - team.total_players()

    def needed_positions(self, team: TeamRoster) -> List[str]:
        """Positions still below their roster minimum."""
        return [
            pos for pos in POSITIONS
            if team.get_roster_count(pos) < self.league_config.get_position_min(pos)
        ]

    def is_position_full(self, team: TeamRoster, position: str) -> bool:
        """Whether *team* has reached the maximum at *position*."""
        return team.get_roster_count(position) >= self.league_config.get_position_max(position)

    def can_add(self, team: TeamRoster, position: str) -> Tuple[bool, str]:
        """
        Check if team can draft another player at this position.

        Returns:
            (is_valid, error_message) - (True, "") if valid
        """
        if self.picks_remaining(team) <= 0:
            return False, (
                f"{team.team_name} roster is full "
                f"({team.total_players()}/{self.league_config.roster_size})"
            )

        if self.is_position_full(team, position):
            return False, (
                f"{team.team_name} cannot draft another {position} "
                f"({team.get_roster_count(position)}/"
                f"{self.league_config.get_position_max(position)})"
            )

        return True, ""

    def validate_final_roster(self, team: TeamRoster) -> Tuple[bool, List[str]]:
        """
        Check a completed roster against the position minimums and maximums.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        for position in POSITIONS:
            actual = team.get_roster_count(position)
            minimum = self.league_config.get_position_min(position)
            maximum = self.league_config.get_position_max(position)

            if actual < minimum:
                errors.append(
                    f"Missing {minimum - actual} {position} "
                    f"(have {actual}, need {minimum})"
                )
            elif actual > maximum:
                errors.append(
                    f"Too many {position} players "
                    f"(have {actual}, max {maximum})"
                )

        return (len(errors) == 0, errors)

    def get_roster_summary(self, team: TeamRoster) -> Dict[str, Dict]:
        """Generate summary of team's roster status."""
        summary = {}

        for position in POSITIONS:
            filled = team.get_roster_count(position)
            minimum = self.league_config.get_position_min(position)
            summary[position] = {
                "filled": filled,
                "min": minimum,
                "max": self.league_config.get_position_max(position),
                "needed": max(0, minimum - filled),
            }

        return summary
