"""Draft controller - orchestrates pick flow and state updates."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from src.data_pipeline.models import Player
from src.draft_manager.config import UPCOMING_PICKS_COUNT
from src.draft_manager.draft_rules import DraftRules
from src.draft_manager.draft_state import (
    DraftPhase,
    DraftPick,
    DraftState,
    TeamRanking,
    TeamRoster,
    UpcomingPick,
)
from src.draft_manager.roster_validator import RosterValidator
from src.draft_manager.snake_order import get_pick_slot, get_snake_team_index
from src.simulation_engine.cpu_drafter import CPUDrafter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingAutoPick:
    """An automated pick waiting out its pacing delay.

    The ticket records the draft it was scheduled against; if the draft has
    been reset or has moved on by the time the delay elapses, the pick is
    discarded.
    """

    generation: int
    pick_index: int
    delay: float


class DraftController:
    """Main controller for draft orchestration.

    Coordinates between DraftRules (validation), CPUDrafter (computer picks)
    and DraftState (state mutation). The controller is the only writer of
    the ledger, the available pool and the rosters.

    Protocol violations (picking outside the drafting phase, picking a
    player who is not available, or overfilling a position) are no-ops: they
    are logged as errors and return ``None``.
    """

    def __init__(
        self,
        draft_state: DraftState,
        cpu_drafter: Optional[CPUDrafter] = None,
        rng=None,
    ):
        self.draft_state = draft_state
        self.validator = RosterValidator(draft_state.league_config)
        self.rules = DraftRules(draft_state, self.validator)
        self.cpu_drafter = cpu_drafter or CPUDrafter(
            self.validator,
            scarcity_weights=draft_state.league_config.scarcity_weights,
            rng=rng,
        )

    # ------------------------------------------------------------------
    # Phase transitions
    # ------------------------------------------------------------------

    def start(self):
        """Begin a fresh draft from the full player pool.

        Only valid from setup; a running or finished draft must be reset
        first. Calls from any other phase are logged and ignored.
        """
        if self.draft_state.phase != DraftPhase.SETUP:
            logger.error("Cannot start draft in phase %s", self.draft_state.phase)
            return

        self.draft_state.reset_board()
        self.draft_state.phase = DraftPhase.DRAFTING

        config = self.draft_state.league_config
        logger.info(
            "Draft started: %d teams, %d rounds, %s scoring, %d players, "
            "user picks at slot %d",
            config.league_size, config.rounds, config.scoring_format,
            len(self.draft_state.available_players), config.user_position,
        )
        self._check_pool_exhausted()

    def reset(self):
        """Return to setup with an empty ledger, empty rosters and the full pool.

        Any automated pick scheduled before the reset is invalidated.
        """
        self.draft_state.reset_board()
        self.draft_state.phase = DraftPhase.SETUP
        self.draft_state.autopick = False
        logger.info("Draft reset")

    # ------------------------------------------------------------------
    # Picks
    # ------------------------------------------------------------------

    def apply_pick(self, player: Player) -> Optional[DraftPick]:
        """Record *player* as the pick of the team on the clock.

        Returns:
            The new DraftPick, or ``None`` if the pick was rejected.
        """
        is_valid, error_msg = self.rules.validate_pick(player)
        if not is_valid:
            logger.error("Rejected pick: %s", error_msg)
            return None

        state = self.draft_state
        slot = get_pick_slot(len(state.picks), state.league_config.league_size)
        team = state.get_team(slot.team_index)

        pick = DraftPick(
            round=slot.round,
            pick=slot.pick,
            overall=slot.overall,
            team_index=slot.team_index,
            player=player,
        )

        state.picks.append(pick)
        state.remove_available(player)
        team.add(player)

        logger.info(
            "Pick %d (Rd %d.%02d): %s selects %s (%s, %.2f pts, VOR %.2f)",
            pick.overall, pick.round, pick.pick, team.team_name,
            player.name, player.position, player.points, player.vor,
        )

        if self.rules.is_draft_complete():
            state.phase = DraftPhase.COMPLETE
            logger.info("Draft complete after %d picks", len(state.picks))
        else:
            self._check_pool_exhausted()

        return pick

    def handle_user_pick(self, player: Player) -> Optional[DraftPick]:
        """Apply a pick made by the user, only when it is the user's turn."""
        if not self.draft_state.is_user_turn:
            logger.error(
                "Rejected user pick of %s: team %d is on the clock",
                player.name, self.draft_state.current_team_index + 1,
            )
            return None
        return self.apply_pick(player)

    def set_autopick(self, enabled: bool):
        """Let the computer drafter pick for the user as well."""
        self.draft_state.autopick = enabled
        logger.info("Autopick %s", "enabled" if enabled else "disabled")

    # ------------------------------------------------------------------
    # Automation
    # ------------------------------------------------------------------

    @property
    def should_auto_pick(self) -> bool:
        """Whether the pick on the clock is made by the computer."""
        state = self.draft_state
        return (
            state.phase == DraftPhase.DRAFTING
            and bool(state.available_players)
            and (not state.is_user_turn or state.autopick)
        )

    def pending_auto_pick(self) -> Optional[PendingAutoPick]:
        """Schedule the automated pick on the clock, if there is one."""
        if not self.should_auto_pick:
            return None
        return PendingAutoPick(
            generation=self.draft_state.generation,
            pick_index=self.draft_state.current_pick_index,
            delay=self.draft_state.league_config.pick_delay(),
        )

    def advance_if_auto(
        self,
        pending: Optional[PendingAutoPick] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> Optional[DraftPick]:
        """Make the computer's pick when the team on the clock is automated.

        Waits out the pacing delay with *sleep*, then applies the pick
        unless the ticket has gone stale (draft reset, phase changed, or
        another pick landed first).

        Args:
            pending: A ticket from :meth:`pending_auto_pick`. When omitted
                one is scheduled now.
            sleep: Delay function, ``time.sleep`` by default.

        Returns:
            The applied DraftPick, or ``None`` if nothing was picked.
        """
        if pending is None:
            pending = self.pending_auto_pick()
            if pending is None:
                return None

        (sleep or time.sleep)(pending.delay)

        if self._is_stale(pending):
            logger.debug(
                "Discarding stale automated pick %d (generation %d)",
                pending.pick_index + 1, pending.generation,
            )
            return None
        if not self.should_auto_pick:
            return None

        state = self.draft_state
        team = state.get_current_team()
        player = self.cpu_drafter.select_pick(
            state.available_players, team, state.current_round
        )
        if player is None:
            return None

        is_valid, error_msg = self.rules.validate_pick(player)
        if not is_valid:
            legal = self.rules.legal_players(team)
            if not legal:
                logger.error("No legal pick for %s: %s", team.team_name, error_msg)
                return None
            logger.warning(
                "Computer proposed an illegal pick (%s); taking %s instead",
                error_msg, legal[0].name,
            )
            player = legal[0]

        return self.apply_pick(player)

    def run_until_user_turn(
        self, sleep: Optional[Callable[[float], None]] = None
    ) -> List[DraftPick]:
        """Make automated picks until the user is on the clock or the draft ends."""
        made: List[DraftPick] = []
        while self.should_auto_pick:
            pick = self.advance_if_auto(sleep=sleep)
            if pick is None:
                break
            made.append(pick)
        return made

    def simulate_to_completion(
        self, sleep: Optional[Callable[[float], None]] = None
    ) -> List[DraftPick]:
        """Autopick every remaining pick, the user's included."""
        if self.draft_state.phase == DraftPhase.SETUP:
            self.start()
        self.set_autopick(True)
        return self.run_until_user_turn(sleep=sleep)

    def _is_stale(self, pending: PendingAutoPick) -> bool:
        state = self.draft_state
        return (
            state.phase != DraftPhase.DRAFTING
            or pending.generation != state.generation
            or pending.pick_index != state.current_pick_index
        )

    def _check_pool_exhausted(self):
        """End the draft early if the team on the clock has no legal pick."""
        state = self.draft_state
        if state.phase != DraftPhase.DRAFTING:
            return
        team = state.get_current_team()
        if not self.rules.has_legal_pick(team):
            state.phase = DraftPhase.COMPLETE
            state.pool_exhausted = True
            logger.warning(
                "Player pool exhausted: no legal pick for %s at pick %d of %d",
                team.team_name, state.current_pick_index + 1,
                state.league_config.total_picks(),
            )

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def is_complete(self) -> bool:
        """Whether the draft is finished."""
        return self.draft_state.is_complete

    def get_current_team(self) -> TeamRoster:
        """Get the team currently on the clock."""
        return self.draft_state.get_current_team()

    def get_available_players(
        self, position: Optional[str] = None, search: str = ""
    ) -> List[Player]:
        """Available players in best-available order.

        Args:
            position: If provided, filter to this position only.
            search: Case-insensitive substring of the player name.
        """
        query = search.lower()
        return [
            p for p in self.draft_state.available_players
            if (position is None or p.position == position)
            and query in p.name.lower()
        ]

    def upcoming_picks(self, count: int = UPCOMING_PICKS_COUNT) -> List[UpcomingPick]:
        """The next *count* picks, starting with the one on the clock."""
        state = self.draft_state
        config = state.league_config
        upcoming = []
        for pick_index in range(
            state.current_pick_index,
            min(state.current_pick_index + count, config.total_picks()),
        ):
            team_index = get_snake_team_index(pick_index, config.league_size)
            upcoming.append(
                UpcomingPick(
                    pick=pick_index + 1,
                    team=team_index + 1,
                    is_user=(team_index == config.user_team_index),
                )
            )
        return upcoming

    def get_team_rankings(self) -> List[TeamRanking]:
        """Teams ranked by starting-lineup points, best first."""
        rankings = [
            TeamRanking(
                team_index=team.team_index,
                name=team.team_name,
                roster=team,
                total_points=team.total_points(),
                starter_points=team.starter_points(),
                is_user=team.is_user,
            )
            for team in self.draft_state.teams
        ]
        rankings.sort(key=lambda r: r.starter_points, reverse=True)
        return rankings

    def get_draft_summary(self) -> Dict:
        """Generate summary of draft results.

        Returns dict with "error" key if draft is not yet complete.
        """
        if not self.draft_state.is_complete:
            return {"error": "Draft not complete"}

        summary = {
            "total_picks": len(self.draft_state.picks),
            "pool_exhausted": self.draft_state.pool_exhausted,
            "teams": [],
        }

        for rank, ranking in enumerate(self.get_team_rankings(), start=1):
            is_valid, errors = self.validator.validate_final_roster(ranking.roster)
            summary["teams"].append({
                "rank": rank,
                "team_index": ranking.team_index,
                "team_name": ranking.name,
                "is_user": ranking.is_user,
                "starter_points": round(ranking.starter_points, 2),
                "total_points": round(ranking.total_points, 2),
                "roster": {
                    pos: [p.name for p in players]
                    for pos, players in ranking.roster.roster.items()
                },
                "roster_valid": is_valid,
                "roster_errors": errors,
            })

        return summary
