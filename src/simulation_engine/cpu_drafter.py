"""Computer drafter - picks for the non-user teams.

Scores each available player from its VOR and then nudges the score for
the team's roster situation:

* **Scarcity** - VOR is weighted by a fixed per-position scarcity weight.
* **Roster need** - positions still below their roster minimum get a boost,
  and become mandatory when the team is running out of picks.
* **Top tier** - tier 1-2 players get a small boost.
* **Late-round scramble** - from round 8, a team with no QB (or TE) boosts
  that position.
* **Personality** - a bounded random factor so repeat simulations differ.
"""

import logging
import random
from typing import Dict, List, Optional

from src.data_pipeline.models import Player
from src.simulation_engine.config import (
    COMPUTER_PERSONALITY_VARIANCE,
    LATE_ROUND_MULTIPLIER,
    LATE_ROUND_POSITIONS,
    LATE_ROUND_THRESHOLD,
    NEED_MULTIPLIER,
    POSITION_SCARCITY_WEIGHTS,
    TOP_TIER_CUTOFF,
    TOP_TIER_MULTIPLIER,
    URGENCY_BUFFER,
)
from src.simulation_engine.models import CandidateScore

logger = logging.getLogger(__name__)


class CPUDrafter:
    """Select picks for computer-controlled teams.

    The drafter holds no draft state: the available pool, the team's roster
    and the round are passed in on every call.

    Args:
        validator: A :class:`RosterValidator` supplying the team's roster
            needs (``position_counts``, ``needed_positions``,
            ``is_position_full`` and ``picks_remaining``).
        scarcity_weights: Per-position VOR weights.
        rng: Source of the personality noise. Anything with a ``random()``
            method returning floats in ``[0, 1)``; pass a seeded
            ``random.Random`` (or a stub) for repeatable picks.
    """

    def __init__(
        self,
        validator,
        scarcity_weights: Optional[Dict[str, float]] = None,
        rng=None,
        variance: float = COMPUTER_PERSONALITY_VARIANCE,
    ):
        self.validator = validator
        self.scarcity_weights = dict(scarcity_weights or POSITION_SCARCITY_WEIGHTS)
        self.rng = rng if rng is not None else random.Random()
        self.variance = variance

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def select_pick(
        self,
        available_players: List[Player],
        team_roster,
        round_number: int,
    ) -> Optional[Player]:
        """Choose the player a computer team drafts.

        Args:
            available_players: Undrafted players, best-available first.
            team_roster: The acting team's :class:`TeamRoster`.
            round_number: Current round (1-based).

        Returns:
            The highest-scoring candidate (first one on ties), or ``None``
            when no players are available.
        """
        if not available_players:
            return None

        scored = self.score_candidates(available_players, team_roster, round_number)
        if not scored:
            return available_players[0]

        best = max(scored, key=lambda c: c.score)
        logger.debug(
            "CPU pick for round %d: %s (%s) score=%.2f",
            round_number, best.player.name, best.player.position, best.score,
        )
        return best.player

    def score_candidates(
        self,
        available_players: List[Player],
        team_roster,
        round_number: int,
    ) -> List[CandidateScore]:
        """Score every eligible candidate, in pool order.

        Candidates are the players at positions the team has not maxed out
        (or the whole pool if every position is maxed). When a needed
        position is at risk of going unfilled, only needed positions are
        considered.
        """
        counts = self.validator.position_counts(team_roster)
        needed = self.validator.needed_positions(team_roster)
        picks_remaining = self.validator.picks_remaining(team_roster)

        candidates = self._filter_candidates(
            available_players, team_roster, needed, picks_remaining
        )

        return [
            self._score_player(player, counts, needed, round_number)
            for player in candidates
        ]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _filter_candidates(
        self,
        available_players: List[Player],
        team_roster,
        needed: List[str],
        picks_remaining: int,
    ) -> List[Player]:
        candidates = [
            p for p in available_players
            if not self.validator.is_position_full(team_roster, p.position)
        ]
        if not candidates:
            candidates = list(available_players)

        if needed and picks_remaining <= len(needed) + URGENCY_BUFFER:
            urgent = [p for p in candidates if p.position in needed]
            if urgent:
                logger.debug(
                    "Urgency override: %d picks left, needs %s",
                    picks_remaining, needed,
                )
                candidates = urgent

        return candidates

    def _score_player(
        self,
        player: Player,
        counts: Dict[str, int],
        needed: List[str],
        round_number: int,
    ) -> CandidateScore:
        base = player.vor * self.scarcity_weights.get(player.position, 1.0)

        need = NEED_MULTIPLIER if player.position in needed else 1.0
        tier = TOP_TIER_MULTIPLIER if player.tier <= TOP_TIER_CUTOFF else 1.0

        late = 1.0
        if (
            round_number >= LATE_ROUND_THRESHOLD
            and player.position in LATE_ROUND_POSITIONS
            and counts.get(player.position, 0) == 0
        ):
            late = LATE_ROUND_MULTIPLIER

        noise = 1.0 - self.variance + self.rng.random() * 2 * self.variance

        return CandidateScore(
            player=player,
            base_score=base,
            need_multiplier=need,
            tier_multiplier=tier,
            late_round_multiplier=late,
            noise=noise,
            score=base * need * tier * late * noise,
        )
