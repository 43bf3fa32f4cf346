"""Tests for the computer drafter.

Fixtures ``neutral_rng`` and ``fixed_rng`` are provided by conftest.py.
"""

import random

import pytest

from src.data_pipeline.models import Player
from src.draft_manager.draft_state import LeagueConfig, TeamRoster
from src.draft_manager.roster_validator import RosterValidator
from src.simulation_engine.cpu_drafter import CPUDrafter


# ── Helpers ──────────────────────────────────────────────────────────

def _p(pid, position, vor, tier=3, points=None):
    return Player(
        player_id=pid,
        name=pid,
        position=position,
        points=points if points is not None else 100.0 + vor,
        vor=vor,
        tier=tier,
    )


def _make_roster(**counts):
    roster = TeamRoster(team_index=1, team_name="CPU Team 2", is_user=False)
    for position, n in counts.items():
        for i in range(n):
            roster.add(_p(f"{position}-own-{i}", position, 10.0))
    return roster


def _make_drafter(rng, **config_overrides):
    return CPUDrafter(RosterValidator(LeagueConfig(**config_overrides)), rng=rng)


# ── Scoring ──────────────────────────────────────────────────────────

class TestScoreCandidates:
    def test_base_score_is_weighted_vor(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(QB=1, RB=4, WR=4, TE=1)
        scores = drafter.score_candidates(
            [_p("rb", "RB", 100.0), _p("qb", "QB", 100.0)], roster, 3
        )
        assert [c.base_score for c in scores] == pytest.approx([115.0, 95.0])
        assert [c.score for c in scores] == pytest.approx([115.0, 95.0])
        assert all(c.noise == pytest.approx(1.0) for c in scores)

    def test_need_multiplier(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(QB=1, RB=4, WR=4)
        (te,) = drafter.score_candidates([_p("te", "TE", 50.0)], roster, 3)
        assert te.need_multiplier == 1.3
        assert te.score == pytest.approx(65.0)

    def test_top_tier_multiplier(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(QB=1, RB=4, WR=4, TE=1)
        scores = drafter.score_candidates(
            [_p("a", "WR", 100.0, tier=1), _p("b", "WR", 100.0, tier=2),
             _p("c", "WR", 100.0, tier=3)],
            roster, 3,
        )
        assert [c.tier_multiplier for c in scores] == [1.1, 1.1, 1.0]

    def test_late_round_boost_for_missing_qb(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(RB=4, WR=4, TE=1)
        early = drafter.score_candidates([_p("qb", "QB", 40.0)], roster, 7)[0]
        late = drafter.score_candidates([_p("qb", "QB", 40.0)], roster, 8)[0]
        assert early.late_round_multiplier == 1.0
        assert late.late_round_multiplier == 1.25
        # need and late-round boosts stack
        assert late.score == pytest.approx(40.0 * 0.95 * 1.3 * 1.25)

    def test_no_late_round_boost_when_position_rostered(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(QB=1, TE=1)
        scores = drafter.score_candidates(
            [_p("qb", "QB", 40.0), _p("te", "TE", 40.0), _p("rb", "RB", 40.0)],
            roster, 10,
        )
        assert [c.late_round_multiplier for c in scores] == [1.0, 1.0, 1.0]

    @pytest.mark.parametrize("value,noise", [(0.0, 0.95), (0.5, 1.0), (0.999999, 1.05)])
    def test_noise_bounds(self, fixed_rng, value, noise):
        drafter = _make_drafter(fixed_rng(value))
        (c,) = drafter.score_candidates([_p("wr", "WR", 10.0)], _make_roster(), 1)
        assert c.noise == pytest.approx(noise, abs=1e-5)

    def test_one_draw_per_candidate(self, fixed_rng):
        rng = fixed_rng(0.5)
        drafter = _make_drafter(rng)
        pool = [_p(f"wr{i}", "WR", 10.0 - i) for i in range(5)]
        drafter.score_candidates(pool, _make_roster(), 1)
        assert rng.calls == 5


# ── Candidate filtering ──────────────────────────────────────────────

class TestCandidateFiltering:
    def test_maxed_positions_excluded(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(QB=2)
        scores = drafter.score_candidates(
            [_p("qb", "QB", 500.0), _p("rb", "RB", 10.0)], roster, 1
        )
        assert [c.player.player_id for c in scores] == ["rb"]

    def test_all_positions_maxed_falls_back_to_pool(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(QB=2, TE=2)
        scores = drafter.score_candidates(
            [_p("qb", "QB", 50.0), _p("te", "TE", 60.0)], roster, 1
        )
        assert len(scores) == 2

    def test_urgency_restricts_to_needed(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        # 12 rostered, 3 picks left, needs QB: 3 <= 1 + 2
        roster = _make_roster(RB=6, WR=5, TE=1)
        pick = drafter.select_pick(
            [_p("wr", "WR", 300.0, tier=1), _p("qb", "QB", 1.0)], roster, 13
        )
        assert pick.player_id == "qb"

    def test_no_urgency_with_enough_picks(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        # 11 rostered, 4 picks left, needs QB: 4 > 1 + 2
        roster = _make_roster(RB=5, WR=5, TE=1)
        pick = drafter.select_pick(
            [_p("wr", "WR", 300.0), _p("qb", "QB", 1.0)], roster, 12
        )
        assert pick.player_id == "wr"

    def test_urgency_without_needed_players_keeps_candidates(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(RB=6, WR=5, TE=1)
        pick = drafter.select_pick([_p("wr", "WR", 300.0)], roster, 13)
        assert pick.player_id == "wr"


# ── select_pick ──────────────────────────────────────────────────────

class TestSelectPick:
    def test_empty_pool(self, neutral_rng):
        assert _make_drafter(neutral_rng).select_pick([], _make_roster(), 1) is None

    def test_picks_highest_score(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(QB=1, RB=4, WR=4, TE=1)
        pool = [_p("qb", "QB", 110.0), _p("rb", "RB", 100.0)]
        # RB 100 * 1.15 = 115 beats QB 110 * 0.95 = 104.5
        assert drafter.select_pick(pool, roster, 2).player_id == "rb"

    def test_need_boost_changes_pick(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        roster = _make_roster(QB=1, RB=4, WR=4)
        pool = [_p("wr", "WR", 100.0), _p("te", "TE", 90.0)]
        # TE 90 * 1.3 = 117 beats WR 100 * 1.1 = 110
        assert drafter.select_pick(pool, roster, 4).player_id == "te"

    def test_ties_go_to_first_in_pool(self, neutral_rng):
        drafter = _make_drafter(neutral_rng)
        pool = [_p("wr1", "WR", 50.0), _p("wr2", "WR", 50.0)]
        assert drafter.select_pick(pool, _make_roster(), 1).player_id == "wr1"

    def test_noise_can_flip_close_calls(self, fixed_rng):
        pool = [_p("wr1", "WR", 100.0), _p("wr2", "WR", 99.0)]
        favourite = _make_drafter(fixed_rng(0.0, 0.99)).select_pick(pool, _make_roster(), 1)
        assert favourite.player_id == "wr2"

    def test_seeded_rng_is_repeatable(self):
        pool = [_p(f"p{i}", ("RB", "WR")[i % 2], 100.0 - i) for i in range(10)]
        picks = [
            _make_drafter(random.Random(42)).select_pick(pool, _make_roster(), 1)
            for _ in range(2)
        ]
        assert picks[0] == picks[1]

    def test_default_rng(self):
        drafter = CPUDrafter(RosterValidator(LeagueConfig()))
        pick = drafter.select_pick([_p("rb", "RB", 10.0)], _make_roster(), 1)
        assert pick.player_id == "rb"
