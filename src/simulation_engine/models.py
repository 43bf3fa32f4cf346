"""Data models for the simulation engine."""

from dataclasses import dataclass

from src.data_pipeline.models import Player


@dataclass
class CandidateScore:
    """Breakdown of the computer drafter's score for a single candidate."""

    player: Player
    base_score: float  # vor * scarcity weight
    need_multiplier: float
    tier_multiplier: float
    late_round_multiplier: float
    noise: float
    score: float
