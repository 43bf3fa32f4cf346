"""Player model shared by the data pipeline and the draft engine."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Player:
    """A valuated player available for drafting.

    ``vor`` and ``tier`` are filled in by :class:`VORCalculator` from the
    player's points and rank within its position; nothing else sets them.
    """

    player_id: str
    name: str
    position: str  # QB, RB, WR or TE
    points: float
    vor: float = 0.0
    tier: int = 0
    raw: Dict[str, str] = field(default_factory=dict, compare=False, hash=False)
