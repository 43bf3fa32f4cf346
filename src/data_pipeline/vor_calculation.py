"""VOR (Value Over Replacement) and tier calculation.

For each position, identifies the "replacement player" (the player at the
position's replacement rank, e.g. QB12 or RB24) and computes every player's
value relative to that baseline. Players are also bucketed into tiers of a
fixed width by position rank.
"""

import logging
from typing import Dict, Optional

import pandas as pd

from src.data_pipeline.config import REPLACEMENT_RANK, TIER_SIZE
from src.simulation_engine.config import POSITION_SCARCITY_WEIGHTS

logger = logging.getLogger(__name__)


class VORCalculator:
    """Calculate VOR, tiers and the combined best-available ordering."""

    def __init__(
        self,
        replacement_rank: Optional[Dict[str, int]] = None,
        scarcity_weights: Optional[Dict[str, float]] = None,
        tier_size: int = TIER_SIZE,
    ):
        if tier_size < 1:
            raise ValueError(f"tier_size must be positive, got {tier_size}")
        self.replacement_rank = dict(replacement_rank or REPLACEMENT_RANK)
        self.scarcity_weights = dict(scarcity_weights or POSITION_SCARCITY_WEIGHTS)
        self.tier_size = tier_size

    def calculate_position_vor(
        self, players_df: pd.DataFrame, position: str
    ) -> pd.DataFrame:
        """Add ``vor`` and ``tier`` columns for a single position.

        1. Sort players by points (descending, stable).
        2. The replacement player is the one at index ``rank - 1``; when
           fewer players exist the replacement level is 0.
        3. VOR = points - replacement points.
        4. Tier = index // tier_size + 1.

        Negative VOR is preserved; it marks a below-replacement player.
        """
        out = (
            players_df.sort_values("points", ascending=False, kind="stable")
            .reset_index(drop=True)
        )
        rank = self.replacement_rank.get(position, 0)

        if 0 < rank <= len(out):
            replacement_points = float(out.iloc[rank - 1]["points"])
        else:
            replacement_points = 0.0

        out["vor"] = out["points"] - replacement_points
        out["tier"] = (out.index // self.tier_size + 1).astype(int)

        if not out.empty:
            logger.debug(
                "VOR %s: replacement=#%d (%.2f pts), range=[%.2f, %.2f]",
                position, rank, replacement_points,
                out["vor"].max(), out["vor"].min(),
            )
        return out

    def build_player_pool(self, scored: Dict[str, pd.DataFrame]) -> pd.DataFrame:
        """Valuate every position and merge into one ranked pool.

        The pool is ordered by position-weighted VOR
        (``vor * scarcity_weight``), descending. This is the default
        best-available view for the draft.
        """
        frames = [
            self.calculate_position_vor(df, position)
            for position, df in scored.items()
            if not df.empty
        ]
        if not frames:
            logger.warning("No players to valuate")
            return pd.DataFrame(
                columns=["player_id", "name", "position", "points", "raw",
                         "vor", "tier", "weighted_vor"]
            )

        pool = pd.concat(frames, ignore_index=True)
        weights = pool["position"].map(self.scarcity_weights).fillna(1.0)
        pool["weighted_vor"] = pool["vor"] * weights
        pool = pool.sort_values(
            "weighted_vor", ascending=False, kind="stable"
        ).reset_index(drop=True)

        logger.info("Built player pool: %d players", len(pool))
        return pool
