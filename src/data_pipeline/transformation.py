"""Data transformation for projection data.

Turns the cleaned per-position DataFrames into scored player tables:
- Scores every row under the selected scoring format
- Removes duplicate listings of the same athlete (keeps the higher score)
- Generates stable player IDs
"""

import logging
from typing import Dict, List

import pandas as pd

from src.data_pipeline.models import Player
from src.data_pipeline.scoring import compute_fantasy_points, validate_scoring_format

logger = logging.getLogger(__name__)

# Columns of a scored player table
SCORED_COLUMNS = ["player_id", "name", "position", "points", "raw"]


class DataTransformer:
    """Scores and deduplicates cleaned projection data."""

    def __init__(self, scoring_format: str):
        self.scoring_format = validate_scoring_format(scoring_format)

    # ------------------------------------------------------------------
    # Scoring + dedupe
    # ------------------------------------------------------------------
    def score_projections(self, df: pd.DataFrame, position: str) -> pd.DataFrame:
        """Score one position's cleaned projections.

        Rows sharing a dedupe key collapse to the highest-scoring one; on a
        tie the earlier row wins.

        Returns:
            DataFrame with columns ``player_id``, ``name``, ``position``,
            ``points`` and ``raw`` (the source row as a dict).
        """
        source_cols = [c for c in df.columns if not str(c).startswith("_")]
        best: Dict[str, dict] = {}
        duplicates = 0

        for _, r in df.iterrows():
            raw = {col: r[col] for col in source_cols}
            points = compute_fantasy_points(raw, position, self.scoring_format)
            key = r["_key"]

            if key in best:
                duplicates += 1
                if points <= best[key]["points"]:
                    continue

            best[key] = {
                "player_id": self.make_player_id(position, r["_player"]),
                "name": r["_player"],
                "position": position,
                "points": points,
                "raw": raw,
            }

        if duplicates:
            logger.info(
                "Dropped %d duplicate %s listing(s), kept highest projection",
                duplicates, position,
            )

        out = pd.DataFrame(list(best.values()), columns=SCORED_COLUMNS)
        out["points"] = out["points"].astype(float)
        logger.info(
            "Scored %d %s players (%s)", len(out), position, self.scoring_format
        )
        return out

    @staticmethod
    def make_player_id(position: str, name: str) -> str:
        """Stable player key, e.g. ``RB-Bijan Robinson``."""
        return f"{position}-{name}"

    # ------------------------------------------------------------------
    # Conversion to draft players
    # ------------------------------------------------------------------
    @staticmethod
    def to_players(valued_df: pd.DataFrame) -> List[Player]:
        """Build :class:`Player` objects from a valuated table, keeping row order."""
        return [
            Player(
                player_id=r["player_id"],
                name=r["name"],
                position=r["position"],
                points=float(r["points"]),
                vor=float(r["vor"]),
                tier=int(r["tier"]),
                raw=dict(r["raw"]),
            )
            for _, r in valued_df.iterrows()
        ]

    # ------------------------------------------------------------------
    # Full transformation pipeline
    # ------------------------------------------------------------------
    def transform(self, cleaned: Dict[str, pd.DataFrame]) -> Dict[str, pd.DataFrame]:
        """Score every cleaned position table.

        Args:
            cleaned: dict from DataCleaner.clean_all() keyed by position.

        Returns:
            dict with the same keys, each a scored, deduplicated table.
        """
        return {
            position: self.score_projections(df, position)
            for position, df in cleaned.items()
        }
