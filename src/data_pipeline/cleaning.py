"""Data cleaning for projection CSV data.

Projection exports do not agree on what the player-name column is called,
so the name column is located heuristically:
- Try a fixed list of common header names (exact match)
- Fall back to any header containing "name" or "player" (case-insensitive)
- Otherwise use a synthetic per-row name ("Player 7")
"""

import logging
from typing import Iterable, Optional

import pandas as pd

from src.data_pipeline.config import NAME_COLUMN_CANDIDATES

logger = logging.getLogger(__name__)


class DataCleaner:
    """Cleans and standardizes projection rows before scoring."""

    # ------------------------------------------------------------------
    # Name column detection
    # ------------------------------------------------------------------
    @staticmethod
    def detect_name_column(columns: Iterable[str]) -> Optional[str]:
        """Find the column holding the player name.

        Examples:
            ["PlayerName", "Team"]        -> "PlayerName"
            ["Rank", "Full Player Name"]  -> "Full Player Name"
            ["Rank", "Team"]              -> None
        """
        columns = [str(c) for c in columns]
        for candidate in NAME_COLUMN_CANDIDATES:
            if candidate in columns:
                return candidate

        for col in columns:
            lowered = col.lower()
            if "name" in lowered or "player" in lowered:
                return col

        return None

    # ------------------------------------------------------------------
    # Player name helpers
    # ------------------------------------------------------------------
    @staticmethod
    def dedupe_key(name: str) -> str:
        """Key used to detect duplicate listings of the same athlete."""
        return str(name).strip().lower()

    # ------------------------------------------------------------------
    # DataFrame-level cleaning
    # ------------------------------------------------------------------
    def clean_projections(self, df: pd.DataFrame, position: str) -> pd.DataFrame:
        """Clean one position's projections.

        Adds helper columns, prefixed with "_" so they never collide with
        source headers:
            _player   - display name (synthetic when no name column exists)
            _key      - case-insensitive trimmed name used for dedupe
            _position - the position this file was loaded for
        """
        out = df.copy().reset_index(drop=True)
        name_col = self.detect_name_column(out.columns)

        if name_col is None:
            if not out.empty:
                logger.warning(
                    "No player name column found for %s (columns: %s); "
                    "using synthetic names",
                    position, list(out.columns),
                )
            out["_player"] = [f"Player {idx}" for idx in range(len(out))]
        else:
            logger.debug("Using %r as the %s name column", name_col, position)
            out["_player"] = out[name_col].astype(str)

        out["_key"] = out["_player"].apply(self.dedupe_key)
        out["_position"] = position
        logger.info("Cleaned %s projections: %d rows", position, len(out))
        return out

    def clean_all(self, data: dict[str, pd.DataFrame]) -> dict[str, pd.DataFrame]:
        """Clean every per-position DataFrame returned by ProjectionIngester.read_all()."""
        return {
            position: self.clean_projections(df, position)
            for position, df in data.items()
        }
