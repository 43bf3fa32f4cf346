"""CSV ingestion for per-position projection files.

Handles the quirks of the projection exports:
- Whitespace around headers and values
- Quoted fields containing commas
- Comma-formatted numbers (e.g., "3,904.1")
- Missing files (the position simply yields no players)
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from src.data_pipeline.config import POSITION_FILES, POSITIONS, PROJECTIONS_DIR

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when a projection CSV cannot be parsed."""


def parse_numeric(value, default: float = 0.0) -> float:
    """Parse a numeric value that may contain commas (e.g., '3,904.1' -> 3904.1).

    Anything missing or non-numeric becomes *default*.
    """
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return default if pd.isna(value) else float(value)
    s = str(value).replace(",", "").strip().strip('"')
    if s == "":
        return default
    try:
        parsed = float(s)
    except ValueError:
        return default
    return default if pd.isna(parsed) or parsed in (float("inf"), float("-inf")) else parsed


class ProjectionIngester:
    """Reads one projection CSV per position.

    Every value is kept as a stripped string; numeric parsing happens at
    scoring time so the source row can be kept verbatim for display.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else PROJECTIONS_DIR

    def _resolve_path(self, position: str) -> Path:
        return self.data_dir / POSITION_FILES[position]

    def read_position(self, position: str) -> pd.DataFrame:
        """Read the projection file for *position*.

        Returns an empty DataFrame when the file does not exist.

        Raises:
            IngestionError: if the file exists but cannot be parsed.
        """
        filepath = self._resolve_path(position)
        if not filepath.exists():
            logger.warning("Projection file not found for %s: %s", position, filepath)
            return pd.DataFrame()

        logger.info("Reading %s projections: %s", position, filepath.name)
        try:
            df = pd.read_csv(
                filepath,
                dtype=str,
                keep_default_na=False,
                quotechar='"',
                skip_blank_lines=True,
            )
        except pd.errors.EmptyDataError:
            logger.warning("Projection file for %s is empty: %s", position, filepath)
            return pd.DataFrame()
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read {filepath}: {e}") from e

        df.columns = [str(c).strip() for c in df.columns]
        df = df.fillna("")
        for col in df.columns:
            df[col] = df[col].astype(str).str.strip()

        # Drop rows that are blank in every column
        df = df[(df != "").any(axis=1)].reset_index(drop=True)

        logger.info("Loaded %d %s projections", len(df), position)
        return df

    def read_all(self) -> Dict[str, pd.DataFrame]:
        """Read all four position files.

        A position whose file is missing or unreadable yields an empty
        DataFrame; the failure is logged and the other positions still load.
        """
        frames: Dict[str, pd.DataFrame] = {}
        for position in POSITIONS:
            try:
                frames[position] = self.read_position(position)
            except IngestionError:
                logger.exception("Failed to load %s projections", position)
                frames[position] = pd.DataFrame()
        return frames
