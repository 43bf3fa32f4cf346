"""Build the ranked player pool from the projection CSVs.

Usage:
    python -m src.data_pipeline.build_pool [scoring_format] [data_dir] [limit]

Examples:
    python -m src.data_pipeline.build_pool PPR
    python -m src.data_pipeline.build_pool HALF_PPR /path/to/csvs 50
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from src.data_pipeline.cleaning import DataCleaner
from src.data_pipeline.ingestion import ProjectionIngester
from src.data_pipeline.models import Player
from src.data_pipeline.scoring import validate_scoring_format
from src.data_pipeline.transformation import DataTransformer
from src.data_pipeline.vor_calculation import VORCalculator
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_pipeline(
    scoring_format: str = "PPR",
    data_dir: Path | None = None,
    replacement_rank: Optional[Dict[str, int]] = None,
    scarcity_weights: Optional[Dict[str, float]] = None,
) -> List[Player]:
    """Run the complete projection pipeline.

    Args:
        scoring_format: ``"STANDARD"``, ``"HALF_PPR"`` or ``"PPR"``.
        data_dir: Directory containing the per-position CSVs.
            Defaults to ``data/fantasy predictions``.
        replacement_rank: Per-position replacement ranks (defaults from config).
        scarcity_weights: Per-position VOR weights (defaults from config).

    Returns:
        Valuated players, best-available (highest weighted VOR) first.
    """
    validate_scoring_format(scoring_format)
    logger.info("Starting pipeline (%s scoring)", scoring_format)

    # 1. Ingest
    logger.info("Step 1/4: Ingesting CSV files...")
    raw = ProjectionIngester(data_dir).read_all()

    # 2. Clean
    logger.info("Step 2/4: Cleaning data...")
    cleaned = DataCleaner().clean_all(raw)

    # 3. Score + dedupe
    logger.info("Step 3/4: Scoring players...")
    transformer = DataTransformer(scoring_format)
    scored = transformer.transform(cleaned)

    # 4. VOR + tiers
    logger.info("Step 4/4: Calculating VOR and tiers...")
    calculator = VORCalculator(
        replacement_rank=replacement_rank, scarcity_weights=scarcity_weights
    )
    pool = calculator.build_player_pool(scored)
    players = transformer.to_players(pool)

    pos_counts: dict[str, int] = {}
    for p in players:
        pos_counts[p.position] = pos_counts.get(p.position, 0) + 1

    logger.info("Pipeline complete: %d players", len(players))
    logger.info(
        "  By position: %s",
        ", ".join(f"{k}={v}" for k, v in sorted(pos_counts.items())),
    )
    return players


def format_rankings(players: List[Player], limit: int = 50) -> str:
    """Render the ranked pool as a fixed-width table."""
    lines = [f"{'#':>4}  {'Player':<28}{'Pos':<5}{'Pts':>8}{'VOR':>9}{'Tier':>6}"]
    for rank, p in enumerate(players[:limit], start=1):
        lines.append(
            f"{rank:>4}  {p.name[:27]:<28}{p.position:<5}"
            f"{p.points:>8.2f}{p.vor:>9.2f}{p.tier:>6d}"
        )
    return "\n".join(lines)


if __name__ == "__main__":
    setup_logging()

    scoring = sys.argv[1].upper() if len(sys.argv) > 1 else "PPR"
    data_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None
    limit = int(sys.argv[3]) if len(sys.argv) > 3 else 50

    try:
        ranked = run_pipeline(scoring, data_dir)
        print(format_rankings(ranked, limit))
    except Exception:
        logger.exception("Pipeline failed")
        sys.exit(1)
