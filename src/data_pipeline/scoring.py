"""Fantasy point scoring for projection rows.

Passing, rushing and receiving stats are all summed whenever present, so the
same rule applies to every position. Only the reception value depends on the
scoring format.
"""

from typing import Dict, List, Mapping

from src.data_pipeline.config import (
    INT_POINTS,
    PASS_INT_COL,
    PASS_TD_COL,
    PASS_TD_POINTS,
    PASS_YD_POINTS,
    PASS_YDS_COL,
    REC_COL,
    REC_TD_COL,
    REC_YDS_COL,
    RUSH_REC_TD_POINTS,
    RUSH_REC_YD_POINTS,
    RUSH_TD_COL,
    RUSH_YDS_COL,
    SCORING_FORMATS,
    TARGETS_COL,
)
from src.data_pipeline.ingestion import parse_numeric


# Display columns per position: (CSV key, label)
_STAT_COLUMNS = {
    "QB": [
        (PASS_YDS_COL, "Pass Yds"),
        (PASS_TD_COL, "Pass TD"),
        (PASS_INT_COL, "INT"),
        (RUSH_YDS_COL, "Rush Yds"),
        (RUSH_TD_COL, "Rush TD"),
    ],
    "RB": [
        (RUSH_YDS_COL, "Rush Yds"),
        (RUSH_TD_COL, "Rush TD"),
        (REC_COL, "Rec"),
        (REC_YDS_COL, "Rec Yds"),
        (REC_TD_COL, "Rec TD"),
    ],
    "WR": [
        (REC_COL, "Rec"),
        (REC_YDS_COL, "Rec Yds"),
        (REC_TD_COL, "Rec TD"),
        (TARGETS_COL, "Targets"),
    ],
}
_STAT_COLUMNS["TE"] = _STAT_COLUMNS["WR"]


def validate_scoring_format(scoring_format: str) -> str:
    """Return *scoring_format* unchanged, raising if it is not supported."""
    if scoring_format not in SCORING_FORMATS:
        raise ValueError(
            f"Invalid scoring_format: {scoring_format!r}. "
            f"Must be one of: {sorted(SCORING_FORMATS)}"
        )
    return scoring_format


def compute_fantasy_points(
    row: Mapping, position: str, scoring_format: str
) -> float:
    """Score a single projection row.

    Args:
        row: Mapping of column name to raw value (dict or ``pd.Series``).
            Missing or unparsable fields count as 0.
        position: Player position. Accepted for symmetry with the display
            helpers; the rule itself does not vary by position.
        scoring_format: ``"STANDARD"``, ``"HALF_PPR"`` or ``"PPR"``.

    Returns:
        Fantasy points rounded to 2 decimal places.
    """
    ppr = SCORING_FORMATS[validate_scoring_format(scoring_format)]

    def stat(col: str) -> float:
        return parse_numeric(row.get(col))

    points = (
        stat(PASS_YDS_COL) * PASS_YD_POINTS
        + stat(PASS_TD_COL) * PASS_TD_POINTS
        + stat(PASS_INT_COL) * INT_POINTS
    )
    points += stat(RUSH_YDS_COL) * RUSH_REC_YD_POINTS + stat(RUSH_TD_COL) * RUSH_REC_TD_POINTS
    points += (
        stat(REC_YDS_COL) * RUSH_REC_YD_POINTS
        + stat(REC_TD_COL) * RUSH_REC_TD_POINTS
        + stat(REC_COL) * ppr
    )
    return round(points, 2)


def get_stat_columns(position: str) -> List[Dict[str, str]]:
    """Stat columns shown for *position*, as ``{"key", "label"}`` dicts."""
    return [
        {"key": key, "label": label}
        for key, label in _STAT_COLUMNS.get(position, [])
    ]


def format_stat(value) -> str:
    """Render a raw stat value with one decimal place."""
    return f"{parse_numeric(value):.1f}"
