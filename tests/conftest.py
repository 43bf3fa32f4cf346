"""Shared fixtures for the mock draft test suite."""

import csv
from pathlib import Path

import pytest

from src.data_pipeline.build_pool import run_pipeline
from src.data_pipeline.cleaning import DataCleaner
from src.data_pipeline.config import POSITION_FILES
from src.data_pipeline.ingestion import ProjectionIngester
from src.data_pipeline.transformation import DataTransformer
from src.data_pipeline.vor_calculation import VORCalculator


class FixedRandom:
    """Stand-in for ``random.Random`` that replays a fixed sequence.

    The sequence repeats once exhausted, so ``FixedRandom(0.5)`` always
    yields 0.5 (a noise factor of exactly 1.0).
    """

    def __init__(self, *values):
        self.values = list(values) or [0.5]
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def cleaner():
    return DataCleaner()


@pytest.fixture(scope="module")
def transformer():
    return DataTransformer("PPR")


@pytest.fixture(scope="module")
def vor_calculator():
    return VORCalculator()


@pytest.fixture
def neutral_rng():
    """Random source whose noise factor is always exactly 1.0."""
    return FixedRandom(0.5)


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom sources: ``fixed_rng(0.0, 1.0)``."""
    return FixedRandom


@pytest.fixture
def no_sleep():
    """Records requested delays instead of sleeping."""
    delays = []

    def _sleep(seconds):
        delays.append(seconds)

    _sleep.delays = delays
    return _sleep


# ------------------------------------------------------------------
# Projection CSV fixtures – written to tmp_path
# ------------------------------------------------------------------

def write_projection_csv(path: Path, header, rows):
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)


QB_HEADER = [
    "PlayerName", "Team", "PassingYDS_pred", "PassingTD_pred",
    "PassingInt_pred", "RushingYDS_pred", "RushingTD_pred",
]
SKILL_HEADER = [
    "PlayerName", "Team", "RushingYDS_pred", "RushingTD_pred",
    "ReceivingRec_pred", "ReceivingYDS_pred", "ReceivingTD_pred", "Targets_pred",
]


@pytest.fixture
def projection_dir(tmp_path):
    """Small but draftable projection set: 30 QB, 80 RB, 80 WR, 30 TE."""
    qb_rows = [
        [f"QB {i}", "TST", 4500 - i * 60, 30 - i // 2, 10, 200, 2]
        for i in range(30)
    ]
    write_projection_csv(tmp_path / POSITION_FILES["QB"], QB_HEADER, qb_rows)

    for position, count, base in (("RB", 80, 1400), ("WR", 80, 1500), ("TE", 30, 1000)):
        rows = []
        for i in range(count):
            rush = (base - i * 15) if position == "RB" else 0
            rec_yds = (base - i * 12) if position != "RB" else 300
            rows.append([
                f"{position} {i}", "TST", rush, 6 if position == "RB" else 0,
                80 - i // 2, rec_yds, 5, 100,
            ])
        write_projection_csv(tmp_path / POSITION_FILES[position], SKILL_HEADER, rows)

    return tmp_path


@pytest.fixture
def ingester(projection_dir):
    return ProjectionIngester(projection_dir)


@pytest.fixture
def player_pool(projection_dir):
    """Valuated pool built from the projection CSV fixture (220 players)."""
    return run_pipeline("PPR", projection_dir)
