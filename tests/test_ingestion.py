"""Tests for the projection CSV ingestion module."""

import textwrap

import pandas as pd
import pytest

from src.data_pipeline.config import POSITION_FILES, POSITIONS
from src.data_pipeline.ingestion import (
    IngestionError,
    ProjectionIngester,
    parse_numeric,
)


# ---------------------------------------------------------------------------
# parse_numeric
# ---------------------------------------------------------------------------

class TestParseNumeric:
    def test_plain_number_string(self):
        assert parse_numeric("12.5") == 12.5

    def test_thousands_separator(self):
        assert parse_numeric("3,904.1") == pytest.approx(3904.1)

    def test_quoted(self):
        assert parse_numeric('"1,000"') == 1000.0

    def test_numbers_pass_through(self):
        assert parse_numeric(7) == 7.0
        assert parse_numeric(2.25) == 2.25

    @pytest.mark.parametrize("value", [None, "", "   ", "-", "abc", float("nan"), "nan", "inf"])
    def test_fallback_to_zero(self, value):
        assert parse_numeric(value) == 0.0

    def test_custom_default(self):
        assert parse_numeric("bad", default=-1.0) == -1.0


# ---------------------------------------------------------------------------
# ProjectionIngester
# ---------------------------------------------------------------------------

class TestReadPosition:
    def test_loads_all_rows(self, ingester):
        df = ingester.read_position("QB")
        assert len(df) == 30
        assert "PlayerName" in df.columns

    def test_values_kept_as_strings(self, ingester):
        df = ingester.read_position("RB")
        assert df["RushingYDS_pred"].map(type).eq(str).all()

    def test_missing_file_returns_empty(self, tmp_path):
        df = ProjectionIngester(tmp_path).read_position("TE")
        assert isinstance(df, pd.DataFrame)
        assert df.empty

    def test_empty_file_returns_empty(self, tmp_path):
        (tmp_path / POSITION_FILES["WR"]).write_text("")
        df = ProjectionIngester(tmp_path).read_position("WR")
        assert df.empty

    def test_strips_headers_and_values_and_blank_lines(self, tmp_path):
        content = textwrap.dedent("""\
            PlayerName , PassingYDS_pred
            " Josh Allen ","4,100.5"

            Lamar Jackson ,"3,700"
        """)
        (tmp_path / POSITION_FILES["QB"]).write_text(content)

        df = ProjectionIngester(tmp_path).read_position("QB")

        assert list(df.columns) == ["PlayerName", "PassingYDS_pred"]
        assert df["PlayerName"].tolist() == ["Josh Allen", "Lamar Jackson"]
        assert df["PassingYDS_pred"].tolist() == ["4,100.5", "3,700"]

    def test_short_rows_filled_with_empty_strings(self, tmp_path):
        (tmp_path / POSITION_FILES["TE"]).write_text(
            "PlayerName,ReceivingYDS_pred,ReceivingTD_pred\nTravis Kelce,900\n"
        )
        df = ProjectionIngester(tmp_path).read_position("TE")
        assert df.loc[0, "ReceivingTD_pred"] == ""

    def test_unparsable_file_raises(self, tmp_path):
        (tmp_path / POSITION_FILES["RB"]).write_text(
            'PlayerName,RushingYDS_pred\n"unterminated,1\n'
        )
        with pytest.raises(IngestionError):
            ProjectionIngester(tmp_path).read_position("RB")


class TestReadAll:
    def test_returns_every_position(self, ingester):
        frames = ingester.read_all()
        assert set(frames) == set(POSITIONS)
        assert len(frames["RB"]) == 80
        assert len(frames["TE"]) == 30

    def test_missing_positions_are_empty(self, tmp_path):
        (tmp_path / POSITION_FILES["QB"]).write_text("PlayerName\nJoe Burrow\n")
        frames = ProjectionIngester(tmp_path).read_all()
        assert len(frames["QB"]) == 1
        assert frames["RB"].empty and frames["WR"].empty and frames["TE"].empty

    def test_unreadable_position_does_not_block_others(self, tmp_path):
        (tmp_path / POSITION_FILES["QB"]).write_text("PlayerName\nJoe Burrow\n")
        (tmp_path / POSITION_FILES["RB"]).write_text(
            'PlayerName,RushingYDS_pred\n"unterminated,1\n'
        )
        frames = ProjectionIngester(tmp_path).read_all()
        assert frames["RB"].empty
        assert len(frames["QB"]) == 1
