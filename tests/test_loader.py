"""Tests for loading candle history from local files."""

import json
from pathlib import Path

import pytest

from forecaster.exceptions import CandleFormatError
from forecaster.loader import load_candles, parse_candles


class TestParseCandles:
    """Tests for row validation."""

    def test_label_aliases(self) -> None:
        candles = parse_candles(
            [
                {"date": "2024-01-01", "open": 1, "high": 2, "low": 0.5, "close": 1.5},
                {"time": "10:00", "open": 1, "high": 2, "low": 0.5, "close": 1.5, "volume": 9},
                {"label": "x", "open": 1, "high": 2, "low": 0.5, "close": 1.5},
            ]
        )
        assert [c.label for c in candles] == ["2024-01-01", "10:00", "x"]
        assert candles[0].volume == 0.0
        assert candles[1].volume == 9.0

    def test_numeric_strings_accepted(self) -> None:
        """CSV rows arrive as strings."""
        candles = parse_candles(
            [{"date": "d1", "open": "10.5", "high": "11", "low": "10", "close": "10.8"}]
        )
        assert candles[0].close == 10.8

    def test_missing_field_names_row(self) -> None:
        rows = [
            {"date": "d1", "open": 1, "high": 2, "low": 0.5, "close": 1.5},
            {"date": "d2", "open": 1, "high": 2, "low": 0.5},
        ]
        with pytest.raises(CandleFormatError, match="row 1"):
            parse_candles(rows)

    def test_non_numeric_price(self) -> None:
        with pytest.raises(CandleFormatError):
            parse_candles([{"date": "d1", "open": "abc", "high": 2, "low": 0.5, "close": 1.5}])


class TestLoadCandles:
    """Tests for file formats."""

    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "candles.json"
        path.write_text(
            json.dumps(
                [
                    {"date": "2024-01-01", "open": 100, "high": 102, "low": 99, "close": 101,
                     "volume": 500},
                    {"date": "2024-01-02", "open": 101, "high": 103, "low": 100, "close": 102,
                     "volume": 600},
                ]
            ),
            encoding="utf-8",
        )

        candles = load_candles(path)

        assert len(candles) == 2
        assert candles[0].label == "2024-01-01"
        assert candles[1].close == 102.0
        assert candles[1].volume == 600.0

    def test_csv_file(self, tmp_path: Path) -> None:
        path = tmp_path / "candles.csv"
        path.write_text(
            "date,open,high,low,close,volume\n"
            "2024-01-01,100,102,99,101,500\n"
            "2024-01-02,101,103,100,102,600\n",
            encoding="utf-8",
        )

        candles = load_candles(str(path))

        assert [c.label for c in candles] == ["2024-01-01", "2024-01-02"]
        assert candles[0].high == 102.0

    def test_json_must_be_list(self, tmp_path: Path) -> None:
        path = tmp_path / "candles.json"
        path.write_text(json.dumps({"candles": []}), encoding="utf-8")

        with pytest.raises(CandleFormatError, match="JSON list"):
            load_candles(path)

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "candles.txt"
        path.write_text("", encoding="utf-8")

        with pytest.raises(CandleFormatError, match="unsupported"):
            load_candles(path)

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "candles.json"
        path.write_text('[{"date": "d1", "open": 1,', encoding="utf-8")

        with pytest.raises(CandleFormatError, match="invalid JSON"):
            load_candles(path)
