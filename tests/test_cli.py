"""
Tests for the virtex-normalize command.
"""
import json

import pytest

from virtex_engine.cli import main, normalize_dump
from virtex_engine.normalizers import VirtExNormalizer


DUMP = {
    "bids": [[250.5, 1.0], [249.75, 2.5], [250.0, 0.1]],
    "asks": [["252.10", "0.3"], ["251.00", "1.2"]],
    "trades": [
        {"amount": 0.5, "price": 251.0, "date": 1700000000, "side": "bid"},
        {"amount": 1.25, "price": 250.5, "date": 1700000060, "side": "ask"},
    ],
    "ticker": {"last": "251.00", "high": "255.5", "low": "248", "volume": "42.125"},
}


@pytest.fixture
def dump_file(tmp_path):
    path = tmp_path / "dump.json"
    path.write_text(json.dumps(DUMP))
    return path


class TestNormalizeDump:
    """Tests for dump normalization."""

    def test_all_sections(self):
        result = normalize_dump(DUMP, VirtExNormalizer(), "CAD")

        assert [o["limit_price"]["amount"] for o in result["bids"]] == ["249.75", "250.0", "250.5"]
        assert all(o["side"] == "BID" for o in result["bids"])
        assert [o["limit_price"]["amount"] for o in result["asks"]] == ["251.00", "252.10"]
        assert all(o["side"] == "ASK" for o in result["asks"])
        assert [t["side"] for t in result["trades"]] == ["BID", "ASK"]
        assert result["trades"][0]["timestamp_ms"] == 1700000000000
        assert result["trades"][0]["timestamp"] == "2023-11-14T22:13:20+00:00"
        assert result["ticker"]["volume"] == "42.125"
        assert result["ticker"]["last"] == {"currency": "CAD", "amount": "251.00"}

    def test_missing_sections_skipped(self):
        assert normalize_dump({"asks": []}, VirtExNormalizer(), "CAD") == {"asks": []}


class TestMain:
    """Tests for the CLI entry point."""

    def test_prints_json(self, dump_file, capsys):
        assert main([str(dump_file), "--currency", "USD"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["bids"][0]["limit_price"] == {"currency": "USD", "amount": "249.75"}
        assert output["trades"][1]["price"]["currency"] == "USD"

    def test_float_input_kept_exact(self, tmp_path, capsys):
        path = tmp_path / "dump.json"
        path.write_text('{"bids": [[0.30000000000000004, 1.10]]}')

        assert main([str(path)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["bids"][0]["limit_price"]["amount"] == "0.30000000000000004"
        assert output["bids"][0]["amount"] == "1.10"

    def test_config_file(self, dump_file, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("exchange:\n  base_asset: LTC\n  quote_currency: EUR\n")

        assert main([str(dump_file), "--config", str(config)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["asks"][0]["base_asset"] == "LTC"
        assert output["ticker"]["high"]["currency"] == "EUR"

    def test_invalid_config_exits_2(self, dump_file, capsys):
        assert main([str(dump_file), "--currency", "NOPE"]) == 2
        assert capsys.readouterr().out == ""

    def test_normalization_error_exits_1(self, tmp_path, capsys):
        path = tmp_path / "dump.json"
        path.write_text(json.dumps({"ticker": {"last": "n/a", "high": 1, "low": 1, "volume": 1}}))

        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_malformed_record_exits_1(self, tmp_path):
        path = tmp_path / "dump.json"
        path.write_text(json.dumps({"trades": [{"price": 1}]}))

        assert main([str(path)]) == 1

    def test_invalid_log_level_exits_2(self, dump_file, monkeypatch, capsys):
        monkeypatch.setenv("VIRTEX_LOG_LEVEL", "LOUD")

        assert main([str(dump_file)]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid log level: LOUD" in captured.err

    def test_missing_input_exits_1(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.json")]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot read" in captured.err

    def test_invalid_json_exits_1(self, tmp_path, capsys):
        path = tmp_path / "dump.json"
        path.write_text("{not json")

        assert main([str(path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot read" in captured.err
