"""
Tests for configuration loading.
"""
from virtex_engine.config import AdapterConfig
from virtex_engine.core import is_registered, money_of


class TestAdapterConfig:
    """Tests for AdapterConfig."""

    def test_defaults(self):
        config = AdapterConfig.load()
        assert config.exchange.base_asset == "BTC"
        assert config.exchange.quote_currency == "CAD"
        assert config.logging.level == "INFO"
        assert config.validate() == []

    def test_missing_file_uses_defaults(self, tmp_path):
        config = AdapterConfig.load(tmp_path / "missing.yaml")
        assert config.exchange.quote_currency == "CAD"

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "exchange:\n"
            "  base_asset: LTC\n"
            "  quote_currency: USD\n"
            "  extra_currencies: [ZZTOP]\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  json_format: true\n"
            "  unknown_key: ignored\n"
        )
        config = AdapterConfig.load(path)

        assert config.exchange.base_asset == "LTC"
        assert config.exchange.quote_currency == "USD"
        assert config.exchange.extra_currencies == ["ZZTOP"]
        assert config.logging.level == "DEBUG"
        assert config.logging.json_format is True
        assert not hasattr(config.logging, "unknown_key")

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        config = AdapterConfig.load(path)
        assert config.exchange.base_asset == "BTC"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("exchange:\n  quote_currency: USD\n")
        monkeypatch.setenv("VIRTEX_QUOTE_CURRENCY", "EUR")
        monkeypatch.setenv("VIRTEX_BASE_ASSET", "ETH")
        monkeypatch.setenv("VIRTEX_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("VIRTEX_LOG_JSON", "true")

        config = AdapterConfig.load(path)

        assert config.exchange.quote_currency == "EUR"
        assert config.exchange.base_asset == "ETH"
        assert config.logging.level == "WARNING"
        assert config.logging.json_format is True

    def test_validate_unknown_quote(self):
        config = AdapterConfig()
        config.exchange.quote_currency = "NOPE"
        assert "Unknown quote currency: NOPE" in config.validate()

    def test_validate_extra_currency_as_quote(self):
        config = AdapterConfig()
        config.exchange.extra_currencies = ["QUOTEX"]
        config.exchange.quote_currency = "QUOTEX"
        assert config.validate() == []

    def test_validate_bad_values(self):
        config = AdapterConfig()
        config.exchange.base_asset = ""
        config.exchange.extra_currencies = ["bad"]
        config.logging.level = "LOUD"

        errors = config.validate()
        assert "base_asset not set" in errors
        assert "Invalid currency code: 'bad'" in errors
        assert "Invalid log level: LOUD" in errors

    def test_register_currencies(self):
        config = AdapterConfig()
        config.exchange.extra_currencies = ["CFGCOIN"]
        assert not is_registered("CFGCOIN")

        config.register_currencies()

        assert is_registered("CFGCOIN")
        assert money_of("CFGCOIN", "1.5").currency == "CFGCOIN"
