"""Tests for configuration loading and presets."""

import pytest

from decaysearch.config import PRESETS, DecaySearchConfig
from decaysearch.exceptions import ConfigError


class TestDefaults:
    def test_defaults(self):
        cfg = DecaySearchConfig()
        assert cfg.endpoint == "https://www.google.com/search"
        assert cfg.params.vector_count == 10
        assert cfg.params.density == 257
        assert cfg.density_risk_threshold == 600

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            DecaySearchConfig(density=2000)


class TestFromEnv:
    def test_reads_prefixed_vars(self):
        cfg = DecaySearchConfig.from_env(
            {
                "DECAYSEARCH_VECTOR_COUNT": "4",
                "DECAYSEARCH_DENSITY": "512",
                "DECAYSEARCH_PAGE_OFFSET": "3",
                "DECAYSEARCH_ENDPOINT": "https://search.test/s",
                "DECAYSEARCH_BOOT_DELAY": "0",
                "DECAYSEARCH_AUTO_LAUNCH": "false",
            }
        )
        assert (cfg.vector_count, cfg.density, cfg.page_offset) == (4, 512, 3)
        assert cfg.endpoint == "https://search.test/s"
        assert cfg.boot_delay == 0
        assert cfg.auto_launch is False

    def test_empty_env_gives_defaults(self):
        assert DecaySearchConfig.from_env({}) == DecaySearchConfig()

    def test_non_numeric(self):
        with pytest.raises(ConfigError):
            DecaySearchConfig.from_env({"DECAYSEARCH_DENSITY": "lots"})

    def test_out_of_range(self):
        with pytest.raises(ConfigError):
            DecaySearchConfig.from_env({"DECAYSEARCH_VECTOR_COUNT": "50"})


class TestPresets:
    def test_terminal_matches_defaults(self):
        assert PRESETS["terminal"] == DecaySearchConfig().params

    def test_from_preset(self):
        cfg = DecaySearchConfig.from_preset("deep", page_offset=1)
        assert cfg.vector_count == 20
        assert cfg.density == 700
        assert cfg.page_offset == 1

    def test_unknown_preset(self):
        with pytest.raises(ConfigError):
            DecaySearchConfig.from_preset("nope")
