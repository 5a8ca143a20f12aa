"""
Application Config Tests
========================
"""

from pathlib import Path

import pytest

from videoconv.app.catalog import FormatCatalog
from videoconv.app.config import AppConfig, DEFAULT_SERVICE_URL


class TestAppConfig:

    def test_defaults(self):
        config = AppConfig()
        assert config.service_url == DEFAULT_SERVICE_URL
        assert config.progress_interval == 0.2
        assert config.progress_max_step == 10.0
        assert config.progress_ceiling == 90.0
        assert config.reset_delay == 3.0
        assert config.output_dir == Path.home() / "Downloads"
        assert len(config.catalog) == 10

    @pytest.mark.parametrize("overrides", [
        {"progress_interval": 0},
        {"progress_max_step": -1},
        {"progress_ceiling": 0},
        {"progress_ceiling": 100},
        {"reset_delay": -0.1},
        {"request_timeout": 0},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            AppConfig(**overrides)

    def test_zero_reset_delay_allowed(self):
        assert AppConfig(reset_delay=0).reset_delay == 0

    def test_from_dict(self):
        config = AppConfig.from_dict({
            "catalog": ["mp4", "mkv"],
            "output_dir": "~/converted",
            "reset_delay": 1.5,
        })
        assert isinstance(config.catalog, FormatCatalog)
        assert list(config.catalog) == ["mp4", "mkv"]
        assert config.output_dir == Path("~/converted").expanduser()
        assert config.reset_delay == 1.5

    def test_dict_round_trip(self, tmp_path):
        config = AppConfig(output_dir=tmp_path, reset_delay=2.0)
        data = config.to_dict()
        assert data["output_dir"] == str(tmp_path)
        assert data["catalog"][0] == "mp4"
        assert AppConfig.from_dict(data) == config
