"""Tests for environment configuration."""

import tempfile
from pathlib import Path

import pytest

from pixelcompare.config import EngineConfig, check_log_level, load_config
from pixelcompare.errors import ConfigurationError


class TestEngineConfig:
    def test_defaults(self):
        config = load_config({})
        assert config.output_dir is None
        assert config.image_format == "png"
        assert config.log_level == "WARNING"
        assert config.output_path == Path(tempfile.gettempdir()).resolve() / "pixelcompare"

    def test_reads_environment(self, tmp_path):
        config = load_config({
            "PIXELCOMPARE_OUTPUT_DIR": str(tmp_path),
            "PIXELCOMPARE_IMAGE_FORMAT": "TIFF",
            "PIXELCOMPARE_LOG_LEVEL": "debug",
        })
        assert config.output_path == tmp_path.resolve()
        assert config.image_format == "tiff"
        assert config.log_level == "DEBUG"

    def test_empty_output_dir_means_default(self):
        assert load_config({"PIXELCOMPARE_OUTPUT_DIR": ""}).output_dir is None

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("PIXELCOMPARE_IMAGE_FORMAT", "webp")
        assert load_config().image_format == "webp"

    def test_lossy_format_rejected(self):
        with pytest.raises(ConfigurationError, match="image_format"):
            EngineConfig(image_format="jpg")

    def test_unknown_log_level_does_not_block_loading(self):
        config = load_config({"PIXELCOMPARE_LOG_LEVEL": "loud"})
        assert config.log_level == "LOUD"


class TestCheckLogLevel:
    def test_known_level_normalised(self):
        assert check_log_level("info") == "INFO"

    def test_unknown_level_rejected(self):
        with pytest.raises(ConfigurationError, match="log_level"):
            check_log_level("LOUD")
