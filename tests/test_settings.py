"""Tests for settings loading and typed lookups.

Tests cover:
- String, integer and float lookups
- Missing and malformed values (logged, zero fallback)
- Loading YAML settings files
- Building RenderSettings
"""

import logging
from pathlib import Path

import pytest

from pathtracer.settings import RenderSettings, Settings, load_settings

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


class TestSettingsLookups:
    """Tests for Settings.get_*."""

    def test_get_string(self):
        settings = Settings({"FILE_NAME": "cornell_box"})
        assert settings.get_string("FILE_NAME") == "cornell_box"
        assert "FILE_NAME" in settings

    def test_missing_key(self, caplog):
        """Test that a missing key logs an error and yields None or zero."""
        settings = Settings()
        with caplog.at_level(logging.ERROR):
            assert settings.get_string("SAVE_DIRECTORY") is None
            assert settings.get_int("MAX_BOUNCES") == 0
            assert settings.get_float("EXPOSURE") == 0.0
        assert "SAVE_DIRECTORY" in caplog.text

    def test_get_int(self):
        settings = Settings({"MAX_BOUNCES": 4, "IMAGE_WIDTH": " 320 "})
        assert settings.get_int("MAX_BOUNCES") == 4
        assert settings.get_int("IMAGE_WIDTH") == 320

    def test_get_int_malformed(self, caplog):
        settings = Settings({"MAX_BOUNCES": "four"})
        with caplog.at_level(logging.ERROR):
            assert settings.get_int("MAX_BOUNCES") == 0
        assert "integer" in caplog.text

    def test_get_float(self):
        settings = Settings({"EXPOSURE": 1.5, "FIELD_OF_VIEW": "90"})
        assert settings.get_float("EXPOSURE") == 1.5
        assert settings.get_float("FIELD_OF_VIEW") == 90.0

    def test_get_float_decimal_comma(self, caplog):
        """Test the hint logged for a decimal comma."""
        settings = Settings({"EXPOSURE": "1,5"})
        with caplog.at_level(logging.ERROR):
            assert settings.get_float("EXPOSURE") == 0.0
        assert "commas" in caplog.text


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_load(self, tmp_path):
        path = tmp_path / "render.yaml"
        path.write_text("MAX_BOUNCES: 3\nSAVE_DIRECTORY: ./out\n")
        settings = load_settings(path)

        assert settings.get_int("MAX_BOUNCES") == 3
        assert settings.get_string("SAVE_DIRECTORY") == "./out"

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            settings = load_settings(tmp_path / "missing.yaml")
        assert "MAX_BOUNCES" not in settings
        assert "Could not read" in caplog.text

    def test_invalid_yaml(self, tmp_path, caplog):
        path = tmp_path / "broken.yaml"
        path.write_text("MAX_BOUNCES: [4\n")
        with caplog.at_level(logging.ERROR):
            settings = load_settings(path)
        assert "MAX_BOUNCES" not in settings

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- MAX_BOUNCES\n")
        assert "MAX_BOUNCES" not in load_settings(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert "MAX_BOUNCES" not in load_settings(path)


class TestRenderSettings:
    """Tests for RenderSettings.from_settings()."""

    def test_example_file(self):
        """Test the bundled example configuration."""
        settings = RenderSettings.from_settings(load_settings(EXAMPLES_DIR / "render.yaml"))

        assert settings.min_ray_length == pytest.approx(0.01)
        assert settings.max_ray_length == 10000.0
        assert settings.max_bounces == 4
        assert settings.samples_per_pixel == 8
        assert settings.exposure == 1.0
        assert settings.field_of_view == 90.0
        assert settings.image_width == 320
        assert settings.image_height == 180
        assert settings.save_directory == "./renders"
        assert settings.file_name == "cornell_box"
        assert settings.gamma == 2.2

    def test_missing_keys_fall_back_to_zero(self):
        settings = RenderSettings.from_settings(Settings())
        assert settings.max_bounces == 0
        assert settings.image_width == 0
        assert settings.exposure == 0.0
        assert settings.save_directory == ""

    def test_frozen(self):
        with pytest.raises(AttributeError):
            RenderSettings().max_bounces = 10
