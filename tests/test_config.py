"""Tests for configuration loading and validation."""

import json
from pathlib import Path

import pytest

from edlsegments.config import AppConfig, ProviderConfig, load_config


class TestProviderConfig:
    def test_defaults(self):
        cfg = ProviderConfig()
        assert cfg.edl_extension == ".edl"
        assert cfg.marker_extension == ".edl.processed"
        assert cfg.use_marker_guard is False

    def test_extension_needs_dot(self):
        with pytest.raises(ValueError, match="must start with"):
            ProviderConfig(edl_extension="edl")

    def test_extensions_must_differ(self):
        with pytest.raises(ValueError, match="must differ"):
            ProviderConfig(edl_extension=".edl", marker_extension=".edl")


class TestAppConfig:
    def test_minimal(self):
        cfg = AppConfig()
        assert cfg.library is None
        assert cfg.provider == ProviderConfig()


class TestLoadConfig:
    def test_load_sample(self, sample_config_path: Path):
        cfg = load_config(sample_config_path)
        assert cfg.library == sample_config_path.parent / "library.json"
        assert cfg.provider.marker_extension == ".done"
        assert cfg.provider.use_marker_guard is True

    def test_empty_object(self, tmp_path: Path):
        f = tmp_path / "config.json"
        f.write_text("{}")
        assert load_config(f) == AppConfig()

    def test_absolute_library(self, tmp_path: Path):
        f = tmp_path / "config.json"
        f.write_text(json.dumps({"library": "/srv/library.json"}))
        assert load_config(f).library == Path("/srv/library.json")

    def test_load_invalid_json(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("not json")
        with pytest.raises(json.JSONDecodeError):
            load_config(bad)

    def test_load_not_an_object(self, tmp_path: Path):
        bad = tmp_path / "list.json"
        bad.write_text("[]")
        with pytest.raises(ValueError, match="must contain"):
            load_config(bad)

    def test_unknown_provider_key(self, tmp_path: Path):
        bad = tmp_path / "config.json"
        bad.write_text(json.dumps({"provider": {"bogus": 1}}))
        with pytest.raises(ValueError, match="must contain only known settings"):
            load_config(bad)

    def test_provider_not_an_object(self, tmp_path: Path):
        bad = tmp_path / "config.json"
        bad.write_text(json.dumps({"provider": ".edl"}))
        with pytest.raises(ValueError, match="must contain"):
            load_config(bad)

    def test_non_string_extension(self, tmp_path: Path):
        bad = tmp_path / "config.json"
        bad.write_text(json.dumps({"provider": {"edl_extension": 5}}))
        with pytest.raises(ValueError, match="must start with"):
            load_config(bad)

    def test_library_not_a_string(self, tmp_path: Path):
        bad = tmp_path / "config.json"
        bad.write_text(json.dumps({"library": ["a.json"]}))
        with pytest.raises(ValueError, match="must contain"):
            load_config(bad)
