"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from partnerhub.config import DEFAULT_STORAGE_KEY, load_settings
from partnerhub.main import build_store


class TestLoadSettings:

    def test_defaults(self, monkeypatch):
        for name in ("STORAGE_BACKEND", "DATA_DIR", "STORAGE_KEY", "SEED_ON_START", "LOG_LEVEL"):
            monkeypatch.delenv(f"PARTNERHUB_{name}", raising=False)

        settings = load_settings()
        assert settings.storage_backend == "file"
        assert settings.data_dir == Path("./data")
        assert settings.storage_key == DEFAULT_STORAGE_KEY
        assert settings.seed_on_start is True
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PARTNERHUB_STORAGE_BACKEND", " Memory ")
        monkeypatch.setenv("PARTNERHUB_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("PARTNERHUB_STORAGE_KEY", "demo")
        monkeypatch.setenv("PARTNERHUB_SEED_ON_START", "no")
        monkeypatch.setenv("PARTNERHUB_LOG_LEVEL", "debug")

        settings = load_settings()
        assert settings.storage_backend == "memory"
        assert settings.data_dir == tmp_path
        assert settings.storage_key == "demo"
        assert settings.seed_on_start is False
        assert settings.log_level == "DEBUG"

    def test_unknown_backend(self, monkeypatch):
        monkeypatch.setenv("PARTNERHUB_STORAGE_BACKEND", "redis")
        with pytest.raises(ValueError):
            load_settings()


class TestBuildStore:

    def test_file_backend(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PARTNERHUB_STORAGE_BACKEND", "file")
        monkeypatch.setenv("PARTNERHUB_DATA_DIR", str(tmp_path))
        monkeypatch.delenv("PARTNERHUB_STORAGE_KEY", raising=False)
        store = build_store(load_settings())
        assert store.backend.name == "file"
        store.seed()
        assert (tmp_path / f"{DEFAULT_STORAGE_KEY}.json").exists()

    def test_memory_backend(self, settings):
        assert build_store(settings).backend.name == "memory"
