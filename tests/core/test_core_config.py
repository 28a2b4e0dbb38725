"""
tests/core/test_core_config.py - core/config.py 테스트
"""

import logging

import pytest

from core.config import (
    AnalyzerSettings,
    LogConfig,
    get_env_bool,
    get_env_int,
    get_project_root,
    get_version,
    settings,
)
from core.exceptions import ConfigError, ValidationError


class TestSettings:
    """Settings 데이터클래스 테스트"""

    def test_settings_is_frozen(self):
        """설정이 불변인지 확인"""
        with pytest.raises(Exception):  # FrozenInstanceError
            settings.DEFAULT_LIST_TOP = 1

    def test_default_values(self):
        assert settings.DEFAULT_LIST_TOP == 10
        assert settings.DEFAULT_PACKAGE_TOP == 100
        assert settings.DEFAULT_PROGRESS_INTERVAL == 10_000
        assert settings.DEFAULT_WORKERS == 1


class TestPaths:
    def test_project_root(self):
        root = get_project_root()
        assert (root / "core" / "config.py").exists()

    def test_version(self):
        version = get_version()
        parts = version.split(".")
        assert len(parts) >= 2
        assert all(part.isdigit() for part in parts)


class TestEnvHelpers:
    """환경변수 헬퍼 테스트"""

    @pytest.mark.parametrize("value", ["true", "1", "YES", " on "])
    def test_env_bool_true(self, monkeypatch, value):
        monkeypatch.setenv("MIRROR_STATS_FLAG", value)
        assert get_env_bool("MIRROR_STATS_FLAG") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "off"])
    def test_env_bool_false(self, monkeypatch, value):
        monkeypatch.setenv("MIRROR_STATS_FLAG", value)
        assert get_env_bool("MIRROR_STATS_FLAG", default=True) is False

    def test_env_bool_invalid_uses_default(self, monkeypatch):
        monkeypatch.setenv("MIRROR_STATS_FLAG", "maybe")
        assert get_env_bool("MIRROR_STATS_FLAG", default=True) is True

    def test_env_int(self, monkeypatch):
        monkeypatch.setenv("MIRROR_STATS_NUM", " 42 ")
        assert get_env_int("MIRROR_STATS_NUM", 1) == 42

    def test_env_int_missing(self):
        assert get_env_int("MIRROR_STATS_NUM", 7) == 7

    def test_env_int_invalid(self, monkeypatch, caplog):
        monkeypatch.setenv("MIRROR_STATS_NUM", "many")
        with caplog.at_level(logging.WARNING):
            assert get_env_int("MIRROR_STATS_NUM", 7) == 7
        assert "MIRROR_STATS_NUM" in caplog.text


class TestLogConfig:
    def test_defaults(self):
        config = LogConfig()
        assert config.level == "WARNING"
        assert config.level_number == logging.WARNING
        assert "%(message)s" in config.format

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = LogConfig.from_env()

        assert config.level == "DEBUG"
        assert config.level_number == logging.DEBUG

    def test_unknown_level_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert LogConfig(level="LOUD").level_number == logging.WARNING
        assert "LOUD" in caplog.text


class TestAnalyzerSettings:
    """AnalyzerSettings 테스트"""

    def test_defaults(self):
        config = AnalyzerSettings()
        assert config.list_top == 10
        assert config.package_top == 100
        assert config.workers == 1

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MIRROR_STATS_WORKERS", "4")
        monkeypatch.setenv("MIRROR_STATS_PACKAGE_TOP", "20")

        config = AnalyzerSettings.from_env()
        assert config.workers == 4
        assert config.package_top == 20
        assert config.list_top == 10

    def test_from_env_out_of_range(self, monkeypatch):
        monkeypatch.setenv("MIRROR_STATS_WORKERS", "0")
        with pytest.raises(ValidationError):
            AnalyzerSettings.from_env()

    @pytest.mark.parametrize(
        "field,value",
        [("list_top", -1), ("package_top", -5), ("progress_interval", 0), ("workers", 0), ("workers", 65)],
    )
    def test_validation(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            AnalyzerSettings(**{field: value})
        assert exc_info.value.field == field
        assert isinstance(exc_info.value, ConfigError)

    def test_zero_top_allowed(self):
        assert AnalyzerSettings(list_top=0, package_top=0).package_top == 0

    def test_override_ignores_none(self):
        base = AnalyzerSettings(workers=2)
        config = base.override(workers=None, list_top=3)

        assert config.workers == 2
        assert config.list_top == 3

    def test_override_without_changes(self):
        base = AnalyzerSettings()
        assert base.override(workers=None) is base

    def test_override_validates(self):
        with pytest.raises(ValidationError):
            AnalyzerSettings().override(workers=-1)
