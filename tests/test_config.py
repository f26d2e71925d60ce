import pytest
from hypothesis import given, strategies as st

from collection_extensions.config import LOG_LEVEL_ENV_VAR, Settings


class TestSettings:
    def test_default_values(self):
        """Test that Settings has sensible defaults."""
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert "%(levelname)s" in settings.log_format

    def test_custom_values(self):
        """Test that Settings accepts custom values."""
        settings = Settings(log_level="DEBUG", log_format="%(message)s")
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "%(message)s"


class TestSettingsFromEnv:
    def test_env_overrides_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
        assert Settings.from_env().log_level == "DEBUG"

    def test_missing_env_keeps_default(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        assert Settings.from_env() == Settings()

    def test_empty_env_keeps_default(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "")
        assert Settings.from_env().log_level == "WARNING"

    @given(level=st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]))
    def test_any_level_name_is_carried(self, level):
        """For any standard level name in the environment, from_env reports it."""
        with pytest.MonkeyPatch.context() as mp:
            mp.setenv(LOG_LEVEL_ENV_VAR, level)
            assert Settings.from_env().log_level == level
