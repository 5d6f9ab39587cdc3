"""Tests for CSSDeclConfig."""

import pytest

from cssdecl.config import CSSDeclConfig
from cssdecl.errors import InvalidLogLevelError


class TestConfig:
    def test_defaults(self):
        config = CSSDeclConfig()
        assert config.platform == "deferred"
        assert config.default_extension == "css"
        assert config.log_level == "WARNING"

    def test_from_empty_env(self):
        assert CSSDeclConfig.from_env({}) == CSSDeclConfig()

    def test_from_env(self):
        config = CSSDeclConfig.from_env(
            {
                "CSSDECL_PLATFORM": "appkit",
                "CSSDECL_STYLESHEET_DIR": "/styles",
                "CSSDECL_DEFAULT_EXTENSION": "style",
                "CSSDECL_LOG_LEVEL": "debug",
            }
        )
        assert config == CSSDeclConfig(
            platform="appkit",
            stylesheet_dir="/styles",
            default_extension="style",
            log_level="DEBUG",
        )

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            CSSDeclConfig().platform = "uikit"  # type: ignore[misc]

    def test_unknown_log_level_rejected(self):
        with pytest.raises(InvalidLogLevelError) as excinfo:
            CSSDeclConfig.from_env({"CSSDECL_LOG_LEVEL": "verbose"})
        assert excinfo.value.level == "VERBOSE"

    def test_numeric_log_level_rejected(self):
        with pytest.raises(InvalidLogLevelError):
            CSSDeclConfig(log_level="10")
