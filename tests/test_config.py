import importlib

import pytest

from presence_types import OptionalString, config


class TestConfigSetters:
    """Test runtime switches."""

    def test_strict_validate_toggle(self, monkeypatch):
        """Test set_strict_validate() switches type checks."""
        monkeypatch.setattr(config, "STRICT_VALIDATE", True)
        with pytest.raises(TypeError):
            OptionalString.of(b"x")
        config.set_strict_validate(False)
        assert OptionalString.of(b"x").is_present()

    def test_share_empty_toggle(self, monkeypatch):
        """Test set_share_empty() switches the absent-instance strategy."""
        monkeypatch.setattr(config, "SHARE_EMPTY", True)
        assert OptionalString.empty() is OptionalString.empty()
        config.set_share_empty(0)
        assert config.SHARE_EMPTY is False
        assert OptionalString.empty() is not OptionalString.empty()


class TestConfigEnvironment:
    """Test environment-driven defaults."""

    @pytest.mark.parametrize("raw,expected", [("0", False), ("1", True), ("yes", True)])
    def test_env_defaults(self, monkeypatch, raw, expected):
        """Test environment variables drive the defaults."""
        monkeypatch.setenv("PRESENCE_TYPES_STRICT_VALIDATE", raw)
        monkeypatch.setenv("PRESENCE_TYPES_SHARE_EMPTY", raw)
        try:
            reloaded = importlib.reload(config)
            assert reloaded.STRICT_VALIDATE is expected
            assert reloaded.SHARE_EMPTY is expected
        finally:
            monkeypatch.delenv("PRESENCE_TYPES_STRICT_VALIDATE")
            monkeypatch.delenv("PRESENCE_TYPES_SHARE_EMPTY")
            importlib.reload(config)
