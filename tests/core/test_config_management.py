# tests/core/test_config_management.py
import pytest
import json

from a11y_auditor.managers.config_manager import ConfigManager
from a11y_auditor.utils.path_utils import PathUtils, SETTINGS_ENV_VAR

# A small, predictable configuration for these tests
MOCK_SETTINGS_CONTENT = {
    "validators": {
        "phone_min_digits": 7
    },
    "viewport": {
        "min_maximum_scale": 2
    },
    "audit": {
        "workers": 4,
        "show_progress": True
    },
    "logging": {
        "level": "WARNING"
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Sets up an isolated environment for the ConfigManager:
    - writes a fake settings.json into a temporary directory,
    - points PathUtils at it and disables the user override file.
    The real configuration is restored afterwards.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))

    monkeypatch.setattr(PathUtils, "get_settings_file", staticmethod(lambda: settings_file))
    monkeypatch.setattr(PathUtils, "get_user_settings_file", staticmethod(lambda: None))

    manager = ConfigManager()
    manager.reset()

    yield manager

    monkeypatch.undo()
    manager.reset()


# --- ConfigManager ---

def test_config_manager_is_singleton():
    """Every instantiation returns the same manager."""
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    """The manager loads the configuration file."""
    config = config_env.get_all()
    assert config["logging"]["level"] == "WARNING"
    assert config["validators"]["phone_min_digits"] == 7


def test_config_manager_get_nested(config_env):
    """Nested values are reachable through dotted paths."""
    assert config_env.get_nested("audit.workers") == 4
    assert config_env.get_nested("non.existent.key", "default") == "default"
    assert config_env.get_nested("audit.workers.deeper", "default") == "default"


def test_config_manager_set_nested(config_env):
    """In-memory updates cast to the type of the existing value."""
    config_env.set_nested("logging.level", "INFO")
    assert config_env.get_nested("logging.level") == "INFO"

    config_env.set_nested("new_feature.enabled", "True")
    assert config_env.get_nested("new_feature.enabled") == "True"

    config_env.set_nested("validators.phone_min_digits", "10")
    assert config_env.get_nested("validators.phone_min_digits") == 10
    assert isinstance(config_env.get_nested("validators.phone_min_digits"), int)

    config_env.set_nested("audit.show_progress", "false")
    assert config_env.get_nested("audit.show_progress") is False


def test_config_manager_failed_cast_keeps_value(config_env):
    """A value that cannot be cast is stored as given."""
    config_env.set_nested("audit.workers", "many")
    assert config_env.get_nested("audit.workers") == "many"


def test_config_manager_reset(config_env):
    """reset() reloads the configuration from disk."""
    config_env.set_nested("logging.level", "DEBUG")
    assert config_env.get_nested("logging.level") == "DEBUG"

    config_env.reset()

    assert config_env.get_nested("logging.level") == "WARNING"


def test_config_manager_user_override(config_env, tmp_path, monkeypatch):
    """The user settings file is deep-merged over the packaged settings."""
    user_file = tmp_path / "user.json"
    user_file.write_text(json.dumps({"viewport": {"max_minimum_scale": 3}, "audit": {"workers": 2}}))
    monkeypatch.setattr(PathUtils, "get_user_settings_file", staticmethod(lambda: user_file))

    config_env.reset()

    assert config_env.get_nested("audit.workers") == 2
    assert config_env.get_nested("audit.show_progress") is True
    assert config_env.get_nested("viewport.min_maximum_scale") == 2
    assert config_env.get_nested("viewport.max_minimum_scale") == 3


def test_config_manager_missing_file(tmp_path, monkeypatch, config_env):
    """A missing settings file yields an empty configuration instead of an error."""
    monkeypatch.setattr(PathUtils, "get_settings_file", staticmethod(lambda: tmp_path / "missing.json"))
    config_env.reset()
    assert config_env.get_all() == {}
    assert config_env.get_nested("audit.workers", 4) == 4


def test_config_manager_invalid_json(tmp_path, monkeypatch, config_env):
    """An unreadable settings file is logged and treated as empty."""
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    monkeypatch.setattr(PathUtils, "get_settings_file", staticmethod(lambda: broken))
    config_env.reset()
    assert config_env.get_all() == {}


# --- PathUtils ---

def test_user_settings_file_from_environment(tmp_path, monkeypatch):
    """The override file is taken from the environment variable."""
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(tmp_path / "mine.json"))
    assert PathUtils.get_user_settings_file() == tmp_path / "mine.json"

    monkeypatch.delenv(SETTINGS_ENV_VAR)
    assert PathUtils.get_user_settings_file() is None


def test_packaged_settings_file_exists():
    """The default settings ship with the package."""
    settings = json.loads(PathUtils.get_settings_file().read_text())
    assert settings["parser"]["features"] == "html.parser"
    assert settings["validators"]["phone_min_digits"] == 7
