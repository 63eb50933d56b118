# tests/griddata/test_context.py
import json

import pytest
from pydantic import ValidationError

from griddata.context import DEFAULT_FEATURES, GridContext
from griddata.converters import GridConverter
from griddata.utils.config_manager import ConfigManager

MOCK_SETTINGS_CONTENT = {
    "debug": {"level": "INFO"},
    "context": {
        "culture": "da-DK",
        "features": {"normalize_whitespace": True},
    },
    "converters": {
        "include_default": False,
        "modules": [],
    },
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Points the ConfigManager singleton at a temporary settings file and
    reloads the packaged settings afterwards.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT), encoding="utf-8")
    monkeypatch.setenv("GRIDDATA_SETTINGS", str(settings_file))

    manager = ConfigManager()
    manager.reset()
    yield manager

    monkeypatch.delenv("GRIDDATA_SETTINGS")
    manager.reset()


def test_default_context():
    context = GridContext.create()
    assert context.culture == "en-US"
    assert dict(context.features) == DEFAULT_FEATURES
    assert [type(c) for c in context.converters] == [GridConverter]


def test_context_is_frozen():
    context = GridContext.create()
    with pytest.raises(ValidationError):
        context.culture = "da-DK"


def test_feature_flags():
    context = GridContext.create(features={"normalize_whitespace": True, "beta": False})
    assert context.is_enabled("normalize_whitespace")
    assert not context.is_enabled("beta")
    assert not context.is_enabled("unknown")


def test_normalize_text():
    assert GridContext.create().normalize_text("  a   b  ") == "a   b"
    assert GridContext.create(features={"normalize_whitespace": True}).normalize_text("  a   b  ") == "a b"


def test_config_manager_load(config_env):
    assert config_env.get_nested("context.culture") == "da-DK"
    assert config_env.get_nested("non.existent.key", "default") == "default"


def test_config_manager_set_nested(config_env):
    config_env.set_nested("debug.level", "WARNING")
    assert config_env.get_nested("debug.level") == "WARNING"

    # Booleans are cast from their string form
    config_env.set_nested("context.features.normalize_whitespace", "false")
    assert config_env.get_nested("context.features.normalize_whitespace") is False

    config_env.set_nested("new_feature.enabled", True)
    assert config_env.get_nested("new_feature.enabled") is True


def test_config_manager_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("GRIDDATA_SETTINGS", str(tmp_path / "missing.json"))
    manager = ConfigManager()
    manager.reset()
    try:
        assert manager.get_all() == {}
    finally:
        monkeypatch.delenv("GRIDDATA_SETTINGS")
        manager.reset()


def test_context_from_config(config_env):
    context = GridContext.from_config(config_env)
    assert context.culture == "da-DK"
    assert context.is_enabled("normalize_whitespace")
    assert len(context.converters) == 0


def test_packaged_settings_include_default_converter():
    context = GridContext.from_config(ConfigManager())
    assert any(isinstance(c, GridConverter) for c in context.converters)


def test_features_are_read_only():
    context = GridContext.create(features={"normalize_whitespace": True})
    with pytest.raises(TypeError):
        context.features["normalize_whitespace"] = False
    assert context.is_enabled("normalize_whitespace")


def test_with_features_returns_new_context():
    context = GridContext.create()
    normalized = context.with_features(normalize_whitespace=True)

    assert normalized.is_enabled("normalize_whitespace")
    assert not context.is_enabled("normalize_whitespace")
    assert normalized.converters is context.converters
    with pytest.raises(TypeError):
        normalized.features["beta"] = True
