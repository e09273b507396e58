"""Mini README: Tests for environment-driven settings and the plugin loader."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skyroutes.configuration import SkyroutesSettings
from skyroutes.utils import plugin_loader


def test_defaults() -> None:
    settings = SkyroutesSettings(_env_file=None)
    assert settings.default_strategy == "nearest_waypoint"
    assert settings.interface_port == 8000
    assert settings.distance_decimals == 1


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SKYROUTES_DEFAULT_STRATEGY", "  Nearest_Waypoint ")
    monkeypatch.setenv("SKYROUTES_LOG_LEVEL", "debug")
    monkeypatch.setenv("SKYROUTES_INTERFACE_PORT", "9100")

    settings = SkyroutesSettings(_env_file=None)
    assert settings.default_strategy == "nearest_waypoint"
    assert settings.log_level == "DEBUG"
    assert settings.interface_port == 9100


def test_invalid_values_rejected(monkeypatch) -> None:
    monkeypatch.setenv("SKYROUTES_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        SkyroutesSettings(_env_file=None)


def test_plugin_loader_returns_empty_for_unknown_group() -> None:
    assert plugin_loader.load_entry_point_plugins("skyroutes.tests.no_such_group") == []


def test_plugin_loader_loads_entry_points(monkeypatch) -> None:
    class FakeEntryPoint:
        name = "fake"

        def load(self):
            return "loaded"

    monkeypatch.setattr(plugin_loader, "entry_points", lambda group: [FakeEntryPoint()])
    assert plugin_loader.load_entry_point_plugins("skyroutes.strategies") == ["loaded"]
