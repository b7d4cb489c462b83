"""Tests for environment-driven constants."""

import pytest

from browserstack_fixture import constants
from browserstack_fixture.errors import BrowserStackConfigError


def test_defaults():
    assert constants.HUB_HOST == "hub-cloud.browserstack.com"
    assert constants.TUNNEL_HOST == "127.0.0.1"


def test_number_from_environment(monkeypatch):
    monkeypatch.setenv("BROWSERSTACK_LOCAL_PORT", " 45700 ")
    assert constants._env_number("BROWSERSTACK_LOCAL_PORT", "45691", int) == 45700


def test_number_default_when_unset(monkeypatch):
    monkeypatch.delenv("BROWSERSTACK_PROBE_TIMEOUT", raising=False)
    assert constants._env_number("BROWSERSTACK_PROBE_TIMEOUT", "0.5", float) == 0.5


@pytest.mark.parametrize("name,cast", [("BROWSERSTACK_LOCAL_PORT", int), ("BROWSERSTACK_PROBE_TIMEOUT", float)])
def test_malformed_number_raises_config_error(monkeypatch, name, cast):
    monkeypatch.setenv(name, "soon")
    with pytest.raises(BrowserStackConfigError, match=name):
        constants._env_number(name, "1", cast)
