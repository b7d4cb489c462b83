"""Tests for the BrowserStack configuration store."""

import pytest

from browserstack_fixture.config.application import ApplicationConfig
from browserstack_fixture.config.store import CONFIG_KEYS, BrowserStackConfig, ConfigUpdate
from browserstack_fixture.errors import BrowserStackConfigError, UnknownConfigKeyError


class TestSetConfig:

    def setup_method(self):
        self.config = BrowserStackConfig()

    @pytest.mark.parametrize("key", ["user", "access_key", "Username", "localConfig", "caps", ""])
    def test_unknown_key_raises(self, key):
        with pytest.raises(UnknownConfigKeyError) as excinfo:
            self.config.set_config({key: "x"})
        assert excinfo.value.key == key
        assert f"'{key}'" in str(excinfo.value)

    def test_unknown_key_is_a_config_error_and_value_error(self):
        with pytest.raises(BrowserStackConfigError):
            self.config.set_config({"nope": 1})
        with pytest.raises(ValueError):
            self.config.set_config({"nope": 1})

    def test_unknown_key_applies_nothing(self):
        with pytest.raises(UnknownConfigKeyError):
            self.config.set_config({"username": "u", "bogus": 1})
        assert self.config.username == ""

    @pytest.mark.parametrize("alias", ["key", "api_key"])
    def test_key_aliases_set_the_access_key(self, alias):
        self.config.set_config({alias: "secret"})
        assert self.config.access_key == "secret"

    def test_all_keys_dispatch(self):
        result = self.config.set_config({
            "username": "u",
            "key": "k",
            "local_config": {"forcelocal": "true"},
            "capabilities": {"browserName": "firefox"},
        })
        assert result is self.config
        assert self.config.username == "u"
        assert self.config.access_key == "k"
        assert self.config.local_options == {"forcelocal": "true"}
        assert self.config.capabilities == {"browserName": "firefox"}

    def test_mappings_are_replaced_not_merged(self):
        self.config.set_capabilities({"browserName": "firefox", "os": "Windows"})
        self.config.set_capabilities({"browserName": "safari"})
        assert self.config.capabilities == {"browserName": "safari"}

        self.config.set_local_options({"a": 1})
        self.config.set_local_options({"b": 2})
        assert self.config.local_options == {"b": 2}

    def test_setters_chain(self):
        c = self.config.set_username("u").set_access_key("k")
        assert c is self.config
        assert (c.username, c.access_key) == ("u", "k")

    def test_empty_mapping_is_a_noop(self):
        self.config.set_config({})
        assert self.config == BrowserStackConfig()


class TestConfigUpdate:

    @pytest.mark.parametrize("key", CONFIG_KEYS)
    def test_every_listed_key_is_accepted(self, key):
        value = {} if key in ("local_config", "capabilities") else "v"
        ConfigUpdate.from_mapping({key: value})

    def test_listed_keys(self):
        assert set(CONFIG_KEYS) == {"username", "key", "api_key", "local_config", "capabilities"}

    @pytest.mark.parametrize("config", [
        {"username": 42},
        {"key": ["k"]},
        {"api_key": 1.5},
        {"local_config": "forcelocal"},
        {"capabilities": ["browserName"]},
    ])
    def test_wrong_value_type_raises(self, config):
        with pytest.raises(BrowserStackConfigError, match=next(iter(config))):
            ConfigUpdate.from_mapping(config)

    def test_none_means_not_provided(self):
        config = BrowserStackConfig(username="kept", access_key="k")
        config.set_config({"username": None, "capabilities": None})
        assert config.username == "kept"
        assert config.capabilities == {}

    def test_none_alias_does_not_erase_earlier_key(self):
        assert ConfigUpdate.from_mapping({"key": "k", "api_key": None}).key == "k"


    def test_later_alias_wins(self):
        update = ConfigUpdate.from_mapping({"key": "first", "api_key": "second"})
        assert update.key == "second"

    def test_missing_fields_are_none(self):
        update = ConfigUpdate.from_mapping({"username": "u"})
        assert update.key is None
        assert update.capabilities is None


class TestLoadApplicationConfig:

    def test_loads_section(self):
        config = BrowserStackConfig()
        app = ApplicationConfig({"services": {"browserstack": {"username": "u", "api_key": "k"}}})
        config.load_application_config(app)
        assert config.config_loaded is True
        assert (config.username, config.access_key) == ("u", "k")

    def test_missing_section_defaults_to_empty(self):
        config = BrowserStackConfig()
        config.load_application_config(ApplicationConfig({}))
        assert config.config_loaded is True
        assert config.username == ""

    def test_second_load_is_a_noop(self):
        config = BrowserStackConfig()
        config.load_application_config(
            ApplicationConfig({"services": {"browserstack": {"username": "first"}}})
        )
        config.load_application_config(
            ApplicationConfig({"services": {"browserstack": {"username": "second"}}})
        )
        assert config.username == "first"

    def test_override_survives_later_load(self):
        config = BrowserStackConfig()
        app = ApplicationConfig({"services": {"browserstack": {"username": "from-app"}}})
        config.load_application_config(app)
        config.set_config({"username": "override"})
        config.load_application_config(app)
        assert config.username == "override"

    def test_unknown_key_in_application_config_raises(self):
        config = BrowserStackConfig()
        app = ApplicationConfig({"services": {"browserstack": {"user": "u"}}})
        with pytest.raises(UnknownConfigKeyError):
            config.load_application_config(app)
