"""Tests for config manager."""

import stat

import pytest

from awx_reconciler.client.errors import ConfigurationError
from awx_reconciler.config.manager import ConfigManager
from awx_reconciler.config.models import ConnectionProfile


class TestConfigManager:
    def test_load_empty(self, config_manager: ConfigManager):
        assert config_manager.config.profiles == {}
        assert config_manager.config.default_profile is None

    def test_add_profile(self, config_manager: ConfigManager, sample_profile: ConnectionProfile):
        config_manager.add_profile(sample_profile)
        assert "test-awx" in config_manager.config.profiles
        assert config_manager.config.default_profile == "test-awx"

    def test_add_sets_first_as_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ConnectionProfile(name="first", host="https://first.test"))
        config_manager.add_profile(ConnectionProfile(name="second", host="https://second.test"))
        assert config_manager.config.default_profile == "first"

    def test_remove_profile(self, config_manager: ConfigManager, sample_profile: ConnectionProfile):
        config_manager.add_profile(sample_profile)
        assert config_manager.remove_profile("test-awx") is True
        assert "test-awx" not in config_manager.config.profiles

    def test_remove_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.remove_profile("nope") is False

    def test_remove_default_reassigns(self, config_manager: ConfigManager):
        config_manager.add_profile(ConnectionProfile(name="a", host="https://a.test"))
        config_manager.add_profile(ConnectionProfile(name="b", host="https://b.test"))
        config_manager.set_default("a")
        config_manager.remove_profile("a")
        assert config_manager.config.default_profile == "b"

    def test_set_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ConnectionProfile(name="dev", host="https://dev.test"))
        assert config_manager.set_default("dev") is True
        assert config_manager.config.default_profile == "dev"

    def test_set_default_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.set_default("nope") is False

    def test_get_default_profile(self, config_manager: ConfigManager, sample_profile: ConnectionProfile):
        config_manager.add_profile(sample_profile)
        p = config_manager.get_profile()
        assert p is not None
        assert p.name == "test-awx"

    def test_save_and_reload(self, config_manager: ConfigManager, sample_profile: ConnectionProfile):
        config_manager.add_profile(sample_profile)
        mgr2 = ConfigManager(config_path=config_manager.config_path)
        p = mgr2.get_profile("test-awx")
        assert p is not None
        assert p.host == "https://awx.test"
        assert p.token == "s3cr3t-token"
        assert p.verify_ssl is True

    def test_saved_file_is_owner_only(self, config_manager: ConfigManager, sample_profile: ConnectionProfile):
        config_manager.add_profile(sample_profile)
        mode = stat.S_IMODE(config_manager.config_path.stat().st_mode)
        assert mode == 0o600

    def test_defaults_are_not_written(self, config_manager: ConfigManager, sample_profile: ConnectionProfile):
        config_manager.add_profile(sample_profile)
        text = config_manager.config_path.read_text()
        assert "verify_ssl" not in text
        assert "timeout" not in text


class TestResolveConnection:
    def test_from_profile(self, config_manager: ConfigManager, sample_profile: ConnectionProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_connection()
        assert resolved.host == "https://awx.test"
        assert resolved.token == "s3cr3t-token"
        assert resolved.name == "test-awx"

    def test_flags_override(self, config_manager: ConfigManager, sample_profile: ConnectionProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_connection(host="https://other.test/", token="flag")
        assert resolved.host == "https://other.test"
        assert resolved.token == "flag"

    def test_env_vars(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AWX_HOST", "https://env.awx.test")
        monkeypatch.setenv("AWX_TOKEN", "env-token")
        resolved = config_manager.resolve_connection()
        assert resolved.host == "https://env.awx.test"
        assert resolved.token == "env-token"
        assert resolved.name == "cli"

    def test_env_beats_profile(self, config_manager, sample_profile, monkeypatch):
        config_manager.add_profile(sample_profile)
        monkeypatch.setenv("AWX_TOKEN", "env-token")
        resolved = config_manager.resolve_connection()
        assert resolved.host == "https://awx.test"
        assert resolved.token == "env-token"

    def test_env_profile_selects(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        config_manager.add_profile(ConnectionProfile(name="a", host="https://a.test", token="ta"))
        config_manager.add_profile(ConnectionProfile(name="b", host="https://b.test", token="tb"))
        monkeypatch.setenv("AWX_PROFILE", "b")
        assert config_manager.resolve_connection().host == "https://b.test"

    def test_keeps_profile_transport_settings(self, config_manager: ConfigManager):
        config_manager.add_profile(ConnectionProfile(
            name="lab", host="https://lab.test", token="t", verify_ssl=False, timeout=5,
        ))
        resolved = config_manager.resolve_connection("lab")
        assert resolved.verify_ssl is False
        assert resolved.timeout == 5

    def test_no_host_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="No AWX host configured"):
            config_manager.resolve_connection()

    def test_no_token_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="No AWX token configured"):
            config_manager.resolve_connection(host="https://awx.test")
