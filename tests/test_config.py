"""Tests for environment-driven resolver settings"""
import logging
import os

from wa_identity.config import ResolverSettings, load_settings, resolve_user_path
from wa_identity.utils.logging_config import configure_logging, log_verbose, should_log_verbose


class TestResolveUserPath:
    def test_expands_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_user_path("~/creds") == str(tmp_path / "creds")

    def test_relative_made_absolute(self):
        assert resolve_user_path(" creds/../auth ") == os.path.join(os.getcwd(), "auth")

    def test_blank_unchanged(self):
        assert resolve_user_path("   ") == ""


class TestResolverSettings:
    def test_oauth_dir_defaults_to_credentials(self, tmp_path):
        settings = ResolverSettings(state_dir=str(tmp_path))
        assert settings.oauth_dir == settings.credentials_dir == str(tmp_path / "credentials")

    def test_oauth_override(self, tmp_path):
        settings = ResolverSettings(state_dir=str(tmp_path), oauth_dir_override=str(tmp_path / "oauth"))
        assert settings.oauth_dir == str(tmp_path / "oauth")
        assert settings.credentials_dir == str(tmp_path / "credentials")


class TestLoadSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        settings = load_settings()
        assert settings.config_dir == str(tmp_path / ".wa-identity")
        assert settings.oauth_dir == str(tmp_path / ".wa-identity" / "credentials")
        assert settings.verbose is False

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WA_STATE_DIR", str(tmp_path / "state"))
        monkeypatch.setenv("WA_OAUTH_DIR", str(tmp_path / "oauth"))
        monkeypatch.setenv("WA_VERBOSE", "yes")
        settings = load_settings()
        assert settings.config_dir == str(tmp_path / "state")
        assert settings.oauth_dir == str(tmp_path / "oauth")
        assert settings.verbose is True

    def test_read_fresh_each_call(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WA_STATE_DIR", str(tmp_path / "one"))
        first = load_settings()
        monkeypatch.setenv("WA_STATE_DIR", str(tmp_path / "two"))
        assert load_settings().config_dir != first.config_dir

    def test_env_file(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(f"WA_STATE_DIR={tmp_path / 'from-file'}\nWA_VERBOSE=true\n")
        monkeypatch.setenv("WA_VERBOSE", "false")
        settings = load_settings(str(env_file))
        assert settings.config_dir == str(tmp_path / "from-file")
        assert settings.verbose is False


class TestLogging:
    def test_should_log_verbose(self):
        assert should_log_verbose(ResolverSettings(verbose=True)) is True
        assert should_log_verbose(ResolverSettings(verbose=False)) is False
        assert should_log_verbose(ResolverSettings(verbose=False), override=True) is True
        assert should_log_verbose(ResolverSettings(verbose=True), override=False) is False

    def test_log_verbose_emits_info(self, caplog):
        caplog.set_level(logging.INFO, logger="wa_identity.test")
        log_verbose(logging.getLogger("wa_identity.test"), "LID mapping not found for 1")
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.INFO, "LID mapping not found for 1")
        ]

    def test_configure_logging_force(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging(logging.DEBUG, force=True)
            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG

            configure_logging(logging.WARNING)
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
