"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from rdapview.config import get_settings, reload_settings
from rdapview.config.models.jobs import MosapiConfig
from rdapview.config.settings import Settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        """Settings has sensible defaults."""
        settings = Settings()
        assert settings.app_name == "rdapview"
        assert settings.debug is False

    def test_rdap_defaults(self) -> None:
        """RDAP configuration has defaults."""
        settings = Settings()
        assert settings.rdap.base_url == "https://rdap.example/rdap/"
        assert settings.rdap.tos == []
        assert settings.rdap.tos_static_url is None
        assert settings.rdap.zone_signed is True

    def test_jobs_defaults(self) -> None:
        """MoSAPI configuration has defaults."""
        settings = Settings()
        assert settings.jobs.mosapi.tld == "example"
        assert settings.jobs.mosapi.password is None
        assert settings.jobs.mosapi.timeout_seconds == 30.0
        # the schedule lives on the workflow class, not in configuration
        assert "cron_schedule" not in type(settings.jobs.mosapi).model_fields

    def test_observability_defaults(self) -> None:
        """Observability configuration has defaults."""
        settings = Settings()
        assert settings.observability.logging.level == "INFO"
        assert settings.observability.logging.redact_pii is True


class TestMosapiConfig:
    """Tests for MosapiConfig."""

    def test_endpoint_substitutes_tld(self) -> None:
        """The TLD is filled into the base URL template."""
        config = MosapiConfig(tld="app")
        assert config.endpoint == "https://mosapi.icann.org/mosapi/v1/app/"

    def test_password_is_secret(self) -> None:
        """The password does not leak through repr."""
        config = MosapiConfig(password="hunter2")
        assert "hunter2" not in repr(config)
        assert config.password is not None
        assert config.password.get_secret_value() == "hunter2"

    def test_timeout_must_be_positive(self) -> None:
        """A zero timeout is rejected."""
        with pytest.raises(ValueError):
            MosapiConfig(timeout_seconds=0)


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """get_settings returns a Settings instance."""
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "default.toml").write_text("app_name = 'test'")

        monkeypatch.setenv("RDAPVIEW_CONFIG_DIR", str(config_dir))
        monkeypatch.setenv("RDAPVIEW_ENV", "nonexistent")

        settings = get_settings()
        assert isinstance(settings, Settings)
        assert settings.app_name == "test"

    def test_settings_cached(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """get_settings returns cached instance."""
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "default.toml").write_text("app_name = 'test'")

        monkeypatch.setenv("RDAPVIEW_CONFIG_DIR", str(config_dir))

        assert get_settings() is get_settings()

    def test_reload_settings_reads_again(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """reload_settings picks up changed TOML files."""
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        default_toml = config_dir / "default.toml"
        default_toml.write_text("app_name = 'first'")
        monkeypatch.setenv("RDAPVIEW_CONFIG_DIR", str(config_dir))

        assert get_settings().app_name == "first"
        default_toml.write_text("app_name = 'second'")
        assert get_settings().app_name == "first"
        assert reload_settings().app_name == "second"

    def test_nested_toml_sections(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Nested TOML tables populate nested models."""
        mock_toml_files({
            "default.toml": (
                "[rdap]\n"
                "base_url = 'https://rdap.test/'\n"
                "tos = ['one', 'two']\n"
                "zone_signed = false\n"
                "[jobs.mosapi]\n"
                "tld = 'app'\n"
            ),
        })
        monkeypatch.setenv("RDAPVIEW_CONFIG_DIR", str(test_config_dir))

        settings = get_settings()
        assert settings.rdap.base_url == "https://rdap.test/"
        assert settings.rdap.tos == ["one", "two"]
        assert settings.rdap.zone_signed is False
        assert settings.jobs.mosapi.tld == "app"

    def test_env_overrides_toml(
        self, test_config_dir: Path, mock_toml_files, env_override,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """RDAPVIEW_* variables take precedence over TOML values."""
        mock_toml_files({"default.toml": "debug = false\n[jobs.mosapi]\ntld = 'app'\n"})
        monkeypatch.setenv("RDAPVIEW_CONFIG_DIR", str(test_config_dir))

        with env_override({
            "RDAPVIEW_DEBUG": "true",
            "RDAPVIEW_JOBS__MOSAPI__PASSWORD": "s3cret",
        }):
            settings = get_settings()

        assert settings.debug is True
        assert settings.jobs.mosapi.password is not None
        assert settings.jobs.mosapi.password.get_secret_value() == "s3cret"

    def test_environment_file_merged(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The RDAPVIEW_ENV file is deep-merged over default.toml."""
        mock_toml_files({
            "default.toml": "[rdap]\nbase_url = 'https://rdap.test/'\ntos = ['a']\n",
            "production.toml": "[rdap]\ntos_static_url = '/tos.html'\n",
        })
        monkeypatch.setenv("RDAPVIEW_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("RDAPVIEW_ENV", "production")

        settings = get_settings()
        assert settings.rdap.base_url == "https://rdap.test/"
        assert settings.rdap.tos == ["a"]
        assert settings.rdap.tos_static_url == "/tos.html"


class TestShippedConfig:
    """The default.toml shipped with the project loads cleanly."""

    def test_default_toml_loads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """config/default.toml validates against Settings."""
        config_dir = Path(__file__).resolve().parents[3] / "config"
        monkeypatch.setenv("RDAPVIEW_CONFIG_DIR", str(config_dir))
        monkeypatch.setenv("RDAPVIEW_ENV", "nonexistent")

        settings = get_settings()
        assert settings.rdap.tos
        assert "{tld}" in settings.jobs.mosapi.base_url
