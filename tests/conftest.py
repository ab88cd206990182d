"""Shared test fixtures for the rdapview test suite."""

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from rdapview.auth import RdapAuthorization
from rdapview.clock import FakeClock
from rdapview.config.models.rdap import RdapConfig
from rdapview.rdap.context import RequestContext
from rdapview.rdap.formatter import RdapJsonFormatter
from rdapview.registry.stores.inmemory import InMemoryRegistryStore

REQUEST_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)
BASE_URL = "https://rdap.example/rdap/"


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            toml_file = test_config_dir / filename
            toml_file.write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            if self.original_env[key] is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = self.original_env[key]


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"RDAPVIEW_DEBUG": "true"}):
                # test code here
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from rdapview.config import get_settings
    from rdapview.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def clock() -> FakeClock:
    """Clock frozen at REQUEST_TIME."""
    return FakeClock(REQUEST_TIME)


@pytest.fixture
def rdap_config() -> RdapConfig:
    return RdapConfig(base_url=BASE_URL, tos=["First paragraph.", "Second paragraph."])


@pytest.fixture
def store() -> InMemoryRegistryStore:
    return InMemoryRegistryStore()


@pytest.fixture
def make_context(
    clock: FakeClock, rdap_config: RdapConfig
) -> Callable[..., RequestContext]:
    """Factory for request contexts; public (unauthorized) by default."""

    def _make_context(
        authorization: RdapAuthorization | None = None,
        config: RdapConfig | None = None,
    ) -> RequestContext:
        return RequestContext(
            clock,
            authorization or RdapAuthorization.public(),
            config or rdap_config,
        )

    return _make_context


@pytest.fixture
def context(make_context: Callable[..., RequestContext]) -> RequestContext:
    return make_context()


@pytest.fixture
def make_formatter(
    store: InMemoryRegistryStore, make_context: Callable[..., RequestContext]
) -> Callable[..., RdapJsonFormatter]:
    """Factory for formatters over the shared in-memory store."""

    def _make_formatter(
        authorization: RdapAuthorization | None = None,
        config: RdapConfig | None = None,
    ) -> RdapJsonFormatter:
        return RdapJsonFormatter(store, make_context(authorization, config))

    return _make_formatter
