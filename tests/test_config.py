"""Tests for configuration module."""

import pytest

from listing_catalog.config import (
    CATALOG_CONFIG,
    MAX_PAGE_SIZE,
    CatalogSettings,
    DatabaseConfig,
    SearchConfig,
    get_settings,
)
from listing_catalog.error_handling import RetryConfig


def test_catalog_config_exists():
    """Test that CATALOG_CONFIG dictionary is properly defined."""
    assert isinstance(CATALOG_CONFIG, dict)
    assert "storage_backend" in CATALOG_CONFIG
    assert "log_level" in CATALOG_CONFIG
    assert "database" in CATALOG_CONFIG
    assert "search" in CATALOG_CONFIG
    assert "retry_config" in CATALOG_CONFIG


def test_get_settings():
    """Test that get_settings returns a CatalogSettings mirroring CATALOG_CONFIG."""
    settings = get_settings()

    assert isinstance(settings, CatalogSettings)
    assert settings.storage_backend == CATALOG_CONFIG["storage_backend"]

    assert isinstance(settings.database, DatabaseConfig)
    assert settings.database.url == CATALOG_CONFIG["database"]["url"]

    assert isinstance(settings.search, SearchConfig)
    assert settings.search.default_page_size == CATALOG_CONFIG["search"]["default_page_size"]

    assert isinstance(settings.retry_config, RetryConfig)
    assert settings.retry_config.max_retries == CATALOG_CONFIG["retry_config"]["max_retries"]


def test_settings_defaults():
    """Test default values of nested configs."""
    settings = CatalogSettings()

    assert settings.storage_backend == "postgres"
    assert settings.database.min_pool_size == 2
    assert settings.database.max_pool_size == 10
    assert settings.search.default_page_size == 10
    assert settings.retry_config.max_retries == 3


def test_settings_with_custom_values():
    """Test creating CatalogSettings with custom values."""
    settings = CatalogSettings(
        storage_backend="memory",
        search=SearchConfig(default_page_size=5)
    )

    assert settings.storage_backend == "memory"
    assert settings.search.default_page_size == 5
    assert isinstance(settings.database, DatabaseConfig)


def test_page_size_ceiling_is_not_configurable():
    """The page-size ceiling is fixed at 50 and not read from the environment."""
    assert MAX_PAGE_SIZE == 50
    assert "max_page_size" not in CATALOG_CONFIG["search"]
    assert not hasattr(get_settings().search, "max_page_size")


@pytest.mark.parametrize("default_page_size", [0, -1, 51, 100])
def test_default_page_size_outside_limits_is_rejected(default_page_size):
    """A default page size the query layer would reject fails at configuration time."""
    with pytest.raises(ValueError):
        SearchConfig(default_page_size=default_page_size)
