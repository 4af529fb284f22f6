"""Configuration module for the listing catalog service."""

from .settings import (
    CATALOG_CONFIG,
    MAX_PAGE_SIZE,
    CatalogSettings,
    DatabaseConfig,
    SearchConfig,
    get_settings,
)

__all__ = [
    'CATALOG_CONFIG',
    'MAX_PAGE_SIZE',
    'CatalogSettings',
    'DatabaseConfig',
    'SearchConfig',
    'get_settings',
]
