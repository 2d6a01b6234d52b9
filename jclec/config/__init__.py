"""Configuration module."""

from .settings import (
    AppSettings,
    SettingsError,
    ResolverSettings,
    RepositorySettings,
    SearchSettings,
    DatasetSettings,
    DEFAULT_SETTINGS,
    MAVEN_CENTRAL_URL,
    CENTRAL_SEARCH_URL,
    repositories_from_urls
)

__all__ = [
    "AppSettings",
    "SettingsError",
    "ResolverSettings",
    "RepositorySettings",
    "SearchSettings",
    "DatasetSettings",
    "DEFAULT_SETTINGS",
    "MAVEN_CENTRAL_URL",
    "CENTRAL_SEARCH_URL",
    "repositories_from_urls"
]
