"""
Configuration settings for the vulnerable-class verifier.

Defaults mirror the Maven client: a local repository under the user's
home directory and Maven Central as the remote repository.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import os
import json
from pathlib import Path


MAVEN_CENTRAL_URL = "https://repo.maven.apache.org/maven2/"
CENTRAL_SEARCH_URL = "https://search.maven.org/solrsearch/select"
DEFAULT_USER_AGENT = "Mozilla/5.0"

# Known repository endpoints, usable from config files by id alone
WELL_KNOWN_REPOSITORIES: Dict[str, str] = {
    "central": MAVEN_CENTRAL_URL,
    "google": "https://maven.google.com/",
    "sonatype-releases": "https://oss.sonatype.org/content/repositories/releases/",
}


class SettingsError(ValueError):
    """Raised when a settings file is unreadable or malformed."""


@dataclass
class RepositorySettings:
    """A single remote Maven repository."""
    id: str
    url: str


@dataclass
class ResolverSettings:
    """Artifact resolution settings."""
    local_repository: str = str(Path.home() / ".m2" / "repository")
    remote_repositories: List[RepositorySettings] = field(default_factory=lambda: [
        RepositorySettings(id="central", url=MAVEN_CENTRAL_URL)
    ])
    request_timeout: int = 60
    checksum_policy: str = "warn"  # warn, fail, ignore
    metadata_update_interval: int = 24 * 60 * 60  # seconds; cached metadata younger than this is reused
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class SearchSettings:
    """Maven Central search settings."""
    base_url: str = CENTRAL_SEARCH_URL
    rows: int = 20
    request_timeout: int = 30
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class DatasetSettings:
    """Dataset location; None means the bundled resource."""
    path: Optional[str] = None


@dataclass
class AppSettings:
    """Main application settings."""
    resolver: ResolverSettings = field(default_factory=ResolverSettings)
    search: SearchSettings = field(default_factory=SearchSettings)
    dataset: DatasetSettings = field(default_factory=DatasetSettings)

    log_level: str = "INFO"

    @classmethod
    def from_file(cls, file_path: str) -> "AppSettings":
        """Load settings from JSON file."""
        try:
            with open(file_path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise SettingsError(f"Could not read settings file {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {file_path} must contain a JSON object")

        settings = cls()

        if 'resolver' in data:
            for k, v in data['resolver'].items():
                if k == 'remote_repositories':
                    settings.resolver.remote_repositories = [
                        _repository_from_entry(r, i) for i, r in enumerate(v)
                    ]
                elif hasattr(settings.resolver, k):
                    setattr(settings.resolver, k, v)

        if 'search' in data:
            for k, v in data['search'].items():
                if hasattr(settings.search, k):
                    setattr(settings.search, k, v)

        if 'dataset' in data:
            for k, v in data['dataset'].items():
                if hasattr(settings.dataset, k):
                    setattr(settings.dataset, k, v)

        if 'log_level' in data:
            settings.log_level = data['log_level']

        return settings

    @classmethod
    def from_env(cls, settings: Optional["AppSettings"] = None) -> "AppSettings":
        """Load settings from environment variables, on top of `settings` if given."""
        settings = settings or cls()

        # Resolver
        if os.getenv('JCLEC_LOCAL_REPOSITORY'):
            settings.resolver.local_repository = os.getenv('JCLEC_LOCAL_REPOSITORY')
        if os.getenv('JCLEC_REMOTE_REPOSITORIES'):
            urls = [u.strip() for u in os.getenv('JCLEC_REMOTE_REPOSITORIES').split(',') if u.strip()]
            settings.resolver.remote_repositories = repositories_from_urls(urls)

        # Search
        if os.getenv('JCLEC_SEARCH_URL'):
            settings.search.base_url = os.getenv('JCLEC_SEARCH_URL')

        # Dataset
        if os.getenv('JCLEC_DATASET'):
            settings.dataset.path = os.getenv('JCLEC_DATASET')

        if os.getenv('JCLEC_LOG_LEVEL'):
            settings.log_level = os.getenv('JCLEC_LOG_LEVEL')

        return settings

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return {
            "resolver": {
                "local_repository": self.resolver.local_repository,
                "remote_repositories": [
                    {"id": r.id, "url": r.url} for r in self.resolver.remote_repositories
                ],
                "request_timeout": self.resolver.request_timeout,
                "checksum_policy": self.resolver.checksum_policy,
                "metadata_update_interval": self.resolver.metadata_update_interval,
                "user_agent": self.resolver.user_agent
            },
            "search": {
                "base_url": self.search.base_url,
                "rows": self.search.rows,
                "request_timeout": self.search.request_timeout,
                "user_agent": self.search.user_agent
            },
            "dataset": {
                "path": self.dataset.path
            },
            "log_level": self.log_level
        }

    def save(self, file_path: str):
        """Save settings to JSON file."""
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


def _repository_from_entry(entry, index: int) -> RepositorySettings:
    """Build a repository from a settings entry; a well-known id may omit the url."""
    if not isinstance(entry, dict):
        raise SettingsError(f"remote_repositories[{index}]: expected an object, got {entry!r}")

    repo_id = entry.get('id') or f"repo{index + 1}"
    url = entry.get('url') or WELL_KNOWN_REPOSITORIES.get(repo_id)
    if not url:
        raise SettingsError(
            f"remote_repositories[{index}]: {entry!r} has no url and '{repo_id}' "
            f"is not one of {', '.join(sorted(WELL_KNOWN_REPOSITORIES))}"
        )
    return RepositorySettings(id=repo_id, url=url)


def repositories_from_urls(urls: List[str]) -> List[RepositorySettings]:
    """Build repository entries for bare URLs. Maven Central keeps the id 'central'."""
    repos = []
    for i, url in enumerate(urls):
        repo_id = "central" if url.rstrip('/') == MAVEN_CENTRAL_URL.rstrip('/') else f"repo{i + 1}"
        repos.append(RepositorySettings(id=repo_id, url=url))
    return repos


# Default settings instance
DEFAULT_SETTINGS = AppSettings()
