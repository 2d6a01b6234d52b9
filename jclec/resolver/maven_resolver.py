"""
Maven artifact resolver.

Resolves jar artifacts against an ordered chain of remote repositories,
using a local repository in the Maven 2 layout as a pass-through cache.
An artifact already present locally is returned without network access.
"""

import os
import hashlib
import logging
import tempfile
import time
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import requests

from ..models import Coordinates

logger = logging.getLogger(__name__)

CHECKSUM_POLICIES = ("warn", "fail", "ignore")
METADATA_FILE = "maven-metadata.xml"


class ArtifactResolutionError(Exception):
    """Raised when an artifact cannot be resolved from any repository."""


@dataclass(frozen=True)
class RemoteRepository:
    """A remote repository using the default (Maven 2) layout."""
    id: str
    url: str

    def url_for(self, path: str) -> str:
        return self.url.rstrip('/') + '/' + path.lstrip('/')


class LocalRepository:
    """On-disk repository in the Maven 2 layout."""

    def __init__(self, basedir: Union[str, Path]):
        self.basedir = Path(basedir).expanduser()

    def path_for(self, coordinates: Coordinates) -> Path:
        return self.basedir / coordinates.repository_path()

    def find(self, coordinates: Coordinates) -> Optional[Path]:
        """Return the cached artifact file, if present."""
        path = self.path_for(coordinates)
        return path if path.is_file() else None

    def metadata_path(self, coordinates: Coordinates, repository_id: str) -> Path:
        """Cached copy of a remote repository's metadata for the artifact."""
        return self.basedir / coordinates.artifact_dir() / f"maven-metadata-{repository_id}.xml"


class ArtifactResolver:
    """
    Resolves Maven coordinates to a local jar file.

    Remote repositories are tried in order; the first one that serves the
    artifact wins. Downloads land in the local repository so later runs
    resolve offline.
    """

    CHUNK_SIZE = 64 * 1024

    def __init__(
            self,
            local_repository: Union[str, Path, LocalRepository],
            remote_repositories: List[RemoteRepository],
            session: Optional[requests.Session] = None,
            timeout: int = 60,
            checksum_policy: str = "warn",
            metadata_update_interval: int = 24 * 60 * 60,
            user_agent: str = "Mozilla/5.0",
            logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the resolver.

        Args:
            local_repository: Local repository directory (e.g. ~/.m2/repository)
            remote_repositories: Remote repositories, in lookup order
            session: HTTP session to use; one is created if omitted
            timeout: Per-request timeout in seconds
            checksum_policy: "warn", "fail" or "ignore" for SHA-1 mismatches
            metadata_update_interval: Seconds cached maven-metadata.xml stays fresh
            user_agent: User-Agent header sent to repositories
            logger: Logger to report through
        """
        if checksum_policy not in CHECKSUM_POLICIES:
            raise ValueError(f"Unknown checksum policy: {checksum_policy}")

        if isinstance(local_repository, LocalRepository):
            self.local = local_repository
        else:
            self.local = LocalRepository(local_repository)
        self.remotes = list(remote_repositories)
        self.session = session or requests.Session()
        self.timeout = timeout
        self.checksum_policy = checksum_policy
        self.metadata_update_interval = metadata_update_interval
        self.headers = {"User-Agent": user_agent}
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings, session: Optional[requests.Session] = None,
                      logger: Optional[logging.Logger] = None) -> "ArtifactResolver":
        """Build a resolver from ResolverSettings."""
        return cls(
            local_repository=settings.local_repository,
            remote_repositories=[RemoteRepository(r.id, r.url) for r in settings.remote_repositories],
            session=session,
            timeout=settings.request_timeout,
            checksum_policy=settings.checksum_policy,
            metadata_update_interval=settings.metadata_update_interval,
            user_agent=settings.user_agent,
            logger=logger
        )

    def resolve(self, coordinates: Coordinates) -> Path:
        """
        Resolve an artifact to a local file.

        Args:
            coordinates: Parsed coordinates; LATEST is resolved first

        Returns:
            Path of the jar in the local repository

        Raises:
            ArtifactResolutionError: if no repository can provide the artifact
        """
        if coordinates.is_latest:
            coordinates = self.resolve_version(coordinates)

        cached = self.local.find(coordinates)
        if cached:
            self.logger.debug(f"Using cached artifact {coordinates} at {cached}")
            return cached

        target = self.local.path_for(coordinates)
        for repo in self.remotes:
            if self._download(repo, coordinates, target):
                self.logger.info(f"Downloaded {coordinates} from {repo.id}")
                return target

        repo_ids = ", ".join(r.id for r in self.remotes) or "no repositories"
        raise ArtifactResolutionError(f"Could not find artifact {coordinates} in {repo_ids}")

    def resolve_version(self, coordinates: Coordinates) -> Coordinates:
        """
        Replace a LATEST version with a concrete one.

        Uses versioning/latest, then versioning/release, then the last
        listed version of maven-metadata.xml. Cached metadata younger than
        metadata_update_interval is used without network access; otherwise
        each remote repository is asked in order and the first that answers
        wins. If none answers, stale cached metadata is used.
        """
        version = self._cached_latest(coordinates, fresh_only=True)
        if version:
            return coordinates.with_version(version)

        for repo in self.remotes:
            version = self._remote_latest(repo, coordinates)
            if version:
                self.logger.debug(f"{coordinates} -> {version} (from {repo.id})")
                return coordinates.with_version(version)

        version = self._cached_latest(coordinates, fresh_only=False)
        if version:
            return coordinates.with_version(version)

        raise ArtifactResolutionError(f"Could not resolve version for {coordinates}")

    def _cached_latest(self, coordinates: Coordinates, fresh_only: bool) -> Optional[str]:
        now = time.time()
        for repo in self.remotes:
            cached = self.local.metadata_path(coordinates, repo.id)
            if not cached.is_file():
                continue
            if fresh_only and now - cached.stat().st_mtime > self.metadata_update_interval:
                continue

            version = parse_latest_version(cached.read_text(encoding='utf-8'))
            if version:
                self.logger.debug(f"{coordinates} -> {version} (cached metadata of {repo.id})")
                return version
        return None

    def _remote_latest(self, repo: RemoteRepository, coordinates: Coordinates) -> Optional[str]:
        url = repo.url_for(f"{coordinates.artifact_dir()}/{METADATA_FILE}")
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.warning(f"Failed to fetch metadata from {repo.id}: {e}")
            return None

        if response.status_code != 200:
            self.logger.debug(f"No metadata for {coordinates} in {repo.id} (HTTP {response.status_code})")
            return None

        version = parse_latest_version(response.text)
        if version:
            cache_file = self.local.metadata_path(coordinates, repo.id)
            cache_file.parent.mkdir(parents=True, exist_ok=True)
            cache_file.write_text(response.text, encoding='utf-8')
        return version

    def _download(self, repo: RemoteRepository, coordinates: Coordinates, target: Path) -> bool:
        """Download the artifact from one repository into `target`."""
        url = repo.url_for(coordinates.repository_path())
        self.logger.debug(f"Fetching {url}")

        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout, stream=True)
        except requests.RequestException as e:
            self.logger.warning(f"Request to {repo.id} failed: {e}")
            return False

        try:
            if response.status_code == 404:
                self.logger.debug(f"{coordinates} not found in {repo.id}")
                return False
            if response.status_code != 200:
                self.logger.warning(f"{repo.id} returned HTTP {response.status_code} for {coordinates}")
                return False

            target.parent.mkdir(parents=True, exist_ok=True)
            sha1 = hashlib.sha1()
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=target.name, suffix=".part")
            try:
                with os.fdopen(fd, 'wb') as f:
                    for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                        if chunk:
                            sha1.update(chunk)
                            f.write(chunk)

                if not self._checksum_ok(repo, url, sha1.hexdigest(), coordinates):
                    return False

                os.replace(tmp_name, target)
            except requests.RequestException as e:
                self.logger.warning(f"Download of {coordinates} from {repo.id} failed: {e}")
                return False
            finally:
                if os.path.exists(tmp_name):
                    os.remove(tmp_name)
        finally:
            response.close()

        return True

    def _checksum_ok(self, repo: RemoteRepository, url: str, actual: str,
                     coordinates: Coordinates) -> bool:
        if self.checksum_policy == "ignore":
            return True

        try:
            response = self.session.get(url + ".sha1", headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.debug(f"No checksum for {coordinates} from {repo.id}: {e}")
            return True

        if response.status_code != 200:
            self.logger.debug(f"No checksum for {coordinates} from {repo.id}")
            return True

        fields = response.text.strip().split()
        expected = fields[0].lower() if fields else ""
        if expected == actual:
            return True

        message = f"Checksum mismatch for {coordinates} from {repo.id}: expected {expected}, got {actual}"
        if self.checksum_policy == "fail":
            self.logger.error(message)
            return False

        self.logger.warning(message)
        return True


def parse_latest_version(metadata_xml: str) -> Optional[str]:
    """Pick the newest version from a maven-metadata.xml document."""
    try:
        root = ET.fromstring(metadata_xml)
    except ET.ParseError as e:
        logger.debug(f"Unreadable maven-metadata.xml: {e}")
        return None

    versioning = root.find("versioning")
    if versioning is None:
        return None

    for tag in ("latest", "release"):
        value = versioning.findtext(tag)
        if value and value.strip():
            return value.strip()

    versions = [v.text.strip() for v in versioning.findall("versions/version") if v.text and v.text.strip()]
    return versions[-1] if versions else None
