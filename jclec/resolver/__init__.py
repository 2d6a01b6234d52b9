"""Maven artifact resolution."""

from .maven_resolver import (
    ArtifactResolver,
    ArtifactResolutionError,
    LocalRepository,
    RemoteRepository,
    parse_latest_version
)

__all__ = [
    "ArtifactResolver",
    "ArtifactResolutionError",
    "LocalRepository",
    "RemoteRepository",
    "parse_latest_version"
]
