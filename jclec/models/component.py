"""Component and Maven coordinate data models."""

from dataclasses import dataclass
from typing import Optional, Tuple


LATEST_VERSION = "LATEST"
DEFAULT_PACKAGING = "jar"


class CoordinateError(ValueError):
    """Raised when a Maven coordinate string cannot be parsed."""


@dataclass(frozen=True)
class Component:
    """A software component with suspected vulnerable classes."""
    name: str = ""
    coordinates: Optional[str] = None  # groupId:artifactId[:version]
    vulnerable_classes: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any iterable, store a tuple
        object.__setattr__(self, "vulnerable_classes", tuple(self.vulnerable_classes))

    @property
    def has_coordinates(self) -> bool:
        """True when Maven coordinates are present and non-blank."""
        return bool(self.coordinates and self.coordinates.strip())


@dataclass(frozen=True)
class Coordinates:
    """Parsed Maven coordinates of a jar artifact."""
    group_id: str
    artifact_id: str
    version: str = LATEST_VERSION
    packaging: str = DEFAULT_PACKAGING

    @classmethod
    def parse(cls, coordinates: str) -> "Coordinates":
        """
        Parse `groupId:artifactId[:version]`.

        Parts past the version are ignored. A missing version becomes LATEST.

        Raises:
            CoordinateError: on fewer than two parts or a blank group/artifact
        """
        parts = [p.strip() for p in (coordinates or "").strip().split(":")]
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise CoordinateError(f"Invalid Maven coordinates: {coordinates}")

        version = parts[2] if len(parts) > 2 and parts[2] else LATEST_VERSION
        return cls(group_id=parts[0], artifact_id=parts[1], version=version)

    @property
    def is_latest(self) -> bool:
        return self.version == LATEST_VERSION

    def with_version(self, version: str) -> "Coordinates":
        return Coordinates(self.group_id, self.artifact_id, version, self.packaging)

    @property
    def file_name(self) -> str:
        return f"{self.artifact_id}-{self.version}.{self.packaging}"

    def artifact_dir(self) -> str:
        """Repository-relative directory of the artifact (no version)."""
        return f"{self.group_id.replace('.', '/')}/{self.artifact_id}"

    def repository_path(self) -> str:
        """Repository-relative path in the Maven 2 layout."""
        return f"{self.artifact_dir()}/{self.version}/{self.file_name}"

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"
