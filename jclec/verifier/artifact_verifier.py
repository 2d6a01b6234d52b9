"""Checks whether a class is packaged inside a Maven artifact."""

import logging
import zipfile
from pathlib import Path
from typing import List, Optional

from ..models import (
    Coordinates,
    CoordinateError,
    VerificationResult,
    VerificationStatus,
    class_entry_path
)
from ..resolver import ArtifactResolver, ArtifactResolutionError
from ..search import CentralSearchClient


class ArtifactVerifier:
    """
    Verifies vulnerable classes against Maven artifacts.

    Every failure (bad coordinates, resolution, unreadable archive) is
    logged and reported as a non-found result. Nothing is raised to the
    caller, which always has the search fallback available.
    """

    def __init__(
            self,
            resolver: ArtifactResolver,
            search_client: CentralSearchClient,
            logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the verifier.

        Args:
            resolver: Resolves coordinates to a local jar
            search_client: Fallback class search
            logger: Logger to report through
        """
        self.resolver = resolver
        self.search_client = search_client
        self.logger = logger or logging.getLogger(__name__)

    def verify_class_in_artifact(self, coordinates: str, class_name: str) -> bool:
        """
        Check whether `class_name` is packaged in the artifact at `coordinates`.

        Args:
            coordinates: groupId:artifactId[:version]
            class_name: Fully-qualified class name

        Returns:
            True only if the class entry exists in the resolved jar
        """
        return self.check_class(coordinates, class_name).found

    def check_class(self, coordinates: str, class_name: str) -> VerificationResult:
        """Same as verify_class_in_artifact, keeping the reason for a miss."""
        try:
            parsed = Coordinates.parse(coordinates)
        except CoordinateError as e:
            self.logger.error(str(e))
            return VerificationResult.error(coordinates, class_name, str(e))

        try:
            jar_path = self.resolver.resolve(parsed)
            return self.check_class_in_jar(jar_path, class_name, coordinates)
        except ArtifactResolutionError as e:
            self.logger.error(f"Failed to resolve artifact: {e}")
            return VerificationResult.error(coordinates, class_name, str(e))
        except Exception as e:
            self.logger.error(f"Error verifying class: {e}")
            return VerificationResult.error(coordinates, class_name, str(e))

    def check_class_in_jar(self, jar_path: Path, class_name: str,
                           coordinates: str = "") -> VerificationResult:
        """Look up the compiled entry of `class_name` inside a jar file."""
        entry = class_entry_path(class_name)
        try:
            with zipfile.ZipFile(jar_path) as jar:
                jar.getinfo(entry)
        except KeyError:
            self.logger.debug(f"{entry} not in {jar_path.name}")
            return VerificationResult(
                coordinates, class_name, VerificationStatus.NOT_FOUND,
                reason=f"{entry} not in archive", artifact_path=jar_path
            )
        except (zipfile.BadZipFile, OSError) as e:
            self.logger.error(f"Error checking class in JAR: {e}")
            return VerificationResult.error(coordinates, class_name, str(e))

        return VerificationResult(
            coordinates, class_name, VerificationStatus.FOUND, artifact_path=jar_path
        )

    def search_for_class(self, class_name: str) -> List[str]:
        """Search Maven Central for artifacts containing `class_name`."""
        return self.search_client.search_for_class(class_name)
