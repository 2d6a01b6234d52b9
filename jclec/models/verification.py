"""Verification outcome models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional


class VerificationStatus(Enum):
    """Outcome of looking for a class inside an artifact."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class VerificationResult:
    """Result of a single (coordinates, class) verification."""
    coordinates: str
    class_name: str
    status: VerificationStatus
    reason: str = ""
    artifact_path: Optional[Path] = None

    @property
    def found(self) -> bool:
        return self.status == VerificationStatus.FOUND

    @classmethod
    def error(cls, coordinates: str, class_name: str, reason: str) -> "VerificationResult":
        return cls(coordinates, class_name, VerificationStatus.ERROR, reason)


@dataclass
class ClassCheck:
    """What the pipeline did for one vulnerable class of one component."""
    component: str
    class_name: str
    coordinates: Optional[str] = None
    verification: Optional[VerificationResult] = None
    search_results: Optional[List[str]] = None

    @property
    def searched(self) -> bool:
        return self.search_results is not None

    @property
    def found_in_artifact(self) -> bool:
        return self.verification is not None and self.verification.found


def class_entry_path(class_name: str) -> str:
    """Archive entry path of a fully-qualified class name."""
    return class_name.replace('.', '/') + ".class"
