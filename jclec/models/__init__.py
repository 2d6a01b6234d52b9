"""Data models for vulnerable-class verification."""

from .component import Component, Coordinates, CoordinateError, LATEST_VERSION
from .verification import (
    VerificationStatus,
    VerificationResult,
    ClassCheck,
    class_entry_path
)

__all__ = [
    "Component",
    "Coordinates",
    "CoordinateError",
    "LATEST_VERSION",
    "VerificationStatus",
    "VerificationResult",
    "ClassCheck",
    "class_entry_path"
]
