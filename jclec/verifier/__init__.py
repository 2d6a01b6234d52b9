"""Artifact class verification."""

from .artifact_verifier import ArtifactVerifier

__all__ = ["ArtifactVerifier"]
