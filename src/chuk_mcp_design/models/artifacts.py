"""
Artifact models - the in-memory output of a generation run.

Nothing touches the filesystem until the whole run has succeeded,
so a failed run leaves no partial output behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from chuk_mcp_design.constants import ArtifactKind, ErrorMessages
from chuk_mcp_design.errors import DesignSystemError


@dataclass(frozen=True)
class Artifact:
    """A single generated file."""

    kind: ArtifactKind
    path: PurePosixPath  # Relative to the output root
    content: str


@dataclass
class GenerationResult:
    """Result of generating a design system."""

    system_name: str
    artifacts: list[Artifact] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    groups_processed: list[str] = field(default_factory=list)
    output_root: Path | None = None  # Set once written

    def add(self, kind: ArtifactKind, path: PurePosixPath, content: str) -> Artifact:
        """
        Append an artifact and return it.

        Raises:
            DesignSystemError: If another artifact already uses the path
                (e.g. a category named like its group aggregate, or two
                groups that kebab-case to the same folder)
        """
        if self.get(path) is not None:
            raise DesignSystemError(ErrorMessages.DUPLICATE_ARTIFACT.format(path=path))
        artifact = Artifact(kind=kind, path=path, content=content)
        self.artifacts.append(artifact)
        return artifact

    def by_kind(self, kind: ArtifactKind) -> list[Artifact]:
        """Get artifacts of one kind, in emission order."""
        return [a for a in self.artifacts if a.kind == kind]

    def get(self, path: str | PurePosixPath) -> Artifact | None:
        """Look up an artifact by its relative path."""
        target = PurePosixPath(path)
        for artifact in self.artifacts:
            if artifact.path == target:
                return artifact
        return None

    @property
    def total_artifacts(self) -> int:
        """Number of generated files."""
        return len(self.artifacts)

    def summary(self) -> dict[str, int]:
        """Count artifacts per kind."""
        counts: dict[str, int] = {}
        for artifact in self.artifacts:
            counts[artifact.kind.value] = counts.get(artifact.kind.value, 0) + 1
        return counts
