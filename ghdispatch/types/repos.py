"""Repository-related data models."""

from dataclasses import dataclass, field

from ghdispatch.exceptions import ValidationError


@dataclass(frozen=True)
class RepositoryRef:
    """Identifies a repository on GitHub."""

    owner: str
    repo: str

    def __post_init__(self) -> None:
        if not self.owner or not self.repo:
            raise ValidationError(
                "INVALID_REPOSITORY",
                f"owner and repo must be non-empty (got {self.owner!r}, {self.repo!r})",
            )


@dataclass(frozen=True)
class RepositoryDescription(RepositoryRef):
    """A RepositoryRef with its full ``owner/repo`` name."""

    repo_id: str = field(default="")

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.repo_id:
            object.__setattr__(self, "repo_id", f"{self.owner}/{self.repo}")

    @classmethod
    def from_ref(cls, ref: RepositoryRef) -> "RepositoryDescription":
        """Describe a plain RepositoryRef, keeping an existing repo_id."""
        if isinstance(ref, RepositoryDescription):
            return ref
        return cls(owner=ref.owner, repo=ref.repo)


@dataclass
class DispatchResult:
    """Result of a repository_dispatch call."""

    message: str
    repository: RepositoryDescription
    event_type: str
