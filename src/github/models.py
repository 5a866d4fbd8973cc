"""Commit data returned by the GitHub client.

Only the fields the change-detection pipeline reads are kept; the rest of
the GitHub payload is dropped at parse time.
"""

from dataclasses import dataclass, field
from typing import Any

from .exceptions import GitHubResponseError


@dataclass(frozen=True)
class CommitRef:
    """Opaque reference to a commit, as returned by the listing endpoint."""

    sha: str

    @classmethod
    def from_api(cls, data: Any) -> "CommitRef":
        """Build a reference from one item of the commit listing."""
        if not isinstance(data, dict) or not isinstance(data.get("sha"), str):
            raise GitHubResponseError(
                f"Commit listing item has no 'sha': {data!r:.200}"
            )
        return cls(sha=data["sha"])


@dataclass(frozen=True)
class ChangedFile:
    """One file touched by a commit.

    ``diff_text`` is the unified-diff patch fragment. GitHub omits it for
    binary and very large files, in which case it is ``None``.
    """

    path: str
    diff_text: str | None = None
    status: str | None = None

    @classmethod
    def from_api(cls, data: Any) -> "ChangedFile":
        """Build a changed file from an entry of a commit's ``files`` array."""
        if not isinstance(data, dict) or not isinstance(data.get("filename"), str):
            raise GitHubResponseError(
                f"Changed file entry has no 'filename': {data!r:.200}"
            )
        patch = data.get("patch")
        return cls(
            path=data["filename"],
            diff_text=patch if isinstance(patch, str) else None,
            status=data.get("status"),
        )


@dataclass(frozen=True)
class CommitDetail:
    """Full detail for one commit: its sha and ordered changed files."""

    sha: str
    files: tuple[ChangedFile, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, ref: CommitRef, data: Any) -> "CommitDetail":
        """Build commit detail from the single-commit endpoint payload.

        A payload without a ``files`` array is a commit that changed nothing
        the API reports, not an error.
        """
        if not isinstance(data, dict):
            raise GitHubResponseError(
                f"Commit {ref.sha} detail is not an object: {type(data).__name__}"
            )
        files = data.get("files") or []
        if not isinstance(files, list):
            raise GitHubResponseError(f"Commit {ref.sha} 'files' is not a list")
        return cls(
            sha=ref.sha,
            files=tuple(ChangedFile.from_api(item) for item in files),
        )
