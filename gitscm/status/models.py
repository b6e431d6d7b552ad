"""Data models for gitscm status classification.

Contains Pydantic models shared by the classifier and the provider:
- RawStatusRecord: One entry of git short status (path plus X/Y codes)
- ResourceEntry: A classified resource inside a group
- ResourceGroup: An immutable snapshot of one group
"""

from pydantic import BaseModel, ConfigDict, field_validator

from gitscm.status.constants import GroupId, StatusKind
from gitscm.uri import Uri


class RawStatusRecord(BaseModel):
    """A single path with its two-column status code.

    Attributes:
        path: Path relative to the repository root.
        x: Index-vs-HEAD code (blank when unchanged).
        y: Working-tree-vs-index code (blank when unchanged).
    """

    model_config = ConfigDict(frozen=True)

    path: str
    x: str = " "
    y: str = " "

    @field_validator("x", "y", mode="before")
    @classmethod
    def single_character_code(cls, v):
        """Normalize empty codes to blank and reject multi-character codes."""
        if v is None or v == "":
            return " "
        if not isinstance(v, str) or len(v) != 1:
            raise ValueError(f"Status code must be a single character, got {v!r}")
        return v

    @property
    def code(self) -> str:
        """The two-character code used for whole-pair matching."""
        return self.x + self.y


class ResourceEntry(BaseModel):
    """One classified occurrence of a path in a group."""

    model_config = ConfigDict(frozen=True)

    location: Uri
    kind: StatusKind


class ResourceGroup(BaseModel):
    """A published group of resources.

    Use ``ResourceGroup.create`` so the label always matches the id.

    Attributes:
        id: Which of the three groups this is.
        label: Display label for the group.
        entries: Resources in the order they were classified.
    """

    model_config = ConfigDict(frozen=True)

    id: GroupId
    label: str
    entries: tuple[ResourceEntry, ...]

    @classmethod
    def create(cls, group_id: GroupId, entries) -> "ResourceGroup":
        return cls(id=group_id, label=group_id.label, entries=tuple(entries))
