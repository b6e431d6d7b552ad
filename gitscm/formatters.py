"""Group snapshot formatting and rendering."""

import os
from pathlib import Path
from typing import Sequence

from gitscm.status import ResourceGroup, StatusKind

# Short letters shown next to each resource, as in `git status --short`
KIND_LETTERS = {
    StatusKind.UNTRACKED: "U",
    StatusKind.IGNORED: "I",
    StatusKind.BOTH_DELETED: "!",
    StatusKind.ADDED_BY_US: "!",
    StatusKind.DELETED_BY_THEM: "!",
    StatusKind.ADDED_BY_THEM: "!",
    StatusKind.DELETED_BY_US: "!",
    StatusKind.BOTH_ADDED: "!",
    StatusKind.BOTH_MODIFIED: "!",
    StatusKind.INDEX_MODIFIED: "M",
    StatusKind.INDEX_ADDED: "A",
    StatusKind.INDEX_DELETED: "D",
    StatusKind.INDEX_RENAMED: "R",
    StatusKind.INDEX_COPIED: "C",
    StatusKind.MODIFIED: "M",
    StatusKind.DELETED: "D",
}


def _display_path(fs_path: str, repo_root: Path | None) -> str:
    if repo_root is None:
        return fs_path
    try:
        return os.path.relpath(fs_path, repo_root)
    except ValueError:
        # Different drive on Windows
        return fs_path


def render_groups(groups: Sequence[ResourceGroup], repo_root: Path | None = None) -> str:
    """Render a group snapshot as plain text.

    Args:
        groups: Published groups.
        repo_root: If given, paths are shown relative to it.

    Returns:
        A multi-line string. Example output:

            Merge Changes (1)
              !  c.txt  (both modified)

            Changes (2)
              M  b.txt  (modified)
              U  d.txt  (untracked)
    """
    if not groups:
        return "Working tree clean"

    blocks = []
    for group in groups:
        lines = [f"{group.label} ({len(group.entries)})"]
        for entry in group.entries:
            path = _display_path(entry.location.fs_path, repo_root)
            description = entry.kind.value.replace("_", " ")
            lines.append(f"  {KIND_LETTERS[entry.kind]}  {path}  ({description})")
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)


def groups_to_dict(groups: Sequence[ResourceGroup]) -> list[dict]:
    """Convert a group snapshot into JSON-serializable data."""
    return [
        {
            "id": group.id.value,
            "label": group.label,
            "entries": [
                {"uri": str(entry.location), "kind": entry.kind.value}
                for entry in group.entries
            ],
        }
        for group in groups
    ]
