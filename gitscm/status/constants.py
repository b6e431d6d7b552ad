"""Constants for gitscm status classification.

Contains:
- StatusKind: Every kind a classified resource can have
- GroupId: The three fixed resource group identities
- GROUP_LABELS: Display label for each group
- GROUP_ORDER: Order in which groups are published
- WHOLE_PAIR_CODES: Two-character codes matched before per-column codes
- INDEX_CODES: Index (X column) codes
- WORKING_TREE_CODES: Working tree (Y column) codes
"""

from enum import Enum


class StatusKind(Enum):
    """Status of a single resource within a group."""

    UNTRACKED = "untracked"
    IGNORED = "ignored"
    BOTH_DELETED = "both_deleted"
    ADDED_BY_US = "added_by_us"
    DELETED_BY_THEM = "deleted_by_them"
    ADDED_BY_THEM = "added_by_them"
    DELETED_BY_US = "deleted_by_us"
    BOTH_ADDED = "both_added"
    BOTH_MODIFIED = "both_modified"
    INDEX_MODIFIED = "index_modified"
    INDEX_ADDED = "index_added"
    INDEX_DELETED = "index_deleted"
    INDEX_RENAMED = "index_renamed"
    INDEX_COPIED = "index_copied"
    MODIFIED = "modified"
    DELETED = "deleted"


class GroupId(Enum):
    """Identity of a resource group."""

    MERGE = "merge"
    INDEX = "index"
    WORKING_TREE = "workingTree"

    @property
    def label(self) -> str:
        return GROUP_LABELS[self]


GROUP_LABELS = {
    GroupId.MERGE: "Merge Changes",
    GroupId.INDEX: "Staged Changes",
    GroupId.WORKING_TREE: "Changes",
}

GROUP_ORDER = (GroupId.MERGE, GroupId.INDEX, GroupId.WORKING_TREE)


# Checked first against x + y. A match here ends classification.
# Untracked and ignored share this table but land in the working tree.
WHOLE_PAIR_CODES = {
    "??": (GroupId.WORKING_TREE, StatusKind.UNTRACKED),
    "!!": (GroupId.WORKING_TREE, StatusKind.IGNORED),
    "DD": (GroupId.MERGE, StatusKind.BOTH_DELETED),
    "AU": (GroupId.MERGE, StatusKind.ADDED_BY_US),
    "UD": (GroupId.MERGE, StatusKind.DELETED_BY_THEM),
    "UA": (GroupId.MERGE, StatusKind.ADDED_BY_THEM),
    "DU": (GroupId.MERGE, StatusKind.DELETED_BY_US),
    "AA": (GroupId.MERGE, StatusKind.BOTH_ADDED),
    "UU": (GroupId.MERGE, StatusKind.BOTH_MODIFIED),
}

INDEX_CODES = {
    "M": StatusKind.INDEX_MODIFIED,
    "A": StatusKind.INDEX_ADDED,
    "D": StatusKind.INDEX_DELETED,
    "R": StatusKind.INDEX_RENAMED,
    "C": StatusKind.INDEX_COPIED,
}

WORKING_TREE_CODES = {
    "M": StatusKind.MODIFIED,
    "D": StatusKind.DELETED,
}
