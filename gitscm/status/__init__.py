"""Status classification package for gitscm.

This package provides:
- constants: StatusKind, GroupId, GROUP_ORDER and the code tables
- models: RawStatusRecord, ResourceEntry, ResourceGroup
- classifier: classify
"""

from gitscm.status.constants import (
    GROUP_LABELS,
    GROUP_ORDER,
    INDEX_CODES,
    WHOLE_PAIR_CODES,
    WORKING_TREE_CODES,
    GroupId,
    StatusKind,
)
from gitscm.status.models import (
    RawStatusRecord,
    ResourceEntry,
    ResourceGroup,
)
from gitscm.status.classifier import classify


__all__ = [
    # Constants
    "GROUP_LABELS",
    "GROUP_ORDER",
    "INDEX_CODES",
    "WHOLE_PAIR_CODES",
    "WORKING_TREE_CODES",
    "GroupId",
    "StatusKind",
    # Models
    "RawStatusRecord",
    "ResourceEntry",
    "ResourceGroup",
    # Classifier
    "classify",
]
