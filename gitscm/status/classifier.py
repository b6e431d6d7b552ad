"""Status classification.

Maps a RawStatusRecord onto the groups it belongs to. Whole-pair codes
(conflicts, untracked, ignored) are checked first and end classification;
otherwise the index and working tree columns are classified independently,
so a path that is staged and modified again yields two entries.
"""

from gitscm.status.constants import (
    INDEX_CODES,
    WHOLE_PAIR_CODES,
    WORKING_TREE_CODES,
    GroupId,
    StatusKind,
)
from gitscm.status.models import RawStatusRecord


def classify(record: RawStatusRecord) -> list[tuple[GroupId, StatusKind]]:
    """Classify a status record.

    Args:
        record: The raw status record.

    Returns:
        Zero, one or two (group, kind) pairs. Unknown codes yield nothing.
    """
    whole_pair = WHOLE_PAIR_CODES.get(record.code)
    if whole_pair is not None:
        return [whole_pair]

    result = []

    index_kind = INDEX_CODES.get(record.x)
    if index_kind is not None:
        result.append((GroupId.INDEX, index_kind))

    working_tree_kind = WORKING_TREE_CODES.get(record.y)
    if working_tree_kind is not None:
        result.append((GroupId.WORKING_TREE, working_tree_kind))

    return result
