"""Source control provider.

Contains:
- build_groups: Partition status records into ordered resource groups
- resolve_original_resource: Map a file URI to its original-content URI
- GitSCMProvider: Republishes groups whenever the repository model changes
"""

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Sequence

from gitscm.events import Disposable, EventEmitter
from gitscm.git.model import RepositoryModel
from gitscm.status import (
    GROUP_ORDER,
    RawStatusRecord,
    ResourceEntry,
    ResourceGroup,
    classify,
)
from gitscm.uri import FILE_SCHEME, Uri

logger = logging.getLogger(__name__)

DEFAULT_ORIGINAL_SCHEME = "git-index"


def build_groups(records: Sequence[RawStatusRecord], repository_root: str | os.PathLike) -> list[ResourceGroup]:
    """Classify records and group them.

    Args:
        records: Current status records.
        repository_root: Absolute path that record paths are relative to.

    Returns:
        Non-empty groups in merge, index, working tree order.
    """
    buckets = {group_id: [] for group_id in GROUP_ORDER}

    for record in records:
        location = Uri.file(os.path.join(repository_root, record.path))
        for group_id, kind in classify(record):
            buckets[group_id].append(ResourceEntry(location=location, kind=kind))

    return [
        ResourceGroup.create(group_id, buckets[group_id])
        for group_id in GROUP_ORDER
        if buckets[group_id]
    ]


def resolve_original_resource(uri: Uri, scheme: str = DEFAULT_ORIGINAL_SCHEME) -> Optional[Uri]:
    """Map a working copy location to its original-content location.

    Args:
        uri: Working copy location.
        scheme: Scheme that addresses original (indexed) content.

    Returns:
        The same location under ``scheme``, or None for anything that is
        not a local file.
    """
    if uri.scheme != FILE_SCHEME:
        return None

    return uri.with_scheme(scheme)


class GitSCMProvider:
    """Publishes the resource groups of a repository.

    Subscribes to the model on construction and forces an initial
    refresh, so the first snapshot is published immediately.
    """

    def __init__(self, model: RepositoryModel, original_scheme: str = DEFAULT_ORIGINAL_SCHEME):
        self._model = model
        self._original_scheme = original_scheme
        self._groups: tuple[ResourceGroup, ...] = ()
        self._on_did_change: EventEmitter[tuple[ResourceGroup, ...]] = EventEmitter()
        self._disposables: list[Disposable] = [model.on_did_change(self._on_model_change)]

        try:
            model.update(True)
        except BaseException:
            self.dispose()
            raise

    def on_did_change(self, listener: Callable[[tuple[ResourceGroup, ...]], None]) -> Disposable:
        """Subscribe to group snapshots. Each event carries the full list."""
        return self._on_did_change.event(listener)

    @property
    def groups(self) -> tuple[ResourceGroup, ...]:
        """The most recently published snapshot."""
        return self._groups

    def get_original_resource(self, uri: Uri) -> Optional[Uri]:
        """Locate the original (indexed) version of a working copy file."""
        return resolve_original_resource(uri, self._original_scheme)

    def _on_model_change(self, _=None) -> None:
        groups = build_groups(self._model.status, Path(self._model.repository_root))
        self._groups = tuple(groups)

        logger.debug(
            "Rebuilt groups: %s",
            ", ".join(f"{group.id.value}={len(group.entries)}" for group in groups) or "none",
        )

        self._on_did_change.fire(self._groups)

    def dispose(self) -> None:
        for disposable in self._disposables:
            disposable.dispose()
        self._disposables = []
