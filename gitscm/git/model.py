"""Repository model.

Contains:
- RepositoryModel: Protocol the provider depends on
- Model: RepositoryModel backed by ``git status``
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Protocol, Sequence

from gitscm.events import Disposable, EventEmitter
from gitscm.git.status import get_status_records
from gitscm.status import RawStatusRecord
from gitscm.user_config import ScmConfig

logger = logging.getLogger(__name__)


class RepositoryModel(Protocol):
    """Source of status snapshots for a single repository.

    Implementations must deliver change notifications one at a time.
    """

    @property
    def status(self) -> Sequence[RawStatusRecord]: ...

    @property
    def repository_root(self) -> Path: ...

    def on_did_change(self, listener: Callable[[None], None]) -> Disposable: ...

    def update(self, force_refresh: bool = False) -> None: ...


class Model:
    """Holds the latest ``git status`` of a repository.

    ``update()`` re-reads the status and notifies listeners when it
    changed, or unconditionally when ``force_refresh`` is set.
    """

    def __init__(self, repository_root: Path, config: Optional[ScmConfig] = None):
        self._repository_root = Path(repository_root)
        self._config = config or ScmConfig()
        self._status: tuple[RawStatusRecord, ...] = ()
        self._on_did_change: EventEmitter[None] = EventEmitter()

    @property
    def status(self) -> Sequence[RawStatusRecord]:
        return self._status

    @property
    def repository_root(self) -> Path:
        return self._repository_root

    @property
    def config(self) -> ScmConfig:
        return self._config

    def on_did_change(self, listener: Callable[[None], None]) -> Disposable:
        """Subscribe to status changes."""
        return self._on_did_change.event(listener)

    def update(self, force_refresh: bool = False) -> None:
        """Refresh the status from git.

        Args:
            force_refresh: Notify listeners even if nothing changed.

        Raises:
            GitError: If git status fails.
        """
        status = tuple(get_status_records(
            self._repository_root,
            untracked_files=self._config.untracked_files,
            show_ignored=self._config.show_ignored,
        ))

        changed = status != self._status
        self._status = status
        logger.debug(
            "Status of %s: %d record(s), changed=%s, forced=%s",
            self._repository_root, len(status), changed, force_refresh,
        )

        if changed or force_refresh:
            self._on_did_change.fire(None)

    def dispose(self) -> None:
        self._on_did_change.dispose()
