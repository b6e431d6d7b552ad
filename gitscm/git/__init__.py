"""Git access for gitscm.

This package provides the repository model the provider consumes:
- exceptions: GitError, NotARepositoryError
- runner: _run_git_command, get_repo_root
- status: get_status_output, parse_porcelain, get_status_records
- model: RepositoryModel, Model
"""

# Exceptions
from gitscm.git.exceptions import (
    GitError,
    NotARepositoryError,
)

# Runner utilities
from gitscm.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Status utilities
from gitscm.git.status import (
    get_status_output,
    parse_porcelain,
    get_status_records,
)

# Repository model
from gitscm.git.model import (
    RepositoryModel,
    Model,
)


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Status
    "get_status_output",
    "parse_porcelain",
    "get_status_records",
    # Model
    "RepositoryModel",
    "Model",
]
