"""Git status utilities.

Contains:
- get_status_output: Run git status in NUL-separated porcelain format
- parse_porcelain: Parse that output into RawStatusRecord objects
- get_status_records: Both of the above in one call
"""

from pathlib import Path

from gitscm.git.runner import _run_git_command
from gitscm.status import RawStatusRecord

UNTRACKED_MODES = ("all", "normal", "no")


def get_status_output(repo_root: Path, untracked_files: str = "all", show_ignored: bool = False) -> str:
    """Get git status output in porcelain v1 format with NUL terminators.

    Args:
        repo_root: The root directory of the git repository.
        untracked_files: Value for ``--untracked-files`` (all, normal, no).
        show_ignored: Include ignored files (reported as ``!!``).

    Returns:
        The raw, unstripped git status output.
    """
    if untracked_files not in UNTRACKED_MODES:
        raise ValueError(f"Invalid untracked_files mode: {untracked_files}")

    args = ["status", "--porcelain=v1", "-z", f"--untracked-files={untracked_files}"]
    if show_ignored:
        args.append("--ignored")
    return _run_git_command(args, cwd=repo_root, strip=False)


def parse_porcelain(output: str) -> list[RawStatusRecord]:
    """Parse ``git status --porcelain=v1 -z`` output.

    Each entry is ``XY path``. Renamed and copied entries are followed
    by an extra field holding the source path, which is skipped; the
    record keeps the destination path.

    Args:
        output: Raw git status output.

    Returns:
        One record per entry, in git's order.
    """
    records = []
    fields = output.split("\0")
    i = 0

    while i < len(fields):
        entry = fields[i]
        i += 1

        # Trailing terminator or malformed entry
        if len(entry) < 4:
            continue

        x, y, path = entry[0], entry[1], entry[3:]
        records.append(RawStatusRecord(path=path, x=x, y=y))

        if x in ("R", "C") or y in ("R", "C"):
            i += 1

    return records


def get_status_records(repo_root: Path, untracked_files: str = "all", show_ignored: bool = False) -> list[RawStatusRecord]:
    """Get the current status of a repository as records.

    Args:
        repo_root: The root directory of the git repository.
        untracked_files: Value for ``--untracked-files``.
        show_ignored: Include ignored files.

    Returns:
        List of RawStatusRecord.

    Raises:
        GitError: If git status fails.
    """
    output = get_status_output(repo_root, untracked_files=untracked_files, show_ignored=show_ignored)
    return parse_porcelain(output)
