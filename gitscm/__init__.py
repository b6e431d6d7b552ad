"""Git SCM provider: classify git status into merge, staged and unstaged groups."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gitscm")
except PackageNotFoundError:
    # Not installed (running from a source checkout)
    __version__ = "0.0.0-dev"
