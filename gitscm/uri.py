"""Resource locations.

Contains:
- Uri: Immutable scheme/authority/path location
- FILE_SCHEME: Scheme of files on the local filesystem
"""

import os
from urllib.parse import quote, unquote, urlsplit

from pydantic import BaseModel, ConfigDict

FILE_SCHEME = "file"


class Uri(BaseModel):
    """A resource location such as ``file:///repo/a.txt``.

    Attributes:
        scheme: URI scheme (``file``, ``git-index``, ``untitled``, ...).
        authority: Host part, empty for local files.
        path: Absolute path using forward slashes.
        hierarchical: Render with ``//`` after the scheme, as in
            ``file:///repo/a.txt``. Kept across ``with_scheme``.
    """

    model_config = ConfigDict(frozen=True)

    scheme: str
    authority: str = ""
    path: str = ""
    hierarchical: bool = False

    @classmethod
    def file(cls, path: str | os.PathLike) -> "Uri":
        """Build a file URI from a filesystem path.

        Backslashes are converted so Windows paths produce the same
        shape as POSIX ones (``C:\\repo\\a.txt`` -> ``/C:/repo/a.txt``).

        Args:
            path: Absolute filesystem path.

        Returns:
            A ``file`` scheme Uri.
        """
        text = os.fspath(path).replace("\\", "/")

        authority = ""
        # UNC share: //server/share/path
        if text.startswith("//"):
            authority, _, rest = text[2:].partition("/")
            text = "/" + rest

        if not text.startswith("/"):
            text = "/" + text

        return cls(scheme=FILE_SCHEME, authority=authority, path=text, hierarchical=True)

    @classmethod
    def parse(cls, value: str) -> "Uri":
        """Parse a URI string like ``file:///repo/a.txt`` or ``untitled:/foo``.

        Raises:
            ValueError: If the string has no scheme.
        """
        parts = urlsplit(value)
        if not parts.scheme:
            raise ValueError(f"Not a URI (missing scheme): {value}")
        hierarchical = value[len(parts.scheme) + 1:].startswith("//")
        return cls(
            scheme=parts.scheme,
            authority=parts.netloc,
            path=unquote(parts.path),
            hierarchical=hierarchical,
        )

    def with_scheme(self, scheme: str) -> "Uri":
        """Return a copy of this Uri with a different scheme."""
        return self.model_copy(update={"scheme": scheme})

    @property
    def fs_path(self) -> str:
        """Filesystem path for a file URI, using the platform separator."""
        path = self.path
        if self.authority:
            path = f"//{self.authority}{path}"
        elif len(path) >= 3 and path[0] == "/" and path[2] == ":":
            # /C:/repo -> C:/repo
            path = path[1:]
        if os.sep != "/":
            path = path.replace("/", os.sep)
        return path

    def __str__(self) -> str:
        path = quote(self.path, safe="/:@!$&'()*+,;=-._~")
        if self.authority or self.hierarchical:
            return f"{self.scheme}://{self.authority}{path}"
        return f"{self.scheme}:{path}"
