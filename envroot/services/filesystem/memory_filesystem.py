import posixpath

from envroot.services.filesystem.interface import RootFileSystemInterface


class MemoryFileSystem(RootFileSystemInterface):
    """In-memory file system for unit testing.

    Paths are POSIX-style. Parent directories of written files are created
    implicitly, ``/`` always exists.
    """

    def __init__(self) -> None:
        self._files: dict[str, str] = {}
        self._dirs: set[str] = {"/"}
        self._unreadable: set[str] = set()
        self._read_errors: dict[str, BaseException] = {}
        self._stat_errors: dict[str, OSError] = {}

    def _normalize(self, path: str) -> str:
        return posixpath.normpath(posixpath.join("/", path))

    def mkdir(self, path: str) -> None:
        full = self._normalize(path)
        while full not in self._dirs:
            self._dirs.add(full)
            full = posixpath.dirname(full)

    def write(self, path: str, contents: str) -> None:
        full = self._normalize(path)
        self.mkdir(posixpath.dirname(full))
        self._files[full] = contents

    def set_unreadable(self, path: str) -> None:
        self._unreadable.add(self._normalize(path))

    def fail_reads(self, path: str, error: BaseException) -> None:
        """Make read_text raise *error* even though the file exists."""
        self._read_errors[self._normalize(path)] = error

    def fail_stats(self, path: str, error: OSError) -> None:
        """Make exists and is_readable raise *error*, like stat on an untraversable parent."""
        self._stat_errors[self._normalize(path)] = error

    def _check_stat(self, full: str) -> None:
        if full in self._stat_errors:
            raise self._stat_errors[full]

    def resolve(self, path: str) -> str:
        full = self._normalize(path)
        if full not in self._dirs and full not in self._files:
            raise FileNotFoundError(f"No such file or directory: {path}")
        return full

    def is_dir(self, path: str) -> bool:
        return self._normalize(path) in self._dirs

    def exists(self, path: str) -> bool:
        full = self._normalize(path)
        self._check_stat(full)
        return full in self._files or full in self._dirs

    def is_readable(self, path: str) -> bool:
        return self.exists(path) and self._normalize(path) not in self._unreadable

    def read_text(self, path: str) -> str:
        full = self._normalize(path)
        if full in self._read_errors:
            raise self._read_errors[full]
        if full not in self._files:
            raise FileNotFoundError(f"File not found: {path}")
        return self._files[full]

    def join(self, root: str, name: str) -> str:
        return posixpath.join(root, name)
