from abc import ABC, abstractmethod


class RootFileSystemInterface(ABC):
    """Path queries and reads the .env parser needs from the operating system."""

    @abstractmethod
    def resolve(self, path: str) -> str:
        """Return the canonical absolute path. Raises OSError if it cannot be resolved."""
        ...

    @abstractmethod
    def is_dir(self, path: str) -> bool: ...

    @abstractmethod
    def exists(self, path: str) -> bool: ...

    @abstractmethod
    def is_readable(self, path: str) -> bool: ...

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read the whole file as text. Raises FileNotFoundError if missing."""
        ...

    @abstractmethod
    def join(self, root: str, name: str) -> str: ...
