from abc import ABC, abstractmethod
from pathlib import Path


class IFileSystem(ABC):
    @abstractmethod
    def exists(self, path: Path) -> bool:
        """True if anything (including a dangling symlink) occupies path."""
        pass

    @abstractmethod
    def move(self, source: Path, destination: Path) -> None:
        """
        Atomically renames source to destination on the same filesystem.
        Raises OSError on failure.
        """
        pass

    @abstractmethod
    def is_real_dir(self, path: Path) -> bool:
        """True if path is a directory and not a symlink to one."""
        pass

    @abstractmethod
    def remove_tree(self, path: Path) -> None:
        """Recursively deletes a directory and whatever is left inside it."""
        pass
