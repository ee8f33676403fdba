from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from .models import DiscoveredFile


class IFileWalker(ABC):
    """
    Contract for traversing a tree that is about to be flattened.
    """

    @abstractmethod
    def walk(self,
             root: Path,
             max_depth: Optional[int] = None,
             include: Optional[Iterable[str]] = None,
             exclude: Optional[Iterable[str]] = None) -> Iterator[DiscoveredFile]:
        """
        Yields every eligible file strictly below root, one by one,
        tagged with the top-level directory it descends from.
        Should handle depth bounding and top-level filtering internally.
        """
        pass

    def visit(self,
              root: Path,
              visit_file: Callable[[DiscoveredFile], None],
              max_depth: Optional[int] = None,
              include: Optional[Iterable[str]] = None,
              exclude: Optional[Iterable[str]] = None) -> None:
        """Callback form of walk()."""
        for discovered in self.walk(root, max_depth, include, exclude):
            visit_file(discovered)
