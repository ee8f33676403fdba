import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ..domain.interfaces import IFileWalker
from ..domain.models import DiscoveredFile, WalkFrame
from .path_filter import PathFilter

logger = logging.getLogger(__name__)


class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using os.scandir and an explicit work stack,
    so arbitrarily deep trees cannot exhaust the call stack.
    Entries are handled in listing order; a subdirectory is descended as soon as it is met.
    """

    def _list(self, frame: WalkFrame) -> Optional[Iterator[os.DirEntry]]:
        # Snapshot the listing; consumers may move files out while we yield
        try:
            with os.scandir(frame.path) as it:
                return iter(list(it))
        except OSError as e:
            if frame.depth == 0:
                raise
            logger.warning(f"Cannot read directory {frame.path}: {e}")
            return None

    def walk(self,
             root: Path,
             max_depth: Optional[int] = None,
             include: Optional[Iterable[str]] = None,
             exclude: Optional[Iterable[str]] = None) -> Iterator[DiscoveredFile]:
        if include is not None:
            include = tuple(include)
        if exclude is not None:
            exclude = tuple(exclude)

        root_frame = WalkFrame(path=root, depth=0)
        stack: List[Tuple[WalkFrame, Iterator[os.DirEntry]]] = [(root_frame, self._list(root_frame))]

        while stack:
            frame, entries = stack[-1]

            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            entry_path = frame.path / entry.name

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError as e:
                logger.warning(f"Cannot stat {entry_path}: {e}")
                continue

            if is_dir:
                # 1. Hard stop below the depth bound
                if max_depth is not None and frame.depth + 1 > max_depth:
                    continue

                # 2. Children of the root establish the top-level directory
                if frame.depth == 0:
                    if not PathFilter.is_top_level_eligible(entry.name, include, exclude):
                        logger.debug(f"Skipping filtered top-level directory: {entry.name}")
                        continue
                    top_level_dir = entry.name
                else:
                    top_level_dir = frame.top_level_dir

                child = WalkFrame(entry_path, frame.depth + 1, top_level_dir)
                child_entries = self._list(child)
                if child_entries is not None:
                    stack.append((child, child_entries))

            elif is_file and frame.depth > 0:
                # 3. Files sitting directly in the root never move
                yield DiscoveredFile(path=entry_path, top_level_dir=frame.top_level_dir)
