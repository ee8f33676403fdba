import os
import shutil
from pathlib import Path

from ..domain.interfaces import IFileSystem


class LocalFileSystem(IFileSystem):
    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def move(self, source: Path, destination: Path) -> None:
        # Plain rename: no copy fallback, a cross-device move fails with EXDEV
        os.rename(source, destination)

    def is_real_dir(self, path: Path) -> bool:
        return path.is_dir() and not path.is_symlink()

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)
