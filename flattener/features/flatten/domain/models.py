from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Set

from flattener.core.common.enums import FlattenStatus


def _normalize_patterns(patterns: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
    if patterns is None:
        return None
    return frozenset(patterns)


@dataclass(frozen=True)
class FlattenRequest:
    """
    User intent to flatten a specific directory.
    root_path is canonicalized on creation; everything else is validated here
    so that usage errors surface before any file is touched.
    """
    root_path: Path
    max_depth: Optional[int] = None
    include: Optional[FrozenSet[str]] = None
    exclude: Optional[FrozenSet[str]] = None

    def __post_init__(self):
        if self.include is not None and self.exclude is not None:
            raise ValueError("Cannot use both include and exclude patterns at the same time")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"Maximum depth cannot be negative: {self.max_depth}")

        root = Path(self.root_path)
        if not root.exists():
            raise FileNotFoundError(f"Directory '{root}' does not exist")
        if not root.is_dir():
            raise NotADirectoryError(f"'{root}' is not a directory")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "root_path", root.resolve())
        object.__setattr__(self, "include", _normalize_patterns(self.include))
        object.__setattr__(self, "exclude", _normalize_patterns(self.exclude))


@dataclass
class FileSummary:
    """
    Pre-flight report: how many files will move and which top-level directories they come from.
    Cleanup removes exactly these directories.
    """
    file_count: int = 0
    top_level_dirs: Set[str] = field(default_factory=set)

    def sorted_dirs(self) -> List[str]:
        return sorted(self.top_level_dirs)


@dataclass(frozen=True)
class MoveRecord:
    source: Path
    destination: Path


@dataclass
class FlattenReport:
    """
    Report returned after the moving pass completes.
    """
    moved_count: int = 0
    moves: List[MoveRecord] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


@dataclass
class CleanupReport:
    removed_dirs: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


@dataclass
class FlattenOutcome:
    status: FlattenStatus
    summary: FileSummary
    report: Optional[FlattenReport] = None
    cleanup: Optional[CleanupReport] = None
