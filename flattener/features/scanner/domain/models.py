from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DiscoveredFile:
    """
    A regular file found below the flatten root.
    top_level_dir is the name of the root's child directory it descends from.
    """
    path: Path
    top_level_dir: str


@dataclass(frozen=True)
class WalkFrame:
    """
    One pending directory on the walker's work stack.
    top_level_dir is None only for the root frame itself.
    """
    path: Path
    depth: int
    top_level_dir: Optional[str] = None
