import os
from pathlib import Path
from typing import Callable, Tuple


def split_name(base_name: str) -> Tuple[str, str]:
    """
    Splits a file name into (stem, extension) at the final dot.
    Leading dots do not count, so '.bashrc' has no extension.
    A trailing dot is an empty extension and is dropped: 'name.' -> ('name', '').
    """
    stem, ext = os.path.splitext(base_name)
    if ext == ".":
        ext = ""
    return stem, ext


def resolve_destination(root: Path,
                        base_name: str,
                        exists: Callable[[Path], bool] = os.path.lexists) -> Path:
    """
    Returns the first free path in root for base_name.
    Probes root/base_name, then root/stem_1.ext, root/stem_2.ext, ...
    Every candidate is re-checked, so files placed earlier in the same pass count as taken.
    """
    candidate = root / base_name
    if not exists(candidate):
        return candidate

    stem, ext = split_name(base_name)
    counter = 1
    while True:
        candidate = root / f"{stem}_{counter}{ext}"
        if not exists(candidate):
            return candidate
        counter += 1
