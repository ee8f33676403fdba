from typing import Iterable, Optional


class PathFilter:
    """
    Central logic for which top-level directories take part in a flatten.
    """

    @staticmethod
    def _matches_any(name: str, patterns: Iterable[str]) -> bool:
        folded = name.casefold()
        return any(folded.startswith(p.casefold()) for p in patterns)

    @classmethod
    def is_top_level_eligible(cls,
                              name: str,
                              include: Optional[Iterable[str]] = None,
                              exclude: Optional[Iterable[str]] = None) -> bool:
        """
        Returns True if the subtree under this top-level directory should be flattened.
        Patterns are case-insensitive prefixes of the name ("doc" matches
        "Documentation" but not "mydocs").
        Callers must not pass both include and exclude.
        """
        # 1. Whitelist mode
        if include is not None and not cls._matches_any(name, include):
            return False

        # 2. Blacklist mode
        if exclude is not None and cls._matches_any(name, exclude):
            return False

        return True
