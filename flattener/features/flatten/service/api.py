import logging
from pathlib import Path
from typing import Callable, Iterator, Optional

from flattener.core.common.enums import FlattenStatus
from flattener.features.scanner.data.file_walker import LocalFileWalker
from flattener.features.scanner.domain.interfaces import IFileWalker
from flattener.features.scanner.domain.models import DiscoveredFile

from ..data.conflict_resolver import resolve_destination
from ..data.local_fs import LocalFileSystem
from ..domain.interfaces import IFileSystem
from ..domain.models import (
    CleanupReport,
    FileSummary,
    FlattenOutcome,
    FlattenReport,
    FlattenRequest,
    MoveRecord,
)

logger = logging.getLogger(__name__)


class FlattenService:
    """
    Facade for the Flatten Feature.
    Orchestrates the summary pass, the moving pass and the final cleanup.
    """

    def __init__(self, walker: Optional[IFileWalker] = None, fs: Optional[IFileSystem] = None):
        self.walker = walker or LocalFileWalker()
        self.fs = fs or LocalFileSystem()

    def _eligible_files(self, request: FlattenRequest) -> Iterator[DiscoveredFile]:
        return self.walker.walk(
            request.root_path,
            max_depth=request.max_depth,
            include=request.include,
            exclude=request.exclude,
        )

    def summarize(self, request: FlattenRequest) -> FileSummary:
        """
        First pass. Counts eligible files and records their top-level directories
        without keeping per-file paths.
        """
        summary = FileSummary()
        for discovered in self._eligible_files(request):
            summary.file_count += 1
            summary.top_level_dirs.add(discovered.top_level_dir)

        logger.debug(f"Summary: {summary.file_count} file(s) across {len(summary.top_level_dirs)} top-level dir(s)")
        return summary

    def flatten(self, request: FlattenRequest) -> FlattenReport:
        """
        Second pass. Moves every eligible file into the root under a collision-free name.
        A failed move is logged and skipped; it never stops the run.
        """
        report = FlattenReport()
        root = request.root_path

        for discovered in self._eligible_files(request):
            source = discovered.path
            destination = resolve_destination(root, source.name, exists=self.fs.exists)

            try:
                self.fs.move(source, destination)
            except OSError as e:
                error_msg = f"Error moving {source}: {e}"
                logger.error(error_msg)
                report.errors.append(error_msg)
                continue

            report.moved_count += 1
            report.moves.append(MoveRecord(source=source, destination=destination))
            logger.info(f"Moved: {source} -> {destination}")

        logger.info(f"Successfully moved {report.moved_count} file(s)")
        return report

    def cleanup(self, root: Path, summary: FileSummary) -> CleanupReport:
        """
        Removes every top-level directory recorded by the summary pass.

        WARNING: removal is recursive and unconditional. Files left behind
        (beyond the depth bound, or after a failed move) are deleted with
        their directory.
        """
        report = CleanupReport()

        for name in summary.sorted_dirs():
            dir_path = root / name
            if not self.fs.is_real_dir(dir_path):
                continue

            try:
                self.fs.remove_tree(dir_path)
            except OSError as e:
                error_msg = f"Error removing directory {name}: {e}"
                logger.error(error_msg)
                report.errors.append(error_msg)
                continue

            report.removed_dirs.append(name)
            logger.debug(f"Removed directory: {dir_path}")

        return report

    def run(self,
            request: FlattenRequest,
            confirm: Optional[Callable[[FileSummary], bool]] = None) -> FlattenOutcome:
        """
        Full flow: summary -> confirmation -> flatten -> cleanup.
        confirm receives the summary before anything is mutated; returning False cancels.
        """
        # 1. Pre-flight
        summary = self.summarize(request)
        if summary.file_count == 0:
            return FlattenOutcome(status=FlattenStatus.NOTHING_TO_DO, summary=summary)

        # 2. Ask
        if confirm is not None and not confirm(summary):
            return FlattenOutcome(status=FlattenStatus.CANCELLED, summary=summary)

        # 3. Mutate
        report = self.flatten(request)
        cleanup = self.cleanup(request.root_path, summary)

        return FlattenOutcome(
            status=FlattenStatus.COMPLETED,
            summary=summary,
            report=report,
            cleanup=cleanup,
        )


# Singleton Instance for easy import
flatten_service = FlattenService()
