import logging
from collections import deque
from pathlib import Path
from typing import Iterable

from keyscan.common.enum import SourceKind

logger = logging.getLogger(__name__)


def find_relevant_files(
    root: Path,
    markup_extensions: Iterable[str],
    program_extensions: Iterable[str],
    exclude_dirs: Iterable[str] = (),
) -> dict[SourceKind, list[Path]]:
    """Walk ``root`` breadth-first and sort matching files into markup and program lists"""
    markup_suffixes = tuple(markup_extensions)
    program_suffixes = tuple(program_extensions)
    excluded = set(exclude_dirs)

    files: dict[SourceKind, list[Path]] = {
        SourceKind.MARKUP: [],
        SourceKind.PROGRAM: [],
    }
    paths_to_iterate = deque([root.resolve()])

    while paths_to_iterate:
        current = paths_to_iterate.popleft()

        for entry in sorted(current.iterdir()):
            if entry.is_dir():
                if entry.name not in excluded:
                    paths_to_iterate.append(entry)
            elif entry.is_file():
                if entry.name.endswith(markup_suffixes):
                    files[SourceKind.MARKUP].append(entry)
                elif entry.name.endswith(program_suffixes):
                    files[SourceKind.PROGRAM].append(entry)

    logger.info(
        "Found %d markup and %d program files under %s",
        len(files[SourceKind.MARKUP]),
        len(files[SourceKind.PROGRAM]),
        root,
    )

    return files
