"""
Unit Locator — finds build-unit descriptors under a selection.

A selection is a sequence of filesystem paths. Each entry is handled as:
    - missing path      → ignored
    - directory         → every descriptor in the subtree
    - descriptor file   → itself
    - any other file    → every descriptor under its containing directory

NOTE: The last rule means selecting an unrelated file inside a project
scans the whole folder that holds it.

Results are collected in a DescriptorSet, which compares paths
case-insensitively. Nothing here writes to disk.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, List

from .model import ASMDEF_EXTENSION

logger = logging.getLogger(__name__)


def _path_key(path: str) -> str:
    return os.path.abspath(path).replace("\\", "/").lower()


class DescriptorSet:
    """
    Set of descriptor paths with case-insensitive membership.

    The first spelling added for a path is the one kept.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self._paths = {}
        self.update(paths)

    def add(self, path: str) -> bool:
        """Add a path; return False if an equivalent path was already present."""
        key = _path_key(path)
        if key in self._paths:
            return False
        self._paths[key] = path
        return True

    def update(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.add(path)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and _path_key(path) in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths.values()))

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"DescriptorSet({sorted(self._paths.values())!r})"


def is_descriptor(path: str, extension: str = ASMDEF_EXTENSION) -> bool:
    return path.lower().endswith(extension.lower())


def find_descriptors_under(directory: str, extension: str = ASMDEF_EXTENSION) -> Iterator[str]:
    """Yield every descriptor file in `directory` and its subdirectories."""
    for root, _dirs, files in os.walk(directory):
        for name in files:
            if is_descriptor(name, extension):
                yield os.path.join(root, name)


def existing_entries(selection: Iterable[str]) -> List[str]:
    """Return the selection entries that resolve to an existing path."""
    return [p for p in selection if p and os.path.exists(p)]


def locate(selection: Iterable[str], extension: str = ASMDEF_EXTENSION) -> DescriptorSet:
    """
    Collect descriptor paths reachable from a selection.

    Args:
        selection: Directories and/or files, in any order
        extension: Descriptor file extension (matched case-insensitively)

    Returns:
        DescriptorSet without duplicates (case-insensitive)
    """
    found = DescriptorSet()

    for entry in selection:
        if not entry or not os.path.exists(entry):
            logger.debug("Ignoring selection entry that does not exist: %s", entry)
            continue

        if os.path.isdir(entry):
            found.update(find_descriptors_under(entry, extension))
        elif is_descriptor(entry, extension):
            found.add(entry)
        else:
            directory = os.path.dirname(entry)
            if directory and os.path.isdir(directory):
                found.update(find_descriptors_under(directory, extension))

    return found
