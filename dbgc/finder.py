"""Source file discovery.

A file argument is scanned as-is when its extension has a language profile;
a directory is walked recursively. SKIP_DIRS is the only directory filter
(version control, dependencies, build artifacts, caches).
"""

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from dbgc.scanner.profiles import SUPPORTED_EXTENSIONS
from dbgc.utils.constants import DEFAULT_MAX_FILE_SIZE
from dbgc.utils.logging import logger

# Directories to always skip while walking
SKIP_DIRS: set[str] = {
    # Version control
    ".git",
    ".hg",
    ".svn",

    # Dependencies
    "node_modules",
    "vendor",

    # Build artifacts
    "dist",
    "build",
    "out",
    "target",  # Rust/Java
    "bin",
    "obj",

    # Python virtual environments and caches
    ".venv",
    "venv",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".tox",

    # dbgc output
    ".dbgc",

    # IDE/Editor
    ".vscode",
    ".idea",
}


def is_text_file(file_path: Path) -> bool:
    """Check if file is text (no NUL bytes in its first 8KB)."""
    try:
        with open(file_path, "rb") as f:
            return b"\0" not in f.read(8192)
    except OSError:
        return False


class SourceFinder:
    """Collect scannable source files under a path."""

    def __init__(
        self,
        extensions: Iterable[str] | None = None,
        exclude_patterns: Iterable[str] = (),
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        follow_symlinks: bool = False,
    ):
        requested = frozenset(e.lower() for e in (extensions or SUPPORTED_EXTENSIONS))
        self.extensions = requested & SUPPORTED_EXTENSIONS
        self.exclude_patterns = list(exclude_patterns)
        self.max_file_size = max_file_size
        self.follow_symlinks = follow_symlinks
        self.stats: dict[str, Any] = {
            "total_files": 0,
            "source_files": 0,
            "skipped_dirs": 0,
            "excluded_files": 0,
            "large_files": 0,
            "binary_files": 0,
        }

    def _excluded(self, file: Path, root: Path) -> bool:
        if not self.exclude_patterns:
            return False
        try:
            relative = file.relative_to(root).as_posix()
        except ValueError:
            relative = file.as_posix()
        return any(
            fnmatch.fnmatch(file.name, pattern) or fnmatch.fnmatch(relative, pattern)
            for pattern in self.exclude_patterns
        )

    def accept(self, file: Path, root: Path) -> bool:
        """Decide whether a single file should be scanned."""
        if file.suffix.lower() not in self.extensions:
            return False

        if self._excluded(file, root):
            self.stats["excluded_files"] += 1
            return False

        try:
            if not self.follow_symlinks and file.is_symlink():
                return False
            if file.stat().st_size >= self.max_file_size:
                self.stats["large_files"] += 1
                logger.debug("Skipping large file {path}", path=str(file))
                return False
        except OSError:
            return False

        if not is_text_file(file):
            self.stats["binary_files"] += 1
            return False

        return True

    def find(self, path: str | Path) -> list[Path]:
        """Return the sorted list of source files at or under `path`.

        Raises:
            FileNotFoundError: if `path` does not exist
        """
        root = Path(path)
        if not root.exists():
            raise FileNotFoundError(f"Path does not exist: {root}")

        if root.is_file():
            self.stats["total_files"] += 1
            if root.suffix.lower() not in self.extensions:
                logger.warning("Unsupported file type, not scanned: {path}", path=str(root))
                return []
            found = [root] if self.accept(root, root.parent) else []
            self.stats["source_files"] = len(found)
            return found

        files = []
        for dirpath, dirnames, filenames in os.walk(root, followlinks=self.follow_symlinks):
            skipped = [d for d in dirnames if d in SKIP_DIRS]
            self.stats["skipped_dirs"] += len(skipped)
            dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS]

            for filename in filenames:
                self.stats["total_files"] += 1
                file = Path(dirpath) / filename
                if self.accept(file, root):
                    files.append(file)

        files.sort()
        self.stats["source_files"] = len(files)
        logger.debug("Found {n} source files under {root}", n=len(files), root=str(root))
        return files


def find_source_files(
    path: str | Path,
    extensions: Iterable[str] | None = None,
    exclude: Iterable[str] = (),
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
) -> list[Path]:
    """Convenience wrapper around SourceFinder.find()."""
    return SourceFinder(extensions, exclude, max_file_size).find(path)
