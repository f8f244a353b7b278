"""Bounded search for ``templates`` / ``.templates`` directories."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
import os
from pathlib import Path

from cppmod.core.config import TEMPLATE_DIR_NAMES, LocatorConfig
from cppmod.core.types import TEMPLATE_FILE_NAMES, NoticeHandler

logger = logging.getLogger(__name__)


def notify(message: str, on_notice: NoticeHandler | None) -> None:
    """Hand a non-fatal notice to ``on_notice``, or log it when there is no handler."""
    if on_notice is None:
        logger.warning(message)
    else:
        on_notice(message)


def path_depth(path: Path) -> int:
    return len(path.parts)


def has_template_files(directory: Path) -> bool:
    """True if ``directory`` holds at least one regular file with a template filename."""
    try:
        with os.scandir(directory) as it:
            return any(
                entry.name in TEMPLATE_FILE_NAMES and entry.is_file() for entry in it
            )
    except OSError:
        return False


def _entry_count(path: Path, on_notice: NoticeHandler | None) -> int | None:
    try:
        return len(os.listdir(path))
    except OSError as exc:
        logger.debug("Cannot count entries of %s: %s", path, exc)
        notify(f"Could not read directory {path}", on_notice)
        return None


def find_template_dirs(
    root: str | os.PathLike[str],
    config: LocatorConfig | None = None,
    on_notice: NoticeHandler | None = None,
) -> list[Path]:
    """
    Depth-first search below ``root`` for valid template directories.

    Args:
        root: Directory to search. It is listed at depth 0.
        config: Depth and fan-out caps, ignored names and symlink handling.
        on_notice: Receives a message for each directory that cannot be listed.

    Returns:
        Absolute paths sorted by depth, shallowest first. Directories at the
        same depth keep the order in which they were found.
    """
    config = config or LocatorConfig()
    root_path = Path(root).absolute()

    found: list[Path] = []
    visited: set[tuple[int, int]] = set()
    stack: list[tuple[Path, int]] = [(root_path, 0)]

    if config.follow_symlinks:
        try:
            st = root_path.stat()
            visited.add((st.st_dev, st.st_ino))
        except OSError:
            pass

    while stack:
        current, depth = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            logger.debug("Cannot list %s: %s", current, exc)
            notify(f"Could not read directory {current}", on_notice)
            continue

        children: list[tuple[Path, int]] = []
        for entry in entries:
            try:
                if not entry.is_dir(follow_symlinks=config.follow_symlinks):
                    continue
            except OSError:
                continue

            path = Path(entry.path)

            if entry.name in TEMPLATE_DIR_NAMES:
                if has_template_files(path):
                    logger.debug("Found template directory %s", path)
                    found.append(path)
                # Candidates are never entered, valid or not.
                continue

            if entry.name in config.ignored_dirs:
                continue

            if depth + 1 > config.max_depth:
                continue

            count = _entry_count(path, on_notice)
            if count is None or count > config.max_children:
                continue

            if config.follow_symlinks:
                try:
                    st = path.stat()
                except OSError:
                    continue
                key = (st.st_dev, st.st_ino)
                if key in visited:
                    continue
                visited.add(key)

            children.append((path, depth + 1))

        # Reversed so the first child in name order is popped next.
        stack.extend(reversed(children))

    found.sort(key=path_depth)
    return found


def find_all_template_dirs(
    roots: Iterable[str | os.PathLike[str]],
    config: LocatorConfig | None = None,
    on_notice: NoticeHandler | None = None,
) -> list[Path]:
    """Search each root independently, then order the combined result by depth."""
    combined: list[Path] = []
    for root in roots:
        combined.extend(find_template_dirs(root, config, on_notice))
    combined.sort(key=path_depth)
    return combined


def relative_template_dirs(dirs: Sequence[Path], base: str | os.PathLike[str]) -> list[str]:
    return [os.path.relpath(d, base) for d in dirs]
