"""Configuration dataclasses for template discovery."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_MAX_DEPTH = 10
DEFAULT_MAX_CHILDREN = 10

TEMPLATE_DIR_NAMES: frozenset[str] = frozenset({"templates", ".templates"})

DEFAULT_IGNORED_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        ".svn",
        ".hg",
        "build",
        "dist",
        "out",
        "target",
        "bin",
        "obj",
        ".vscode-test",
        "__pycache__",
        ".pytest_cache",
        "CMakeFiles",
        ".vs",
        ".idea",
        "Debug",
        "Release",
        "x64",
        "x86",
    }
)


@dataclass(kw_only=True)
class LocatorConfig:
    """
    Bounds and filters for the template directory search.

    Attributes:
        max_depth: Deepest directory that is listed, with the search root at depth 0.
        max_children: Directories with more immediate entries than this are not entered.
        ignored_dirs: Directory names that are never entered.
        follow_symlinks: Enter symlinked directories. Each real directory is listed once.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_children: int = DEFAULT_MAX_CHILDREN
    ignored_dirs: frozenset[str] = field(default_factory=lambda: DEFAULT_IGNORED_DIRS)
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}.")
        if self.max_children <= 0:
            raise ValueError(f"max_children must be positive, got {self.max_children}.")
