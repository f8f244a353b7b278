"""Core types: template roles, generation plans and module-name rules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
import re

from cppmod.core.errors import ModuleNameError

NoticeHandler = Callable[[str], None]
"""Receives non-fatal notices (unreadable directories, unreadable templates)."""

MODULE_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


class TemplateRole(str, Enum):
    """The fixed output files of a module."""

    HEADER = "header"
    SOURCE = "source"
    TEST_SOURCE = "test-source"
    BUILD_FILE = "build-file"
    TEST_BUILD_FILE = "test-build-file"

    @property
    def template_name(self) -> str:
        names: dict[TemplateRole, str] = {
            TemplateRole.HEADER: "template.header.hpp",
            TemplateRole.SOURCE: "template.src.cpp",
            TemplateRole.TEST_SOURCE: "template.test.cpp",
            TemplateRole.BUILD_FILE: "template.CMakeLists.txt",
            TemplateRole.TEST_BUILD_FILE: "template.test.CMakeLists.txt",
        }
        return names[self]

    @property
    def label(self) -> str:
        labels: dict[TemplateRole, str] = {
            TemplateRole.HEADER: "public header",
            TemplateRole.SOURCE: "implementation",
            TemplateRole.TEST_SOURCE: "unit tests",
            TemplateRole.BUILD_FILE: "module build",
            TemplateRole.TEST_BUILD_FILE: "test build",
        }
        return labels[self]

    def output_path(self, module_name: str) -> PurePath:
        """Output location relative to the module root."""
        paths: dict[TemplateRole, PurePath] = {
            TemplateRole.HEADER: PurePath("include", module_name, f"{module_name}.hpp"),
            TemplateRole.SOURCE: PurePath("src", f"{module_name}.cpp"),
            TemplateRole.TEST_SOURCE: PurePath("tests", f"test_{module_name}.cpp"),
            TemplateRole.BUILD_FILE: PurePath("CMakeLists.txt"),
            TemplateRole.TEST_BUILD_FILE: PurePath("tests", "CMakeLists.txt"),
        }
        return paths[self]

    @classmethod
    def from_template_name(cls, name: str) -> TemplateRole | None:
        for role in cls:
            if role.template_name == name:
                return role
        return None


TEMPLATE_FILE_NAMES: frozenset[str] = frozenset(role.template_name for role in TemplateRole)


@dataclass(frozen=True)
class PlannedFile:
    role: TemplateRole
    path: Path


@dataclass(frozen=True)
class GenerationPlan:
    """
    Directories and files that make up one module.

    Attributes:
        module_name: Name of the module, used verbatim as a path segment.
        module_dir: Module root, ``base_dir / module_name``.
        directories: Module root followed by ``include/<name>``, ``src`` and ``tests``.
        files: One entry per ``TemplateRole``, in role order.
    """

    module_name: str
    module_dir: Path
    directories: tuple[Path, ...]
    files: tuple[PlannedFile, ...]


def validate_module_name(text: str) -> str | None:
    """Return an error message for an invalid module name, or ``None`` if it is valid."""
    if not text:
        return "Module name cannot be empty!"
    if not MODULE_NAME_PATTERN.fullmatch(text):
        return (
            "Module name must start with a letter and contain only letters, "
            "numbers, underscores and dashes!"
        )
    return None


def check_module_name(text: str) -> str:
    message = validate_module_name(text)
    if message is not None:
        raise ModuleNameError(message)
    return text
