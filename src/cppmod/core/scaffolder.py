"""Writes the directory tree and files of a new module."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path

from cppmod.core.resolver import TemplateResolver
from cppmod.core.types import GenerationPlan, PlannedFile, TemplateRole

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WrittenFile:
    planned: PlannedFile
    source: Path | None  # template file used, None for the fallback stub


def plan_module(base_dir: str | os.PathLike[str], module_name: str) -> GenerationPlan:
    module_dir = Path(base_dir) / module_name
    directories = (
        module_dir,
        module_dir / "include" / module_name,
        module_dir / "src",
        module_dir / "tests",
    )
    files = tuple(
        PlannedFile(role=role, path=module_dir / role.output_path(module_name))
        for role in TemplateRole
    )
    return GenerationPlan(
        module_name=module_name,
        module_dir=module_dir,
        directories=directories,
        files=files,
    )


def ensure_module_dirs(plan: GenerationPlan) -> None:
    for directory in plan.directories:
        directory.mkdir(parents=True, exist_ok=True)


def create_module(
    base_dir: str | os.PathLike[str],
    module_name: str,
    resolver: TemplateResolver,
) -> list[WrittenFile]:
    """
    Create ``base_dir/module_name`` with its header, source, test and CMake files.

    Existing files at the output paths are overwritten. The module name is
    expected to be validated by the caller.

    Raises:
        OSError: A directory or file could not be created. Whatever was written
            before the failure is left on disk.
    """
    plan = plan_module(base_dir, module_name)
    ensure_module_dirs(plan)

    written: list[WrittenFile] = []
    for planned in plan.files:
        content, source = resolver.resolve_with_source(planned.role, module_name)
        planned.path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s (%s)", planned.path, source or "default stub")
        written.append(WrittenFile(planned=planned, source=source))

    return written
