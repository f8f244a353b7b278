"""Template lookup over the discovered template directories."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
import os
from pathlib import Path

from cppmod.core.config import LocatorConfig
from cppmod.core.fallback import default_content
from cppmod.core.locator import find_all_template_dirs, notify
from cppmod.core.substitution import substitute
from cppmod.core.types import NoticeHandler, TemplateRole

logger = logging.getLogger(__name__)

TEMPLATE_DIRS_KEY = "templateDirs"


class DiscoveryCache:
    """
    Holds the discovered template directories for the lifetime of the process.

    ``get()`` returns ``None`` until ``populate()`` has been called. An empty
    tuple means discovery ran and found nothing.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[Path, ...]] = {}

    @property
    def is_populated(self) -> bool:
        return TEMPLATE_DIRS_KEY in self._store

    def get(self) -> tuple[Path, ...] | None:
        return self._store.get(TEMPLATE_DIRS_KEY)

    def populate(self, dirs: Iterable[Path]) -> tuple[Path, ...]:
        stored = tuple(dirs)
        self._store[TEMPLATE_DIRS_KEY] = stored
        return stored

    def clear(self) -> None:
        self._store.pop(TEMPLATE_DIRS_KEY, None)


class TemplateResolver:
    """
    Resolves a template to its content for a given module name.

    Template directories are discovered under ``roots`` on first use and kept
    in ``cache``. The first directory (shallowest first) that holds the
    template wins; when none does, the fallback stub is returned.
    """

    def __init__(
        self,
        roots: Sequence[str | os.PathLike[str]],
        cache: DiscoveryCache | None = None,
        config: LocatorConfig | None = None,
        on_notice: NoticeHandler | None = None,
    ) -> None:
        self.roots = [Path(r) for r in roots]
        self.cache = cache if cache is not None else DiscoveryCache()
        self.config = config or LocatorConfig()
        self.on_notice = on_notice

    def _discover(self) -> tuple[Path, ...]:
        dirs = find_all_template_dirs(self.roots, self.config, self.on_notice)
        logger.debug("Discovered %d template director(ies) under %s", len(dirs), self.roots)
        return self.cache.populate(dirs)

    def template_dirs(self) -> tuple[Path, ...]:
        cached = self.cache.get()
        if cached is None:
            return self._discover()
        return cached

    def refresh(self) -> tuple[Path, ...]:
        """Drop cached results and search all roots again."""
        self.cache.clear()
        return self._discover()

    def find_template(self, template: TemplateRole | str) -> tuple[Path, str] | None:
        """Path and raw content of the first readable template file, or ``None``."""
        name = template.template_name if isinstance(template, TemplateRole) else template
        for template_dir in self.template_dirs():
            path = template_dir / name
            if not path.exists():
                continue
            try:
                return path, path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                notify(f"Could not read template {path}: {exc}", self.on_notice)
        return None

    def resolve_with_source(
        self, template: TemplateRole | str, module_name: str
    ) -> tuple[str, Path | None]:
        """Like ``resolve`` but also returns the template file used (``None`` for the stub)."""
        found = self.find_template(template)
        if found is None:
            return default_content(template, module_name), None
        path, content = found
        return substitute(content, module_name), path

    def resolve(self, template: TemplateRole | str, module_name: str) -> str:
        content, _ = self.resolve_with_source(template, module_name)
        return content
