"""Template discovery, resolution and module generation."""

from cppmod.core.config import DEFAULT_IGNORED_DIRS, TEMPLATE_DIR_NAMES, LocatorConfig
from cppmod.core.errors import ModuleNameError, UserCancelledError
from cppmod.core.fallback import default_content
from cppmod.core.locator import (
    find_all_template_dirs,
    find_template_dirs,
    has_template_files,
    relative_template_dirs,
)
from cppmod.core.resolver import TEMPLATE_DIRS_KEY, DiscoveryCache, TemplateResolver
from cppmod.core.scaffolder import WrittenFile, create_module, ensure_module_dirs, plan_module
from cppmod.core.substitution import PLACEHOLDERS, substitute
from cppmod.core.types import (
    TEMPLATE_FILE_NAMES,
    GenerationPlan,
    NoticeHandler,
    PlannedFile,
    TemplateRole,
    check_module_name,
    validate_module_name,
)

__all__ = [
    "DEFAULT_IGNORED_DIRS",
    "PLACEHOLDERS",
    "TEMPLATE_DIRS_KEY",
    "TEMPLATE_DIR_NAMES",
    "TEMPLATE_FILE_NAMES",
    "DiscoveryCache",
    "GenerationPlan",
    "LocatorConfig",
    "ModuleNameError",
    "NoticeHandler",
    "PlannedFile",
    "TemplateResolver",
    "TemplateRole",
    "UserCancelledError",
    "WrittenFile",
    "check_module_name",
    "create_module",
    "default_content",
    "ensure_module_dirs",
    "find_all_template_dirs",
    "find_template_dirs",
    "has_template_files",
    "plan_module",
    "relative_template_dirs",
    "substitute",
    "validate_module_name",
]
