"""Stub content for roles that have no template on disk."""

from __future__ import annotations

from cppmod.core.types import TemplateRole

_DEFAULTS: dict[TemplateRole, str] = {
    TemplateRole.HEADER: "// Blank header\n",
    TemplateRole.SOURCE: "// Blank src\n",
    TemplateRole.TEST_SOURCE: "// Blank test\n",
    TemplateRole.BUILD_FILE: "# Blank cmake\n",
    TemplateRole.TEST_BUILD_FILE: "# Blank test cmake\n",
}


def default_content(template: TemplateRole | str, module_name: str) -> str:
    """Stub body for a role or template filename; unknown names get a generic stub."""
    role = template if isinstance(template, TemplateRole) else _lookup(template)
    if role is None:
        return f"// Generated file for {module_name}\n"
    return _DEFAULTS[role]


def _lookup(name: str) -> TemplateRole | None:
    role = TemplateRole.from_template_name(name)
    if role is not None:
        return role
    try:
        return TemplateRole(name)
    except ValueError:
        return None
