"""Placeholder substitution for template bodies."""

from __future__ import annotations

from collections.abc import Callable
import re

PLACEHOLDERS: dict[str, Callable[[str], str]] = {
    "@MODULE_NAME@": lambda name: name,
    "@MODULE_NAME_UPPER@": str.upper,
    "@MODULE_NAME_LOWER@": str.lower,
}

_PLACEHOLDER_RE = re.compile("|".join(re.escape(token) for token in PLACEHOLDERS))


def substitute(content: str, module_name: str) -> str:
    """
    Replace every recognized placeholder in ``content``.

    ``@MODULE_NAME@`` becomes the name as given, ``@MODULE_NAME_UPPER@`` its
    upper-case form and ``@MODULE_NAME_LOWER@`` its lower-case form. Other
    ``@...@`` sequences are left untouched. Replacement happens in one pass, so
    inserted names are never scanned again.
    """
    return _PLACEHOLDER_RE.sub(lambda m: PLACEHOLDERS[m.group(0)](module_name), content)
