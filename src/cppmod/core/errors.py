"""Exceptions raised by cppmod."""


class ModuleNameError(ValueError):
    """The module name is empty or contains characters outside ``[A-Za-z0-9_-]``."""


class UserCancelledError(Exception):
    """The user backed out of an interactive prompt before anything was written."""
