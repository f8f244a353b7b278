"""cppmod: C/C++ module scaffolding from project-local templates."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cppmod")
except PackageNotFoundError:
    __version__ = "0.0.0"
