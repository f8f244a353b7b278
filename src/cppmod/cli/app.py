"""Typer CLI application for cppmod."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, BadParameter, Exit, Option, Typer

import cppmod
from cppmod.cli._prompts import prompt_module_name, prompt_target_dir
from cppmod.core.config import DEFAULT_MAX_CHILDREN, DEFAULT_MAX_DEPTH, LocatorConfig
from cppmod.core.errors import ModuleNameError, UserCancelledError
from cppmod.core.locator import relative_template_dirs
from cppmod.core.resolver import DiscoveryCache, TemplateResolver
from cppmod.core.scaffolder import create_module
from cppmod.core.types import check_module_name

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()

RootsOption = Annotated[
    list[Path] | None,
    Option(
        "--root",
        "-r",
        help="Workspace root to search for templates (repeatable). Defaults to the cwd.",
        file_okay=False,
        show_default=False,
    ),
]
MaxDepthOption = Annotated[
    int,
    Option("--max-depth", envvar="CPPMOD_MAX_DEPTH", min=0, help="Deepest directory searched."),
]
MaxChildrenOption = Annotated[
    int,
    Option(
        "--max-children",
        envvar="CPPMOD_MAX_CHILDREN",
        min=1,
        help="Directories with more entries than this are not searched.",
    ),
]


@app.callback()
def main(
    verbose: Annotated[bool, Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """cppmod: scaffolding tool for C/C++ modules built from project templates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_notice(message: str) -> None:
    _console.print(f"[bold yellow]▲[/]  {escape(message)}")


def _roots(roots: list[Path] | None) -> list[Path]:
    return [r.absolute() for r in roots] if roots else [Path.cwd()]


def _module_name_callback(value: str | None) -> str | None:
    if value is None:
        return value
    try:
        return check_module_name(value)
    except ModuleNameError as exc:
        raise BadParameter(str(exc)) from None


def _target_dir(target: Path | None, root: Path) -> Path:
    if target is None:
        return prompt_target_dir(root)
    return target if target.is_dir() else target.parent


@app.command()
def create(
    target: Annotated[
        Path | None,
        Argument(
            help="Directory to create the module in. A file path selects its directory.",
            exists=True,
            show_default=False,
        ),
    ] = None,
    name: Annotated[
        str | None,
        Option(
            "--name",
            "-n",
            help="Module name: a letter followed by letters, digits, '_' or '-'.",
            callback=_module_name_callback,
            show_default=False,
        ),
    ] = None,
    root: RootsOption = None,
    max_depth: MaxDepthOption = DEFAULT_MAX_DEPTH,
    max_children: MaxChildrenOption = DEFAULT_MAX_CHILDREN,
) -> None:
    """Create a new C/C++ module from the nearest templates."""
    roots = _roots(root)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  cppmod v{cppmod.__version__}")
    _console.print("[dim]│[/]")

    try:
        base_dir = _target_dir(target, roots[0])
        if name is None:
            name = prompt_module_name()
        else:
            _console.print("[bold green]◇[/]  Enter the module name")
            _console.print(f"[dim]│[/]  {name}")
            _console.print("[dim]│[/]")
    except UserCancelledError:
        _console.print("[bold yellow]▲[/]  User cancelled operation.")
        raise Exit(code=1) from None

    resolver = TemplateResolver(
        roots,
        cache=DiscoveryCache(),
        config=LocatorConfig(max_depth=max_depth, max_children=max_children),
        on_notice=_print_notice,
    )

    _console.print(f"[bold green]◇[/]  Creating {escape(name)}/ in {escape(str(base_dir))}...")

    try:
        written = create_module(base_dir, name, resolver)
    except OSError as exc:
        _console.print(f"[bold red]Error:[/] Failed to create module: {escape(str(exc))}")
        raise Exit(code=1) from None

    module_dir = base_dir / name
    for item in written:
        rel = item.planned.path.relative_to(module_dir).as_posix()
        origin = (
            f"from {escape(os.path.relpath(item.source, roots[0]))}"
            if item.source is not None
            else "default stub"
        )
        _console.print(
            f"[dim]│[/]  {escape(rel)} [dim]— {item.planned.role.label}, {origin}[/]"
        )

    _console.print("[dim]│[/]")
    _console.print(f"[bold cyan]●[/]  Done! Module {escape(name)} created.")
    _console.print()


@app.command()
def refresh(
    root: RootsOption = None,
    max_depth: MaxDepthOption = DEFAULT_MAX_DEPTH,
    max_children: MaxChildrenOption = DEFAULT_MAX_CHILDREN,
) -> None:
    """List the template directories a fresh search of the roots finds."""
    roots = _roots(root)
    resolver = TemplateResolver(
        roots,
        cache=DiscoveryCache(),
        config=LocatorConfig(max_depth=max_depth, max_children=max_children),
        on_notice=_print_notice,
    )

    _console.print()
    _console.print("[bold cyan]◆[/]  Searching for C++ module templates...")
    _console.print("[dim]│[/]")

    dirs = resolver.refresh()

    if not dirs:
        _console.print(
            "[bold green]◇[/]  No template directories found. Default templates will be used."
        )
        _console.print()
        return

    noun = "directory" if len(dirs) == 1 else "directories"
    _console.print(f"[bold green]◇[/]  Found {len(dirs)} template {noun}:")
    for rel in relative_template_dirs(dirs, roots[0]):
        _console.print(f"[dim]│[/]  {escape(rel)}")
    _console.print()
