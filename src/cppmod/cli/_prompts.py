"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from cppmod.core.errors import UserCancelledError
from cppmod.core.types import validate_module_name

_console = Console()

T = TypeVar("T")


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise UserCancelledError(question)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {labels[index]}")
    _print_bar()

    return selected


def _ask_module_name(question: str, placeholder: str) -> str:
    """Ask for a module name until it passes validation."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    lines = 2
    while True:
        _console.print(f"[dim]│[/]  [dim]{placeholder}[/]")
        _console.print("[dim]│[/]  ", end="")
        lines += 2
        try:
            answer = input().strip()
        except (EOFError, KeyboardInterrupt):
            raise UserCancelledError(question) from None

        error = validate_module_name(answer)
        if error is None:
            break
        _console.print(f"[dim]│[/]  [yellow]{error}[/]")
        lines += 1

    _clear_lines(lines)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _print_bar()

    return answer


def prompt_target_dir(root: Path) -> Path:
    """Prompt user to pick one of the immediate subdirectories of ``root``."""
    try:
        subdirs = sorted(p for p in root.iterdir() if p.is_dir())
    except OSError:
        subdirs = []
    if not subdirs:
        raise UserCancelledError(f"No subdirectories in {root}")
    labels = [p.name for p in subdirs]
    return _select("Select destination directory", subdirs, labels)


def prompt_module_name() -> str:
    """Prompt user for the new module's name."""
    return _ask_module_name("Enter the module name", "e.g. device_manager")
