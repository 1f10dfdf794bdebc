"""
Rich console wrapper for consistent terminal UI across Pinbox.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

PINBOX_THEME = Theme({
    "pinbox.title": "bold bright_cyan",
    "pinbox.success": "bold green",
    "pinbox.warning": "bold yellow",
    "pinbox.error": "bold red",
    "pinbox.info": "dim cyan",
    "pinbox.engine": "bold bright_green",
    "pinbox.image": "bold magenta",
    "pinbox.muted": "dim white",
})

# Global console instances
console = Console(theme=PINBOX_THEME)
err_console = Console(theme=PINBOX_THEME, stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[pinbox.success]✓[/] {message}")


def print_error(message: str) -> None:
    """Print an error message to standard error."""
    err_console.print(f"[pinbox.error]✗[/] {escape(message)}", highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[pinbox.warning]⚠[/] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[pinbox.info]ℹ[/] {message}")


def print_command(cmd: list[str]) -> None:
    """Echo a command line before it runs."""
    console.print(f"[dim]$ {escape(' '.join(cmd))}[/]", highlight=False)
