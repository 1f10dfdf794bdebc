"""
pinbox status - Show detected container engines and the effective image.
"""

import typer
from rich.markup import escape
from rich.table import Table

from pinbox.core.config import IMAGE_URI_ENV, get_config_path, load_config
from pinbox.core.engine import engine_status
from pinbox.core.errors import PinboxError
from pinbox.ui.console import console, print_error


def status_command():
    """
    Display which container engine would be used and with which image.
    """
    console.print("\n[bold]📦 Pinbox Status[/]\n")

    probes = engine_status()
    selected = next((p.engine for p in probes if p.found), None)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Engine")
    table.add_column("Path", style="dim")
    table.add_column("Status")

    for probe in probes:
        if probe.engine == selected:
            status = "[green]✓ Selected[/]"
        elif probe.found:
            status = "[dim]Available[/]"
        else:
            status = "[dim]Not found[/]"
        table.add_row(probe.engine.value, escape(probe.path or "-"), status)

    console.print(table)

    try:
        config = load_config()
    except PinboxError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code)

    console.print()
    config_path = get_config_path()
    if config_path.exists():
        console.print(f"  Config: [cyan]{escape(str(config_path))}[/]")
    console.print(f"  Image: [pinbox.image]{escape(config.image_uri)}[/]")
    console.print(f"  [dim]Override with {IMAGE_URI_ENV}=<image>[/]")
    console.print()

    if selected is None:
        print_error("No supported container engine found (install podman or docker)")
        raise typer.Exit(1)
