"""
pinbox shell - Build the workshop image and open a container on it.

This is also what a bare ``pinbox`` runs.
"""

import typer

from pinbox.core.config import load_config
from pinbox.core.errors import PinboxError
from pinbox.core.runner import ShellSession
from pinbox.ui.console import print_error


def shell_command():
    """
    Build the image with podman or docker, then run it with the current directory mounted at /src.
    """
    try:
        config = load_config()
        session = ShellSession(config)
        status = session.launch()
    except PinboxError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code)
    except KeyboardInterrupt:
        raise typer.Exit(130)

    raise typer.Exit(status)
