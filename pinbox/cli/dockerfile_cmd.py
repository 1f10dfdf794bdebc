"""
pinbox dockerfile - Write the build environment definition.
"""

from pathlib import Path

import typer
from rich.markup import escape

from pinbox.core.config import load_config
from pinbox.core.dockerfile import DOCKERFILE_NAME, render_dockerfile, write_dockerfile
from pinbox.core.errors import DockerfileExistsError, PinboxError
from pinbox.ui.console import print_error, print_success


def dockerfile_command(
    output: Path = typer.Option(
        Path(DOCKERFILE_NAME), "--output", "-o",
        help="Where to write the Dockerfile",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
    stdout: bool = typer.Option(False, "--stdout", help="Print instead of writing a file"),
):
    """
    Generate the Dockerfile with the compiler toolchain, Rust and the Solana CLI.
    """
    try:
        config = load_config()
        if stdout:
            typer.echo(render_dockerfile(config.build), nl=False)
            return
        path = write_dockerfile(config.build, output, force=force)
    except DockerfileExistsError as e:
        print_error(f"{e} (use --force to overwrite)")
        raise typer.Exit(e.exit_code)
    except PinboxError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code)

    print_success(f"Wrote {escape(str(path))}")
