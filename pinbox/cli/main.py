"""
Pinbox CLI - Main entry point.

Container shell launcher for the Pinocchio workshop toolchain.
"""

import typer

from pinbox.ui.console import console

# Create the main Typer app
app = typer.Typer(
    name="pinbox",
    help="📦 Pinbox - build the workshop image and open a shell in it",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
):
    """
    📦 Pinbox - build the workshop image and open a shell in it

    Run without a command to build the image with podman or docker and start a
    container with the current directory mounted at /src.
    """
    if version:
        from pinbox import __version__
        console.print(f"Pinbox CLI v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        shell_command()


# Import and register commands
from pinbox.cli.shell_cmd import shell_command
from pinbox.cli.status_cmd import status_command
from pinbox.cli.dockerfile_cmd import dockerfile_command

app.command(name="shell", help="🐳 Build the image and run it with this directory mounted")(shell_command)
app.command(name="status", help="📊 Show detected engines and the image in use")(status_command)
app.command(name="dockerfile", help="📝 Write the toolchain Dockerfile")(dockerfile_command)


if __name__ == "__main__":
    app()
