"""
Build-then-run workflow against the selected container engine.
"""

import subprocess
from pathlib import Path
from typing import Callable, Optional

from rich.markup import escape

from pinbox.core.config import MOUNT_TARGET, PinboxConfig
from pinbox.core.engine import ContainerEngine, Which, find_engine
from pinbox.ui.console import print_command, print_info, print_warning


Executor = Callable[..., subprocess.CompletedProcess]


def build_command(
    engine: ContainerEngine,
    image_uri: str,
    context: str = ".",
) -> list[str]:
    """Command that builds (or refreshes) ``image_uri`` from ``context``."""
    return [engine.value, "build", "-t", image_uri, context]


def run_command(
    engine: ContainerEngine,
    image_uri: str,
    source_dir: Path,
    mount_target: str = MOUNT_TARGET,
) -> list[str]:
    """Command that starts an interactive, auto-removed container with ``source_dir`` mounted.

    ``-v`` splits on ``:``, so a source path containing one is passed with
    ``--mount`` instead.
    """
    if ":" in str(source_dir):
        mount = ["--mount", f"type=bind,source={source_dir},target={mount_target}"]
    else:
        mount = ["-v", f"{source_dir}:{mount_target}"]

    return [
        engine.value, "run",
        "-it",
        "--rm",
        *mount,
        image_uri,
    ]


class ShellSession:
    """One build + run cycle.

    Both steps inherit stdio and block until the engine returns. Failures are
    reported through the engine's own exit status and never retried.
    """

    def __init__(
        self,
        config: PinboxConfig,
        engine: Optional[ContainerEngine] = None,
        *,
        source_dir: Optional[Path] = None,
        executor: Optional[Executor] = None,
        which: Optional[Which] = None,
    ):
        self.config = config
        self._engine = engine
        self.source_dir = (source_dir or Path.cwd()).resolve()
        self._executor = executor or subprocess.run
        self._which = which

    @property
    def engine(self) -> ContainerEngine:
        """Selected engine; resolved on first access."""
        if self._engine is None:
            self._engine = find_engine(self._which)
        return self._engine

    def build(self) -> int:
        cmd = build_command(self.engine, self.config.image_uri, self.config.build_context)
        print_command(cmd)
        return self._executor(cmd).returncode

    def run(self) -> int:
        cmd = run_command(
            self.engine,
            self.config.image_uri,
            self.source_dir,
            self.config.mount_target,
        )
        print_command(cmd)
        return self._executor(cmd).returncode

    def launch(self) -> int:
        """
        Build the image, then run it. Returns the run step's exit status.

        A failed build does not stop the run step; a previously built image
        may still be usable.
        """
        print_info(f"Using [pinbox.engine]{self.engine.value}[/] with image [pinbox.image]{escape(self.config.image_uri)}[/]")

        status = self.build()
        if status != 0:
            print_warning(f"{self.engine.value} build exited with status {status}")

        return self.run()
