"""
Build environment definition for the workshop image.

Renders the Dockerfile that installs the compiler toolchain, rustup and the
Solana CLI on top of an Ubuntu base image.
"""

from pathlib import Path

from pydantic import BaseModel, Field

from pinbox.core.errors import DockerfileExistsError, DockerfileWriteError


DOCKERFILE_NAME = "Dockerfile"


class BuildEnvironment(BaseModel):
    """Base image and toolchain bootstrap steps."""

    base_image: str = Field(default="docker.io/ubuntu:24.04", description="Base OS image")
    apt_packages: list[str] = Field(
        default=["build-essential", "curl"],
        description="Packages installed with apt",
    )
    rustup_url: str = Field(default="https://sh.rustup.rs", description="rustup installer script")
    solana_release: str = Field(default="v2.2.14", description="Solana CLI release tag")
    solana_installer_url: str = Field(
        default="https://release.anza.xyz/{release}/install",
        description="Solana installer URL template, {release} is substituted",
    )
    extra_path: list[str] = Field(
        default=[
            "/root/.local/share/solana/install/active_release/bin",
            "/root/.cargo/bin",
        ],
        description="Directories prepended to PATH",
    )
    workdir: str = Field(default="/src", description="Working directory inside the image")

    @property
    def solana_installer(self) -> str:
        return self.solana_installer_url.format(release=self.solana_release)


def render_dockerfile(env: BuildEnvironment) -> str:
    """Render the build file for ``env``."""
    steps = []
    if env.apt_packages:
        steps.append(f"apt update && apt install -y {' '.join(env.apt_packages)}")
    steps.append(
        f'sh -c "$(curl --proto \'=https\' --tlsv1.2 -sSf {env.rustup_url})" -- -y'
    )
    steps.append(f'sh -c "$(curl -sSfL {env.solana_installer})"')

    lines = [f"FROM {env.base_image}", ""]
    lines.append("RUN " + " \\\n    && ".join(steps))
    lines.append("")

    path = ":".join([*env.extra_path, "${PATH}"])
    lines.append(f'ENV PATH="{path}"')
    lines.append(f"WORKDIR {env.workdir}")

    return "\n".join(lines) + "\n"


def write_dockerfile(env: BuildEnvironment, path: Path, force: bool = False) -> Path:
    """
    Write the rendered build file to ``path``.

    Raises:
        DockerfileExistsError: if ``path`` exists and ``force`` is not set.
        DockerfileWriteError: if the file cannot be written.
    """
    if path.exists() and not force:
        raise DockerfileExistsError(f"{path} already exists")

    try:
        path.write_text(render_dockerfile(env))
    except OSError as e:
        raise DockerfileWriteError(f"Could not write {path}: {e}") from e
    return path
