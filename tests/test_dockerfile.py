"""
Tests for the build environment definition.
"""

import pytest

from pinbox.core.dockerfile import BuildEnvironment, render_dockerfile, write_dockerfile
from pinbox.core.errors import DockerfileExistsError, DockerfileWriteError


EXPECTED_DEFAULT = """\
FROM docker.io/ubuntu:24.04

RUN apt update && apt install -y build-essential curl \\
    && sh -c "$(curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs)" -- -y \\
    && sh -c "$(curl -sSfL https://release.anza.xyz/v2.2.14/install)"

ENV PATH="/root/.local/share/solana/install/active_release/bin:/root/.cargo/bin:${PATH}"
WORKDIR /src
"""


class TestRenderDockerfile:
    """Test Dockerfile rendering."""

    def test_default(self):
        """The default environment renders the workshop Dockerfile."""
        assert render_dockerfile(BuildEnvironment()) == EXPECTED_DEFAULT

    def test_solana_release(self):
        """The release tag is substituted into the installer URL."""
        env = BuildEnvironment(solana_release="v2.3.1")

        assert env.solana_installer == "https://release.anza.xyz/v2.3.1/install"
        assert "release.anza.xyz/v2.3.1/install" in render_dockerfile(env)

    def test_no_apt_packages(self):
        """Without packages the apt step is omitted."""
        text = render_dockerfile(BuildEnvironment(apt_packages=[]))

        assert "apt" not in text
        assert "RUN sh -c" in text

    def test_custom_base_and_workdir(self):
        """Base image and workdir are configurable."""
        text = render_dockerfile(BuildEnvironment(base_image="debian:12", workdir="/work"))

        assert text.startswith("FROM debian:12\n")
        assert text.endswith("WORKDIR /work\n")


class TestWriteDockerfile:
    """Test writing the Dockerfile to disk."""

    def test_write(self, tmp_path):
        """The file is written with the rendered content."""
        path = write_dockerfile(BuildEnvironment(), tmp_path / "Dockerfile")
        assert path.read_text() == EXPECTED_DEFAULT

    def test_refuses_overwrite(self, tmp_path):
        """An existing file is kept unless forced."""
        path = tmp_path / "Dockerfile"
        path.write_text("FROM scratch\n")

        with pytest.raises(DockerfileExistsError) as excinfo:
            write_dockerfile(BuildEnvironment(), path)
        assert "--force" not in str(excinfo.value)
        assert path.read_text() == "FROM scratch\n"

    def test_force_overwrite(self, tmp_path):
        """force replaces an existing file."""
        path = tmp_path / "Dockerfile"
        path.write_text("FROM scratch\n")

        write_dockerfile(BuildEnvironment(), path, force=True)

        assert path.read_text() == EXPECTED_DEFAULT

    def test_missing_parent(self, tmp_path):
        """Write failures surface as DockerfileWriteError."""
        with pytest.raises(DockerfileWriteError, match="Could not write"):
            write_dockerfile(BuildEnvironment(), tmp_path / "missing" / "Dockerfile")
