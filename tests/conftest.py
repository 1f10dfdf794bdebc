"""
Shared fixtures: fake engine lookup and a recording subprocess executor.
"""

import shutil
import subprocess

import pytest


class RecordingExecutor:
    """Stands in for subprocess.run and remembers every command."""

    def __init__(self, returncodes=None):
        self.calls = []
        self._returncodes = dict(returncodes or {})

    def __call__(self, cmd, *args, **kwargs):
        self.calls.append(list(cmd))
        code = self._returncodes.get(cmd[1], 0)
        return subprocess.CompletedProcess(cmd, code)

    @property
    def subcommands(self):
        return [call[1] for call in self.calls]


def fake_which(*installed):
    """Build a shutil.which replacement that only knows ``installed``."""
    def which(name):
        return f"/usr/bin/{name}" if name in installed else None
    return which


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run in an empty directory with no IMAGE_URI set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("IMAGE_URI", raising=False)
    return tmp_path


@pytest.fixture
def installed(monkeypatch):
    """Pretend only the given engines are on PATH."""
    def install(*names):
        monkeypatch.setattr(shutil, "which", fake_which(*names))
    install()
    return install


@pytest.fixture
def executor(monkeypatch):
    """Replace subprocess.run with a recorder."""
    recorder = RecordingExecutor()
    monkeypatch.setattr(subprocess, "run", recorder)
    return recorder
