"""
Container engine detection.

Pinbox supports exactly two engines and always prefers podman when both are
installed.
"""

import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pinbox.core.errors import EngineNotFoundError


class ContainerEngine(str, Enum):
    """Supported container engines."""
    PODMAN = "podman"
    DOCKER = "docker"


# Probe order. First match wins.
ENGINE_CANDIDATES: tuple[ContainerEngine, ...] = (
    ContainerEngine.PODMAN,
    ContainerEngine.DOCKER,
)

Which = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class EngineProbe:
    """Result of looking up one candidate on the search path."""
    engine: ContainerEngine
    path: Optional[str]

    @property
    def found(self) -> bool:
        return self.path is not None


def _no_engine_message() -> str:
    names = ", ".join(sorted(e.value for e in ENGINE_CANDIDATES))
    return f"Could not find a supported container engine ({names})"


def find_engine(which: Optional[Which] = None) -> ContainerEngine:
    """
    Select the first candidate engine present on the search path.

    Raises:
        EngineNotFoundError: if none of the candidates resolve.
    """
    which = which or shutil.which
    for engine in ENGINE_CANDIDATES:
        if which(engine.value):
            return engine
    raise EngineNotFoundError(_no_engine_message())


def engine_status(which: Optional[Which] = None) -> list[EngineProbe]:
    """Probe every candidate, in priority order."""
    which = which or shutil.which
    return [EngineProbe(engine, which(engine.value)) for engine in ENGINE_CANDIDATES]
