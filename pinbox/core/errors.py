"""
Exception hierarchy for Pinbox.

Core modules raise these; only the CLI layer turns them into exit codes.
"""


class PinboxError(Exception):
    """Base class for all Pinbox errors."""

    exit_code: int = 1


class EngineNotFoundError(PinboxError):
    """No supported container engine is on the search path."""


class ConfigError(PinboxError):
    """pinbox.yaml could not be read or failed validation."""


class DockerfileExistsError(PinboxError):
    """Refused to overwrite an existing build file."""


class DockerfileWriteError(PinboxError):
    """The build file could not be written."""
