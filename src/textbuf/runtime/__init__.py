"""Runtime services: settings and telemetry."""

from . import telemetry
from .settings import ENV_PREFIX, Settings

__all__ = ["ENV_PREFIX", "Settings", "telemetry"]
