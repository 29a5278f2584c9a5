"""Runtime services shared across the engine."""

from . import telemetry

__all__ = ["telemetry"]
