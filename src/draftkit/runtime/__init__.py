"""Runtime services shared by the editor and the formatter."""

from . import telemetry

__all__ = ["telemetry"]
