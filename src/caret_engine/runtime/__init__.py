"""Telemetry and event plumbing shared by every engine layer."""

from .bus import EventBus

__all__ = ["EventBus", "telemetry"]
