"""Runtime services: telemetry and configuration."""

from .config import WrapSettings

__all__ = ["WrapSettings"]
