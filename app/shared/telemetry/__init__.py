"""Logging setup, OpenTelemetry wiring and the traced decorator."""

from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import Telemetry, get_telemetry, set_telemetry
from app.shared.telemetry.tracing import span_arguments, traced

__all__ = [
    "setup_logging",
    "Telemetry",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "span_arguments",
]
