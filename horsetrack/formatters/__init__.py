"""Console formatters for kiosk output."""

from horsetrack.formatters.report import (
    format_invalid_command,
    format_result,
    format_status,
)

__all__ = ["format_invalid_command", "format_result", "format_status"]
