"""Horse track betting kiosk."""

__version__ = "1.0.0"
