"""Price-time priority order book, matching engine and health-check HTTP server."""

__version__ = "0.1.0"
__all__ = ["entity", "matching", "httpserver"]