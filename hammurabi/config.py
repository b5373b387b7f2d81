"""
Configuration - Environment settings for the CLI and the HTTP server.

Game rules are fixed (see engine_core.rules); only the process around the
game is configurable.
"""

import logging
import os

HAMMURABI_ENV = os.getenv("HAMMURABI_ENV", "development")
HAMMURABI_LOG_LEVEL = os.getenv("HAMMURABI_LOG_LEVEL", "WARNING")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
HAMMURABI_HOST = os.getenv("HAMMURABI_HOST", "127.0.0.1")
HAMMURABI_PORT = int(os.getenv("HAMMURABI_PORT", "9000"))
HAMMURABI_DEFAULT_YEARS = int(os.getenv("HAMMURABI_DEFAULT_YEARS", "10"))
HAMMURABI_SESSION_TTL = int(os.getenv("HAMMURABI_SESSION_TTL", "3600"))


def configure_logging(level: str | None = None):
    """Set up root logging once for a process entry point."""
    logging.basicConfig(
        level=(level or HAMMURABI_LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
