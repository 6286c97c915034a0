"""Configuration helpers for the webinar formatter service.

Exposes `load_config`, which reads environment variables and returns a
typed `AppConfig` instance with sensible defaults, and
`configure_logging` for process-wide log setup.
"""

from .env import AppConfig, load_config
from .logging import configure_logging

__all__ = ["AppConfig", "configure_logging", "load_config"]
