"""Tool functions behind the HTTP routes.

Each tool is exposed as a plain Python function to facilitate testing.
The FastAPI adapter (see `server.py`) registers these as routes. The
tool functions return Pydantic models and raise `AppError` subclasses.
"""

from .status import service_status
from .webinar import DRY_RUN_WARNING, format_webinar

__all__ = [
    "DRY_RUN_WARNING",
    "format_webinar",
    "service_status",
]
