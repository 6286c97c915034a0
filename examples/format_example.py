"""Example: formatting webinar timings without the HTTP server

This script shows the display strings produced for a few inputs and
what the format tool returns in dry-run mode.
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from webinar_formatter.config import AppConfig
from webinar_formatter.errors import AppError
from webinar_formatter.formatter import format_webinar_timing
from webinar_formatter.schemas import FormatWebinarInput
from webinar_formatter.tools import format_webinar


SAMPLES = [
    ("2026-12-30", "11:00 AM", "EST"),
    ("December 1, 2026", "7:30pm", "PST"),
    ("07/04/2026", "00:15", None),
    ("2026-07-04", "12:00 PM", "Europe/London"),
    ("not a date", "11:00 AM", "CST"),
]


def main():
    """Print formatted samples, then run the tool in dry-run mode."""

    print("Formatted samples")
    print("-" * 50)
    for date_value, time_value, zone in SAMPLES:
        try:
            text = format_webinar_timing(date_value, time_value, zone)
        except AppError as e:
            text = f"error: {e.to_payload()}"
        print(f"  {date_value!r} {time_value!r} {zone!r}\n    -> {text}")

    config = AppConfig(_env_file=None, ghl_api_key=None, formatted_cv_id=None)
    params = FormatWebinarInput(
        location_id="loc_123", webinar_date="2026-12-30", webinar_time="11:00 AM"
    )
    result = asyncio.run(format_webinar(config, None, params))
    print("\nDry-run response")
    print("-" * 50)
    print(f"  {result.model_dump(exclude_none=True)}")


if __name__ == "__main__":
    main()
