"""Webinar formatter package.

This package provides a small HTTP relay for CRM workflows: it takes a
webinar date, time and timezone label, renders them as a display string
(e.g. "Thursday, December 30th @ 11:00 AM EST") and writes that string
to a CRM custom value.

Modes:
- Live: GHL_API_KEY and FORMATTED_CV_ID set; values are forwarded.
- Dry run (default): values are formatted and returned with a warning.

Usage example:
    from webinar_formatter.server import main
    if __name__ == "__main__":
        main()

Note: The formatter can also be used on its own:
    from webinar_formatter.formatter import format_webinar_timing
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
