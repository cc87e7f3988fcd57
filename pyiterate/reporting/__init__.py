"""Reporting module for PyIterate."""

from pyiterate.reporting.formatters import (
    FORMATTERS,
    Formatter,
    JSONFormatter,
    TextFormatter,
    describe_code_units,
    describe_element,
    format_report,
    get_formatter,
    inspect_value,
)

__all__ = [
    "FORMATTERS",
    "Formatter",
    "TextFormatter",
    "JSONFormatter",
    "describe_code_units",
    "describe_element",
    "format_report",
    "get_formatter",
    "inspect_value",
]
