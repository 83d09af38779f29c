"""
prettycli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — bad arguments, unreadable input, parse errors."""

    exit_code = 1


class ConfigError(CliError):
    """Exit code 2 — invalid render configuration (column width, column order)."""

    exit_code = 2
