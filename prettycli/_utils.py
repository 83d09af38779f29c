"""
Shared pure-utility functions for prettycli.

These helpers have no business logic and no side effects.
They are used across formatters, models, and commands.
"""

import re

_NUMBER_RE = re.compile(
    r"""
    \s*
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | inf(?:inity)?
      | nan
    )
    \s*
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


def is_number(text):
    """True when *text* is a decimal integer or float (optionally signed).

    Accepts exponents and inf/nan like a strict double parse does, but
    rejects hex/octal literals, digit separators, and the empty string.
    """
    if not isinstance(text, str) or not text:
        return False
    return _NUMBER_RE.fullmatch(text) is not None


def _parse_column_list(raw):
    """Parse a comma-separated column list. Blank entries are dropped."""
    if raw is None:
        return ()
    return tuple(c.strip() for c in raw.split(",") if c.strip())
