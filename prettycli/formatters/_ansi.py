"""ANSI-aware width helpers (stdlib only)."""

import re

# CSI: ESC [ , parameters (digits and semicolons), one final letter.
_CSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text):
    """Remove ANSI CSI escape sequences, leaving all other characters intact."""
    if not text:
        return text
    return _CSI_RE.sub("", text)


def visible_length(text):
    """Number of characters a terminal shows for *text* (escapes excluded)."""
    return len(strip_ansi(text))


def pad_ansi(text, width, align="left"):
    """Pad *text* with spaces to *width* visible columns.

    Text already at or beyond *width* is returned unchanged.
    align: "left" pads on the right, "right" pads on the left.
    """
    if align not in ("left", "right"):
        raise ValueError(f"Invalid value for align: {align!r}")
    padding = width - visible_length(text)
    if padding <= 0:
        return text
    spaces = " " * padding
    if align == "right":
        return spaces + text
    return text + spaces
