"""Core output dispatchers and stderr diagnostics."""

import json
import sys

from prettycli import config


def emit_lines(lines, file=None):
    """Print each line to *file* (stdout by default)."""
    out = sys.stdout if file is None else file
    for line in lines:
        print(line, file=out)


def _log_render_event(**fields):
    """Emit structured render logs to stderr when enabled."""
    if not (config.RENDER_LOG_ENABLED or config.RUNTIME_VERBOSE):
        return
    print("[RENDER] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def warn(message):
    """Print a [WARN] line to stderr unless quiet mode is on."""
    if config.RUNTIME_QUIET:
        return
    print(f"[WARN] {message}", file=sys.stderr)
