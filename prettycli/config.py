"""
prettycli shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Keys that may also come from the process environment when .env lacks them.
_KNOWN_ENV_KEYS = (
    "PRETTYCLI_MAX_COL_WIDTH",
    "PRETTYCLI_PREFIX",
    "PRETTYCLI_SEPARATOR",
    "PRETTYCLI_VERBOSE",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _KNOWN_ENV_KEYS:
        if key not in env and key in os.environ:
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_str(key, default):
    """Read string env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    return raw


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.2.0"
CONTRACT_SCHEMA_VERSION = "1.0"

DEFAULT_MAX_COL_WIDTH = 80
DEFAULT_DICT_PREFIX = "  "
DEFAULT_DICT_SEPARATOR = " -> "

MISSING_PLACEHOLDER = "-"
NO_DATA_TEXT = "No data"
COLUMN_SEP = " | "
SEPARATOR_JOIN = "-+-"

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env)
# ---------------------------------------------------------------------------

env = load_env()

MAX_COL_WIDTH = _env_int("PRETTYCLI_MAX_COL_WIDTH", DEFAULT_MAX_COL_WIDTH)
DICT_PREFIX = _env_str("PRETTYCLI_PREFIX", DEFAULT_DICT_PREFIX)
DICT_SEPARATOR = _env_str("PRETTYCLI_SEPARATOR", DEFAULT_DICT_SEPARATOR)
RENDER_LOG_ENABLED = _env_bool("PRETTYCLI_VERBOSE", False)

# ---------------------------------------------------------------------------
# Runtime flags (set by cli.main)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
RUNTIME_VERBOSE = False
