"""Core helpers: response contract and error conversion."""

from __future__ import annotations

from prettycli.config import CONTRACT_SCHEMA_VERSION
from prettycli.exceptions import CliError, ConfigError


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope."""
    return {
        "ok": False,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "type": error_type,
        "error": message,
    }


def _finalize_tool_result(result: dict) -> dict:
    """Add stable contract metadata to dict responses."""
    out = dict(result)
    out.setdefault("schema_version", CONTRACT_SCHEMA_VERSION)
    out.setdefault("ok", True)
    return out


def _call(fn, *args, **kwargs) -> dict:
    """Run a render function, converting exceptions to error dicts.

    Successful results are returned as {"ok": True, "lines": [...], "text": "..."}.
    """
    try:
        lines = fn(*args, **kwargs)
    except ConfigError as e:
        return _contract_error(str(e), "config")
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
    return _finalize_tool_result({"lines": lines, "text": "\n".join(lines)})
