"""
Command implementations for prettycli.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Rendering lives in formatters. These thin wrappers handle input loading,
argparse → keyword args, and diagnostics.
"""

import json
import os
import sys
from collections.abc import Mapping

from prettycli import config
from prettycli._utils import _parse_column_list
from prettycli.exceptions import CliError
from prettycli.formatters import pdict, ptable, warn
from prettycli.models import RenderConfig


def _safe_json_parse(text, context="input"):
    """Parse JSON with friendly error message on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CliError(f"[ERROR] Invalid JSON in {context}: {e.msg} at position {e.pos}") from None


def _read_input(path):
    """Read a whole input document. None or "-" reads stdin."""
    if not path or path == "-":
        return sys.stdin.read()
    if not os.path.exists(path):
        raise CliError(f"[ERROR] File not found: {path}")
    with open(path, encoding="utf-8") as f:
        return f.read()


def _load_rows(data, context):
    """Validate a decoded JSON document as a list of row objects."""
    if not isinstance(data, list):
        raise CliError(
            f"[ERROR] Invalid rows in {context}: expected array of objects, "
            f"got {type(data).__name__}."
        )
    for i, row in enumerate(data):
        if not isinstance(row, Mapping):
            raise CliError(
                f"[ERROR] Invalid row {i} in {context}: expected object, got {type(row).__name__}."
            )
    return data


def _json_scalar(val):
    """Render JSON scalars the way they were written (true/false/null)."""
    if isinstance(val, str):
        return val
    return json.dumps(val, ensure_ascii=False)


def _stringify_row(row):
    return {key: _json_scalar(val) for key, val in row.items() if val is not None}


def _warn_unknown_columns(rows, column_order):
    present = set()
    for row in rows:
        present.update(row)
    missing = [col for col in column_order if col not in present]
    if missing:
        warn(f"Column(s) not present in any row: {', '.join(missing)}")


def cmd_table(ns):
    context = ns.file if ns.file and ns.file != "-" else "stdin"
    rows = _load_rows(_safe_json_parse(_read_input(ns.file), context), context)
    max_col_width = ns.max_col_width if ns.max_col_width is not None else config.MAX_COL_WIDTH
    render_config = RenderConfig.from_kwargs(_parse_column_list(ns.columns), max_col_width)
    rows = [_stringify_row(row) for row in rows]
    if rows and render_config.column_order:
        _warn_unknown_columns(rows, render_config.column_order)
    ptable(rows, render_config)


def cmd_dict(ns):
    context = ns.file if ns.file and ns.file != "-" else "stdin"
    data = _safe_json_parse(_read_input(ns.file), context)
    if not isinstance(data, Mapping):
        raise CliError(
            f"[ERROR] Invalid JSON in {context}: expected object, got {type(data).__name__}."
        )
    pdict(
        data,
        prefix=config.DICT_PREFIX if ns.prefix is None else ns.prefix,
        sep=config.DICT_SEPARATOR if ns.sep is None else ns.sep,
        name=ns.name,
    )
