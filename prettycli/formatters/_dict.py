"""Nested key/value tree printer."""

from collections.abc import Mapping

from prettycli import config
from prettycli.exceptions import CliError
from prettycli.formatters._core import emit_lines


def format_dict(d, level=0, prefix=None, sep=None, name=None):
    """Format a (possibly nested) mapping as aligned `key -> 'value'` lines.

    Keys at each level are padded to the longest key of that level.
    Mapping values are expanded on the following lines one level deeper;
    anything else is a scalar and is quoted.
    """
    if not isinstance(d, Mapping):
        raise CliError(f"[ERROR] pdict - argument is not a dict (got {type(d).__name__}).")
    prefix = config.DEFAULT_DICT_PREFIX if prefix is None else prefix
    sep = config.DEFAULT_DICT_SEPARATOR if sep is None else sep

    lines = []
    if name is not None:
        lines.append(f"dict {name}")
    indent = prefix * level
    width = max((len(str(key)) for key in d), default=0)
    for key, val in d.items():
        head = f"{indent}{str(key):<{width}}{sep}"
        if isinstance(val, Mapping):
            lines.append(head)
            lines.extend(format_dict(val, level + 1, prefix, sep))
        else:
            lines.append(f"{head}'{val}'")
    return lines


def pdict(d, level=0, prefix=None, sep=None, name=None, file=None):
    """Print a mapping as a tree. See format_dict()."""
    emit_lines(format_dict(d, level, prefix, sep, name), file=file)
