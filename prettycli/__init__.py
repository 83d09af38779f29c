"""prettycli — table and key/value tree printing plus small option parsers for CLIs."""

from prettycli.args import OptResult, ParsedArgs, getopt, getswitchopt, parse_args
from prettycli.config import VERSION
from prettycli.exceptions import CliError, ConfigError
from prettycli.formatters import (
    compute_widths,
    derive_columns,
    format_dict,
    format_table,
    pad_ansi,
    pdict,
    ptable,
    strip_ansi,
    visible_length,
    wrap_text,
)
from prettycli.models import RenderConfig, WrappedCell

__all__ = [
    "VERSION",
    "CliError",
    "ConfigError",
    "OptResult",
    "ParsedArgs",
    "RenderConfig",
    "WrappedCell",
    "compute_widths",
    "derive_columns",
    "format_dict",
    "format_table",
    "getopt",
    "getswitchopt",
    "pad_ansi",
    "parse_args",
    "pdict",
    "ptable",
    "strip_ansi",
    "visible_length",
    "wrap_text",
]
