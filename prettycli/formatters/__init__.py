"""Output formatting package for prettycli.

Re-exports all public names so consumers can do:
    from prettycli.formatters import ptable
"""

from prettycli.formatters._ansi import (
    pad_ansi,
    strip_ansi,
    visible_length,
)
from prettycli.formatters._core import (
    emit_lines,
    warn,
)
from prettycli.formatters._dict import (
    format_dict,
    pdict,
)
from prettycli.formatters._table import (
    compute_widths,
    derive_columns,
    format_table,
    ptable,
)
from prettycli.formatters._wrap import wrap_text

__all__ = [
    "compute_widths",
    "derive_columns",
    "emit_lines",
    "format_dict",
    "format_table",
    "pad_ansi",
    "pdict",
    "ptable",
    "strip_ansi",
    "visible_length",
    "warn",
    "wrap_text",
]
