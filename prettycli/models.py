"""
Typed models for render configuration and per-cell layout.
"""

from dataclasses import dataclass

from prettycli._utils import _parse_column_list
from prettycli.args import parse_args
from prettycli.config import DEFAULT_MAX_COL_WIDTH
from prettycli.exceptions import ConfigError


@dataclass(frozen=True)
class RenderConfig:
    """Validated input contract for table rendering."""

    column_order: tuple[str, ...] = ()
    max_col_width: int = DEFAULT_MAX_COL_WIDTH

    def __post_init__(self):
        width = self.max_col_width
        # bool is an int subclass.
        if isinstance(width, bool) or not isinstance(width, int):
            raise ConfigError(
                f"[ERROR] max_col_width must be an integer, got {type(width).__name__}."
            )
        if width < 1:
            raise ConfigError(f"[ERROR] max_col_width must be >= 1, got {width}.")
        order = self.column_order
        if isinstance(order, str):
            raise ConfigError("[ERROR] column_order must be a sequence of names, not a string.")
        try:
            order = tuple(order)
        except TypeError as e:
            raise ConfigError(
                f"[ERROR] column_order must be a sequence of names, got {type(order).__name__}."
            ) from e
        for name in order:
            if not isinstance(name, str):
                raise ConfigError(
                    f"[ERROR] column_order entries must be strings, got {type(name).__name__}."
                )
        object.__setattr__(self, "column_order", order)

    @classmethod
    def from_kwargs(cls, column_order=None, max_col_width=None):
        """Build a config from optional keyword values, applying defaults."""
        return cls(
            column_order=() if column_order is None else column_order,
            max_col_width=DEFAULT_MAX_COL_WIDTH if max_col_width is None else max_col_width,
        )

    @classmethod
    def from_args(cls, args):
        """Parse leading `-column_order a,b -max_col_width N` tokens.

        Returns (config, remaining_tokens).
        """
        parsed = parse_args(args, {"column_order": "", "max_col_width": None})
        raw_width = parsed["max_col_width"]
        width = None
        if raw_width is not None:
            try:
                width = int(raw_width)
            except ValueError as e:
                raise ConfigError(
                    f"[ERROR] max_col_width must be an integer, got '{raw_width}'."
                ) from e
        order = _parse_column_list(parsed["column_order"])
        return cls.from_kwargs(order, width), parsed.rest


@dataclass(frozen=True)
class WrappedCell:
    """One cell of one row after wrapping: its output lines and alignment."""

    lines: tuple[str, ...]
    is_numeric: bool

    def line(self, index):
        """Return line *index*, or an empty string past the last line."""
        return self.lines[index] if index < len(self.lines) else ""
