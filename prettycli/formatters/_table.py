"""Table rendering: column model, cell wrapping, and row layout."""

from prettycli import config
from prettycli._utils import is_number
from prettycli.formatters._ansi import pad_ansi, strip_ansi, visible_length
from prettycli.formatters._core import _log_render_event, emit_lines
from prettycli.formatters._wrap import wrap_text
from prettycli.models import RenderConfig, WrappedCell


def _cell_value(row, col):
    """Cell text for *col*, or the placeholder when the row lacks it."""
    val = row.get(col)
    if val is None:
        return config.MISSING_PLACEHOLDER
    return val if isinstance(val, str) else str(val)


def derive_columns(rows, column_order=()):
    """Return the column names to render, in order.

    An explicit *column_order* is used as given. Otherwise columns are
    collected from all rows in first-seen order.
    """
    if column_order:
        return list(column_order)
    columns = []
    seen = set()
    for row in rows:
        for key in row:
            if key not in seen:
                seen.add(key)
                columns.append(key)
    return columns


def compute_widths(rows, columns, max_col_width=config.DEFAULT_MAX_COL_WIDTH):
    """Visible width per column: widest of name and values, capped at max_col_width."""
    widths = {}
    for col in columns:
        width = visible_length(str(col))
        for row in rows:
            if row.get(col) is not None:
                width = max(width, visible_length(_cell_value(row, col)))
        widths[col] = min(width, max_col_width)
    return widths


def _wrap_cell(value, width):
    """Lay out one cell. Numbers and values that fit stay on one line."""
    is_num = is_number(strip_ansi(value))
    if not is_num and width >= 1 and visible_length(value) > width:
        return WrappedCell(lines=tuple(wrap_text(value, width)), is_numeric=False)
    return WrappedCell(lines=(value,), is_numeric=is_num)


def _format_row(row, columns, widths):
    cells = [_wrap_cell(_cell_value(row, col), widths[col]) for col in columns]
    height = max((len(cell.lines) for cell in cells), default=1)
    lines = []
    for i in range(height):
        parts = []
        for col, cell in zip(columns, cells):
            text = cell.line(i)
            align = "right" if cell.is_numeric and text else "left"
            parts.append(pad_ansi(text, widths[col], align))
        lines.append(config.COLUMN_SEP.join(parts))
    return lines


def format_table(rows, render_config=None, *, column_order=None, max_col_width=None):
    """Render *rows* (sequence of mappings) as table lines.

    Pass either a RenderConfig or the column_order / max_col_width keywords.
    Configuration is validated before anything is rendered.
    """
    if render_config is None:
        render_config = RenderConfig.from_kwargs(column_order, max_col_width)
    rows = list(rows)
    if not rows:
        return [config.NO_DATA_TEXT]

    columns = derive_columns(rows, render_config.column_order)
    widths = compute_widths(rows, columns, render_config.max_col_width)

    lines = [
        config.COLUMN_SEP.join(pad_ansi(str(col), widths[col]) for col in columns),
        config.SEPARATOR_JOIN.join("-" * widths[col] for col in columns),
    ]
    for row in rows:
        lines.extend(_format_row(row, columns, widths))

    _log_render_event(
        event="table",
        rows=len(rows),
        columns=len(columns),
        widths=widths,
        lines=len(lines),
    )
    return lines


def ptable(rows, render_config=None, *, column_order=None, max_col_width=None, file=None):
    """Print *rows* as a table. See format_table()."""
    lines = format_table(
        rows, render_config, column_order=column_order, max_col_width=max_col_width
    )
    emit_lines(lines, file=file)
