"""Tests for models.py — RenderConfig validation and WrappedCell."""

import pytest

from prettycli.exceptions import ConfigError
from prettycli.models import RenderConfig, WrappedCell


class TestRenderConfig:
    def test_defaults(self):
        cfg = RenderConfig()
        assert cfg.column_order == ()
        assert cfg.max_col_width == 80

    def test_order_normalized_to_tuple(self):
        assert RenderConfig(column_order=["a", "b"]).column_order == ("a", "b")

    @pytest.mark.parametrize("width", [0, -1])
    def test_rejects_non_positive_width(self, width):
        with pytest.raises(ConfigError, match="max_col_width"):
            RenderConfig(max_col_width=width)

    @pytest.mark.parametrize("width", ["20", 2.5, True, None])
    def test_rejects_non_int_width(self, width):
        with pytest.raises(ConfigError):
            RenderConfig(max_col_width=width)

    def test_rejects_string_order(self):
        with pytest.raises(ConfigError):
            RenderConfig(column_order="abc")

    def test_rejects_non_string_column(self):
        with pytest.raises(ConfigError):
            RenderConfig(column_order=("a", 1))

    def test_config_error_exit_code(self):
        with pytest.raises(ConfigError) as exc_info:
            RenderConfig(max_col_width=0)
        assert exc_info.value.exit_code == 2

    def test_frozen(self):
        cfg = RenderConfig()
        with pytest.raises(AttributeError):
            cfg.max_col_width = 10

    def test_from_kwargs_defaults(self):
        assert RenderConfig.from_kwargs() == RenderConfig()

    def test_from_kwargs_values(self):
        cfg = RenderConfig.from_kwargs(["x"], 12)
        assert cfg == RenderConfig(column_order=("x",), max_col_width=12)


class TestRenderConfigFromArgs:
    def test_no_options(self):
        cfg, rest = RenderConfig.from_args(["rows.json"])
        assert cfg == RenderConfig()
        assert rest == ["rows.json"]

    def test_options(self):
        cfg, rest = RenderConfig.from_args(
            ["-column_order", "name, age", "-max_col_width", "20", "rows.json"]
        )
        assert cfg.column_order == ("name", "age")
        assert cfg.max_col_width == 20
        assert rest == ["rows.json"]

    def test_bad_width(self):
        with pytest.raises(ConfigError, match="integer"):
            RenderConfig.from_args(["-max_col_width", "wide"])

    def test_zero_width(self):
        with pytest.raises(ConfigError):
            RenderConfig.from_args(["-max_col_width", "0"])


class TestWrappedCell:
    def test_line_in_range(self):
        cell = WrappedCell(lines=("a", "b"), is_numeric=False)
        assert cell.line(1) == "b"

    def test_line_past_end(self):
        cell = WrappedCell(lines=("a",), is_numeric=True)
        assert cell.line(3) == ""
