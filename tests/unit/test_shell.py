"""
Тесты для Shell (reader / ShellConfig / MatrixShell / CLI)

Проверяет:
1. Чтение блоков до sentinel и обработку EOF
2. Валидацию ShellConfig
3. Вывод результата и ошибок; продолжение цикла после ошибки
4. Коды возврата CLI
"""

import io
import json

import pytest
from rich.console import Console
from typer.testing import CliRunner

from src.core.notation import NotationConfig
from src.shell import MatrixShell, OutputFormat, ShellConfig, iter_blocks, read_block
from src.shell.cli import app

EXAMPLE = "1 0 4 2,\n1 2 6 2,\n2 0 8 8,\n2 1 9 4;"


def make_shell(**config_kwargs):
    console = Console(file=io.StringIO(), highlight=False, color_system=None, width=200)
    return MatrixShell(ShellConfig(**config_kwargs), console)


def output_of(shell):
    return shell.console.file.getvalue()


# =============================================================================
# ТЕСТЫ: reader
# =============================================================================


class TestReader:
    """Тесты read_block / iter_blocks."""

    def test_reads_until_sentinel(self):
        stream = io.StringIO("1 2,\n3 4;rest")
        assert read_block(stream) == "1 2,\n3 4"
        assert stream.read() == "rest"

    def test_multiple_blocks(self):
        stream = io.StringIO("1;\n2 3;\n")
        assert list(iter_blocks(stream)) == ["1", "\n2 3"]

    def test_eof_remainder_is_last_block(self):
        assert list(iter_blocks(io.StringIO("1;2 3"))) == ["1", "2 3"]

    def test_blank_remainder_ignored(self):
        stream = io.StringIO("1;\n  \n")
        assert read_block(stream) == "1"
        assert read_block(stream) is None

    def test_empty_stream(self):
        assert read_block(io.StringIO("")) is None

    def test_empty_block_between_sentinels(self):
        assert list(iter_blocks(io.StringIO("1;;2;"))) == ["1", "", "2"]

    def test_custom_sentinel(self):
        assert list(iter_blocks(io.StringIO("1 2#3#"), sentinel="#")) == ["1 2", "3"]


# =============================================================================
# ТЕСТЫ: ShellConfig
# =============================================================================


class TestShellConfig:
    """Тесты ShellConfig."""

    def test_defaults(self):
        config = ShellConfig()
        assert config.sentinel == ";"
        assert config.output_format == OutputFormat.TEXT
        assert config.precision is None
        assert config.show_banner is True
        assert config.log_level == "WARNING"

    def test_empty_terminator_rejected(self):
        with pytest.raises(ValueError, match="non-empty terminator"):
            ShellConfig(notation=NotationConfig(terminator=""))

    def test_negative_precision_rejected(self):
        with pytest.raises(ValueError, match="precision must be non-negative"):
            ShellConfig(precision=-2)

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="log_level"):
            ShellConfig(log_level="LOUD")

    def test_log_level_case_insensitive(self):
        assert ShellConfig(log_level="debug").log_level == "debug"


# =============================================================================
# ТЕСТЫ: MatrixShell
# =============================================================================


class TestMatrixShell:
    """Тесты MatrixShell."""

    def test_submit_success(self):
        shell = make_shell()
        assert shell.submit("2 1,\n1 3") is True
        assert "Result is:\n1.0 3.0,\n0.0 -5.0;" in output_of(shell)

    def test_submit_parse_error(self):
        shell = make_shell()
        assert shell.submit("1 a,\n2 3") is False
        out = output_of(shell)
        assert "Attempt eliminated with reason:" in out
        assert "'a' of cell at row 0, column 1" in out
        assert "Result is:" not in out

    def test_submit_ragged_error(self):
        shell = make_shell()
        assert shell.submit("1 2,\n3") is False
        assert "row 1" in output_of(shell)

    def test_submit_json(self):
        shell = make_shell(output_format=OutputFormat.JSON)
        shell.submit("1 0,\n0 1")
        out = output_of(shell)
        payload = out[out.index("{"): out.rindex("}") + 1]
        assert json.loads(payload)["dimensions"] == {"width": 2, "height": 2}

    def test_unexpected_error_reraised(self, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("src.shell.repl.run_pipeline", boom)
        with pytest.raises(RuntimeError, match="boom"):
            make_shell().submit("1")

    def test_run_continues_after_error(self):
        shell = make_shell()
        processed = shell.run(io.StringIO("1 a;\n" + EXAMPLE + "\n1 2,\n3;"))
        assert processed == 1
        out = output_of(shell)
        assert out.count("Attempt eliminated with reason:") == 2
        assert out.count("Result is:") == 1

    def test_run_banner(self):
        shell = make_shell()
        shell.run(io.StringIO(""))
        out = output_of(shell)
        assert "Hi, user!" in out
        assert EXAMPLE in out

    def test_run_without_banner(self):
        shell = make_shell(show_banner=False)
        assert shell.run(io.StringIO("")) == 0
        assert output_of(shell) == ""

    def test_long_rows_not_wrapped(self):
        shell = make_shell(show_banner=False)
        shell.console.width = 20
        shell.submit(" ".join(["1"] * 30))
        assert " ".join(["1.0"] * 30) + ";" in output_of(shell)


# =============================================================================
# ТЕСТЫ: CLI
# =============================================================================


runner = CliRunner()


class TestCli:
    """Тесты typer CLI."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "v0.1.0" in result.output

    def test_solve_success(self):
        result = runner.invoke(app, ["solve", "2 1,\n1 3;"])
        assert result.exit_code == 0
        assert "1.0 3.0,\n0.0 -5.0;" in result.output

    def test_solve_rejected_input(self):
        result = runner.invoke(app, ["solve", "1 2,\n3;"])
        assert result.exit_code == 1
        assert "Attempt eliminated with reason:" in result.output

    def test_solve_from_stdin(self):
        result = runner.invoke(app, ["solve", "-"], input="1 0,\n0 1;")
        assert result.exit_code == 0
        assert "1.0 0.0,\n0.0 1.0;" in result.output

    def test_solve_precision(self):
        result = runner.invoke(app, ["solve", "3 1 1,\n1 1 0;", "--precision", "3"])
        assert result.exit_code == 0
        assert "1.0 1.0 0.0,\n0.0 -2.0 1.0;" in result.output

    def test_solve_invalid_precision(self):
        result = runner.invoke(app, ["solve", "1;", "--precision", "-1"])
        assert result.exit_code != 0

    def test_repl_reads_stdin(self):
        result = runner.invoke(app, ["repl", "--no-banner"], input="1 0,\n0 1;\n1 x;\n")
        assert result.exit_code == 0
        assert result.output.count("Result is:") == 1
        assert "'x' of cell at row 0, column 1" in result.output

    def test_repl_json(self):
        result = runner.invoke(app, ["repl", "--no-banner", "--json"], input="5;")
        assert result.exit_code == 0
        assert '"non_finite_cells": 0' in result.output

    def test_repl_custom_sentinel(self):
        result = runner.invoke(app, ["repl", "--no-banner", "--sentinel", "#"], input="1 2#")
        assert result.exit_code == 0
        assert "1.0 2.0#" in result.output

    @pytest.mark.parametrize("sentinel", [".", "-", "e", "5"])
    def test_repl_numeric_sentinel_rejected(self, sentinel):
        result = runner.invoke(app, ["repl", "--no-banner", "--sentinel", sentinel], input="1 2;")
        assert result.exit_code != 0
