from typing import Optional

import typer
from rich.console import Console

from src.core.notation import NotationConfig
from src.shell.config import OutputFormat, ShellConfig
from src.shell.log_config import configure_logging
from src.shell.repl import MatrixShell

__version__ = "0.1.0"

app = typer.Typer(help="Gaussian elimination to row-echelon form")


def _build_config(
    json_output: bool,
    precision: Optional[int],
    sentinel: str,
    show_banner: bool,
    log_level: str,
) -> ShellConfig:
    try:
        return ShellConfig(
            notation=NotationConfig(terminator=sentinel),
            output_format=OutputFormat.JSON if json_output else OutputFormat.TEXT,
            precision=precision,
            show_banner=show_banner,
            log_level=log_level,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command()
def version():
    typer.echo(f"v{__version__}")


@app.command()
def repl(
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
    precision: Optional[int] = typer.Option(None, help="Round cells to N decimals"),
    sentinel: str = typer.Option(";", help="Character that ends an input block"),
    banner: bool = typer.Option(True, "--banner/--no-banner"),
    log_level: str = typer.Option("WARNING", help="loguru level for stderr"),
):
    """
    Read matrices from stdin, one per sentinel-terminated block, until EOF.
    """
    config = _build_config(json_output, precision, sentinel, banner, log_level)
    configure_logging(config.log_level)

    MatrixShell(config, Console(highlight=False)).run(typer.get_text_stream("stdin"))


@app.command()
def solve(
    text: str = typer.Argument(..., help="Matrix text, or '-' to read stdin"),
    json_output: bool = typer.Option(False, "--json", help="Print result as JSON"),
    precision: Optional[int] = typer.Option(None, help="Round cells to N decimals"),
    log_level: str = typer.Option("WARNING", help="loguru level for stderr"),
):
    """
    Reduce a single matrix and exit (status 1 if the input is rejected).
    """
    config = _build_config(json_output, precision, ";", False, log_level)
    configure_logging(config.log_level)

    if text == "-":
        text = typer.get_text_stream("stdin").read()

    shell = MatrixShell(config, Console(highlight=False))
    if not shell.submit(text):
        raise typer.Exit(code=1)


def main():
    app()


if __name__ == "__main__":
    main()
