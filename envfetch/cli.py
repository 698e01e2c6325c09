"""envfetch CLI."""

import typer
from rich.console import Console
from rich.markup import escape

from envfetch import __version__
from envfetch.facts import host_facts
from envfetch.logging_config import intercept_standard_logging, setup_logging
from envfetch.report import render_json, render_lines

app = typer.Typer(
    name="envfetch",
    help="envfetch - print a snapshot of this machine's hardware and software",
    add_completion=False,
)
console = Console()


@app.callback(invoke_without_command=True)
def show(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Machine-readable JSON output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log probe diagnostics"),
):
    """Print the host report (default when no command is given)."""
    if ctx.invoked_subcommand is not None:
        return

    setup_logging("DEBUG" if verbose else None)
    intercept_standard_logging()

    report = host_facts.collect()

    if json_output:
        print(render_json(report))
        return

    for line in render_lines(report):
        label, sep, value = line.partition(": ")
        if sep:
            console.print(f"[bold cyan]{escape(label)}:[/bold cyan] {escape(value)}")
        else:
            console.print(f"[bold]{escape(line)}[/bold]")


@app.command()
def version():
    """Show version information."""
    console.print(f"envfetch v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
