"""tagls - list ID3-tagged audio files."""

import typer

from tagls import __version__
from tagls.commands import ls
from tagls.utils.console import setup_logging


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        typer.echo(f"tagls version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="tagls",
    help="List audio files with their ID3 title, artist, album, year, track and genre.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped files and visited directories"),
):
    """tagls - ID3 tag listing toolkit."""
    setup_logging(verbose)


app.command(name="ls")(ls.list_files)


if __name__ == "__main__":
    app()
