"""Command-line interface for Recipe Finder."""

from __future__ import annotations

from typing import Optional

import typer

from recipe_finder.server.run import serve as run_server

app = typer.Typer(help="Recipe Finder web application commands.")


@app.callback()
def main_callback() -> None:
    """Recipe search proxy and web UI."""


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", envvar="RECIPE_FINDER_SERVER_HOST"),
    port: int = typer.Option(8000, "--port", envvar="RECIPE_FINDER_SERVER_PORT"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes."),
    duration: Optional[float] = typer.Option(
        None,
        "--duration",
        min=0.001,
        help="Stop the server after this many seconds.",
    ),
) -> None:
    """
    Start the web server.
    """
    if reload and duration is not None:
        raise typer.BadParameter("--reload cannot be combined with --duration")
    typer.echo(f"Serving Recipe Finder on http://{host}:{port}/")
    run_server(host, port, reload=reload, duration=duration)


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
