import logging

import typer
import typer_di

from . import commands
from .version import version_callback


app = typer_di.TyperDI(help="Parse, build and validate AWS ARNs.")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Logs de debug no stderr.",
    ),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command()(commands.parse)
app.command()(commands.validate)
app.command()(commands.build)
app.command()(commands.substitute)
app.command()(commands.root)
app.command()(commands.services)


if __name__ == "__main__":
    app()
