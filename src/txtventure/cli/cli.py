"""CLI entrypoint: Typer app definition and command registration"""

import typer

from txtventure.cli.commands import generate_cmd, sections_cmd


app = typer.Typer(name="txtventure", no_args_is_help=True, help="Plain-text hypertext adventure generator")

app.command(name="generate")(generate_cmd)
app.command(name="sections")(sections_cmd)
