"""CLI entrypoint: Typer app definition and command registration"""

import typer

from richmd.cli.commands import blocks_cmd, normalize_cmd, render_cmd, strip_cmd


app = typer.Typer(name="richmd", no_args_is_help=True, help="HTML / pseudo-Markdown to document renderer")

app.command(name="render")(render_cmd)
app.command(name="normalize")(normalize_cmd)
app.command(name="strip")(strip_cmd)
app.command(name="blocks")(blocks_cmd)
