"""CLI entrypoint: Typer app definition and command registration"""

from pathlib import Path

import typer

from mdsite.cli.commands import build_cmd, render_cmd


app = typer.Typer(name="mdsite", help="Render Chapter*/ markdown directories into standalone HTML pages")

app.command(name="build")(build_cmd)
app.command(name="render")(render_cmd)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """With no command, build the current directory."""
    if ctx.invoked_subcommand is None:
        build_cmd(root=Path("."))
