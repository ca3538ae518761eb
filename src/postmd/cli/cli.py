"""CLI entrypoint: Typer app definition and command registration"""

import typer

from postmd.cli.commands import convert_cmd, main_callback, render_cmd


app = typer.Typer(name="postmd", no_args_is_help=True, help="Convert JSON blog posts with HTML bodies to Markdown")

app.callback()(main_callback)
app.command(name="convert")(convert_cmd)
app.command(name="render")(render_cmd)
