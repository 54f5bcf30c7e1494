"""CLI entrypoint: Typer app definition and command registration"""

import typer

from jiradoc.cli.commands import decode_cmd, encode_cmd, preview_cmd


app = typer.Typer(name="jiradoc", no_args_is_help=True, help="Convert between plain text and the tracker's rich-text document format")

app.command(name="encode")(encode_cmd)
app.command(name="decode")(decode_cmd)
app.command(name="preview")(preview_cmd)
