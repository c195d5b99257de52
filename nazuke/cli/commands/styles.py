"""Styles command for listing the available name styles."""

import typer

from ...generator import NAME_STYLES, FALLBACK_STYLE
from ..app import app, console, get_json_mode
from ..utils import Output


@app.command("styles")
def styles_command():
    """List the name styles accepted by `nazuke generate --style`."""
    out = Output(console=console, json_mode=get_json_mode())

    rows = [[style.id, style.label, style.description] for style in NAME_STYLES]
    out.table(
        "Styles",
        ["ID", "Label", "Description"],
        rows,
        styles=["cyan", "bold", None],
    )
    out.text(f"[dim]Unknown or empty styles use '{FALLBACK_STYLE}'.[/dim]")
    out.set_data("fallback", FALLBACK_STYLE)

    raise typer.Exit(out.finish())
