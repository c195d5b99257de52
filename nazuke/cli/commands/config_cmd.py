"""Config command for viewing and managing nazuke configuration."""

import typer

from ..app import app, console
from ...config import (
    get_config,
    reset_config,
    CONFIG_FILE,
    OUTPUT_FORMATS,
)
from ...generator import get_style, reset_tables


VALID_KEYS = {
    "defaults.style",
    "defaults.count",
    "defaults.output_format",
    "data.dir",
}

INT_FIELDS = {"count"}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. defaults.style, data.dir)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify nazuke configuration.

    Examples:
        nazuke config show
        nazuke config set defaults.style elegant
        nazuke config set defaults.count 5
        nazuke config set data.dir ~/my-name-tables
        nazuke config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] nazuke config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]nazuke Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Defaults[/bold cyan]")
    style_val = config.defaults.style or "[dim](fallback)[/dim]"
    console.print(f"  style         = {style_val}")
    console.print(f"  count         = {config.defaults.count}")
    console.print(f"  output_format = {config.defaults.output_format}")

    console.print()
    console.print("[bold cyan]Data[/bold cyan]")
    dir_val = config.data.dir or "[dim](bundled tables)[/dim]"
    console.print(f"  dir           = {dir_val}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()
    section, field_name = key.split(".", 1)
    target = config.defaults if section == "defaults" else config.data

    if field_name in INT_FIELDS:
        try:
            int_value = int(value)
        except ValueError:
            console.print(f"[red]Invalid integer value:[/red] {value}")
            raise typer.Exit(1)
        if int_value < 1:
            console.print(f"[red]Value must be at least 1:[/red] {value}")
            raise typer.Exit(1)
        setattr(target, field_name, int_value)
    elif field_name == "output_format":
        if value.lower() not in OUTPUT_FORMATS:
            console.print(f"[red]Invalid output format:[/red] {value}")
            console.print(f"Valid formats: {', '.join(OUTPUT_FORMATS)}")
            raise typer.Exit(1)
        setattr(target, field_name, value.lower())
    elif field_name == "style":
        if value and get_style(value) is None:
            console.print(f"[red]Unknown style:[/red] {value}")
            console.print("Run `nazuke styles` to list available styles")
            raise typer.Exit(1)
        setattr(target, field_name, value.strip().lower())
    else:
        setattr(target, field_name, value)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads
    if section == "data":
        reset_tables()

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        reset_tables()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
