"""Generate command for composing Japanese names."""

from pathlib import Path

import typer

from ...config import get_config
from ...core.errors import InvalidGenderError, TableLoadError
from ...core.models.names import GeneratedName, save_names
from ...generator import FALLBACK_STYLE, compose_names, get_style
from ..app import app, console, get_json_mode
from ..utils import Output, ExitCode


@app.command("generate")
def generate_command(
    gender: str | None = typer.Option(
        None,
        "--gender",
        "-g",
        help="Gender of the given name: male or female (required)",
    ),
    style: str | None = typer.Option(
        None,
        "--style",
        "-s",
        help="Name style (see `nazuke styles`); defaults to config defaults.style",
    ),
    count: int | None = typer.Option(
        None,
        "--count",
        "-n",
        help="Number of names to generate (default: config defaults.count)",
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Random seed for reproducible output"
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Save generated names to a .yaml or .json file",
    ),
):
    """
    Generate one or more Japanese names.

    Each name is a family name followed by a given name, with kanji,
    romaji, a pronunciation guide and a style-flavored meaning.

    Examples:
        nazuke generate -g female
        nazuke generate -g male -s strong -n 5
        nazuke generate -g female -s cute --seed 42 -o names.yaml
        nazuke --json generate -g male
    """
    config = get_config()
    out = Output(console=console, json_mode=get_json_mode())

    if not gender:
        out.error(
            "No gender selected.",
            suggestion="Pass --gender male or --gender female",
        )
        raise typer.Exit(out.finish())

    if style is None:
        style = config.defaults.style
    if count is None:
        count = config.defaults.count

    if style and get_style(style) is None:
        out.warning(
            f"Unknown style '{style}', using '{FALLBACK_STYLE}' templates",
            suggestion="Run `nazuke styles` to list available styles",
        )

    try:
        names = compose_names(gender, style, count=count, seed=seed)
    except InvalidGenderError as e:
        out.error(str(e), suggestion="Pass --gender male or --gender female")
        raise typer.Exit(out.finish())
    except TableLoadError as e:
        out.error(
            str(e),
            suggestion="Check data.dir with `nazuke config show`",
            exit_code=ExitCode.FILE_NOT_FOUND,
        )
        raise typer.Exit(out.finish())
    except ValueError as e:
        out.error(str(e))
        raise typer.Exit(out.finish())

    if out.json_mode:
        out.set_data("names", [name.model_dump(mode="json") for name in names])
    else:
        for name in names:
            _print_name(name)

    if output is not None:
        if not output.suffix:
            output = output.with_suffix(f".{config.defaults.output_format}")
        try:
            saved = save_names(names, output)
        except OSError as e:
            out.error(
                f"Failed to write {output}: {e}", exit_code=ExitCode.WRITE_ERROR
            )
            raise typer.Exit(out.finish())
        out.success(f"Saved {len(names)} name(s) to {saved}", output=str(saved))

    raise typer.Exit(out.finish())


def _print_name(name: GeneratedName) -> None:
    """Display one generated name."""
    console.print()
    console.print(f"[bold magenta]{name.kanji}[/bold magenta]")
    console.print(f"  Romaji         {name.romaji}")
    console.print(f"  Pronunciation  {name.pronunciation}")
    console.print(f"  Meaning        {name.meaning}")
    for element in name.elements:
        console.print(f"    [cyan]{element.part}[/cyan]  {element.meaning}")
