"""Configuration management commands for dwrgen."""
import typer
from pathlib import Path
from ..config import get_config_path, load_config
from ..storage import write_json, read_json
from ..models import GeneratorConfig
from pydantic import ValidationError

app = typer.Typer()


@app.command("show")
def config_show(
    base: Path = typer.Option(Path("."), "--base", "-b", help="Project root"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text output"),
) -> None:
    """Show the effective configuration.

    Displays all configuration values and marks which are defaults vs custom.
    Environment overrides (DWRGEN_SKIP, DWRGEN_OUTPUT_DIR) are included.

    Example:
        dwrgen config show
    """
    from rich.console import Console
    from rich.table import Table
    from rich import box

    console = Console(force_terminal=not plain, no_color=plain)
    config_file = get_config_path(base)
    config = load_config(base)
    defaults = GeneratorConfig()

    if config_file.exists():
        console.print(f"[dim]Config file: {config_file}[/dim]")
    else:
        console.print("[dim]No dwrgen.json found, using defaults[/dim]")
    console.print()

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Status", justify="center")

    for name in ("output_dir", "manifest", "skip", "command_logging"):
        value = getattr(config, name)
        status = "[dim]default[/dim]" if value == getattr(defaults, name) else "[green]custom[/green]"
        table.add_row(name, str(value), status)

    console.print(table)

    console.print()
    console.print(f"[bold]Page wrapper types[/bold] ({len(config.page_wrapper_types)}):")
    for name in config.page_wrapper_types:
        console.print(f"  [dim]-[/dim] {name}")
    console.print(f"[bold]Support imports[/bold]: {', '.join(config.support_imports)}")


@app.command("reset")
def config_reset(
    base: Path = typer.Option(Path("."), "--base", "-b", help="Project root"),
) -> None:
    """Reset configuration to defaults.

    This regenerates dwrgen.json with the latest default values.
    """
    config = GeneratorConfig()
    write_json(get_config_path(base), config.model_dump())

    typer.echo("Configuration reset to defaults.")
    typer.echo(f"  Output directory: {config.output_dir}")
    typer.echo(f"  Manifest: {config.manifest}")


@app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Config key to set"),
    value: str = typer.Argument(..., help="Value to set"),
    base: Path = typer.Option(Path("."), "--base", "-b", help="Project root"),
) -> None:
    """Set a configuration value.

    Examples:
        dwrgen config set output_dir web/src/generated
        dwrgen config set skip true
    """
    if key not in GeneratorConfig.model_fields:
        typer.echo(f"Error: '{key}' is not a config key.", err=True)
        raise typer.Exit(1)

    list_keys = {"page_wrapper_types", "support_imports"}
    parsed = [v.strip() for v in value.split(",") if v.strip()] if key in list_keys else value

    config_file = get_config_path(base)
    stored = read_json(config_file) if config_file.exists() else {}
    try:
        # pydantic coerces "true"/"false" and rejects values of the wrong shape
        config = GeneratorConfig.model_validate({**stored, key: parsed})
    except ValidationError as e:
        typer.echo(f"Error: invalid value for {key}: {e.errors()[0]['msg']}", err=True)
        raise typer.Exit(1)

    write_json(config_file, config.model_dump())
    typer.echo(f"Set {key} = {getattr(config, key)}")
