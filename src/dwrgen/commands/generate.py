"""Generate command for dwrgen."""
import typer
from pathlib import Path
from typing import Optional
from ..config import load_config
from ..errors import MalformedMetadataError, OutputWriteError
from ..generator import generate as run_generation
from ..logging import log_event, ERROR
from ..metadata.manifest import ManifestMetadataProvider

# Exit codes: metadata problems and environment problems are reported apart
EXIT_METADATA_ERROR = 1
EXIT_OUTPUT_ERROR = 2


def resolve_path(base: Path, value: str | Path) -> Path:
    """Resolve a configured path relative to the project root."""
    path = Path(value)
    return path if path.is_absolute() else base / path


def generate(
    base: Path = typer.Option(Path("."), "--base", "-b", help="Project root"),
    manifest: Optional[Path] = typer.Option(None, "--manifest", "-m", help="Metadata manifest (JSONL)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory"),
    skip: bool = typer.Option(False, "--skip", help="Do nothing (same as DWRGEN_SKIP=true)"),
) -> None:
    """Regenerate the TypeScript entities, services and module.

    Reads the manifest produced by the backend scan and rewrites
    entities.ts, services.ts, services-wrapper.ts and generated.module.ts.

    Example:
        dwrgen generate
        dwrgen generate -m target/dwrgen/manifest.jsonl -o web/src/generated
    """
    config = load_config(base)
    if skip:
        config.skip = True

    manifest_path = resolve_path(base, manifest or config.manifest)
    output_dir = resolve_path(base, output or config.output_dir)

    try:
        provider = ManifestMetadataProvider(manifest_path)
        result = run_generation(provider, output_dir, config, log_base=base)
    except MalformedMetadataError as e:
        log_event(ERROR, str(e), base)
        typer.echo(f"Error: invalid metadata: {e}", err=True)
        raise typer.Exit(EXIT_METADATA_ERROR)
    except OutputWriteError as e:
        typer.echo(f"Error: could not write output: {e}", err=True)
        raise typer.Exit(EXIT_OUTPUT_ERROR)

    if result.skipped:
        typer.echo(result.reason)
        return

    d = result.descriptors
    typer.echo(f"Read metadata from {manifest_path}")
    typer.echo("\nGeneration complete:")
    typer.echo(f"  Entities: {len(d.entities)}")
    typer.echo(f"  Enums: {len(d.enums)}")
    typer.echo(f"  Services: {len(d.services)}")
    for path in result.written:
        typer.echo(f"  Wrote {path}")

    if result.warnings:
        typer.echo(f"\n{len(result.warnings)} warnings:")
        for warning in result.warnings:
            typer.echo(f"  - {warning}")
