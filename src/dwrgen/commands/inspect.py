"""Inspect command - show descriptors without writing files."""
import typer
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from ..config import load_config
from ..engine.assembler import DescriptorSetAssembler
from ..errors import MalformedMetadataError
from ..metadata.manifest import ManifestMetadataProvider
from .generate import resolve_path, EXIT_METADATA_ERROR


def inspect(
    base: Path = typer.Option(Path("."), "--base", "-b", help="Project root"),
    manifest: Optional[Path] = typer.Option(None, "--manifest", "-m", help="Metadata manifest (JSONL)"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text output"),
) -> None:
    """Show the entities, enums and services a run would generate.

    Example:
        dwrgen inspect
        dwrgen inspect -m target/dwrgen/manifest.jsonl
    """
    console = Console(force_terminal=not plain, no_color=plain)
    config = load_config(base)
    manifest_path = resolve_path(base, manifest or config.manifest)

    try:
        provider = ManifestMetadataProvider(manifest_path)
        if not provider.supports_remoting():
            console.print("[yellow]Backend does not use DWR remoting, nothing to generate.[/yellow]")
            return
        descriptors = DescriptorSetAssembler(provider, config).assemble()
    except MalformedMetadataError as e:
        console.print(f"[red]Error:[/red] invalid metadata: {escape(str(e))}")
        raise typer.Exit(EXIT_METADATA_ERROR)

    entities = Table(title="Entities", box=box.ROUNDED)
    entities.add_column("Entity", style="cyan")
    entities.add_column("Extends")
    entities.add_column("Fields", justify="right")
    for e in descriptors.entities:
        entities.add_row(e.name, e.parent_name or "", str(len(e.fields)))
    console.print(entities)

    enums = Table(title="Enums", box=box.ROUNDED)
    enums.add_column("Enum", style="cyan")
    enums.add_column("Values")
    for e in descriptors.enums:
        enums.add_row(e.name, e.values_union)
    console.print(enums)

    services = Table(title="Services", box=box.ROUNDED)
    services.add_column("Service", style="cyan")
    services.add_column("Method")
    services.add_column("Returns")
    services.add_column("Real-time", style="green")
    for s in descriptors.services:
        for m in s.methods:
            services.add_row(s.name, m.name, escape(m.return_type), m.realtime_element_type or "")
    console.print(services)

    if descriptors.warnings:
        console.print(f"\n[bold yellow]Warnings[/bold yellow] ({len(descriptors.warnings)}):")
        for warning in descriptors.warnings:
            console.print(f"  [dim]-[/dim] {escape(warning)}")
