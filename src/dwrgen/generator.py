"""End-to-end generation: capability check, assemble, render, write."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .engine.assembler import DescriptorSetAssembler
from .engine.types import DescriptorSet
from .errors import OutputWriteError
from .logging import log_event, log_warnings, INFO, ERROR
from .metadata.provider import MetadataProvider
from .models import GeneratorConfig
from .rendering.renderer import render_all
from .storage import write_outputs

NOT_APPLICABLE_NOTICE = "Backend does not use DWR remoting, skipping generation"
SKIPPED_NOTICE = "Skipping, disabled by configuration"


@dataclass
class GenerationResult:
    """Outcome of one generation run."""
    skipped: bool = False
    reason: str = ""
    descriptors: Optional[DescriptorSet] = None
    written: list[Path] = field(default_factory=list)

    @property
    def warnings(self) -> tuple[str, ...]:
        return self.descriptors.warnings if self.descriptors else ()


def generate(
    provider: MetadataProvider,
    output_dir: Path,
    config: Optional[GeneratorConfig] = None,
    log_base: Optional[Path] = None,
) -> GenerationResult:
    """Regenerate all TypeScript outputs from scanned metadata.

    Args:
        provider: Source of scanned backend types.
        output_dir: Directory receiving the four generated files.
        config: Generator configuration. Defaults to GeneratorConfig().
        log_base: Project root for the run log. Defaults to cwd.

    Returns:
        GenerationResult; ``skipped`` is set when the run is not applicable.

    Raises:
        MalformedMetadataError: If metadata is unusable.
        OutputWriteError: If the outputs could not be written.
    """
    config = config or GeneratorConfig()

    if config.skip:
        log_event(INFO, SKIPPED_NOTICE, log_base)
        return GenerationResult(skipped=True, reason=SKIPPED_NOTICE)

    if not provider.supports_remoting():
        log_event(INFO, NOT_APPLICABLE_NOTICE, log_base)
        return GenerationResult(skipped=True, reason=NOT_APPLICABLE_NOTICE)

    descriptors = DescriptorSetAssembler(provider, config).assemble()
    for entity in descriptors.entities:
        log_event(INFO, f"Found entity: {entity.header}", log_base)
    log_warnings(list(descriptors.warnings), log_base)

    files = render_all(descriptors)
    try:
        written = write_outputs(output_dir, files)
    except OutputWriteError as e:
        log_event(ERROR, str(e), log_base)
        raise

    log_event(
        INFO,
        f"Generated {len(descriptors.entities)} entities, {len(descriptors.enums)} enums, "
        f"{len(descriptors.services)} services into {output_dir}",
        log_base,
    )
    return GenerationResult(descriptors=descriptors, written=written)
