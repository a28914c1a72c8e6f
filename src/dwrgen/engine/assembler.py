"""Assembly of the descriptor set for one generation run."""
from typing import Optional

from ..config import SUPPORT_IMPORTS
from ..models import EnumMetadata, GeneratorConfig
from ..metadata.provider import MetadataProvider
from .entities import build_entity, build_enum
from .fields import FieldResolver
from .services import ServiceBuilder
from .types import DescriptorSet, EntityDescriptor, EnumDescriptor


class DescriptorSetAssembler:
    """Turn scanned metadata into the descriptors the renderer consumes."""

    def __init__(self, provider: MetadataProvider, config: Optional[GeneratorConfig] = None):
        self.provider = provider
        self.config = config or GeneratorConfig()
        self.resolver = FieldResolver(provider.find_class)
        self.service_builder = ServiceBuilder(self.config.page_wrapper_types)

    def build_descriptor(self, scanned) -> EntityDescriptor | EnumDescriptor:
        """Route a transfer type to enum or entity construction."""
        if isinstance(scanned, EnumMetadata):
            return build_enum(scanned)
        return build_entity(scanned, self.resolver)

    def import_names(self, entities, enums) -> tuple[str, ...]:
        names = set(self.config.support_imports or SUPPORT_IMPORTS)
        names.update(e.name for e in entities)
        names.update(e.name for e in enums)
        return tuple(sorted(names))

    def collect_warnings(self) -> tuple[str, ...]:
        warnings = list(getattr(self.provider, "warnings", []))
        warnings.extend(self.resolver.warnings)
        warnings.extend(self.service_builder.warnings)
        return tuple(dict.fromkeys(warnings))

    def assemble(self) -> DescriptorSet:
        """Build every descriptor. Each type is handled independently."""
        entities: list[EntityDescriptor] = []
        enums: list[EnumDescriptor] = []
        for scanned in [*self.provider.entity_types(), *self.provider.enum_types()]:
            descriptor = self.build_descriptor(scanned)
            if isinstance(descriptor, EnumDescriptor):
                enums.append(descriptor)
            else:
                entities.append(descriptor)

        services = [self.service_builder.build(s) for s in self.provider.service_types()]

        return DescriptorSet(
            entities=tuple(entities),
            enums=tuple(enums),
            services=tuple(services),
            import_names=self.import_names(entities, enums),
            warnings=self.collect_warnings(),
        )


def assemble(provider: MetadataProvider, config: Optional[GeneratorConfig] = None) -> DescriptorSet:
    """Convenience wrapper around :class:`DescriptorSetAssembler`."""
    return DescriptorSetAssembler(provider, config).assemble()
