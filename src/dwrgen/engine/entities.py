"""Entity and enumeration descriptor construction."""
from ..models import ClassMetadata, EnumMetadata
from .fields import FieldResolver
from .types import EntityDescriptor, EnumDescriptor


def build_entity(cls: ClassMetadata, resolver: FieldResolver) -> EntityDescriptor:
    """Build the interface descriptor for an annotated data class."""
    resolved = resolver.resolve(cls)
    return EntityDescriptor(
        name=cls.name,
        parent_name=resolved.parent_name,
        fields=tuple(resolved.fields),
    )


def build_enum(enum: EnumMetadata) -> EnumDescriptor:
    """Build the union descriptor for an enumeration, keeping declaration order."""
    return EnumDescriptor(name=enum.name, values=tuple(enum.constants))
