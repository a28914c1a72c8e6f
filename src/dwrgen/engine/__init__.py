"""Descriptor engine - translates scanned metadata into render-ready descriptors."""
from .types import (
    FieldDescriptor,
    EntityDescriptor,
    EnumDescriptor,
    ServiceParameter,
    ServiceMethodDescriptor,
    ServiceDescriptor,
    DescriptorSet,
)
from .translator import translate, find_degradations
from .fields import FieldResolver, ResolvedFields
from .entities import build_entity, build_enum
from .services import ServiceBuilder, decapitalize
from .assembler import DescriptorSetAssembler, assemble

__all__ = [
    "FieldDescriptor",
    "EntityDescriptor",
    "EnumDescriptor",
    "ServiceParameter",
    "ServiceMethodDescriptor",
    "ServiceDescriptor",
    "DescriptorSet",
    "translate",
    "find_degradations",
    "FieldResolver",
    "ResolvedFields",
    "build_entity",
    "build_enum",
    "ServiceBuilder",
    "decapitalize",
    "DescriptorSetAssembler",
    "assemble",
]
