"""Pydantic models for dwrgen manifest records."""

from pydantic import BaseModel, Field, field_validator
from typing import Annotated, Literal, Optional, Union

from .config import (
    DEFAULT_MANIFEST,
    DEFAULT_OUTPUT_DIR,
    PAGE_WRAPPER_TYPES,
    SUPPORT_IMPORTS,
)


# === Type Expressions ===

class _TypeBase(BaseModel):
    """Common behaviour of every type expression."""

    @property
    def simple_name(self) -> str:
        return getattr(self, "name", self.kind)

    @property
    def qualified_name(self) -> str:
        return getattr(self, "canonical_name", None) or self.simple_name

    @property
    def is_concrete(self) -> bool:
        """Whether the expression denotes a plain class usable as a type argument."""
        return True


class PrimitiveType(_TypeBase):
    """A primitive such as ``int`` or ``boolean``."""

    kind: Literal["primitive"] = "primitive"
    name: Literal["byte", "short", "int", "long", "float", "double", "char", "boolean"]


class BoxedNumericType(_TypeBase):
    """Any ``java.lang.Number`` subtype (Integer, Long, BigDecimal, ...)."""

    kind: Literal["boxed_numeric"] = "boxed_numeric"
    name: str
    canonical_name: Optional[str] = None


class TemporalType(_TypeBase):
    """Calendar and java.time types."""

    kind: Literal["temporal"] = "temporal"
    name: str
    canonical_name: Optional[str] = None
    zoned: bool = False  # OffsetDateTime travels as an ISO string


class TextType(_TypeBase):
    kind: Literal["text"] = "text"
    name: str = "String"
    canonical_name: Optional[str] = "java.lang.String"


class BooleanType(_TypeBase):
    kind: Literal["boolean"] = "boolean"
    name: str = "Boolean"
    canonical_name: Optional[str] = "java.lang.Boolean"


class GeometryType(_TypeBase):
    """JTS geometry types, serialized as WKT."""

    kind: Literal["geometry"] = "geometry"
    name: str = "Geometry"
    canonical_name: Optional[str] = None


class FileType(_TypeBase):
    """The remoting layer's file handle."""

    kind: Literal["file"] = "file"
    name: str = "FileTransfer"
    canonical_name: Optional[str] = "org.directwebremoting.io.FileTransfer"


class EnumRef(_TypeBase):
    kind: Literal["enum"] = "enum"
    name: str
    canonical_name: Optional[str] = None


class EntityRef(_TypeBase):
    kind: Literal["entity"] = "entity"
    name: str
    canonical_name: Optional[str] = None


class VoidType(_TypeBase):
    kind: Literal["void"] = "void"
    name: str = "void"


class CollectionType(_TypeBase):
    """A ``java.util.Collection``; ``args`` is empty for the raw type."""

    kind: Literal["collection"] = "collection"
    name: str = "List"
    canonical_name: Optional[str] = "java.util.List"
    args: list["TypeExpression"] = Field(default_factory=list)

    @property
    def is_concrete(self) -> bool:
        return not self.args


class MapType(_TypeBase):
    """A ``java.util.Map``; key and value types are never translated."""

    kind: Literal["map"] = "map"
    name: str = "Map"
    canonical_name: Optional[str] = "java.util.Map"
    args: list["TypeExpression"] = Field(default_factory=list)

    @property
    def is_concrete(self) -> bool:
        return not self.args


class GenericType(_TypeBase):
    """Any other parameterized type, e.g. ``Page<Person>``."""

    kind: Literal["generic"] = "generic"
    name: str
    canonical_name: Optional[str] = None
    args: list["TypeExpression"] = Field(default_factory=list)

    @property
    def is_concrete(self) -> bool:
        return not self.args


class ArrayType(_TypeBase):
    kind: Literal["array"] = "array"
    element: "TypeExpression"

    @property
    def simple_name(self) -> str:
        return self.element.simple_name + "[]"

    @property
    def qualified_name(self) -> str:
        return self.element.qualified_name + "[]"


class WildcardType(_TypeBase):
    """``?`` or ``? extends Bound``."""

    kind: Literal["wildcard"] = "wildcard"
    bound: Optional["TypeExpression"] = None

    @property
    def simple_name(self) -> str:
        if self.bound is None:
            return "?"
        return f"? extends {self.bound.simple_name}"

    @property
    def is_concrete(self) -> bool:
        return False


class TypeVariable(_TypeBase):
    kind: Literal["type_variable"] = "type_variable"
    name: str

    @property
    def is_concrete(self) -> bool:
        return False


TypeExpression = Annotated[
    Union[
        PrimitiveType, BoxedNumericType, TemporalType, TextType, BooleanType,
        GeometryType, FileType, EnumRef, EntityRef, VoidType, CollectionType,
        MapType, GenericType, ArrayType, WildcardType, TypeVariable,
    ],
    Field(discriminator="kind"),
]

for _model in (CollectionType, MapType, GenericType, ArrayType, WildcardType):
    _model.model_rebuild()


# === Manifest Records ===

class FieldMetadata(BaseModel):
    """A field declared directly on a class."""

    name: str
    type: TypeExpression
    modifiers: list[str] = Field(default_factory=list)

    @property
    def is_constant(self) -> bool:
        return "final" in self.modifiers


class AnnotationParam(BaseModel):
    """A ``@Param(name=..., value=...)`` entry of the transfer annotation."""

    name: str
    value: str


class ClassMetadata(BaseModel):
    """A data class, annotated or not (ancestors are listed too)."""

    type: Literal["class"] = "class"
    name: str
    canonical_name: Optional[str] = None
    superclass: Optional[str] = None  # qualified name, None for the root
    annotated: bool = True
    params: list[AnnotationParam] = Field(default_factory=list)
    fields: list[FieldMetadata] = Field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        return self.canonical_name or self.name

    @property
    def exclusion_names(self) -> frozenset[str]:
        return frozenset(p.value for p in self.params if p.name == "exclude")


class EnumMetadata(BaseModel):
    """An annotated enumeration."""

    type: Literal["enum"] = "enum"
    name: str
    canonical_name: Optional[str] = None
    constants: list[str]

    @field_validator("constants")
    @classmethod
    def _require_constants(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("an enumeration needs at least one constant")
        return value

    @property
    def qualified_name(self) -> str:
        return self.canonical_name or self.name


class TransactionalMarker(BaseModel):
    """``@Transactional`` as seen on a service method."""

    read_only: bool = False


class ParameterMetadata(BaseModel):
    name: str
    type: TypeExpression


class MethodMetadata(BaseModel):
    """A public method of a remote service."""

    name: str
    declaring_class: Optional[str] = None  # None means declared on the service itself
    parameters: list[ParameterMetadata] = Field(default_factory=list)
    return_type: TypeExpression = Field(default_factory=VoidType)
    transactional: Optional[TransactionalMarker] = None

    @property
    def is_read_only(self) -> bool:
        return self.transactional is not None and self.transactional.read_only


class ServiceMetadata(BaseModel):
    """A ``@RemoteProxy`` service interface."""

    type: Literal["service"] = "service"
    name: str
    canonical_name: Optional[str] = None
    methods: list[MethodMetadata] = Field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        return self.canonical_name or self.name


class CapabilitiesRecord(BaseModel):
    """Header record stating whether the backend uses the remoting framework."""

    type: Literal["capabilities"] = "capabilities"
    framework: str = "dwr"
    available: bool = True


ManifestRecord = Annotated[
    Union[CapabilitiesRecord, ClassMetadata, EnumMetadata, ServiceMetadata],
    Field(discriminator="type"),
]


# === Config ===

class GeneratorConfig(BaseModel):
    """Configuration for dwrgen."""

    version: str = "0.1.0"
    output_dir: str = DEFAULT_OUTPUT_DIR
    manifest: str = DEFAULT_MANIFEST
    skip: bool = False
    command_logging: bool = True  # Log runs to .dwrgen-logs/
    page_wrapper_types: list[str] = Field(default_factory=lambda: list(PAGE_WRAPPER_TYPES))
    support_imports: list[str] = Field(default_factory=lambda: list(SUPPORT_IMPORTS))
