"""Descriptor types produced by the engine.

Descriptors are immutable and already carry translated target types, so
the renderer never needs to look at the source metadata again.
"""
from dataclasses import dataclass, field
from typing import Optional


FIELD_SEPARATOR = ",\n    "

METHOD_STUB = (
    "    public {name}({parameters}): Observable<{returns}> {{\n"
    "        return dwrWrapper(this.brokerConfiguration, '{instance}', '{name}'{arguments})"
    " as Observable<{returns}>;\n"
    "    }}\n"
)


@dataclass(frozen=True)
class FieldDescriptor:
    """A single optional property of a generated interface."""
    name: str
    translated_type: str

    def render(self) -> str:
        return f"{self.name}?: {self.translated_type}"


@dataclass(frozen=True)
class EntityDescriptor:
    """A generated interface for one data class."""
    name: str
    parent_name: Optional[str] = None
    fields: tuple[FieldDescriptor, ...] = ()

    @property
    def header(self) -> str:
        if self.parent_name:
            return f"{self.name} extends {self.parent_name}"
        return self.name

    @property
    def fields_block(self) -> str:
        return FIELD_SEPARATOR.join(f.render() for f in self.fields)

    def placeholders(self) -> dict[str, str]:
        return {"ENTITY": self.header, "FIELDS": self.fields_block}


@dataclass(frozen=True)
class EnumDescriptor:
    """A generated string-literal union for one enumeration."""
    name: str
    values: tuple[str, ...]

    @property
    def quoted_values(self) -> list[str]:
        return [f"'{v}'" for v in self.values]

    @property
    def values_union(self) -> str:
        return " | ".join(self.quoted_values)

    @property
    def values_array(self) -> str:
        return "[" + ", ".join(self.quoted_values) + "]"

    def placeholders(self) -> dict[str, str]:
        return {"ENUM": self.name, "VALUES": self.values_union, "ARRAY": self.values_array}


@dataclass(frozen=True)
class ServiceParameter:
    name: str
    translated_type: str


@dataclass(frozen=True)
class ServiceMethodDescriptor:
    """One proxied service method."""
    name: str
    parameters: tuple[ServiceParameter, ...] = ()
    return_type: str = "void"
    is_realtime_observable: bool = False
    realtime_element_type: Optional[str] = None

    def render_stub(self, instance_name: str) -> str:
        """Render the client stub that forwards to ``dwrWrapper``."""
        parameters = ", ".join(f"{p.name}?: {p.translated_type}" for p in self.parameters)
        arguments = "".join(f", {p.name}" for p in self.parameters)
        return METHOD_STUB.format(
            name=self.name,
            parameters=parameters,
            returns=self.return_type,
            instance=instance_name,
            arguments=arguments,
        )


@dataclass(frozen=True)
class ServiceDescriptor:
    """A generated client class for one remote service."""
    name: str
    instance_name: str
    methods: tuple[ServiceMethodDescriptor, ...] = ()

    @property
    def realtime_methods(self) -> list[ServiceMethodDescriptor]:
        return [m for m in self.methods if m.is_realtime_observable]

    @property
    def methods_block(self) -> str:
        return "".join(m.render_stub(self.instance_name) + "\n" for m in self.methods)

    @property
    def return_types_block(self) -> str:
        entries = "".join(
            f"{m.name}: '{m.realtime_element_type}',\n    " for m in self.realtime_methods
        )
        return "{" + entries + "}"

    def placeholders(self) -> dict[str, str]:
        return {
            "CLASS": self.name,
            "INSTANCE": self.instance_name,
            "METHODS": self.methods_block,
            "RETURN_TYPES": self.return_types_block,
        }


@dataclass(frozen=True)
class DescriptorSet:
    """Everything one run renders. Built once, then only read."""
    entities: tuple[EntityDescriptor, ...] = ()
    enums: tuple[EnumDescriptor, ...] = ()
    services: tuple[ServiceDescriptor, ...] = ()
    import_names: tuple[str, ...] = ()
    warnings: tuple[str, ...] = field(default=(), compare=False)

    @property
    def service_names(self) -> list[str]:
        return [s.name for s in self.services]
