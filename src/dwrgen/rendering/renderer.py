"""Rendering of descriptor sets into TypeScript source files."""
from importlib import resources

from ..config import ENTITIES_FILE, SERVICES_FILE, SERVICES_WRAPPER_FILE, MODULE_FILE
from ..engine.types import (
    DescriptorSet, EntityDescriptor, EnumDescriptor, ServiceDescriptor,
)


def load_template(name: str) -> str:
    """Read a static TypeScript template shipped with the package."""
    return resources.files(__package__).joinpath("templates", name).read_text(encoding="utf-8")


def render_entity(entity: EntityDescriptor) -> str:
    lines = [f"export interface {entity.header} {{"]
    if entity.fields:
        lines.append(f"    {entity.fields_block}")
    lines.append("}")
    return "\n".join(lines)


def render_enum(enum: EnumDescriptor) -> str:
    return "\n".join([
        f"export type {enum.name} = {enum.values_union};",
        f"export const {enum.name}Values: {enum.name}[] = {enum.values_array};",
    ])


def render_service(service: ServiceDescriptor) -> str:
    return "\n".join([
        "@Injectable()",
        f"export class {service.name} {{",
        "",
        "    constructor(@Inject(BROKER_CONFIGURATION) private brokerConfiguration: BrokerConfiguration) {",
        f"        registerMethodTypes('{service.instance_name}', {service.return_types_block});",
        "    }",
        "",
        service.methods_block + "}",
    ])


def render_entities(descriptors: DescriptorSet) -> str:
    """Render entities.ts: support types followed by every interface and enum."""
    blocks = [render_entity(e) for e in descriptors.entities]
    blocks.extend(render_enum(e) for e in descriptors.enums)
    return load_template("models.template.ts") + "".join(b + "\n\n" for b in blocks)


def render_services(descriptors: DescriptorSet) -> str:
    """Render services.ts with one injectable client per remote service."""
    header = load_template("services.template.ts")
    imports = ", ".join(descriptors.import_names)
    parts = [header, f"import {{ {imports} }} from './entities';\n\n"]
    parts.extend(render_service(s) + "\n\n" for s in descriptors.services)
    return "".join(parts)


def render_services_wrapper() -> str:
    """services-wrapper.ts is copied verbatim."""
    return load_template(SERVICES_WRAPPER_FILE)


def render_module(descriptors: DescriptorSet) -> str:
    """Render generated.module.ts registering every service as a provider."""
    names = ", ".join(descriptors.service_names)
    lines = [load_template("generated.module.template.ts").rstrip("\n")]
    if names:
        lines.append(f"import {{ {names} }} from './services';")
    lines.extend([
        "",
        "@NgModule({",
        f"    providers: [{names}]",
        "})",
        "export class GeneratedModule {}",
        "",
    ])
    return "\n".join(lines)


def render_all(descriptors: DescriptorSet) -> dict[str, str]:
    """Render all four output units keyed by file name."""
    return {
        ENTITIES_FILE: render_entities(descriptors),
        SERVICES_FILE: render_services(descriptors),
        SERVICES_WRAPPER_FILE: render_services_wrapper(),
        MODULE_FILE: render_module(descriptors),
    }
