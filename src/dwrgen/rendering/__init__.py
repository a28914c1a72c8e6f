"""Rendering module for dwrgen - TypeScript output from descriptors."""
from .renderer import (
    load_template,
    render_entity,
    render_enum,
    render_service,
    render_entities,
    render_services,
    render_services_wrapper,
    render_module,
    render_all,
)

__all__ = [
    "load_template",
    "render_entity",
    "render_enum",
    "render_service",
    "render_entities",
    "render_services",
    "render_services_wrapper",
    "render_module",
    "render_all",
]
