"""Remote service descriptor construction.

Only methods marked ``@Transactional(readOnly = true)`` may be observed in
real time: the client re-invokes them whenever an entity of the returned
type changes, which is only safe for idempotent reads. Map results are
never observable since they carry no single entity type.
"""
from typing import Optional

from ..config import PAGE_WRAPPER_TYPES
from ..models import (
    ServiceMetadata, MethodMetadata, CollectionType, MapType, GenericType,
    TypeVariable, WildcardType,
)
from .translator import translate, find_degradations, first_concrete_arg
from .types import ServiceDescriptor, ServiceMethodDescriptor, ServiceParameter


def decapitalize(name: str) -> str:
    """Lower-case the first letter, keeping acronyms such as ``URLService`` intact."""
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


class ServiceBuilder:
    """Build service descriptors, collecting translation warnings."""

    def __init__(self, page_wrapper_types: Optional[list[str]] = None):
        self.page_wrapper_types = frozenset(
            page_wrapper_types if page_wrapper_types is not None else PAGE_WRAPPER_TYPES
        )
        # Records without a canonical name can only be matched on the simple name
        self.page_wrapper_names = frozenset(t.rsplit(".", 1)[-1] for t in self.page_wrapper_types)
        self.warnings: list[str] = []

    def is_wrapper(self, expr) -> bool:
        """Whether a return type wraps the entity type it carries."""
        if isinstance(expr, CollectionType):
            return True
        if not isinstance(expr, GenericType):
            return False
        if expr.canonical_name:
            return expr.canonical_name in self.page_wrapper_types
        return expr.name in self.page_wrapper_names

    def realtime_element_type(self, service: ServiceMetadata, method: MethodMetadata) -> Optional[str]:
        """Return the qualified element type a method can be observed on, or None."""
        if not method.is_read_only:
            return None

        returns = method.return_type
        if isinstance(returns, MapType):
            return None

        if isinstance(returns, (TypeVariable, WildcardType)):
            self.warnings.append(
                f"{service.name}.{method.name}: read-only but returns unbound type "
                f"{returns.simple_name}, not observable"
            )
            return None

        if not self.is_wrapper(returns):
            return returns.qualified_name

        element = first_concrete_arg(getattr(returns, "args", []))
        if element is None:
            self.warnings.append(
                f"{service.name}.{method.name}: read-only but the element type of "
                f"{returns.simple_name} is unknown, not observable"
            )
            return None
        return element.qualified_name

    def build_method(self, service: ServiceMetadata, method: MethodMetadata) -> ServiceMethodDescriptor:
        parameters = []
        for p in method.parameters:
            for problem in find_degradations(p.type):
                self.warnings.append(f"{service.name}.{method.name}({p.name}): {problem}")
            parameters.append(ServiceParameter(p.name, translate(p.type)))

        for problem in find_degradations(method.return_type):
            self.warnings.append(f"{service.name}.{method.name} returns: {problem}")

        element = self.realtime_element_type(service, method)
        return ServiceMethodDescriptor(
            name=method.name,
            parameters=tuple(parameters),
            return_type=translate(method.return_type, is_return=True),
            is_realtime_observable=element is not None,
            realtime_element_type=element,
        )

    def build(self, service: ServiceMetadata) -> ServiceDescriptor:
        """Build the descriptor for one service interface.

        Inherited methods are skipped; a service only exposes what it declares.
        """
        own = service.qualified_name
        methods = tuple(
            self.build_method(service, m)
            for m in service.methods
            if m.declaring_class in (None, own, service.name)
        )
        return ServiceDescriptor(
            name=service.name,
            instance_name=decapitalize(service.name),
            methods=methods,
        )
