"""Metadata provider interface and an in-memory registry."""
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..models import ClassMetadata, EnumMetadata, ServiceMetadata


class MetadataProvider(ABC):
    """Source of scanned backend types.

    The engine only depends on this interface; how the metadata was
    obtained (offline scan, static registry, ...) is up to the provider.
    """

    @abstractmethod
    def supports_remoting(self) -> bool:
        """Whether the backend uses the remoting framework at all."""

    @abstractmethod
    def classes(self) -> list[ClassMetadata]:
        """All known classes, annotated or not."""

    @abstractmethod
    def enum_types(self) -> list[EnumMetadata]:
        """Annotated enumerations, in scan order."""

    @abstractmethod
    def service_types(self) -> list[ServiceMetadata]:
        """Remote service interfaces, in scan order."""

    def entity_types(self) -> list[ClassMetadata]:
        """Annotated data classes, in scan order."""
        return [c for c in self.classes() if c.annotated]

    def find_class(self, qualified_name: str) -> Optional[ClassMetadata]:
        """Look up a class by qualified name (simple name as a fallback)."""
        by_simple = None
        for cls in self.classes():
            if cls.qualified_name == qualified_name:
                return cls
            if by_simple is None and cls.name == qualified_name:
                by_simple = cls
        return by_simple


class StaticMetadataProvider(MetadataProvider):
    """Provider over records already held in memory."""

    def __init__(
        self,
        classes: Iterable[ClassMetadata] = (),
        enums: Iterable[EnumMetadata] = (),
        services: Iterable[ServiceMetadata] = (),
        available: bool = True,
    ):
        self._classes = list(classes)
        self._enums = list(enums)
        self._services = list(services)
        self._available = available
        self._index = {c.qualified_name: c for c in self._classes}

    def supports_remoting(self) -> bool:
        return self._available

    def classes(self) -> list[ClassMetadata]:
        return list(self._classes)

    def enum_types(self) -> list[EnumMetadata]:
        return list(self._enums)

    def service_types(self) -> list[ServiceMetadata]:
        return list(self._services)

    def find_class(self, qualified_name: str) -> Optional[ClassMetadata]:
        if qualified_name in self._index:
            return self._index[qualified_name]
        return super().find_class(qualified_name)
