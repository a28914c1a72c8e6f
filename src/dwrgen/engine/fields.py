"""Field resolution across a data class and its ungenerated ancestors."""
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..errors import MalformedMetadataError
from ..models import ClassMetadata
from .translator import translate, find_degradations
from .types import FieldDescriptor

# Superclass names that end the ancestor walk
ROOT_TYPES = frozenset({"java.lang.Object", "Object"})


@dataclass
class ResolvedFields:
    """Fields of one entity plus the generated parent it extends, if any."""
    fields: list[FieldDescriptor] = field(default_factory=list)
    parent_name: Optional[str] = None


class FieldResolver:
    """Merge a class's own fields with those of its ungenerated ancestors.

    Climbing stops at the first annotated ancestor, which becomes the
    parent interface, or at the root type. Exclusions only apply to the
    starting class's own fields.
    """

    def __init__(self, find_class: Callable[[str], Optional[ClassMetadata]]):
        self.find_class = find_class
        self.warnings: list[str] = []

    def _translate_fields(
        self,
        owner: ClassMetadata,
        exclusion_names: frozenset[str] = frozenset(),
    ) -> list[FieldDescriptor]:
        descriptors = []
        for f in owner.fields:
            if f.is_constant or f.name in exclusion_names:
                continue
            for problem in find_degradations(f.type):
                self.warnings.append(f"{owner.name}.{f.name}: {problem}")
            descriptors.append(FieldDescriptor(f.name, translate(f.type)))
        return descriptors

    def resolve(
        self,
        cls: ClassMetadata,
        exclusion_names: Optional[frozenset[str]] = None,
    ) -> ResolvedFields:
        """Resolve the ordered field list for ``cls``.

        Args:
            cls: The annotated class being generated.
            exclusion_names: Field names to drop; defaults to the class's
                own ``exclude`` params.

        Returns:
            ResolvedFields with own fields first, then each merged ancestor
            nearest-first.
        """
        if exclusion_names is None:
            exclusion_names = cls.exclusion_names

        result = ResolvedFields(fields=self._translate_fields(cls, exclusion_names))

        seen = {cls.qualified_name}
        superclass = cls.superclass
        while superclass and superclass not in ROOT_TYPES:
            if superclass in seen:
                raise MalformedMetadataError(
                    f"Inheritance cycle through {superclass} while resolving {cls.name}"
                )
            seen.add(superclass)

            ancestor = self.find_class(superclass)
            if ancestor is None:
                self.warnings.append(
                    f"{cls.name}: ancestor {superclass} not found in metadata, fields not merged"
                )
                break
            if ancestor.annotated:
                result.parent_name = ancestor.name
                break

            result.fields.extend(self._translate_fields(ancestor))
            superclass = ancestor.superclass

        return result
