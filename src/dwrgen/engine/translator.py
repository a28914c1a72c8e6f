"""Translation of source type expressions into TypeScript type syntax."""
from typing import Optional

from ..config import UNTYPED, FILE_INPUT_TYPE
from ..models import (
    PrimitiveType, TemporalType, FileType, CollectionType, MapType,
    GenericType, ArrayType, WildcardType, TypeVariable,
)

# Scalar renderings keyed by expression kind
SCALAR_TYPES = {
    "boxed_numeric": "number",
    "text": "string",
    "boolean": "boolean",
    "geometry": "string",
    "void": "void",
}


def first_concrete_arg(args: list) -> Optional[object]:
    """Return the first type argument that is a plain class, if any."""
    for arg in args:
        if arg.is_concrete:
            return arg
    return None


def _translate_arg(args: list) -> str:
    arg = first_concrete_arg(args)
    if arg is None:
        return UNTYPED
    return translate(arg)


def translate(expr, is_return: bool = False) -> str:
    """Translate a type expression into TypeScript.

    Args:
        expr: Type expression from the metadata manifest.
        is_return: True when translating a method's return type.

    Returns:
        TypeScript type syntax. Maps and unresolvable generics degrade to
        ``any``; unknown classes pass through by simple name.
    """
    if isinstance(expr, ArrayType):
        return translate(expr.element)

    if isinstance(expr, MapType):
        return UNTYPED

    if isinstance(expr, CollectionType):
        if expr.args:
            return _translate_arg(expr.args) + "[]"
        return UNTYPED + "[]"

    if isinstance(expr, GenericType) and expr.args:
        return f"{expr.name}<{_translate_arg(expr.args)}>"

    if isinstance(expr, FileType):
        # the remoting layer hands file downloads back as a relative URL
        return "string" if is_return else FILE_INPUT_TYPE

    if isinstance(expr, PrimitiveType):
        return "boolean" if expr.name == "boolean" else "number"

    if isinstance(expr, TemporalType):
        return "string" if expr.zoned else "Date"

    if isinstance(expr, (WildcardType, TypeVariable)):
        return UNTYPED

    return SCALAR_TYPES.get(expr.kind, expr.simple_name)


def find_degradations(expr) -> list[str]:
    """List the parts of an expression that translate to ``any``.

    Mirrors the branches of :func:`translate` without changing its result,
    so callers can report lossy translations.
    """
    if isinstance(expr, ArrayType):
        return find_degradations(expr.element)

    if isinstance(expr, MapType):
        return [f"map type {expr.simple_name} rendered as {UNTYPED}"]

    if isinstance(expr, (CollectionType, GenericType)) and expr.args:
        arg = first_concrete_arg(expr.args)
        if arg is None:
            return [f"no concrete type argument for {expr.simple_name}"]
        return find_degradations(arg)

    if isinstance(expr, CollectionType):
        return [f"raw collection {expr.simple_name} rendered as {UNTYPED}[]"]

    if isinstance(expr, (WildcardType, TypeVariable)):
        return [f"unbound type {expr.simple_name} rendered as {UNTYPED}"]

    return []
