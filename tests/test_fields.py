"""Tests for field resolution across class hierarchies."""

import pytest
from dwrgen.engine.fields import FieldResolver
from dwrgen.errors import MalformedMetadataError
from dwrgen.metadata.provider import StaticMetadataProvider
from dwrgen.models import (
    ClassMetadata, FieldMetadata, AnnotationParam, TextType, PrimitiveType,
    BoxedNumericType, MapType, TemporalType,
)


def make_field(name: str, type_=None, *modifiers: str) -> FieldMetadata:
    return FieldMetadata(name=name, type=type_ or TextType(), modifiers=list(modifiers))


def resolver_for(*classes: ClassMetadata) -> FieldResolver:
    return FieldResolver(StaticMetadataProvider(classes).find_class)


def names(resolved) -> list[str]:
    return [f.name for f in resolved.fields]


class TestOwnFields:
    """Tests for a class without ancestors."""

    def test_own_fields_in_order(self) -> None:
        """Test own fields keep declaration order and are translated."""
        person = ClassMetadata(name="Person", fields=[
            make_field("name"),
            make_field("age", PrimitiveType(name="int")),
        ])

        resolved = resolver_for(person).resolve(person)

        assert [(f.name, f.translated_type) for f in resolved.fields] == [
            ("name", "string"), ("age", "number"),
        ]
        assert resolved.parent_name is None

    def test_constants_are_skipped(self) -> None:
        """Test final fields are not emitted."""
        person = ClassMetadata(name="Person", fields=[
            make_field("serialVersionUID", BoxedNumericType(name="Long"), "private", "static", "final"),
            make_field("name", TextType(), "private"),
        ])

        assert names(resolver_for(person).resolve(person)) == ["name"]

    def test_excluded_fields_are_dropped(self) -> None:
        """Test exclusion params remove fields present in the raw metadata."""
        person = ClassMetadata(
            name="Person",
            params=[AnnotationParam(name="exclude", value="internalNotes")],
            fields=[make_field("name"), make_field("internalNotes")],
        )

        assert names(resolver_for(person).resolve(person)) == ["name"]

    def test_explicit_exclusions_override(self) -> None:
        person = ClassMetadata(name="Person", fields=[make_field("name"), make_field("email")])

        resolved = resolver_for(person).resolve(person, frozenset({"email"}))

        assert names(resolved) == ["name"]

    def test_degradations_are_collected(self) -> None:
        """Test untyped fields produce warnings but still resolve."""
        person = ClassMetadata(name="Person", fields=[make_field("attributes", MapType())])
        resolver = resolver_for(person)

        resolved = resolver.resolve(person)

        assert resolved.fields[0].translated_type == "any"
        assert resolver.warnings == ["Person.attributes: map type Map rendered as any"]


class TestHierarchy:
    """Tests for ancestor merging."""

    def test_three_level_hierarchy(self) -> None:
        """Test C extends B extends A where only A is generated."""
        a = ClassMetadata(name="A", canonical_name="x.A", fields=[make_field("id", BoxedNumericType(name="Long"))])
        b = ClassMetadata(
            name="B", canonical_name="x.B", superclass="x.A", annotated=False,
            fields=[make_field("created", TemporalType(name="LocalDateTime")), make_field("createdBy")],
        )
        c = ClassMetadata(name="C", canonical_name="x.C", superclass="x.B", fields=[make_field("title")])

        resolved = resolver_for(a, b, c).resolve(c)

        assert names(resolved) == ["title", "created", "createdBy"]
        assert resolved.parent_name == "A"

    def test_immediate_generated_parent(self) -> None:
        """Test an annotated superclass becomes the parent without merging."""
        base = ClassMetadata(name="Base", canonical_name="x.Base", fields=[make_field("id")])
        child = ClassMetadata(name="Child", canonical_name="x.Child", superclass="x.Base",
                              fields=[make_field("label")])

        resolved = resolver_for(base, child).resolve(child)

        assert names(resolved) == ["label"]
        assert resolved.parent_name == "Base"

    def test_ungenerated_ancestors_to_root(self) -> None:
        """Test every ungenerated ancestor is merged nearest-first up to Object."""
        root = ClassMetadata(name="Root", canonical_name="x.Root", superclass="java.lang.Object",
                             annotated=False, fields=[make_field("r1"), make_field("r2")])
        mid = ClassMetadata(name="Mid", canonical_name="x.Mid", superclass="x.Root",
                            annotated=False, fields=[make_field("m1")])
        leaf = ClassMetadata(name="Leaf", canonical_name="x.Leaf", superclass="x.Mid",
                             fields=[make_field("l1")])

        resolved = resolver_for(root, mid, leaf).resolve(leaf)

        assert names(resolved) == ["l1", "m1", "r1", "r2"]
        assert resolved.parent_name is None

    def test_exclusions_do_not_apply_to_ancestors(self) -> None:
        """Test an excluded name is still merged when declared on an ancestor."""
        base = ClassMetadata(name="Audited", canonical_name="x.Audited", annotated=False,
                             fields=[make_field("internalNotes")])
        leaf = ClassMetadata(
            name="Leaf", canonical_name="x.Leaf", superclass="x.Audited",
            params=[AnnotationParam(name="exclude", value="internalNotes")],
            fields=[make_field("internalNotes"), make_field("name")],
        )

        resolved = resolver_for(base, leaf).resolve(leaf)

        assert names(resolved) == ["name", "internalNotes"]

    def test_ancestor_constants_are_skipped(self) -> None:
        base = ClassMetadata(name="Base", canonical_name="x.Base", annotated=False,
                             fields=[make_field("TABLE", TextType(), "public", "static", "final"),
                                     make_field("id")])
        leaf = ClassMetadata(name="Leaf", superclass="x.Base")

        assert names(resolver_for(base, leaf).resolve(leaf)) == ["id"]

    def test_missing_ancestor_stops_with_warning(self) -> None:
        """Test an ancestor absent from metadata ends the walk."""
        leaf = ClassMetadata(name="Leaf", superclass="com.vendor.Unknown", fields=[make_field("name")])
        resolver = resolver_for(leaf)

        resolved = resolver.resolve(leaf)

        assert names(resolved) == ["name"]
        assert resolved.parent_name is None
        assert "com.vendor.Unknown" in resolver.warnings[0]

    def test_cycle_is_malformed(self) -> None:
        a = ClassMetadata(name="A", canonical_name="x.A", superclass="x.B", annotated=False)
        b = ClassMetadata(name="B", canonical_name="x.B", superclass="x.A", annotated=False)
        leaf = ClassMetadata(name="Leaf", canonical_name="x.Leaf", superclass="x.A")

        with pytest.raises(MalformedMetadataError):
            resolver_for(a, b, leaf).resolve(leaf)
